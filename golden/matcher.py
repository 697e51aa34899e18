"""
Golden File Matching

Three-state interaction between a live export payload and its golden file:

    Missing                   -> write payload verbatim, pass
    Present, comparison ok    -> pass, no write
    Present, comparison fails -> update mode: overwrite, pass
                                 otherwise:   raise GoldenMismatchError

An unreadable or unparseable golden file raises GoldenFileError, and is
overwritten instead only in update mode.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from comparison.policy import ComparisonPolicy
from comparison.result import ComparisonResult
from comparison.tree import compare
from core.config import update_golden_enabled
from core.errors import GoldenFileError, GoldenMismatchError, PayloadShapeError
from golden.store import GoldenStore
from schemas.payload import resource_groups_for, signal_kind_of

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


class GoldenStatus(str, Enum):
    CREATED = "created"
    MATCHED = "matched"
    UPDATED = "updated"


@dataclass(frozen=True)
class GoldenOutcome:
    """Result of a golden check that did not fail."""
    status: GoldenStatus
    name: str
    path: Path
    message: str
    result: Optional[ComparisonResult] = None

    @property
    def passed(self) -> bool:
        return True


def codify(name: str) -> str:
    """Lower-case ``name`` and replace every non-alphanumeric character with '-'."""
    return _NON_ALPHANUMERIC.sub("-", name).lower()


def golden_file_name(browser: str, scenario: str, suffix: str) -> str:
    """
    Build the golden file name for a (browser, scenario) pair.

    Example:
        golden_file_name("chromium", "Vite 7 ESNext", "session")
        -> "chromium-vite-7-esnext-session.json"
    """
    return f"{browser}-{codify(scenario)}-{suffix}.json"


def match_golden(
    payload: Mapping[str, Any],
    name: str,
    store: GoldenStore,
    *,
    update: Optional[bool] = None,
    policy: Optional[ComparisonPolicy] = None,
    fail_fast: bool = True,
) -> GoldenOutcome:
    """
    Check a live export payload against its golden file.

    Args:
        payload: Export body ({"resourceSpans": [...]} or {"resourceLogs": [...]})
        name: Golden file name within the store
        store: Where golden documents live
        update: Overwrite on mismatch. Defaults to the UPDATE_GOLDEN flag.
        policy: Comparison exclusions. Defaults to the configured policy.
        fail_fast: Report only the first mismatch (default)

    Returns:
        GoldenOutcome describing whether the file was created, matched or updated.

    Raises:
        GoldenMismatchError: comparison failed and update mode is off
        GoldenFileError: golden file unreadable and update mode is off
        PayloadShapeError: the live payload is not an OTLP export body
    """
    if update is None:
        update = update_golden_enabled()
    if policy is None:
        policy = ComparisonPolicy.from_settings()

    data: Dict[str, Any] = dict(payload)
    # The live payload decides which signal to read from the golden document
    kind = signal_kind_of(data)
    received = resource_groups_for(data, kind)
    path = store.path_for(name)

    if not store.exists(name):
        path = store.write(name, data)
        logger.info(f"Golden file created: {path}")
        return GoldenOutcome(GoldenStatus.CREATED, name, path, f"Golden file created: {path}")

    try:
        document = store.read(name)
        try:
            expected = resource_groups_for(document, kind)
        except PayloadShapeError as e:
            raise GoldenFileError(f"Golden file {path} is not an OTLP export body: {e}", path=path) from e
    except GoldenFileError:
        if not update:
            raise
        path = store.write(name, data)
        logger.warning(f"Golden file was unreadable and has been rewritten: {path}")
        return GoldenOutcome(GoldenStatus.UPDATED, name, path, f"Golden file updated: {path}")

    result = compare(received, expected, policy, fail_fast=fail_fast)

    if result.passed:
        logger.debug(f"Golden file matched: {name}")
        return GoldenOutcome(GoldenStatus.MATCHED, name, path, f"Golden file matched: {name}", result)

    if update:
        path = store.write(name, data)
        logger.warning(f"Golden file updated after mismatch at {result.mismatch.path}: {path}")
        return GoldenOutcome(GoldenStatus.UPDATED, name, path, f"Golden file updated: {path}", result)

    logger.warning(f"Golden file mismatch for {name} at {result.mismatch.path}")
    raise GoldenMismatchError(result, path)
