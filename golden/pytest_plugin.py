"""
Pytest integration for golden telemetry checks.

Enable with ``pytest_plugins = ["golden.pytest_plugin"]`` or ``-p golden.pytest_plugin``.

Options:
    --update-golden   Overwrite golden files that no longer match
    --golden-dir DIR  Where golden files live (default: OTEL_GOLDEN_GOLDEN_DIR)

UPDATE_GOLDEN=1 in the environment has the same effect as --update-golden.
"""

from typing import Any, Callable, Mapping, Optional, Sequence

import pytest

from comparison.policy import ComparisonPolicy
from comparison.result import ComparisonResult
from comparison.tree import compare
from core.config import Settings, update_golden_enabled
from core.errors import GoldenMismatchError
from golden.file_store import FileGoldenStore
from golden.matcher import GoldenOutcome, match_golden
from schemas.otlp import ResourceGroup


def pytest_addoption(parser):
    group = parser.getgroup("otel-golden", "OTel golden file checks")
    group.addoption(
        "--update-golden",
        action="store_true",
        default=False,
        help="Overwrite golden files whose comparison fails instead of failing the test.",
    )
    group.addoption(
        "--golden-dir",
        default=None,
        help="Directory holding golden files.",
    )


def assert_entities_match(
    received: Optional[Sequence[ResourceGroup]],
    expected: Optional[Sequence[ResourceGroup]],
    policy: Optional[ComparisonPolicy] = None,
) -> ComparisonResult:
    """Fail the current test unless both telemetry trees match."""
    result = compare(received, expected, policy or ComparisonPolicy.from_settings())
    if not result.passed:
        pytest.fail(result.message, pytrace=False)
    return result


@pytest.fixture
def update_golden(request) -> bool:
    """True when golden files should be overwritten on mismatch."""
    return bool(request.config.getoption("update_golden")) or update_golden_enabled()


@pytest.fixture
def golden_store(request) -> FileGoldenStore:
    directory = request.config.getoption("golden_dir") or Settings().golden_dir
    return FileGoldenStore(directory)


@pytest.fixture
def assert_golden(golden_store, update_golden) -> Callable[[Mapping[str, Any], str], GoldenOutcome]:
    """
    Callable ``(payload, name)`` that checks an export body against its golden file.

    A mismatch fails the test with the comparison message.
    """
    def _assert_golden(payload: Mapping[str, Any], name: str) -> GoldenOutcome:
        try:
            return match_golden(payload, name, golden_store, update=update_golden)
        except GoldenMismatchError as e:
            pytest.fail(str(e), pytrace=False)

    return _assert_golden
