"""
Harness Errors

Three families, kept apart so callers can tell them apart:
- Shape errors: a payload cannot be read as an OTLP tree
- Golden file errors: the stored document is unreadable or unparseable
- Golden mismatches: the comparison itself failed

Comparison mismatches are values (see comparison.result), not exceptions.
Only the golden-file state machine turns a failed comparison into a raise.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from comparison.result import ComparisonResult


class HarnessError(Exception):
    """Base class for every error raised by the harness."""


class PayloadShapeError(HarnessError, ValueError):
    """An export payload does not have the resourceSpans/resourceLogs shape."""


class GoldenFileError(HarnessError):
    """A golden file exists but could not be read or parsed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class GoldenMismatchError(HarnessError, AssertionError):
    """
    Received telemetry does not match the stored golden file.

    Carries the original ComparisonResult so callers can inspect
    every mismatch without re-running the comparison.
    """

    def __init__(self, result: "ComparisonResult", path: Path):
        super().__init__(f"Golden file {path} does not match received telemetry:\n{result.message}")
        self.result = result
        self.path = path


class SessionIdMissingError(HarnessError):
    """A trace export carries no session.id on its first span."""
