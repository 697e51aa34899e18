# Core Package
from core.config import Settings, settings, update_golden_enabled
from core.errors import (
    HarnessError,
    PayloadShapeError,
    GoldenFileError,
    GoldenMismatchError,
    SessionIdMissingError,
)

__all__ = [
    "Settings",
    "settings",
    "update_golden_enabled",
    "HarnessError",
    "PayloadShapeError",
    "GoldenFileError",
    "GoldenMismatchError",
    "SessionIdMissingError",
]
