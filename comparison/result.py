"""
Comparison Result

Data structures returned by the comparator.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from comparison.policy import INTENDED_CHANGE_MESSAGE


class MismatchKind(str, Enum):
    """Where and how two telemetry trees diverged."""
    LENGTH_MISMATCH = "length_mismatch"
    RESOURCE_MISMATCH = "resource_mismatch"
    ATTRIBUTE_MISMATCH = "attribute_mismatch"
    SCALAR_FIELD_MISMATCH = "scalar_field_mismatch"
    EVENT_COUNT_MISMATCH = "event_count_mismatch"


@dataclass(frozen=True)
class Mismatch:
    """
    A single localized difference.

    ``path`` locates the failing node, e.g. ``resource[0].scope[1].entity[3].event[0]``.
    """
    kind: MismatchKind
    path: str
    message: str
    expected: Any = None
    received: Any = None
    key: Optional[str] = None
    scope: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


@dataclass(frozen=True)
class ComparisonResult:
    """Verdict of one comparison plus a human-readable message."""
    passed: bool
    message: str
    mismatches: Tuple[Mismatch, ...] = ()

    @property
    def mismatch(self) -> Optional[Mismatch]:
        """First mismatch found, if any."""
        return self.mismatches[0] if self.mismatches else None

    def __bool__(self) -> bool:
        return self.passed

    @classmethod
    def ok(cls, message: str = "Entities matched") -> "ComparisonResult":
        return cls(passed=True, message=message)

    @classmethod
    def failed(cls, mismatches: Sequence[Mismatch]) -> "ComparisonResult":
        body = "\n\n".join(m.message for m in mismatches)
        if len(mismatches) > 1:
            body = f"Found {len(mismatches)} mismatches:\n\n{body}"
        return cls(
            passed=False,
            message=f"{body}\n\n{INTENDED_CHANGE_MESSAGE}",
            mismatches=tuple(mismatches),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "message": self.message,
            "mismatches": [m.to_dict() for m in self.mismatches],
        }
