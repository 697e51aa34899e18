"""
Comparison Policy

Which attributes never gate a comparison, and which instrumentation
scopes are only checked for entity counts.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from core.config import Settings

DEFAULT_IGNORED_ATTRIBUTES = frozenset({
    "session.id",
    "log.record.uid",
    # CI runs on Linux, developers on other systems, so the user agent differs
    "user_agent.original",
})

# Spans from these scopes are created in a different order on every page load
DEFAULT_SIMPLIFIED_SCOPES = frozenset({
    "@opentelemetry/instrumentation-document-load",
})

INTENDED_CHANGE_MESSAGE = (
    "If you intended to change the golden files, rerun with UPDATE_GOLDEN=1 "
    "(or pytest --update-golden) instead."
)


@dataclass(frozen=True)
class ComparisonPolicy:
    """
    Exclusion rules applied by the comparator.

    Attributes:
        ignored_attributes: Attribute keys whose values are recorded but never compared
        simplified_scopes: Scope names compared by entity count only
    """
    ignored_attributes: FrozenSet[str] = field(default=DEFAULT_IGNORED_ATTRIBUTES)
    simplified_scopes: FrozenSet[str] = field(default=DEFAULT_SIMPLIFIED_SCOPES)

    def is_ignored(self, key: str) -> bool:
        return key in self.ignored_attributes

    def is_simplified(self, scope_name: str) -> bool:
        return scope_name in self.simplified_scopes

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ComparisonPolicy":
        """Build a policy from harness settings (environment overrides included)."""
        settings = settings or Settings()
        return cls(
            ignored_attributes=frozenset(settings.ignored_attributes),
            simplified_scopes=frozenset(settings.simplified_scopes),
        )


DEFAULT_POLICY = ComparisonPolicy()
