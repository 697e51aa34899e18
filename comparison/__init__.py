# Comparison Package
from comparison.attributes import compare_attributes
from comparison.entities import compare_entity, compare_events, compare_log, compare_resource, compare_span
from comparison.policy import ComparisonPolicy, DEFAULT_POLICY
from comparison.result import ComparisonResult, Mismatch, MismatchKind
from comparison.tree import compare, compare_entity_tree, compare_scopes

__all__ = [
    "compare",
    "compare_attributes",
    "compare_entity",
    "compare_entity_tree",
    "compare_events",
    "compare_log",
    "compare_resource",
    "compare_scopes",
    "compare_span",
    "ComparisonPolicy",
    "ComparisonResult",
    "DEFAULT_POLICY",
    "Mismatch",
    "MismatchKind",
]
