"""
OTel Entity Tree Comparator

Recursive descent over two resource sequences, matched by position:

    resource[i] -> scope[j] -> entity[k] -> event[n]

Counts must agree at every level before descending. The first mismatch
ends the comparison unless the caller asks for every mismatch.

DESIGN RULES:
- Pure: no I/O, inputs are never mutated
- Trace/span ids and timestamps never gate the verdict
- Simplified scopes are checked for entity count only
"""

import logging
from dataclasses import replace
from itertools import islice
from typing import Iterator, Optional, Sequence

from comparison.diff import render_diff
from comparison.entities import compare_entity, compare_resource
from comparison.policy import ComparisonPolicy, DEFAULT_POLICY
from comparison.result import ComparisonResult, Mismatch, MismatchKind
from schemas.otlp import ResourceGroup, ScopeGroup

logger = logging.getLogger(__name__)


def _length_mismatch(path: str, what: str, received: Sequence, expected: Sequence, scope: Optional[str] = None) -> Mismatch:
    return Mismatch(
        kind=MismatchKind.LENGTH_MISMATCH,
        path=path,
        message=(
            f"Expected {len(expected)} {what}, but got {len(received)}\n"
            f"{render_diff(expected, received)}"
        ).rstrip(),
        expected=len(expected),
        received=len(received),
        scope=scope,
    )


def compare_scope(
    received: ScopeGroup,
    expected: ScopeGroup,
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    path: str = "scope",
) -> Iterator[Mismatch]:
    """Compare one scope pair: kind, entity count, then entities by index."""
    scope_name = received.scope_name

    if type(received) is not type(expected):
        yield Mismatch(
            kind=MismatchKind.SCALAR_FIELD_MISMATCH,
            path=path,
            message=(
                f"Scope {scope_name!r} kinds differ: expected {type(expected).__name__}, "
                f"received {type(received).__name__}"
            ),
            expected=type(expected).__name__,
            received=type(received).__name__,
            scope=scope_name,
        )
        return

    received_entities = received.entities
    expected_entities = expected.entities

    if len(received_entities) != len(expected_entities):
        yield _length_mismatch(
            path,
            f"entities in scope {scope_name!r}",
            received_entities,
            expected_entities,
            scope=scope_name,
        )
        return

    # Entities of these scopes cannot be ordered to match a previous run
    if policy.is_simplified(scope_name):
        logger.debug(f"Scope {scope_name!r} at {path}: count-only comparison")
        return

    for index, (received_entity, expected_entity) in enumerate(zip(received_entities, expected_entities)):
        for mismatch in compare_entity(received_entity, expected_entity, policy, path=f"{path}.entity[{index}]"):
            yield replace(
                mismatch,
                scope=scope_name,
                message=(
                    f"Entity {received_entity.label} in scope {scope_name!r} does not match:\n"
                    f"{mismatch.message}"
                ),
            )


def compare_scopes(
    received: Sequence[ScopeGroup],
    expected: Sequence[ScopeGroup],
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    path: str = "resource",
) -> Iterator[Mismatch]:
    """Compare the scope sequences owned by one resource entry."""
    if len(received) != len(expected):
        yield _length_mismatch(path, f"scopes in {path}", received, expected)
        return

    for index, (received_scope, expected_scope) in enumerate(zip(received, expected)):
        yield from compare_scope(received_scope, expected_scope, policy, path=f"{path}.scope[{index}]")


def compare_resource_group(
    received: ResourceGroup,
    expected: ResourceGroup,
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    index: int = 0,
) -> Iterator[Mismatch]:
    """Compare one resource entry: its Resource first, then its scopes."""
    path = f"resource[{index}]"

    if received.resource is not None and expected.resource is not None:
        mismatch = next(compare_resource(received.resource, expected.resource, policy, path=path), None)
        if mismatch is not None:
            yield replace(
                mismatch,
                kind=MismatchKind.RESOURCE_MISMATCH,
                message=f"Resource in resource entry {index} does not match:\n{mismatch.message}",
            )
            return

    yield from compare_scopes(received.scopes, expected.scopes, policy, path=path)


def compare_entity_tree(
    received: Optional[Sequence[ResourceGroup]],
    expected: Optional[Sequence[ResourceGroup]],
    policy: ComparisonPolicy = DEFAULT_POLICY,
) -> Iterator[Mismatch]:
    """Yield every mismatch between two resource sequences, in traversal order."""
    if received is None and expected is None:
        return

    if received is None or expected is None:
        yield _length_mismatch("resource", "resource entries", received or [], expected or [])
        return

    if len(received) != len(expected):
        yield _length_mismatch("resource", "resource entries", received, expected)
        return

    for index, (received_group, expected_group) in enumerate(zip(received, expected)):
        yield from compare_resource_group(received_group, expected_group, policy, index=index)


def compare(
    received: Optional[Sequence[ResourceGroup]],
    expected: Optional[Sequence[ResourceGroup]],
    policy: Optional[ComparisonPolicy] = None,
    *,
    fail_fast: bool = True,
) -> ComparisonResult:
    """
    Compare a received telemetry tree against an expected one.

    Args:
        received: Resource sequence from the live capture
        expected: Resource sequence from the golden document
        policy: Exclusion rules. Defaults to DEFAULT_POLICY.
        fail_fast: Stop at the first mismatch (default). When False,
            every branch is walked and all mismatches are reported.

    Returns:
        ComparisonResult with ``passed``, ``message`` and the mismatches found.
    """
    mismatches = compare_entity_tree(received, expected, policy or DEFAULT_POLICY)
    found = list(islice(mismatches, 1) if fail_fast else mismatches)

    if not found:
        return ComparisonResult.ok()

    logger.debug(f"Comparison failed with {len(found)} mismatch(es), first at {found[0].path}")
    return ComparisonResult.failed(found)
