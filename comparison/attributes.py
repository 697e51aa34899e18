"""
Attribute List Comparison

Attribute lists are compared as sets keyed by ``key``: both sides are
sorted by key and then walked pairwise. Keys on the policy's ignore list
are skipped without affecting the verdict.
"""

import logging
import math
from typing import Iterator, Sequence

from comparison.diff import format_value, render_diff
from comparison.policy import ComparisonPolicy, DEFAULT_POLICY
from comparison.result import Mismatch, MismatchKind
from schemas.otlp import AttributeValue, KeyValue

logger = logging.getLogger(__name__)


def attribute_value(attr: KeyValue) -> AttributeValue:
    """Resolve an attribute to its scalar value (string, int, bool, double or None)."""
    return attr.value.resolve()


def values_equal(received: AttributeValue, expected: AttributeValue) -> bool:
    """
    Strict scalar equality.

    Booleans only equal booleans, so ``True`` never matches ``1``.
    Two NaN doubles compare equal.
    """
    if isinstance(received, float) and isinstance(expected, float) and math.isnan(received) and math.isnan(expected):
        return True
    if isinstance(received, bool) or isinstance(expected, bool):
        return type(received) is type(expected) and received == expected
    return received == expected


def _with_context(context: str, message: str) -> str:
    return f"{context}\n{message}" if context else message


def compare_attributes(
    received: Sequence[KeyValue],
    expected: Sequence[KeyValue],
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    path: str = "",
    context: str = "",
) -> Iterator[Mismatch]:
    """
    Yield the first difference between two attribute lists, if any.

    Args:
        received: Attributes from the live capture
        expected: Attributes from the golden document
        policy: Exclusion rules
        path: Location of the owning entity, used to tag the mismatch
        context: Prefix line describing the owning entity

    An ignored key is skipped only when both sides carry that key at the same
    sorted position. A received ignored key paired with a different expected
    key is still reported as a key mismatch.
    """
    attributes_path = f"{path}.attributes" if path else "attributes"

    if len(received) != len(expected):
        yield Mismatch(
            kind=MismatchKind.LENGTH_MISMATCH,
            path=attributes_path,
            message=_with_context(
                context,
                f"Expected {len(expected)} attributes, but got {len(received)}\n"
                f"{render_diff(expected, received) or 'error getting diff'}",
            ),
            expected=len(expected),
            received=len(received),
        )
        return

    # sorted() returns copies; inputs stay untouched
    sorted_received = sorted(received, key=lambda attr: attr.key)
    sorted_expected = sorted(expected, key=lambda attr: attr.key)

    for index, (received_attr, expected_attr) in enumerate(zip(sorted_received, sorted_expected)):
        if received_attr.key == expected_attr.key and policy.is_ignored(received_attr.key):
            continue

        received_value = attribute_value(received_attr)
        expected_value = attribute_value(expected_attr)

        if received_attr.key != expected_attr.key or not values_equal(received_value, expected_value):
            logger.debug(f"Attribute mismatch at {attributes_path}[{index}]: {expected_attr.key}")
            yield Mismatch(
                kind=MismatchKind.ATTRIBUTE_MISMATCH,
                path=attributes_path,
                message=_with_context(
                    context,
                    f"Attribute mismatch at index {index}: expected {expected_attr.key} "
                    f"to be {format_value(expected_value)}, but got {received_attr.key} "
                    f"with value {format_value(received_value)}",
                ),
                expected=expected_value,
                received=received_value,
                key=expected_attr.key,
            )
            return

