"""
Entity Comparison

Resources, spans, span events and log records. Every function yields
Mismatch records lazily, so a caller that only wants the first failure
stops the walk as soon as it has one.

Identity and timing fields (trace/span ids, timestamps) are never part
of the compared field sets.
"""

from typing import Any, Dict, Iterator, List, Sequence

from comparison.attributes import compare_attributes
from comparison.diff import format_value, to_jsonable
from comparison.policy import ComparisonPolicy, DEFAULT_POLICY
from comparison.result import Mismatch, MismatchKind
from schemas.otlp import Entity, Event, LogRecord, Resource, Span


def _field_differences(received: Dict[str, Any], expected: Dict[str, Any]) -> List[str]:
    return [
        f"  {name}: expected {format_value(expected[name])}, received {format_value(received[name])}"
        for name in expected
        if received[name] != expected[name]
    ]


def _scalar_mismatch(
    path: str,
    title: str,
    received: Dict[str, Any],
    expected: Dict[str, Any],
    differences: List[str],
) -> Mismatch:
    return Mismatch(
        kind=MismatchKind.SCALAR_FIELD_MISMATCH,
        path=path,
        message=f"{title}\n" + "\n".join(differences),
        expected=expected,
        received=received,
    )


def span_fields(span: Span) -> Dict[str, Any]:
    """Core scalar fields of a span compared as a single unit."""
    return {
        "name": span.name,
        "kind": span.kind,
        "droppedAttributesCount": span.dropped_attributes_count,
        "droppedEventsCount": span.dropped_events_count,
        "status": to_jsonable(span.status),
        "droppedLinksCount": span.dropped_links_count,
    }


def log_fields(log: LogRecord) -> Dict[str, Any]:
    """Core scalar fields of a log record compared as a single unit."""
    return {
        "body": to_jsonable(log.body),
        "severityNumber": log.severity_number,
        "severityText": log.severity_text,
        "droppedAttributesCount": log.dropped_attributes_count,
    }


def event_fields(event: Event) -> Dict[str, Any]:
    return {
        "name": event.name,
        "droppedAttributesCount": event.dropped_attributes_count,
    }


def compare_resource(
    received: Resource,
    expected: Resource,
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    path: str = "resource",
) -> Iterator[Mismatch]:
    """Compare dropped-attribute counts, then attributes."""
    received_fields = {"droppedAttributesCount": received.dropped_attributes_count}
    expected_fields = {"droppedAttributesCount": expected.dropped_attributes_count}
    differences = _field_differences(received_fields, expected_fields)
    if differences:
        yield _scalar_mismatch(path, "Resource fields differ:", received_fields, expected_fields, differences)
        return

    yield from compare_attributes(
        received.attributes,
        expected.attributes,
        policy,
        path=path,
        context="Attributes mismatch for resource",
    )


def compare_events(
    received: Sequence[Event],
    expected: Sequence[Event],
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    path: str = "",
    context: str = "",
) -> Iterator[Mismatch]:
    """Compare span events positionally: count, then name/dropped count and attributes."""
    prefix = f"{context}\n" if context else ""

    if len(received) != len(expected):
        yield Mismatch(
            kind=MismatchKind.EVENT_COUNT_MISMATCH,
            path=f"{path}.events" if path else "events",
            message=f"{prefix}Expected {len(expected)} span events, but got {len(received)}",
            expected=len(expected),
            received=len(received),
        )
        return

    for index, (received_event, expected_event) in enumerate(zip(received, expected)):
        event_path = f"{path}.event[{index}]" if path else f"event[{index}]"
        received_fields = event_fields(received_event)
        expected_fields = event_fields(expected_event)
        differences = _field_differences(received_fields, expected_fields)
        if differences:
            yield _scalar_mismatch(
                event_path,
                f"{prefix}Span event {index} fields differ:",
                received_fields,
                expected_fields,
                differences,
            )

        yield from compare_attributes(
            received_event.attributes,
            expected_event.attributes,
            policy,
            path=event_path,
            context=f"{prefix}Attributes mismatch for span event {received_event.name}",
        )


def compare_span(
    received: Span,
    expected: Span,
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    path: str = "",
) -> Iterator[Mismatch]:
    """Compare core fields, attributes, then events of two spans."""
    received_fields = span_fields(received)
    expected_fields = span_fields(expected)
    differences = _field_differences(received_fields, expected_fields)
    if differences:
        yield _scalar_mismatch(path, "Span fields differ:", received_fields, expected_fields, differences)

    yield from compare_attributes(
        received.attributes,
        expected.attributes,
        policy,
        path=path,
        context=f"Attributes mismatch for span {received.name}",
    )

    # TODO: compare links once the SDK exports them
    yield from compare_events(
        received.events,
        expected.events,
        policy,
        path=path,
        context=f"Events mismatch for span {received.name}",
    )


def compare_log(
    received: LogRecord,
    expected: LogRecord,
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    path: str = "",
) -> Iterator[Mismatch]:
    """Compare body/severity/dropped count, then attributes of two log records."""
    received_fields = log_fields(received)
    expected_fields = log_fields(expected)
    differences = _field_differences(received_fields, expected_fields)
    if differences:
        yield _scalar_mismatch(path, "Log record fields differ:", received_fields, expected_fields, differences)

    yield from compare_attributes(
        received.attributes,
        expected.attributes,
        policy,
        path=path,
        context=f"Attributes mismatch for log {format_value(received.body)}",
    )


def compare_entity(
    received: Entity,
    expected: Entity,
    policy: ComparisonPolicy = DEFAULT_POLICY,
    *,
    path: str = "",
) -> Iterator[Mismatch]:
    """Dispatch on the entity variant. A span never matches a log record."""
    if isinstance(received, Span) and isinstance(expected, Span):
        yield from compare_span(received, expected, policy, path=path)
    elif isinstance(received, LogRecord) and isinstance(expected, LogRecord):
        yield from compare_log(received, expected, policy, path=path)
    else:
        received_kind = {"entity": type(received).__name__}
        expected_kind = {"entity": type(expected).__name__}
        yield _scalar_mismatch(
            path,
            "Entity kinds differ:",
            received_kind,
            expected_kind,
            _field_differences(received_kind, expected_kind),
        )
