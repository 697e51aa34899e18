"""
Tests for export payload parsing into tagged OTLP models.
"""

import pytest
from pydantic import ValidationError

from core.errors import PayloadShapeError
from schemas.otlp import LogRecord, ResourceLogs, ResourceSpans, ScopeLogs, ScopeSpans, Span
from schemas.payload import (
    SignalKind,
    parse_resource_group,
    resource_groups_for,
    signal_kind_of,
)
from tests.builders import create_send_log_payload, create_session_payload


def test_signal_kind_detection():
    assert signal_kind_of(create_session_payload()) == SignalKind.TRACES
    assert signal_kind_of(create_send_log_payload()) == SignalKind.LOGS
    assert SignalKind.TRACES.field == "resourceSpans"
    assert SignalKind.LOGS.field == "resourceLogs"


@pytest.mark.parametrize("data", [{}, {"resourceMetrics": []}, {"resourceSpans": None}])
def test_unknown_payload_shape_is_rejected(data):
    with pytest.raises(PayloadShapeError):
        signal_kind_of(data)


def test_non_object_payload_is_rejected():
    with pytest.raises(PayloadShapeError):
        signal_kind_of(["resourceSpans"])


def test_traces_parse_into_span_variants():
    groups = resource_groups_for(create_session_payload())

    assert isinstance(groups[0], ResourceSpans)
    scope = groups[0].scopes[0]
    assert isinstance(scope, ScopeSpans)
    assert scope.scope_name == "app"
    span = scope.entities[0]
    assert isinstance(span, Span)
    assert span.name == "click"
    assert span.events[0].name == "clicked"
    assert span.trace_id == "4bf92f3577b34da6a3ce929d0e0e4736"


def test_logs_parse_into_log_variants():
    groups = resource_groups_for(create_send_log_payload())

    assert isinstance(groups[0], ResourceLogs)
    scope = groups[0].scopes[0]
    assert isinstance(scope, ScopeLogs)
    log = scope.entities[0]
    assert isinstance(log, LogRecord)
    assert log.label == "button clicked"
    assert log.severity_text == "INFO"


def test_missing_signal_returns_none():
    assert resource_groups_for(create_send_log_payload(), SignalKind.TRACES) is None


def test_resource_entry_without_scopes_is_rejected():
    with pytest.raises(PayloadShapeError, match="neither scopeSpans nor scopeLogs"):
        parse_resource_group({"resource": {"attributes": []}})


def test_invalid_resource_entry_is_rejected():
    with pytest.raises(PayloadShapeError, match="Invalid resource entry"):
        parse_resource_group({"scopeSpans": [{"spans": [{"attributes": "not-a-list"}]}]})


def test_resource_sequence_must_be_a_list():
    with pytest.raises(PayloadShapeError):
        resource_groups_for({"resourceSpans": "oops"})


def test_unknown_fields_survive_round_trip():
    payload = create_session_payload()
    payload["resourceSpans"][0]["scopeSpans"][0]["spans"][0]["customField"] = {"nested": True}

    span = resource_groups_for(payload)[0].scopes[0].entities[0]

    assert span.to_wire()["customField"] == {"nested": True}
    assert span.to_wire()["startTimeUnixNano"] == "1700000000000000000"


def test_models_are_immutable():
    span = resource_groups_for(create_session_payload())[0].scopes[0].entities[0]

    with pytest.raises(ValidationError):
        span.name = "changed"
