"""
Builders for OTLP/JSON export payloads used across the test suite.

Everything here returns plain wire-format dicts (camelCase), exactly as
the web SDK posts them.
"""

import copy
from typing import Any, Dict, List, Optional

from schemas.payload import resource_groups_for

DOCUMENT_LOAD_SCOPE = "@opentelemetry/instrumentation-document-load"


def create_value(value: Any) -> Dict[str, Any]:
    if isinstance(value, bool):
        return {"boolValue": value}
    if isinstance(value, int):
        return {"intValue": value}
    if isinstance(value, float):
        return {"doubleValue": value}
    if isinstance(value, str):
        return {"stringValue": value}
    return {}


def create_attributes(values: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    return [{"key": key, "value": create_value(value)} for key, value in (values or {}).items()]


def create_event(name: str, attributes: Optional[Dict[str, Any]] = None, **fields: Any) -> Dict[str, Any]:
    event = {
        "attributes": create_attributes(attributes),
        "name": name,
        "timeUnixNano": "1700000000000000000",
        "droppedAttributesCount": 0,
    }
    event.update(fields)
    return event


def create_span(
    name: str = "click",
    attributes: Optional[Dict[str, Any]] = None,
    events: Optional[List[Dict[str, Any]]] = None,
    **fields: Any,
) -> Dict[str, Any]:
    span = {
        "traceId": "4bf92f3577b34da6a3ce929d0e0e4736",
        "spanId": "00f067aa0ba902b7",
        "name": name,
        "kind": 1,
        "startTimeUnixNano": "1700000000000000000",
        "endTimeUnixNano": "1700000000500000000",
        "attributes": create_attributes(attributes),
        "droppedAttributesCount": 0,
        "events": events if events is not None else [],
        "droppedEventsCount": 0,
        "status": {"code": 0},
        "links": [],
        "droppedLinksCount": 0,
    }
    span.update(fields)
    return span


def create_log(body: str = "hello", attributes: Optional[Dict[str, Any]] = None, **fields: Any) -> Dict[str, Any]:
    log = {
        "timeUnixNano": "1700000000000000000",
        "observedTimeUnixNano": "1700000000000000001",
        "severityNumber": 9,
        "severityText": "INFO",
        "body": {"stringValue": body},
        "attributes": create_attributes(attributes),
        "droppedAttributesCount": 0,
    }
    log.update(fields)
    return log


def create_scope_spans(name: str, spans: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"scope": {"name": name, "version": "0.1.0"}, "spans": spans}


def create_scope_logs(name: str, logs: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"scope": {"name": name, "version": "0.1.0"}, "logRecords": logs}


def create_resource(attributes: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"attributes": create_attributes(attributes), "droppedAttributesCount": 0}


def create_traces_payload(*scopes: Dict[str, Any], resource: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"scopeSpans": list(scopes)}
    if resource is not None:
        entry["resource"] = resource
    return {"resourceSpans": [entry]}


def create_logs_payload(*scopes: Dict[str, Any], resource: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"scopeLogs": list(scopes)}
    if resource is not None:
        entry["resource"] = resource
    return {"resourceLogs": [entry]}


def create_session_payload(
    session_id: str = "session-1",
    trace_id: str = "4bf92f3577b34da6a3ce929d0e0e4736",
    timestamp: str = "1700000000000000000",
    user_agent: str = "Mozilla/5.0 (X11; Linux x86_64)",
) -> Dict[str, Any]:
    """
    A realistic page-session trace export: a resource, an app scope with a
    click span carrying an event, and a document-load scope.
    """
    resource = create_resource({
        "service.name": "vite-7-esnext",
        "telemetry.sdk.language": "webjs",
        "user_agent.original": user_agent,
    })
    click = create_span(
        "click",
        {"session.id": session_id, "target.xpath": "//button[1]", "http.status_code": 200},
        events=[create_event("clicked", {"session.id": session_id}, timeUnixNano=timestamp)],
        traceId=trace_id,
        startTimeUnixNano=timestamp,
    )
    fetch = create_span("documentFetch", {"session.id": session_id, "http.url": "http://localhost:3001/"})
    load = create_span("documentLoad", {"session.id": session_id, "location": "/"})
    return create_traces_payload(
        create_scope_spans("app", [click]),
        create_scope_spans(DOCUMENT_LOAD_SCOPE, [fetch, load]),
        resource=resource,
    )


def create_send_log_payload(session_id: str = "session-1", uid: str = "uid-1") -> Dict[str, Any]:
    resource = create_resource({"service.name": "vite-7-esnext"})
    log = create_log(
        "button clicked",
        {"session.id": session_id, "log.record.uid": uid, "component": "SDKTest"},
    )
    return create_logs_payload(create_scope_logs("app", [log]), resource=resource)


def parse(payload: Dict[str, Any]):
    """Parse a wire payload into tagged resource groups."""
    return resource_groups_for(payload)


def clone(payload: Dict[str, Any]) -> Dict[str, Any]:
    return copy.deepcopy(payload)
