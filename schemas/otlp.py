"""
OTLP JSON Schemas

Immutable snapshots of the OTLP/JSON export shape as sent by the web SDK:

    resourceSpans -> scopeSpans -> spans -> events
    resourceLogs  -> scopeLogs  -> logRecords

Field names are snake_case in Python and camelCase on the wire.
Unknown fields are kept (extra="allow") so a payload written back to a
golden file loses nothing.
"""

from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

AttributeValue = Union[str, int, bool, float, None]


class OtlpModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    def to_wire(self) -> Dict[str, Any]:
        """Dump back to camelCase JSON-compatible data."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Common ---

class AnyValue(OtlpModel):
    """
    One-of value holder. Only the scalar kinds take part in comparisons.
    """
    string_value: Optional[str] = None
    # int64 values may arrive as JSON strings
    int_value: Optional[Union[int, str]] = None
    bool_value: Optional[bool] = None
    double_value: Optional[float] = None

    def resolve(self) -> AttributeValue:
        """Return the first populated scalar: string, int, bool, then double."""
        if self.string_value is not None:
            return self.string_value
        if self.int_value is not None:
            return self.int_value
        if self.bool_value is not None:
            return self.bool_value
        if self.double_value is not None:
            return self.double_value
        return None


class KeyValue(OtlpModel):
    key: str
    value: AnyValue = Field(default_factory=AnyValue)


class Resource(OtlpModel):
    attributes: Tuple[KeyValue, ...] = ()
    dropped_attributes_count: Optional[int] = None


class InstrumentationScope(OtlpModel):
    name: str = ""
    version: Optional[str] = None


class Status(OtlpModel):
    code: Optional[int] = None
    message: Optional[str] = None


# --- Traces ---

class Event(OtlpModel):
    name: str = ""
    time_unix_nano: Any = None
    attributes: Tuple[KeyValue, ...] = ()
    dropped_attributes_count: Optional[int] = None


class Span(OtlpModel):
    trace_id: Optional[str] = None
    span_id: Optional[str] = None
    parent_span_id: Optional[str] = None
    name: str = ""
    kind: Optional[int] = None
    start_time_unix_nano: Any = None
    end_time_unix_nano: Any = None
    attributes: Tuple[KeyValue, ...] = ()
    dropped_attributes_count: Optional[int] = None
    events: Tuple[Event, ...] = ()
    dropped_events_count: Optional[int] = None
    status: Optional[Status] = None
    links: Tuple[Dict[str, Any], ...] = ()
    dropped_links_count: Optional[int] = None

    @property
    def label(self) -> str:
        return self.name


class ScopeSpans(OtlpModel):
    scope: Optional[InstrumentationScope] = None
    spans: Tuple[Span, ...] = ()
    schema_url: Optional[str] = None

    @property
    def scope_name(self) -> str:
        return self.scope.name if self.scope else ""

    @property
    def entities(self) -> Tuple[Span, ...]:
        return self.spans


class ResourceSpans(OtlpModel):
    resource: Optional[Resource] = None
    scope_spans: Tuple[ScopeSpans, ...] = ()
    schema_url: Optional[str] = None

    @property
    def scopes(self) -> Tuple[ScopeSpans, ...]:
        return self.scope_spans


# --- Logs ---

class LogRecord(OtlpModel):
    time_unix_nano: Any = None
    observed_time_unix_nano: Any = None
    severity_number: Optional[int] = None
    severity_text: Optional[str] = None
    body: Optional[AnyValue] = None
    attributes: Tuple[KeyValue, ...] = ()
    dropped_attributes_count: Optional[int] = None
    flags: Optional[int] = None
    trace_id: Optional[str] = None
    span_id: Optional[str] = None

    @property
    def label(self) -> str:
        if self.body is not None and self.body.string_value is not None:
            return self.body.string_value
        return ""


class ScopeLogs(OtlpModel):
    scope: Optional[InstrumentationScope] = None
    log_records: Tuple[LogRecord, ...] = ()
    schema_url: Optional[str] = None

    @property
    def scope_name(self) -> str:
        return self.scope.name if self.scope else ""

    @property
    def entities(self) -> Tuple[LogRecord, ...]:
        return self.log_records


class ResourceLogs(OtlpModel):
    resource: Optional[Resource] = None
    scope_logs: Tuple[ScopeLogs, ...] = ()
    schema_url: Optional[str] = None

    @property
    def scopes(self) -> Tuple[ScopeLogs, ...]:
        return self.scope_logs


# --- Tagged unions ---

Entity = Union[Span, LogRecord]
ScopeGroup = Union[ScopeSpans, ScopeLogs]
ResourceGroup = Union[ResourceSpans, ResourceLogs]
