"""
Export Payload Parsing

Decides the signal kind of an export body once, at parse time,
and turns it into the tagged OTLP models from schemas.otlp.
"""

from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from core.errors import PayloadShapeError
from schemas.otlp import ResourceGroup, ResourceLogs, ResourceSpans


class SignalKind(str, Enum):
    """Which OTLP signal an export body carries."""
    TRACES = "traces"
    LOGS = "logs"

    @property
    def field(self) -> str:
        """Top-level JSON field holding the resource sequence."""
        return "resourceSpans" if self is SignalKind.TRACES else "resourceLogs"


def signal_kind_of(data: Mapping[str, Any]) -> SignalKind:
    """
    Return the signal kind of an export body.

    Raises:
        PayloadShapeError: if the body has neither resourceSpans nor resourceLogs
    """
    if not isinstance(data, Mapping):
        raise PayloadShapeError(f"Export payload must be a JSON object, got {type(data).__name__}")
    if data.get("resourceSpans") is not None:
        return SignalKind.TRACES
    if data.get("resourceLogs") is not None:
        return SignalKind.LOGS
    raise PayloadShapeError("Export payload has neither resourceSpans nor resourceLogs")


def parse_resource_group(item: Mapping[str, Any]) -> ResourceGroup:
    """Parse one resource entry, discriminating on scopeSpans vs scopeLogs."""
    if not isinstance(item, Mapping):
        raise PayloadShapeError(f"Resource entry must be a JSON object, got {type(item).__name__}")

    try:
        if "scopeSpans" in item or "scope_spans" in item:
            return ResourceSpans.model_validate(item)
        if "scopeLogs" in item or "scope_logs" in item:
            return ResourceLogs.model_validate(item)
    except ValidationError as e:
        raise PayloadShapeError(f"Invalid resource entry: {e}") from e

    raise PayloadShapeError("Resource entry has neither scopeSpans nor scopeLogs")


def parse_resource_groups(items: Sequence[Mapping[str, Any]]) -> List[ResourceGroup]:
    """Parse a resourceSpans/resourceLogs sequence."""
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise PayloadShapeError(f"Resource sequence must be a JSON array, got {type(items).__name__}")
    return [parse_resource_group(item) for item in items]


def resource_groups_for(
    data: Mapping[str, Any],
    kind: Optional[SignalKind] = None,
) -> Optional[List[ResourceGroup]]:
    """
    Extract and parse the resource sequence of an export body.

    Args:
        data: Export body (live capture or golden document)
        kind: Signal to read. Defaults to the kind detected in ``data``.

    Returns:
        Parsed resource groups, or None when ``data`` has no entry for ``kind``.
    """
    if kind is None:
        kind = signal_kind_of(data)
    elif not isinstance(data, Mapping):
        raise PayloadShapeError(f"Export payload must be a JSON object, got {type(data).__name__}")

    items = data.get(kind.field)
    if items is None:
        return None
    return parse_resource_groups(items)
