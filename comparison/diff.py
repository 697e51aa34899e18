"""
Structural diff rendering for mismatch messages.
"""

import difflib
import json
from typing import Any

from pydantic import BaseModel


def to_jsonable(value: Any) -> Any:
    """Convert OTLP models (and sequences of them) to plain JSON data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def format_value(value: Any) -> str:
    """Render a scalar the way it appears in the JSON payload."""
    return json.dumps(to_jsonable(value), sort_keys=True, default=str)


def render_diff(expected: Any, received: Any) -> str:
    """
    Line diff of the pretty-printed JSON of both sides.

    Returns an empty string when both sides render identically.
    """
    expected_lines = json.dumps(to_jsonable(expected), indent=2, sort_keys=True, default=str).splitlines()
    received_lines = json.dumps(to_jsonable(received), indent=2, sort_keys=True, default=str).splitlines()
    return "\n".join(
        difflib.unified_diff(
            expected_lines,
            received_lines,
            fromfile="Expected",
            tofile="Received",
            lineterm="",
        )
    )
