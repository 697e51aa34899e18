"""
Received Sessions

Tracks which browser sessions have flushed their spans, keyed by the
``session.id`` attribute on the first span of a trace export.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from core.errors import SessionIdMissingError
from schemas.otlp import ResourceSpans
from schemas.payload import SignalKind, resource_groups_for

logger = logging.getLogger(__name__)

SESSION_ID_ATTRIBUTE = "session.id"


def extract_session_id(data: Mapping[str, Any]) -> Optional[str]:
    """
    Return the session id of a trace export, or None.

    Only the first span of the first scope of the first resource is read.
    """
    groups = resource_groups_for(data, SignalKind.TRACES)
    if not groups or not isinstance(groups[0], ResourceSpans):
        return None

    scopes = groups[0].scope_spans
    if not scopes or not scopes[0].spans:
        return None

    for attr in scopes[0].spans[0].attributes:
        if attr.key == SESSION_ID_ATTRIBUTE:
            return attr.value.string_value
    return None


class ReceivedSessions:
    """
    Accumulator of session ids seen in trace exports.
    """

    def __init__(self):
        self._sessions: Dict[str, bool] = {}

    def register(self, data: Mapping[str, Any]) -> str:
        """
        Record the session carried by a trace export.

        Raises:
            SessionIdMissingError: if the export has no session.id on its first span
        """
        session_id = extract_session_id(data)
        if not session_id:
            raise SessionIdMissingError("Session ID not found in trace export")

        self._sessions[session_id] = True
        logger.info(f"Stored a new session ID: {session_id}")
        return session_id

    def snapshot(self) -> Dict[str, bool]:
        return dict(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
