# Capture Package
from capture.request import CapturedRequest, ExportCapture, RequestLog
from capture.sessions import ReceivedSessions, extract_session_id

__all__ = [
    "CapturedRequest",
    "ExportCapture",
    "RequestLog",
    "ReceivedSessions",
    "extract_session_id",
]
