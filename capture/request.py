"""
Captured Export Requests

Explicit accumulators for export requests intercepted from an
instrumented page. Each test owns its own instances; nothing here is
process-wide state.
"""

import logging
import re
from typing import Any, Dict, Iterator, List, Optional, Pattern, Union

from pydantic import BaseModel, Field

from core.config import Settings
from schemas.otlp import ResourceGroup
from schemas.payload import SignalKind, resource_groups_for, signal_kind_of

logger = logging.getLogger(__name__)

UrlPattern = Union[str, Pattern[str]]


def _compile(pattern: UrlPattern) -> Pattern[str]:
    return re.compile(pattern) if isinstance(pattern, str) else pattern


class CapturedRequest(BaseModel):
    """
    One intercepted export request.
    """
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    data: Dict[str, Any] = Field(default_factory=dict)

    @property
    def signal_kind(self) -> SignalKind:
        return signal_kind_of(self.data)

    def resource_groups(self) -> Optional[List[ResourceGroup]]:
        """Parse the body into tagged OTLP models."""
        return resource_groups_for(self.data)


class RequestLog:
    """
    Ordered record of captured requests for one signal.
    """

    def __init__(self, pattern: UrlPattern):
        self._pattern = _compile(pattern)
        self._requests: List[CapturedRequest] = []

    @property
    def pattern(self) -> Pattern[str]:
        return self._pattern

    def accepts(self, url: str) -> bool:
        return self._pattern.search(url) is not None

    def record(
        self,
        url: str,
        data: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> CapturedRequest:
        request = CapturedRequest(url=url, headers=headers or {}, data=data)
        self._requests.append(request)
        logger.debug(f"Captured request #{len(self._requests)} to {url}")
        return request

    def matching(self, pattern: Optional[UrlPattern] = None) -> List[CapturedRequest]:
        """Requests whose URL matches ``pattern`` (defaults to this log's pattern)."""
        regex = self._pattern if pattern is None else _compile(pattern)
        return [r for r in self._requests if regex.search(r.url)]

    def has(self, pattern: Optional[UrlPattern] = None) -> bool:
        return bool(self.matching(pattern))

    def latest(self) -> Optional[CapturedRequest]:
        return self._requests[-1] if self._requests else None

    def clear(self) -> None:
        self._requests.clear()

    def __len__(self) -> int:
        return len(self._requests)

    def __iter__(self) -> Iterator[CapturedRequest]:
        return iter(list(self._requests))

    def __getitem__(self, index: int) -> CapturedRequest:
        return self._requests[index]


class ExportCapture:
    """
    Routes intercepted requests to the trace or log RequestLog.

    Example:
        capture = ExportCapture.from_settings()
        capture.handle("http://localhost:3001/v1/traces", body)
        assert len(capture.traces) == 1
    """

    def __init__(self, traces_pattern: UrlPattern, logs_pattern: UrlPattern):
        self.traces = RequestLog(traces_pattern)
        self.logs = RequestLog(logs_pattern)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ExportCapture":
        settings = settings or Settings()
        return cls(settings.traces_url_pattern, settings.logs_url_pattern)

    def handle(
        self,
        url: str,
        data: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[CapturedRequest]:
        """
        Record a request in the matching log.

        Returns:
            The captured request, or None when the URL is not an export endpoint.
        """
        if self.traces.accepts(url):
            return self.traces.record(url, data, headers)
        if self.logs.accepts(url):
            return self.logs.record(url, data, headers)
        logger.debug(f"Ignoring non-export request to {url}")
        return None
