"""Pure ASGI middleware binding correlation/trace IDs into structlog contextvars.

GitLab sends an ``X-Gitlab-Event-UUID`` with every hook delivery; it is
reused as the correlation id so a delivery can be matched to its log lines.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger()

_CORRELATION_HEADERS = (b"x-correlation-id", b"x-gitlab-event-uuid")


class CorrelationMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        await self._handle_request(scope, receive, send)

    async def _handle_request(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        clear_contextvars()
        self._bind_request_context(scope)
        http_status = 500
        start = time.perf_counter()
        try:
            http_status = await self._dispatch_and_capture_status(scope, receive, send)
        finally:
            _log_request_completion(http_status, start)

    @staticmethod
    def _bind_request_context(scope: dict[str, Any]) -> None:
        correlation_id = next(
            (value for value in (_extract_header(scope, h) for h in _CORRELATION_HEADERS) if value),
            None,
        )
        bind_contextvars(
            correlation_id=correlation_id or str(uuid4()),
            trace_id=str(uuid4()),
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )

    async def _dispatch_and_capture_status(
        self, scope: dict[str, Any], receive: Any, send: Any
    ) -> int:
        http_status = 500

        async def _capture_status(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
            await send(message)

        await self.app(scope, receive, _capture_status)
        return http_status


def _log_request_completion(http_status: int, start: float) -> None:
    duration_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.info(
        "Request processed",
        processing_status="SUCCESS" if http_status < 400 else "ERROR",
        processing_duration_ms=duration_ms,
        http_status=http_status,
    )


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Case-insensitive header lookup on the ASGI scope."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    lower_name = name.lower()
    for key, value in headers:
        if key.lower() == lower_name:
            return value.decode("latin-1")
    return None
