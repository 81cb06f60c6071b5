"""Structured log schema processor for structlog.

Reshapes the flat structlog event_dict into nested blocks (processing,
error, merge_request, context) so log shippers can index mirror runs.
Fields are taken with dict.pop(key, default) so absent keys never raise.
"""

from __future__ import annotations

import os
from typing import Any

_MERGE_REQUEST_KEYS = (
    "mr_iid",
    "mr_url",
    "target_branch",
    "downstream_branch",
    "working_branch",
    "source_project_id",
)


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "mr-mirror"),
        "environment": os.environ.get("APP_ENV", "local"),
        "trace_id": event_dict.pop("trace_id", None),
        "correlation_id": event_dict.pop("correlation_id", None),
        "span_id": event_dict.pop("span_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
        "state": event_dict.pop("mirror_state", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Error block, only present when error_type was bound."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
        "status_code": event_dict.pop("error_status_code", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def _build_merge_request(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    block = {key: event_dict.pop(key) for key in _MERGE_REQUEST_KEYS if key in event_dict}
    return block or None


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    endpoint = event_dict.pop("context_endpoint", None)
    if component is None and endpoint is None:
        return None
    return {
        "component": component,
        "endpoint": endpoint,
        "method": event_dict.pop("context_method", None),
        "event_type": event_dict.pop("event_type", None),
    }


def _hex_to_uuid(hex_str: str) -> str:
    return f"{hex_str[:8]}-{hex_str[8:12]}-{hex_str[12:16]}-{hex_str[16:20]}-{hex_str[20:]}"


def _inject_otel_ids(event_dict: dict[str, Any]) -> None:
    """Overwrite trace_id and span_id from the current OTel span if recording."""
    from opentelemetry import trace

    span = trace.get_current_span()
    if span.is_recording():
        ctx = span.get_span_context()
        event_dict["trace_id"] = _hex_to_uuid(format(ctx.trace_id, "032x"))
        event_dict["span_id"] = format(ctx.span_id, "016x")


def log_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    _inject_otel_ids(event_dict)
    result = _build_root_fields(event_dict)

    for name, builder in (
        ("processing", _build_processing),
        ("error", _build_error),
        ("merge_request", _build_merge_request),
        ("context", _build_context),
    ):
        block = builder(event_dict)
        if block is not None:
            result[name] = block

    if event_dict:
        result["extra"] = dict(event_dict)
    return result
