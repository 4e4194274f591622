"""Helpers to summarize dispatches for logs and telemetry."""
from __future__ import annotations

from typing import Any, Mapping

_SUMMARY_KEYS: tuple[str, ...] = (
    "connection_id",
    "number",
    "address_id",
    "request_id",
    "message_id",
    "start_date",
    "category",
    "status",
)


def truncate_text(value: Any, *, limit: int = 60) -> str:
    text = str(value)
    if len(text) <= limit:
        return text
    if limit < 4:
        return text[:limit]
    return text[: limit - 3] + "..."


def summarize_arguments(arguments: Any, *, limit: int = 60) -> str:
    if not isinstance(arguments, Mapping):
        return ""
    for key in _SUMMARY_KEYS:
        val = arguments.get(key)
        if isinstance(val, (str, int, float)) and not isinstance(val, bool):
            return truncate_text(val, limit=limit)
    return ""


def summarize_dispatch(name: str, arguments: Any, *, limit: int = 60) -> str:
    base = name or "tool"
    summary = summarize_arguments(arguments, limit=limit)
    return f"{base}({summary})" if summary else base


__all__ = ["truncate_text", "summarize_arguments", "summarize_dispatch"]
