"""Normalized dispatch results."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from errors import DispatchError, ErrorKind

BODY_EXCERPT_LIMIT = 500
_RETRYABLE_STATUSES = frozenset({408, 429})


@dataclass(frozen=True)
class Success:
    """A backend call that completed with a 2xx status."""

    payload: Any
    status_code: int

    @property
    def ok(self) -> bool:
        return True

    def content_text(self) -> str:
        if self.payload is None:
            return f"status {self.status_code}"
        if isinstance(self.payload, str):
            return self.payload
        return json.dumps(self.payload, ensure_ascii=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "status_code": self.status_code, "payload": self.payload}


@dataclass(frozen=True)
class Failure:
    """A dispatch that did not produce a successful backend response."""

    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    parameter: Optional[str] = None
    expected_type: Optional[str] = None
    transient: bool = False

    @property
    def ok(self) -> bool:
        return False

    @property
    def retryable(self) -> bool:
        """Whether the orchestrator may reasonably try the same call again."""
        if self.transient:
            return True
        if self.kind is ErrorKind.BACKEND_ERROR and self.status_code is not None:
            return self.status_code in _RETRYABLE_STATUSES or self.status_code >= 500
        return False

    @classmethod
    def from_error(cls, exc: DispatchError) -> "Failure":
        return cls(
            kind=exc.kind,
            message=exc.message,
            parameter=getattr(exc, "parameter", None),
            expected_type=getattr(exc, "expected_type", None),
        )

    def content_text(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "ok": False,
            "error": self.kind.value,
            "message": self.message,
            "retryable": self.retryable,
            "transient": self.transient,
        }
        if self.status_code is not None:
            data["status_code"] = self.status_code
        if self.parameter is not None:
            data["parameter"] = self.parameter
        if self.expected_type is not None:
            data["expected_type"] = self.expected_type
        return data


Result = Union[Success, Failure]


def body_excerpt(text: str, *, limit: int = BODY_EXCERPT_LIMIT) -> str:
    text = text or ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def to_tool_result(result: Result, call_id: str) -> Dict[str, Any]:
    """Render *result* as an Anthropic ``tool_result`` content block."""
    return {
        "type": "tool_result",
        "tool_use_id": call_id,
        "content": result.content_text(),
        "is_error": not result.ok,
    }


__all__ = ["BODY_EXCERPT_LIMIT", "Failure", "Result", "Success", "body_excerpt", "to_tool_result"]
