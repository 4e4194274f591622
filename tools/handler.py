"""Tool definitions: a schema bound to an executable backend action."""
from __future__ import annotations

import json
from typing import Any, Mapping

from errors import ErrorKind
from .backend import RawResponse
from .result import Failure, Result, Success, body_excerpt
from .spec import ResultKind, ToolSchema


def parse_body(body: str) -> Any:
    """Return the JSON-decoded *body*, the raw text if it is not JSON, or ``None`` if empty."""
    if not body or not body.strip():
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        return body


class ToolDefinition:
    """Base class for executable tools.

    Subclasses implement :meth:`execute`, which runs the backend action exactly
    once with already validated arguments. :meth:`map_response` turns the raw
    backend answer into a normalized result according to the schema's result kind.
    """

    def __init__(self, schema: ToolSchema) -> None:
        self._schema = schema

    @property
    def schema(self) -> ToolSchema:
        return self._schema

    @property
    def name(self) -> str:
        return self._schema.name

    async def execute(self, arguments: Mapping[str, Any]) -> RawResponse:
        raise NotImplementedError

    def map_response(self, response: RawResponse) -> Result:
        if not response.is_success:
            excerpt = body_excerpt(response.body)
            message = f"backend returned {response.status_code}"
            if excerpt:
                message = f"{message}: {excerpt}"
            return Failure(ErrorKind.BACKEND_ERROR, message, status_code=response.status_code)

        if self._schema.result_kind is ResultKind.STATUS_ONLY:
            return Success(payload=None, status_code=response.status_code)
        return Success(payload=parse_body(response.body), status_code=response.status_code)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"{type(self).__name__}({self.name!r})"


__all__ = ["ToolDefinition", "parse_body"]
