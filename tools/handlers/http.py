"""Declarative HTTP tools: path template + query/body mapping over a backend transport."""
from __future__ import annotations

import string
from typing import Any, Dict, Mapping, Optional, Sequence
from urllib.parse import quote

from ..backend import BackendRequest, BackendTransport, RawResponse
from ..handler import ToolDefinition
from ..spec import ParameterSpec, ParamType, ResultKind, ToolSchema

_SAFE_METHODS = frozenset({"GET", "HEAD", "PUT", "DELETE"})


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _path_fields(template: str) -> list[str]:
    return [field for _, field, _, _ in string.Formatter().parse(template) if field]


class HttpToolDefinition(ToolDefinition):
    """Tool whose action is one request against a backend group."""

    def __init__(
        self,
        schema: ToolSchema,
        client: BackendTransport,
        method: str,
        path: str,
        *,
        query: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(schema)
        self._client = client
        self._method = method.upper()
        self._path = path
        self._query = dict(query or {})
        self._body = body

        declared = {param.name: param for param in schema.parameters}
        for field in _path_fields(path):
            param = declared.get(field)
            if param is None or not param.required:
                raise ValueError(f"{schema.name}: path field '{field}' must be a required parameter")
        for arg in list(self._query) + ([body] if body else []):
            if arg not in declared:
                raise ValueError(f"{schema.name}: '{arg}' is not a declared parameter")

    @property
    def method(self) -> str:
        return self._method

    @property
    def path(self) -> str:
        return self._path

    def build_request(self, arguments: Mapping[str, Any]) -> BackendRequest:
        path_values = {field: quote(str(arguments[field]), safe="") for field in _path_fields(self._path)}
        params: Dict[str, Any] = {}
        for arg, wire_name in self._query.items():
            if arg in arguments:
                params[wire_name] = _query_value(arguments[arg])
        body = arguments.get(self._body) if self._body else None
        return BackendRequest(
            method=self._method,
            path=self._path.format(**path_values),
            params=params,
            body=body,
        )

    async def execute(self, arguments: Mapping[str, Any]) -> RawResponse:
        return await self._client.send(self.build_request(arguments))


def text_param(name: str, description: str = "", *, required: bool = True) -> ParameterSpec:
    return ParameterSpec(name=name, type=ParamType.STRING, required=required, description=description)


def json_param(name: str, description: str = "", *, required: bool = True) -> ParameterSpec:
    return ParameterSpec(name=name, type=ParamType.JSON, required=required, description=description)


def page_params(page_size: int = 10) -> tuple[ParameterSpec, ParameterSpec]:
    return (
        ParameterSpec("page", ParamType.INT, required=False, default=1, description="Page number"),
        ParameterSpec("page_size", ParamType.INT, required=False, default=page_size, description="Page size"),
    )


PAGE_QUERY = {"page": "page", "page_size": "pageSize"}


def http_tool(
    client: BackendTransport,
    name: str,
    description: str,
    method: str,
    path: str,
    *,
    params: Sequence[ParameterSpec] = (),
    query: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
    result_kind: ResultKind = ResultKind.RAW_JSON,
    idempotent: Optional[bool] = None,
) -> HttpToolDefinition:
    """Build an ``HttpToolDefinition``; POST tools default to non-idempotent."""
    if idempotent is None:
        idempotent = method.upper() in _SAFE_METHODS
    schema = ToolSchema(
        name=name,
        description=description,
        parameters=tuple(params),
        result_kind=result_kind,
        idempotent=idempotent,
    )
    return HttpToolDefinition(schema, client, method, path, query=query, body=body)


__all__ = [
    "HttpToolDefinition",
    "PAGE_QUERY",
    "http_tool",
    "json_param",
    "page_params",
    "text_param",
]
