"""Connect API tools: connection lifecycle and connectivity checks."""
from __future__ import annotations

from tools.backend import BackendTransport
from tools.handlers.http import HttpToolDefinition, PAGE_QUERY, http_tool, json_param, page_params, text_param
from tools.spec import ResultKind

NAMESPACE = "ConnectApi"


def connect_tools(client: BackendTransport) -> list[HttpToolDefinition]:
    connection_id = text_param("connection_id", "Connection ID")
    return [
        http_tool(
            client,
            f"{NAMESPACE}.GetConnectionStatus",
            "Get connection status",
            "GET",
            "/api/v1/status",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.CreateConnection",
            "Create a new connection",
            "POST",
            "/api/v1/connections",
            params=[json_param("connection_config", "Connection configuration as JSON")],
            body="connection_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetConnectionById",
            "Get connection details by ID",
            "GET",
            "/api/v1/connections/{connection_id}",
            params=[connection_id],
        ),
        http_tool(
            client,
            f"{NAMESPACE}.UpdateConnection",
            "Update an existing connection",
            "PUT",
            "/api/v1/connections/{connection_id}",
            params=[connection_id, json_param("connection_config", "Updated connection configuration as JSON")],
            body="connection_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.DeleteConnection",
            "Delete a connection",
            "DELETE",
            "/api/v1/connections/{connection_id}",
            params=[connection_id],
            result_kind=ResultKind.STATUS_ONLY,
        ),
        http_tool(
            client,
            f"{NAMESPACE}.ListConnections",
            "List all connections",
            "GET",
            "/api/v1/connections",
            params=page_params(),
            query=PAGE_QUERY,
        ),
        http_tool(
            client,
            f"{NAMESPACE}.TestConnection",
            "Test connection connectivity",
            "POST",
            "/api/v1/connections/{connection_id}/test",
            params=[connection_id],
            idempotent=True,
        ),
    ]


__all__ = ["NAMESPACE", "connect_tools"]
