"""MyNumbers API tools: number inventory, reservation and activation."""
from __future__ import annotations

from tools.backend import BackendTransport
from tools.handlers.http import HttpToolDefinition, PAGE_QUERY, http_tool, json_param, page_params, text_param
from tools.spec import ParameterSpec

NAMESPACE = "MyNumbersApi"

HISTORY_QUERY = {"start_date": "startDate", "end_date": "endDate"}


def history_params() -> list[ParameterSpec]:
    return [
        text_param("start_date", "Start date (ISO format)", required=False),
        text_param("end_date", "End date (ISO format)", required=False),
    ]


def mynumbers_tools(client: BackendTransport) -> list[HttpToolDefinition]:
    return [
        http_tool(
            client,
            f"{NAMESPACE}.GetServiceStatus",
            "Get MyNumbers service status",
            "GET",
            "/api/v1/status",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetNumberInventory",
            "Get number inventory",
            "GET",
            "/api/v1/numbers",
            params=[
                text_param("country_code", "Country code", required=False),
                text_param("number_type", "Number type", required=False),
                *page_params(),
            ],
            query={"country_code": "countryCode", "number_type": "numberType", **PAGE_QUERY},
        ),
        http_tool(
            client,
            f"{NAMESPACE}.ReserveNumber",
            "Reserve a number",
            "POST",
            "/api/v1/numbers/{number}/reserve",
            params=[
                text_param("number", "Number to reserve"),
                json_param("reservation_config", "Reservation configuration as JSON"),
            ],
            body="reservation_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.ActivateNumber",
            "Activate a number",
            "POST",
            "/api/v1/numbers/{number}/activate",
            params=[
                text_param("number", "Number to activate"),
                json_param("activation_config", "Activation configuration as JSON"),
            ],
            body="activation_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetNumberDetails",
            "Get number details",
            "GET",
            "/api/v1/numbers/{number}",
            params=[text_param("number", "Number to get details for")],
        ),
        http_tool(
            client,
            f"{NAMESPACE}.UpdateNumberConfiguration",
            "Update number configuration",
            "PUT",
            "/api/v1/numbers/{number}",
            params=[
                text_param("number", "Number to update"),
                json_param("configuration_update", "Configuration update as JSON"),
            ],
            body="configuration_update",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.DeactivateNumber",
            "Deactivate a number",
            "POST",
            "/api/v1/numbers/{number}/deactivate",
            params=[text_param("number", "Number to deactivate")],
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetNumberHistory",
            "Get number history",
            "GET",
            "/api/v1/numbers/{number}/history",
            params=[text_param("number", "Number to get history for"), *history_params()],
            query=HISTORY_QUERY,
        ),
        http_tool(
            client,
            f"{NAMESPACE}.SearchNumbers",
            "Search numbers by criteria",
            "POST",
            "/api/v1/numbers/search",
            params=[json_param("search_criteria", "Search criteria as JSON"), *page_params()],
            query=PAGE_QUERY,
            body="search_criteria",
            idempotent=True,
        ),
    ]


__all__ = ["HISTORY_QUERY", "NAMESPACE", "history_params", "mynumbers_tools"]
