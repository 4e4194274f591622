"""MyNumbers lifecycle tools: disconnection, emergency services and number porting."""
from __future__ import annotations

from tools.backend import BackendTransport
from tools.handlers.http import HttpToolDefinition, http_tool, json_param, text_param
from tools.spec import ResultKind

DISCONNECTION_NAMESPACE = "MyNumbersDisconnectionApi"
EMERGENCY_NAMESPACE = "MyNumbersEmergencyServicesApi"
PORTING_NAMESPACE = "MyNumbersNumberPortingApi"


def disconnection_tools(client: BackendTransport) -> list[HttpToolDefinition]:
    request_id = text_param("request_id", "Disconnection request ID")
    return [
        http_tool(
            client,
            f"{DISCONNECTION_NAMESPACE}.RequestDisconnection",
            "Request number disconnection",
            "POST",
            "/api/v1/disconnection/requests",
            params=[json_param("disconnection_request", "Disconnection request as JSON")],
            body="disconnection_request",
        ),
        http_tool(
            client,
            f"{DISCONNECTION_NAMESPACE}.GetDisconnectionStatus",
            "Get disconnection status",
            "GET",
            "/api/v1/disconnection/requests/{request_id}",
            params=[request_id],
        ),
        http_tool(
            client,
            f"{DISCONNECTION_NAMESPACE}.CancelDisconnection",
            "Cancel disconnection request",
            "DELETE",
            "/api/v1/disconnection/requests/{request_id}",
            params=[request_id],
            result_kind=ResultKind.STATUS_ONLY,
        ),
    ]


def emergency_services_tools(client: BackendTransport) -> list[HttpToolDefinition]:
    return [
        http_tool(
            client,
            f"{EMERGENCY_NAMESPACE}.ConfigureEmergencyServices",
            "Configure emergency services",
            "POST",
            "/api/v1/emergency-services/configure",
            params=[json_param("emergency_config", "Emergency services configuration as JSON")],
            body="emergency_config",
        ),
        http_tool(
            client,
            f"{EMERGENCY_NAMESPACE}.GetEmergencyServicesStatus",
            "Get emergency services status",
            "GET",
            "/api/v1/emergency-services/status/{number}",
            params=[text_param("number", "Number to check emergency services for")],
        ),
        http_tool(
            client,
            f"{EMERGENCY_NAMESPACE}.UpdateEmergencyLocation",
            "Update emergency location",
            "PUT",
            "/api/v1/emergency-services/location/{number}",
            params=[
                text_param("number", "Number to update location for"),
                json_param("location_info", "Location information as JSON"),
            ],
            body="location_info",
        ),
    ]


def number_porting_tools(client: BackendTransport) -> list[HttpToolDefinition]:
    request_id = text_param("request_id", "Porting request ID")
    return [
        http_tool(
            client,
            f"{PORTING_NAMESPACE}.SubmitPortingRequest",
            "Submit number porting request",
            "POST",
            "/api/v1/number-porting/requests",
            params=[json_param("porting_request", "Porting request as JSON")],
            body="porting_request",
        ),
        http_tool(
            client,
            f"{PORTING_NAMESPACE}.GetPortingStatus",
            "Get porting request status",
            "GET",
            "/api/v1/number-porting/requests/{request_id}",
            params=[request_id],
        ),
        http_tool(
            client,
            f"{PORTING_NAMESPACE}.UpdatePortingRequest",
            "Update porting request",
            "PUT",
            "/api/v1/number-porting/requests/{request_id}",
            params=[request_id, json_param("porting_update", "Updated porting information as JSON")],
            body="porting_update",
        ),
        http_tool(
            client,
            f"{PORTING_NAMESPACE}.CancelPortingRequest",
            "Cancel porting request",
            "DELETE",
            "/api/v1/number-porting/requests/{request_id}",
            params=[request_id],
            result_kind=ResultKind.STATUS_ONLY,
        ),
        http_tool(
            client,
            f"{PORTING_NAMESPACE}.GetPortingHistory",
            "Get porting history",
            "GET",
            "/api/v1/number-porting/history/{number}",
            params=[text_param("number", "Number to get porting history for")],
        ),
    ]


__all__ = [
    "DISCONNECTION_NAMESPACE",
    "EMERGENCY_NAMESPACE",
    "PORTING_NAMESPACE",
    "disconnection_tools",
    "emergency_services_tools",
    "number_porting_tools",
]
