"""MyNumbers address management tools."""
from __future__ import annotations

from tools.backend import BackendTransport
from tools.handlers.http import HttpToolDefinition, PAGE_QUERY, http_tool, json_param, page_params, text_param
from tools.spec import ResultKind
from tools_mynumbers import HISTORY_QUERY, history_params

NAMESPACE = "MyNumbersAddressManagementApi"
_BASE = "/api/v1/address-management"


def address_management_tools(client: BackendTransport) -> list[HttpToolDefinition]:
    address_id = text_param("address_id", "Address ID")
    return [
        http_tool(
            client,
            f"{NAMESPACE}.GetServiceStatus",
            "Get address management service status",
            "GET",
            f"{_BASE}/status",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.CreateAddress",
            "Create address record",
            "POST",
            f"{_BASE}/addresses",
            params=[json_param("address_info", "Address information as JSON")],
            body="address_info",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetAddress",
            "Get address by ID",
            "GET",
            f"{_BASE}/addresses/{{address_id}}",
            params=[address_id],
        ),
        http_tool(
            client,
            f"{NAMESPACE}.UpdateAddress",
            "Update address information",
            "PUT",
            f"{_BASE}/addresses/{{address_id}}",
            params=[address_id, json_param("address_info", "Updated address information as JSON")],
            body="address_info",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.DeleteAddress",
            "Delete address record",
            "DELETE",
            f"{_BASE}/addresses/{{address_id}}",
            params=[address_id],
            result_kind=ResultKind.STATUS_ONLY,
        ),
        http_tool(
            client,
            f"{NAMESPACE}.SearchAddresses",
            "Search addresses by criteria",
            "POST",
            f"{_BASE}/addresses/search",
            params=[json_param("search_criteria", "Search criteria as JSON"), *page_params()],
            query=PAGE_QUERY,
            body="search_criteria",
            idempotent=True,
        ),
        http_tool(
            client,
            f"{NAMESPACE}.ValidateAddress",
            "Validate address",
            "POST",
            f"{_BASE}/addresses/validate",
            params=[json_param("address_data", "Address data to validate as JSON")],
            body="address_data",
            idempotent=True,
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetAddressHistory",
            "Get address history",
            "GET",
            f"{_BASE}/addresses/{{address_id}}/history",
            params=[address_id, *history_params()],
            query=HISTORY_QUERY,
        ),
        http_tool(
            client,
            f"{NAMESPACE}.BulkImportAddresses",
            "Bulk import addresses",
            "POST",
            f"{_BASE}/addresses/bulk-import",
            params=[json_param("bulk_address_data", "Bulk address data as JSON")],
            body="bulk_address_data",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.ExportAddresses",
            "Export addresses",
            "POST",
            f"{_BASE}/addresses/export",
            params=[json_param("export_criteria", "Export criteria as JSON")],
            body="export_criteria",
            idempotent=True,
        ),
    ]


__all__ = ["NAMESPACE", "address_management_tools"]
