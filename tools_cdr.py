"""MyNumbers call detail record (CDR) tools."""
from __future__ import annotations

from tools.backend import BackendTransport
from tools.handlers.http import HttpToolDefinition, PAGE_QUERY, http_tool, json_param, page_params, text_param

NAMESPACE = "MyNumbersCdrApi"


def cdr_tools(client: BackendTransport) -> list[HttpToolDefinition]:
    return [
        http_tool(
            client,
            f"{NAMESPACE}.GetServiceStatus",
            "Get CDR service status",
            "GET",
            "/api/v1/cdr/status",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetCallDetailRecords",
            "Get call detail records",
            "GET",
            "/api/v1/cdr/records",
            params=[
                text_param("start_date", "Start date (ISO format)"),
                text_param("end_date", "End date (ISO format)"),
                text_param("number", "Number filter", required=False),
                *page_params(page_size=100),
            ],
            query={"start_date": "startDate", "end_date": "endDate", "number": "number", **PAGE_QUERY},
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GenerateCdrReport",
            "Generate CDR report",
            "POST",
            "/api/v1/cdr/reports",
            params=[json_param("report_config", "Report configuration as JSON")],
            body="report_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.ExportCdrData",
            "Export CDR data",
            "POST",
            "/api/v1/cdr/export",
            params=[json_param("export_criteria", "Export criteria as JSON")],
            body="export_criteria",
            idempotent=True,
        ),
    ]


__all__ = ["NAMESPACE", "cdr_tools"]
