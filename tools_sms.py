"""SMS API tools: messaging, scheduling, templates and account balance."""
from __future__ import annotations

from tools.backend import BackendTransport
from tools.handlers.http import HttpToolDefinition, PAGE_QUERY, http_tool, json_param, page_params, text_param
from tools.spec import ResultKind

NAMESPACE = "SmsApi"


def sms_tools(client: BackendTransport) -> list[HttpToolDefinition]:
    message_id = text_param("message_id", "Message ID")
    return [
        http_tool(
            client,
            f"{NAMESPACE}.GetServiceStatus",
            "Get SMS service status",
            "GET",
            "/api/v1/status",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.SendSms",
            "Send SMS message",
            "POST",
            "/api/v1/messages",
            params=[json_param("message_config", "SMS message configuration as JSON")],
            body="message_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.SendBulkSms",
            "Send bulk SMS messages",
            "POST",
            "/api/v1/messages/bulk",
            params=[json_param("bulk_message_config", "Bulk SMS configuration as JSON")],
            body="bulk_message_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetMessageStatus",
            "Get message status",
            "GET",
            "/api/v1/messages/{message_id}",
            params=[message_id],
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetDeliveryReports",
            "Get message delivery reports",
            "GET",
            "/api/v1/messages/{message_id}/delivery-reports",
            params=[message_id],
        ),
        http_tool(
            client,
            f"{NAMESPACE}.ScheduleSms",
            "Schedule SMS message",
            "POST",
            "/api/v1/messages/schedule",
            params=[json_param("scheduled_message_config", "Scheduled message configuration as JSON")],
            body="scheduled_message_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.CancelScheduledMessage",
            "Cancel scheduled message",
            "DELETE",
            "/api/v1/messages/{message_id}/schedule",
            params=[text_param("message_id", "Scheduled message ID")],
            result_kind=ResultKind.STATUS_ONLY,
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetMessageHistory",
            "Get message history",
            "GET",
            "/api/v1/messages/history",
            params=[
                text_param("start_date", "Start date (ISO format)", required=False),
                text_param("end_date", "End date (ISO format)", required=False),
                text_param("status", "Status filter", required=False),
                *page_params(),
            ],
            query={"start_date": "startDate", "end_date": "endDate", "status": "status", **PAGE_QUERY},
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetTemplates",
            "Get SMS templates",
            "GET",
            "/api/v1/templates",
            params=[text_param("category", "Template category", required=False), *page_params()],
            query={"category": "category", **PAGE_QUERY},
        ),
        http_tool(
            client,
            f"{NAMESPACE}.CreateTemplate",
            "Create SMS template",
            "POST",
            "/api/v1/templates",
            params=[json_param("template_config", "Template configuration as JSON")],
            body="template_config",
        ),
        http_tool(
            client,
            f"{NAMESPACE}.GetAccountBalance",
            "Get account balance",
            "GET",
            "/api/v1/account/balance",
        ),
    ]


__all__ = ["NAMESPACE", "sms_tools"]
