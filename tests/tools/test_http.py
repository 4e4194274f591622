import pytest

from tests.utils import RecordingTransport
from tools.handlers.http import PAGE_QUERY, HttpToolDefinition, http_tool, json_param, page_params, text_param
from tools.spec import ParameterSpec, ParamType, ResultKind, ToolSchema


def test_path_values_are_url_quoted():
    tool = http_tool(
        RecordingTransport(),
        "MyNumbersApi.GetNumberDetails",
        "Get number details",
        "GET",
        "/api/v1/numbers/{number}",
        params=[text_param("number")],
    )

    request = tool.build_request({"number": "+32 470/00"})

    assert request.path == "/api/v1/numbers/%2B32%20470%2F00"
    assert request.params == {}
    assert request.body is None


def test_query_includes_only_present_arguments():
    tool = http_tool(
        RecordingTransport(),
        "MyNumbersApi.GetNumberInventory",
        "Get number inventory",
        "GET",
        "/api/v1/numbers",
        params=[text_param("country_code", required=False), *page_params()],
        query={"country_code": "countryCode", **PAGE_QUERY},
    )

    request = tool.build_request({"page": 2, "page_size": 10})

    assert request.params == {"page": 2, "pageSize": 10}


def test_body_argument_is_sent_as_body():
    tool = http_tool(
        RecordingTransport(),
        "ConnectApi.UpdateConnection",
        "Update an existing connection",
        "PUT",
        "/api/v1/connections/{connection_id}",
        params=[text_param("connection_id"), json_param("connection_config")],
        body="connection_config",
    )

    request = tool.build_request({"connection_id": "c-1", "connection_config": {"name": "edge"}})

    assert request.method == "PUT"
    assert request.path == "/api/v1/connections/c-1"
    assert request.body == {"name": "edge"}


def test_post_tools_default_to_non_idempotent():
    post = http_tool(RecordingTransport(), "SmsApi.SendSms", "Send", "post", "/api/v1/messages")
    get = http_tool(RecordingTransport(), "SmsApi.GetSmsStatistics", "Stats", "GET", "/api/v1/statistics")
    search = http_tool(
        RecordingTransport(), "MyNumbersApi.SearchNumbers", "Search", "POST", "/api/v1/numbers/search", idempotent=True
    )

    assert post.method == "POST"
    assert post.schema.idempotent is False
    assert get.schema.idempotent is True
    assert search.schema.idempotent is True


def test_path_field_must_be_required_parameter():
    schema = ToolSchema(
        "ConnectApi.GetConnectionById",
        "Get",
        parameters=(ParameterSpec("connection_id", required=False),),
    )
    with pytest.raises(ValueError, match="path field"):
        HttpToolDefinition(schema, RecordingTransport(), "GET", "/api/v1/connections/{connection_id}")


def test_query_and_body_must_reference_declared_parameters():
    with pytest.raises(ValueError, match="not a declared parameter"):
        http_tool(RecordingTransport(), "A.B", "x", "GET", "/x", query={"page": "page"})
    with pytest.raises(ValueError, match="not a declared parameter"):
        http_tool(RecordingTransport(), "A.B", "x", "POST", "/x", body="payload")


def test_result_kind_is_carried_on_schema():
    tool = http_tool(
        RecordingTransport(),
        "SmsApi.DeleteTemplate",
        "Delete SMS template",
        "DELETE",
        "/api/v1/templates/{template_id}",
        params=[text_param("template_id")],
        result_kind=ResultKind.STATUS_ONLY,
    )
    assert tool.schema.result_kind is ResultKind.STATUS_ONLY
    assert tool.schema.parameter("template_id").type is ParamType.STRING


def test_bool_query_values_are_lowercase():
    tool = http_tool(
        RecordingTransport(),
        "SmsApi.GetMessageHistory",
        "Get message history",
        "GET",
        "/api/v1/messages/history",
        params=[
            ParameterSpec("include_failed", ParamType.BOOL, required=False),
            ParameterSpec("archived", ParamType.BOOL, required=False),
        ],
        query={"include_failed": "includeFailed", "archived": "archived"},
    )

    request = tool.build_request({"include_failed": True, "archived": False})

    assert request.params == {"includeFailed": "true", "archived": "false"}
