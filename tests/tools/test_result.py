import pytest

from errors import ErrorKind, InvalidArgumentTypeError, UnknownToolError
from tools.handler import ToolDefinition, parse_body
from tools.backend import RawResponse
from tools.result import BODY_EXCERPT_LIMIT, Failure, Success, body_excerpt, to_tool_result
from tools.spec import ResultKind, ToolSchema


@pytest.mark.parametrize(
    "status, transient, expected",
    [
        (404, False, False),
        (400, False, False),
        (408, False, True),
        (429, False, True),
        (503, False, True),
        (None, True, True),
    ],
)
def test_backend_failure_retryable(status, transient, expected):
    failure = Failure(ErrorKind.BACKEND_ERROR, "x", status_code=status, transient=transient)
    assert failure.retryable is expected


def test_validation_failures_are_not_retryable():
    failure = Failure.from_error(InvalidArgumentTypeError("page", "int"))
    assert failure.kind is ErrorKind.INVALID_ARGUMENT_TYPE
    assert failure.parameter == "page"
    assert failure.expected_type == "int"
    assert not failure.retryable


def test_failure_to_dict_omits_unset_fields():
    data = Failure.from_error(UnknownToolError("A.B")).to_dict()
    assert data == {
        "ok": False,
        "error": "unknown_tool",
        "message": "tool 'A.B' not found",
        "retryable": False,
        "transient": False,
    }


def test_success_content_text():
    assert Success({"id": 1}, 200).content_text() == '{"id": 1}'
    assert Success("plain", 200).content_text() == "plain"
    assert Success(None, 204).content_text() == "status 204"


def test_to_tool_result_for_failure():
    block = to_tool_result(Failure(ErrorKind.CANCELLED, "stopped"), "toolu_9")
    assert block == {
        "type": "tool_result",
        "tool_use_id": "toolu_9",
        "content": "cancelled: stopped",
        "is_error": True,
    }


def test_body_excerpt_truncates():
    assert body_excerpt("short") == "short"
    long = body_excerpt("y" * (BODY_EXCERPT_LIMIT + 10))
    assert long.endswith("...")
    assert len(long) == BODY_EXCERPT_LIMIT + 3


@pytest.mark.parametrize(
    "body, expected",
    [
        ('{"a": [1, 2]}', {"a": [1, 2]}),
        ("[]", []),
        ("not json", "not json"),
        ("", None),
        ("   ", None),
    ],
)
def test_parse_body(body, expected):
    assert parse_body(body) == expected


def test_map_response_status_only_discards_body():
    definition = ToolDefinition(ToolSchema("A.Delete", "x", result_kind=ResultKind.STATUS_ONLY))
    assert definition.map_response(RawResponse(200, '{"deleted": true}')) == Success(None, 200)
    failure = definition.map_response(RawResponse(409, "conflict"))
    assert failure.kind is ErrorKind.BACKEND_ERROR
    assert failure.message == "backend returned 409: conflict"
