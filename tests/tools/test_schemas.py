import asyncio

import pytest

from errors import ErrorKind, InvalidArgumentTypeError, MissingArgumentError
from tools.schemas import check_value, validate_arguments
from tools.spec import ParameterSpec, ParamType, ToolSchema


SCHEMA = ToolSchema(
    name="MyNumbersCdrApi.GetCallDetailRecords",
    description="Get call detail records",
    parameters=(
        ParameterSpec("start_date"),
        ParameterSpec("end_date"),
        ParameterSpec("number", required=False),
        ParameterSpec("page", ParamType.INT, required=False, default=1),
        ParameterSpec("page_size", ParamType.INT, required=False, default=100),
        ParameterSpec("include_failed", ParamType.BOOL, required=False),
        ParameterSpec("direction", ParamType.ENUM, required=False, choices=("inbound", "outbound")),
        ParameterSpec("filters", ParamType.JSON, required=False),
    ),
)


def test_defaults_substituted_for_absent_optional_parameters():
    args = validate_arguments(SCHEMA, {"start_date": "2024-01-01", "end_date": "2024-01-31"})
    assert args == {"start_date": "2024-01-01", "end_date": "2024-01-31", "page": 1, "page_size": 100}


def test_unknown_keys_are_ignored():
    args = validate_arguments(
        SCHEMA,
        {"start_date": "a", "end_date": "b", "trace_id": "xyz", "reasoning": {"step": 1}},
    )
    assert "trace_id" not in args
    assert "reasoning" not in args


def test_missing_required_parameter_reported_in_declared_order():
    with pytest.raises(MissingArgumentError) as excinfo:
        validate_arguments(SCHEMA, {})
    assert excinfo.value.parameter == "start_date"
    assert excinfo.value.kind is ErrorKind.MISSING_ARGUMENT


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_required_string_counts_as_missing(blank):
    with pytest.raises(MissingArgumentError) as excinfo:
        validate_arguments(SCHEMA, {"start_date": "2024-01-01", "end_date": blank})
    assert excinfo.value.parameter == "end_date"


@pytest.mark.parametrize("blank", ["", "  ", None])
def test_blank_optional_value_treated_as_absent(blank):
    args = validate_arguments(SCHEMA, {"start_date": "a", "end_date": "b", "number": blank, "page": None})
    assert "number" not in args
    assert args["page"] == 1


@pytest.mark.parametrize(
    "name, value, expected",
    [
        ("page", "2", "int"),
        ("page", True, "int"),
        ("page", 1.5, "int"),
        ("include_failed", "yes", "bool"),
        ("include_failed", 1, "bool"),
        ("number", 32470, "string"),
        ("direction", "sideways", "enum[inbound|outbound]"),
        ("filters", "{not json", "json"),
        ("filters", 12, "json"),
    ],
)
def test_type_mismatch_identifies_parameter_and_expected_type(name, value, expected):
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        validate_arguments(SCHEMA, {"start_date": "a", "end_date": "b", name: value})
    assert excinfo.value.parameter == name
    assert excinfo.value.expected_type == expected
    assert excinfo.value.kind is ErrorKind.INVALID_ARGUMENT_TYPE


def test_presence_checked_before_later_type_errors():
    with pytest.raises(MissingArgumentError):
        validate_arguments(SCHEMA, {"start_date": "a", "page": "bad"})


def test_json_parameter_accepts_objects_and_encoded_strings():
    args = validate_arguments(SCHEMA, {"start_date": "a", "end_date": "b", "filters": '{"country": "BE"}'})
    assert args["filters"] == {"country": "BE"}

    args = validate_arguments(SCHEMA, {"start_date": "a", "end_date": "b", "filters": [1, 2]})
    assert args["filters"] == [1, 2]


def test_valid_typed_values_pass_through():
    args = validate_arguments(
        SCHEMA,
        {"start_date": "a", "end_date": "b", "page": 3, "include_failed": False, "direction": "inbound"},
    )
    assert args["page"] == 3
    assert args["include_failed"] is False
    assert args["direction"] == "inbound"


def test_non_mapping_arguments_rejected():
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        validate_arguments(SCHEMA, ["start_date"])  # type: ignore[arg-type]
    assert excinfo.value.parameter == "arguments"


def test_check_value_returns_normalized_value():
    spec = ParameterSpec("config", ParamType.JSON)
    assert check_value(spec, '{"a": 1}') == {"a": 1}
    with pytest.raises(ValueError):
        check_value(ParameterSpec("n", ParamType.INT), "1")


@pytest.mark.parametrize("value", ["null", " null "])
def test_required_json_null_counts_as_missing(dispatcher, transport, value):
    result = asyncio.run(dispatcher.dispatch("SmsApi.SendSms", {"message_config": value}))

    assert result.kind is ErrorKind.MISSING_ARGUMENT
    assert result.parameter == "message_config"
    assert transport.calls == 0


@pytest.mark.parametrize("value", ["42", '"text"', "true"])
def test_required_json_scalar_rejected(dispatcher, transport, value):
    result = asyncio.run(dispatcher.dispatch("SmsApi.SendSms", {"message_config": value}))

    assert result.kind is ErrorKind.INVALID_ARGUMENT_TYPE
    assert result.parameter == "message_config"
    assert result.expected_type == "json"
    assert transport.calls == 0


def test_optional_json_null_treated_as_absent():
    args = validate_arguments(SCHEMA, {"start_date": "a", "end_date": "b", "filters": "null"})
    assert "filters" not in args


def test_json_default_is_parsed_and_copied_per_call():
    schema = ToolSchema(
        "MyNumbersApi.SearchNumbers",
        "Search numbers by criteria",
        parameters=(ParameterSpec("criteria", ParamType.JSON, required=False, default='{"country": "BE"}'),),
    )

    first = validate_arguments(schema, {})
    first["criteria"]["country"] = "NL"
    second = validate_arguments(schema, {})

    assert schema.parameter("criteria").default == {"country": "BE"}
    assert second["criteria"] == {"country": "BE"}
    assert first["criteria"] is not second["criteria"]
