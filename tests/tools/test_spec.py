import pytest

from tools.spec import ParameterSpec, ParamType, ResultKind, ToolSchema


def _schema() -> ToolSchema:
    return ToolSchema(
        name="MyNumbersApi.GetNumberInventory",
        description="Get number inventory",
        parameters=(
            ParameterSpec("country_code", ParamType.STRING, required=False, description="Country code"),
            ParameterSpec("page", ParamType.INT, required=False, default=1, description="Page number"),
            ParameterSpec("kind", ParamType.ENUM, required=False, choices=("mobile", "geographic")),
        ),
    )


def test_describe_lists_parameters_in_declared_order():
    text = _schema().describe()

    assert text.splitlines()[0] == "MyNumbersApi.GetNumberInventory: Get number inventory"
    assert "  - country_code (string, optional): Country code" in text
    assert "  - page (int, optional, default=1): Page number" in text
    assert "  - kind (enum[mobile|geographic], optional)" in text
    assert text.index("country_code") < text.index("page (") < text.index("kind (")
    assert text.endswith("Returns: raw_json")


def test_describe_is_stable_across_calls():
    schema = _schema()
    assert schema.describe() == schema.describe()
    assert _schema().describe() == schema.describe()


def test_describe_flags_non_idempotent_tools():
    schema = ToolSchema("SmsApi.SendSms", "Send SMS message", idempotent=False)
    assert "Parameters: none" in schema.describe()
    assert "not idempotent" in schema.describe()


def test_schemas_compare_by_value():
    assert _schema() == _schema()
    assert _schema() != ToolSchema("Other.Tool", "x")


def test_required_parameter_cannot_have_default():
    with pytest.raises(ValueError, match="cannot declare a default"):
        ParameterSpec("page", ParamType.INT, required=True, default=1)


@pytest.mark.parametrize(
    "param_type, default",
    [
        (ParamType.INT, "1"),
        (ParamType.INT, True),
        (ParamType.BOOL, 0),
        (ParamType.STRING, 5),
    ],
)
def test_default_must_match_declared_type(param_type, default):
    with pytest.raises(ValueError, match="does not match type"):
        ParameterSpec("value", param_type, required=False, default=default)


def test_enum_default_must_be_a_choice():
    with pytest.raises(ValueError):
        ParameterSpec("kind", ParamType.ENUM, required=False, default="other", choices=("a", "b"))
    spec = ParameterSpec("kind", ParamType.ENUM, required=False, default="a", choices=("a", "b"))
    assert spec.default == "a"


def test_enum_requires_choices():
    with pytest.raises(ValueError, match="at least one choice"):
        ParameterSpec("kind", ParamType.ENUM)


def test_duplicate_parameter_names_rejected():
    with pytest.raises(ValueError, match="twice"):
        ToolSchema("A.B", "x", parameters=(ParameterSpec("id"), ParameterSpec("id")))


def test_input_schema_and_anthropic_definition():
    schema = ToolSchema(
        name="ConnectApi.UpdateConnection",
        description="Update an existing connection",
        parameters=(
            ParameterSpec("connection_id", description="Connection ID"),
            ParameterSpec("connection_config", ParamType.JSON),
        ),
        result_kind=ResultKind.RAW_JSON,
    )

    definition = schema.to_anthropic_definition()

    assert definition["name"] == "ConnectApi__UpdateConnection"
    assert definition["description"] == schema.describe()
    props = definition["input_schema"]["properties"]
    assert props["connection_id"] == {"type": "string", "description": "Connection ID"}
    assert props["connection_config"]["type"] == ["object", "array", "string"]
    assert definition["input_schema"]["required"] == ["connection_id", "connection_config"]


def test_namespace_and_to_dict():
    schema = _schema()
    assert schema.namespace == "MyNumbersApi"
    data = schema.to_dict()
    assert data["name"] == schema.name
    assert [p["name"] for p in data["parameters"]] == ["country_code", "page", "kind"]
    assert data["parameters"][1]["default"] == 1
