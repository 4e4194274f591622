"""Pydantic-backed validation of raw argument bags against a ``ToolSchema``."""
from __future__ import annotations

import copy
import json
from functools import lru_cache
from typing import Annotated, Any, Dict, Literal, Mapping, Tuple

from pydantic import BeforeValidator, StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError

from errors import InvalidArgumentTypeError, MissingArgumentError
from .spec import ParameterSpec, ParamType, ToolSchema


def _load_json(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return value
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid JSON: {exc.msg}") from None
        # "null" is reported as absent by the caller
        if parsed is None or isinstance(parsed, (dict, list)):
            return parsed
        raise ValueError("expected a JSON object or array")
    raise ValueError("expected a JSON object, array, or JSON-encoded string")


JsonValue = Annotated[Any, BeforeValidator(_load_json)]


@lru_cache(maxsize=None)
def _adapter(param_type: ParamType, choices: Tuple[str, ...]) -> TypeAdapter:
    if param_type is ParamType.STRING:
        return TypeAdapter(StrictStr)
    if param_type is ParamType.INT:
        return TypeAdapter(StrictInt)
    if param_type is ParamType.BOOL:
        return TypeAdapter(StrictBool)
    if param_type is ParamType.ENUM:
        return TypeAdapter(Literal[choices])  # type: ignore[valid-type]
    return TypeAdapter(JsonValue)


def check_value(param: ParameterSpec, value: Any) -> Any:
    """Validate *value* for *param* and return the normalized value.

    Raises ``ValueError`` with a short reason when the value does not match.
    """
    try:
        return _adapter(param.type, param.choices).validate_python(value, strict=True)
    except ValidationError as exc:
        errors = exc.errors()
        reason = errors[0].get("msg", "invalid value") if errors else "invalid value"
        raise ValueError(reason) from None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_arguments(schema: ToolSchema, raw_input: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Check presence and type of every declared parameter in declared order.

    Unknown keys are ignored. Optional parameters supplied as ``None`` or a
    blank string are treated as absent and replaced by their default. Required
    string and JSON parameters supplied blank, or JSON parameters supplied as
    ``"null"``, are reported as missing. Defaults are copied per call.
    """
    if raw_input is not None and not isinstance(raw_input, Mapping):
        raise InvalidArgumentTypeError("arguments", "object")
    raw = dict(raw_input or {})
    validated: Dict[str, Any] = {}
    for param in schema.parameters:
        present = param.name in raw
        value = raw.get(param.name)
        blank = _is_blank(value) and param.type in (ParamType.STRING, ParamType.JSON, ParamType.ENUM)

        if present and value is not None and not blank:
            try:
                normalized = check_value(param, value)
            except ValueError as exc:
                raise InvalidArgumentTypeError(param.name, param.type_label, str(exc)) from None
            if normalized is not None:
                validated[param.name] = normalized
                continue

        if param.required:
            raise MissingArgumentError(param.name)
        if param.default is not None:
            validated[param.name] = copy.deepcopy(param.default)
    return validated


__all__ = ["JsonValue", "check_value", "validate_arguments"]
