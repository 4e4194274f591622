"""Tool specification models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class ParamType(Enum):
    """Semantic parameter types understood by the dispatcher."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"
    ENUM = "enum"
    JSON = "json"


class ResultKind(Enum):
    """How a successful backend response is surfaced to the caller."""

    RAW_JSON = "raw_json"
    STATUS_ONLY = "status_only"


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """Describes one named tool parameter.

    ``default`` is only meaningful for optional parameters; ``None`` means the
    parameter is omitted entirely when the caller does not supply it.
    """

    name: str
    type: ParamType = ParamType.STRING
    required: bool = True
    default: Any = None
    description: str = ""
    choices: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("parameter name must be non-empty")
        if self.type is ParamType.ENUM and not self.choices:
            raise ValueError(f"enum parameter '{self.name}' needs at least one choice")
        if self.type is not ParamType.ENUM and self.choices:
            raise ValueError(f"parameter '{self.name}' declares choices but is not an enum")
        if self.default is None:
            return
        if self.required:
            raise ValueError(f"required parameter '{self.name}' cannot declare a default")

        from .schemas import check_value

        try:
            normalized = check_value(self, self.default)
        except ValueError as exc:
            raise ValueError(f"default for '{self.name}' does not match type {self.type_label}: {exc}") from None
        object.__setattr__(self, "default", normalized)

    @property
    def type_label(self) -> str:
        if self.type is ParamType.ENUM:
            return "enum[" + "|".join(self.choices) + "]"
        return self.type.value

    def describe(self) -> str:
        flags = "required" if self.required else "optional"
        if not self.required and self.default is not None:
            flags = f"{flags}, default={self.default!r}"
        line = f"{self.name} ({self.type_label}, {flags})"
        return f"{line}: {self.description}" if self.description else line

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any]
        if self.type is ParamType.STRING:
            schema = {"type": "string"}
        elif self.type is ParamType.INT:
            schema = {"type": "integer"}
        elif self.type is ParamType.BOOL:
            schema = {"type": "boolean"}
        elif self.type is ParamType.ENUM:
            schema = {"type": "string", "enum": list(self.choices)}
        else:
            schema = {"type": ["object", "array", "string"]}
        if self.description:
            schema["description"] = self.description
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True, slots=True)
class ToolSchema:
    """Static description of one capability."""

    name: str
    description: str
    parameters: Tuple[ParameterSpec, ...] = ()
    result_kind: ResultKind = ResultKind.RAW_JSON
    idempotent: bool = True

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("tool name must be non-empty")
        seen: set[str] = set()
        for param in self.parameters:
            if param.name in seen:
                raise ValueError(f"tool '{self.name}' declares parameter '{param.name}' twice")
            seen.add(param.name)

    @property
    def namespace(self) -> str:
        return self.name.split(".", 1)[0] if "." in self.name else ""

    @property
    def api_name(self) -> str:
        """Name safe for provider tool definitions, which reject dots."""
        return self.name.replace(".", "__")

    def parameter(self, name: str) -> Optional[ParameterSpec]:
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def required_parameters(self) -> List[str]:
        return [param.name for param in self.parameters if param.required]

    def describe(self) -> str:
        """Return a stable, human/LLM-readable summary of the tool."""
        lines = [f"{self.name}: {self.description}"]
        if self.parameters:
            lines.append("Parameters:")
            lines.extend(f"  - {param.describe()}" for param in self.parameters)
        else:
            lines.append("Parameters: none")
        returns = f"Returns: {self.result_kind.value}"
        if not self.idempotent:
            returns += " (not idempotent; do not retry blindly)"
        lines.append(returns)
        return "\n".join(lines)

    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {param.name: param.to_json_schema() for param in self.parameters},
            "required": self.required_parameters(),
        }

    def to_anthropic_definition(self) -> Dict[str, Any]:
        """Return a dict compatible with Anthropic tool definitions."""
        return {
            "name": self.api_name,
            "description": self.describe(),
            "input_schema": self.input_schema(),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "result_kind": self.result_kind.value,
            "idempotent": self.idempotent,
            "parameters": [
                {
                    "name": param.name,
                    "type": param.type_label,
                    "required": param.required,
                    "default": param.default,
                    "description": param.description,
                }
                for param in self.parameters
            ],
        }


__all__ = ["ParamType", "ParameterSpec", "ResultKind", "ToolSchema"]
