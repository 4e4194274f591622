"""Structured dispatch error types."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classification of dispatch failures."""

    UNKNOWN_TOOL = "unknown_tool"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT_TYPE = "invalid_argument_type"
    BACKEND_ERROR = "backend_error"
    TRANSPORT_FAULT = "transport_fault"
    CANCELLED = "cancelled"
    INTERNAL_ERROR = "internal_error"
    DUPLICATE_TOOL = "duplicate_tool"


class DispatchError(Exception):
    """Base class for errors raised inside the dispatch core."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INTERNAL_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __str__(self) -> str:  # pragma: no cover - convenience
        return self.message


class UnknownToolError(DispatchError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"tool '{tool_name}' not found", ErrorKind.UNKNOWN_TOOL)
        self.tool_name = tool_name


class DuplicateToolError(DispatchError):
    """Raised when two tools are registered under the same name."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"tool '{tool_name}' is already registered", ErrorKind.DUPLICATE_TOOL)
        self.tool_name = tool_name


class MissingArgumentError(DispatchError):
    """A required parameter was absent or blank."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"missing required argument '{parameter}'", ErrorKind.MISSING_ARGUMENT)
        self.parameter = parameter


class InvalidArgumentTypeError(DispatchError):
    """A supplied value failed the parameter's type check."""

    def __init__(self, parameter: str, expected_type: str, detail: Optional[str] = None) -> None:
        message = f"argument '{parameter}' must be of type {expected_type}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, ErrorKind.INVALID_ARGUMENT_TYPE)
        self.parameter = parameter
        self.expected_type = expected_type


class TransportFault(DispatchError):
    """Network-level failure talking to a backend (connection refused, timeout)."""

    def __init__(self, message: str, *, timeout: bool = False) -> None:
        super().__init__(message, ErrorKind.TRANSPORT_FAULT)
        self.timeout = timeout


__all__ = [
    "DispatchError",
    "DuplicateToolError",
    "ErrorKind",
    "InvalidArgumentTypeError",
    "MissingArgumentError",
    "TransportFault",
    "UnknownToolError",
]
