"""Tool system abstractions: schemas, registry, dispatcher and backend transport."""

from .backend import BackendClient, BackendPool, BackendRequest, BackendTransport, RawResponse
from .dispatcher import DispatchState, Dispatcher, ToolCall
from .handler import ToolDefinition
from .handlers import HttpToolDefinition, http_tool
from .registry import ToolRegistry
from .result import Failure, Result, Success, to_tool_result
from .schemas import validate_arguments
from .spec import ParameterSpec, ParamType, ResultKind, ToolSchema
from errors import (
    DispatchError,
    DuplicateToolError,
    ErrorKind,
    InvalidArgumentTypeError,
    MissingArgumentError,
    TransportFault,
    UnknownToolError,
)

__all__ = [
    "BackendClient",
    "BackendPool",
    "BackendRequest",
    "BackendTransport",
    "DispatchError",
    "DispatchState",
    "Dispatcher",
    "DuplicateToolError",
    "ErrorKind",
    "Failure",
    "HttpToolDefinition",
    "InvalidArgumentTypeError",
    "MissingArgumentError",
    "ParamType",
    "ParameterSpec",
    "RawResponse",
    "Result",
    "ResultKind",
    "Success",
    "ToolCall",
    "ToolDefinition",
    "ToolRegistry",
    "ToolSchema",
    "TransportFault",
    "UnknownToolError",
    "http_tool",
    "to_tool_result",
    "validate_arguments",
]
