"""Tool registry mapping namespaced tool names to definitions."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Tuple

from errors import DuplicateToolError, UnknownToolError
from .handler import ToolDefinition
from .spec import ToolSchema

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Central registry of tool definitions, in registration order.

    Built once at startup; after that it is only read, so concurrent
    dispatches may share it without locking.
    """

    def __init__(self, definitions: Iterable[ToolDefinition] = ()) -> None:
        self._definitions: Dict[str, ToolDefinition] = {}
        self._api_names: Dict[str, str] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ToolDefinition) -> None:
        name = definition.name
        if name in self._definitions:
            raise DuplicateToolError(name)
        api_name = definition.schema.api_name
        if api_name in self._api_names:
            raise DuplicateToolError(name)
        self._definitions[name] = definition
        self._api_names[api_name] = name
        logger.debug("Registered tool %s", name)

    def register_all(self, definitions: Iterable[ToolDefinition]) -> None:
        for definition in definitions:
            self.register(definition)

    def lookup(self, name: str) -> ToolDefinition:
        definition = self._definitions.get(name)
        if definition is None:
            canonical = self._api_names.get(name)
            if canonical is not None:
                definition = self._definitions[canonical]
        if definition is None:
            raise UnknownToolError(name)
        return definition

    def catalog(self) -> Tuple[ToolSchema, ...]:
        """Snapshot of all schemas in registration order."""
        return tuple(definition.schema for definition in self._definitions.values())

    def names(self) -> Tuple[str, ...]:
        return tuple(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(tuple(self._definitions.values()))


__all__ = ["ToolRegistry"]
