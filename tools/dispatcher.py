"""Dispatcher: the single entry point that resolves, validates and invokes tools."""
from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from errors import DispatchError, ErrorKind, TransportFault
from .handler import ToolDefinition
from .registry import ToolRegistry
from .result import Failure, Result, to_tool_result
from .schemas import validate_arguments
from .spec import ToolSchema
from .tool_summary import summarize_dispatch, truncate_text

logger = logging.getLogger(__name__)

DEFAULT_CANCEL_GRACE_SECONDS = 1.0


class DispatchState(Enum):
    RESOLVING = "resolving"
    VALIDATING = "validating"
    INVOKING = "invoking"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ToolCall:
    """A parsed tool call emitted by the orchestrator."""

    tool_name: str
    call_id: str
    arguments: Dict[str, Any] = field(default_factory=dict)


class _Cancelled(Exception):
    pass


class Dispatcher:
    """Runs one validate-then-invoke cycle per call and always returns a ``Result``.

    Validation and resolution failures never reach a backend. The tool action is
    executed exactly once and is never retried here.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        telemetry: Any = None,
        cancel_grace_seconds: float = DEFAULT_CANCEL_GRACE_SECONDS,
    ) -> None:
        self._registry = registry
        self._telemetry = telemetry
        self._cancel_grace = cancel_grace_seconds

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def catalog(self) -> Tuple[ToolSchema, ...]:
        return self._registry.catalog()

    async def dispatch(
        self,
        tool_name: str,
        arguments: Optional[Mapping[str, Any]] = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
        call_id: Optional[str] = None,
    ) -> Result:
        call_id = call_id or uuid.uuid4().hex[:12]
        request_summary = summarize_dispatch(tool_name, arguments)
        start = time.monotonic()
        state = DispatchState.RESOLVING
        logger.debug("[%s] %s: %s", call_id, request_summary, state.value)

        try:
            definition = self._registry.lookup(tool_name)
            state = self._advance(call_id, state, DispatchState.VALIDATING)
            validated = validate_arguments(definition.schema, arguments)
            state = self._advance(call_id, state, DispatchState.INVOKING)
            result = await self._invoke(definition, validated, cancel_event)
        except DispatchError as exc:
            result = Failure.from_error(exc)
        except _Cancelled:
            result = Failure(ErrorKind.CANCELLED, f"dispatch of '{tool_name}' was cancelled by the caller")
        except Exception:
            logger.exception("[%s] Unexpected error while invoking %s", call_id, tool_name)
            result = Failure(ErrorKind.INTERNAL_ERROR, f"internal error while invoking '{tool_name}'")

        final = DispatchState.COMPLETED if result.ok else DispatchState.FAILED
        self._advance(call_id, state, final)
        duration = time.monotonic() - start
        self._log_outcome(call_id, request_summary, result, duration)
        self._record(call_id, tool_name, request_summary, result, duration)
        return result

    async def _invoke(
        self,
        definition: ToolDefinition,
        arguments: Mapping[str, Any],
        cancel_event: Optional[asyncio.Event],
    ) -> Result:
        task = asyncio.ensure_future(definition.execute(arguments))
        try:
            if cancel_event is None:
                response = await task
            else:
                waiter = asyncio.ensure_future(cancel_event.wait())
                try:
                    done, _ = await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
                finally:
                    waiter.cancel()
                if task not in done:
                    await self._abort(task)
                    raise _Cancelled()
                response = task.result()
        except asyncio.CancelledError:
            await self._abort(task)
            current = asyncio.current_task()
            if current is not None and hasattr(current, "uncancel"):
                current.uncancel()
            raise _Cancelled() from None
        except TransportFault as exc:
            return Failure(ErrorKind.BACKEND_ERROR, exc.message, transient=True)
        return definition.map_response(response)

    async def _abort(self, task: "asyncio.Future[Any]") -> None:
        if task.done():
            return
        task.cancel()
        done, _ = await asyncio.wait({task}, timeout=self._cancel_grace)
        if not done:
            logger.warning("Transport call did not stop within %.1fs of cancellation", self._cancel_grace)

    async def dispatch_call(self, call: ToolCall, *, cancel_event: Optional[asyncio.Event] = None) -> Result:
        return await self.dispatch(call.tool_name, call.arguments, cancel_event=cancel_event, call_id=call.call_id)

    async def dispatch_many(self, calls: Sequence[ToolCall], *, limit: Optional[int] = None) -> List[Result]:
        """Run independent calls concurrently; results come back in call order.

        *limit* caps how many calls run at once; ``None`` or a value below 1 means no cap.
        """
        if not calls:
            return []
        semaphore = asyncio.Semaphore(limit) if limit is not None and limit > 0 else None

        async def _run(call: ToolCall) -> Result:
            if semaphore is None:
                return await self.dispatch_call(call)
            async with semaphore:
                return await self.dispatch_call(call)

        return list(await asyncio.gather(*(_run(call) for call in calls)))

    @staticmethod
    def build_tool_call(item: Mapping[str, Any]) -> Optional[ToolCall]:
        if item.get("type") != "tool_use":
            return None

        name = str(item.get("name", ""))
        call_id = str(item.get("id", ""))
        arguments = item.get("input", {})
        if not isinstance(arguments, dict):
            arguments = {}
        return ToolCall(tool_name=name, call_id=call_id, arguments=arguments)

    async def dispatch_tool_use(self, item: Mapping[str, Any]) -> Dict[str, Any]:
        """Dispatch an Anthropic ``tool_use`` block and return the ``tool_result`` block."""
        call = self.build_tool_call(item)
        if call is None:
            raise ValueError("expected a tool_use content block")
        result = await self.dispatch_call(call)
        return to_tool_result(result, call.call_id)

    def anthropic_tools(self) -> List[Dict[str, Any]]:
        return [schema.to_anthropic_definition() for schema in self.catalog()]

    @staticmethod
    def _advance(call_id: str, current: DispatchState, new: DispatchState) -> DispatchState:
        logger.debug("[%s] %s -> %s", call_id, current.value, new.value)
        return new

    @staticmethod
    def _log_outcome(call_id: str, request_summary: str, result: Result, duration: float) -> None:
        elapsed = int(duration * 1000)
        if result.ok:
            logger.info("[%s] %s -> %s [%dms]", call_id, request_summary, result.status_code, elapsed)
            return
        logger.warning(
            "[%s] %s -> %s: %s [%dms]",
            call_id,
            request_summary,
            result.kind.value,
            truncate_text(result.message, limit=160),
            elapsed,
        )

    def _record(self, call_id: str, tool_name: str, request_summary: str, result: Result, duration: float) -> None:
        if self._telemetry is None:
            return
        try:
            self._telemetry.record_dispatch(
                tool_name=tool_name,
                call_id=call_id,
                duration=duration,
                success=result.ok,
                error_kind=None if result.ok else result.kind.value,
                status_code=result.status_code,
                message=None if result.ok else result.message,
                request_summary=request_summary,
            )
        except Exception as exc:  # pragma: no cover - telemetry should not break dispatch
            logger.debug("Telemetry recording failed: %s", exc)


__all__ = ["DEFAULT_CANCEL_GRACE_SECONDS", "DispatchState", "Dispatcher", "ToolCall"]
