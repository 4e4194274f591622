"""Telemetry collector for dispatch metrics."""
from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional


@dataclass
class DispatchEvent:
    """One completed dispatch."""

    tool_name: str
    call_id: str
    timestamp: datetime
    duration: float
    success: bool
    error_kind: Optional[str] = None
    status_code: Optional[int] = None
    message: Optional[str] = None
    request_summary: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "tool_name": self.tool_name,
            "call_id": self.call_id,
            "timestamp": self.timestamp.isoformat(),
            "duration": self.duration,
            "success": self.success,
            "error_kind": self.error_kind,
            "status_code": self.status_code,
            "message": self.message,
            "request_summary": self.request_summary,
        }


@dataclass
class DispatchTelemetry:
    events: List[DispatchEvent] = field(default_factory=list)
    durations: Dict[str, List[float]] = field(default_factory=dict)
    error_counts: Dict[str, int] = field(default_factory=dict)
    error_kinds: Dict[str, int] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record_dispatch(
        self,
        *,
        tool_name: str,
        call_id: str,
        duration: float,
        success: bool,
        error_kind: Optional[str] = None,
        status_code: Optional[int] = None,
        message: Optional[str] = None,
        request_summary: Optional[str] = None,
    ) -> None:
        event = DispatchEvent(
            tool_name=tool_name,
            call_id=call_id,
            timestamp=datetime.now(timezone.utc),
            duration=duration,
            success=success,
            error_kind=error_kind,
            status_code=status_code,
            message=message,
            request_summary=request_summary,
        )
        with self._lock:
            self.events.append(event)
            self.durations.setdefault(tool_name, []).append(duration)
            if not success:
                self.error_counts[tool_name] = self.error_counts.get(tool_name, 0) + 1
                if error_kind:
                    self.error_kinds[error_kind] = self.error_kinds.get(error_kind, 0) + 1

    def tool_stats(self, tool_name: str) -> Dict[str, float]:
        times = self.durations.get(tool_name, [])
        if not times:
            return {"calls": 0, "errors": 0}
        errors = self.error_counts.get(tool_name, 0)
        calls = len(times)
        return {
            "calls": calls,
            "avg_duration": sum(times) / calls,
            "min_duration": min(times),
            "max_duration": max(times),
            "errors": errors,
            "success_rate": (calls - errors) / calls,
        }

    def iter_otel_events(self) -> Iterable[Dict[str, object]]:
        """Yield OTEL-style event dictionaries for downstream exporters."""

        for event in list(self.events):
            yield {
                "timestamp": event.timestamp.isoformat(),
                "name": f"dispatch.{event.tool_name}",
                "attributes": {
                    "tool.name": event.tool_name,
                    "tool.call_id": event.call_id,
                    "tool.duration_ms": event.duration * 1000,
                    "tool.success": event.success,
                    "tool.error_kind": event.error_kind,
                    "tool.status_code": event.status_code,
                    "tool.message": event.message,
                    "tool.request_summary": event.request_summary,
                },
            }

    def export_otel(self) -> str:
        records = list(self.iter_otel_events())
        return json.dumps({"events": records}, ensure_ascii=False, indent=2)


__all__ = ["DispatchEvent", "DispatchTelemetry"]
