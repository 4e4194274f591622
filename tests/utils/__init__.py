"""Shared testing utilities."""
from .async_helpers import wait_for_condition
from .registry import build_sample_registry
from .transport import HangingTransport, RecordingTransport, StubResponse

__all__ = ["HangingTransport", "RecordingTransport", "StubResponse", "build_sample_registry", "wait_for_condition"]
