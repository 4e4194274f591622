"""Shared pytest fixtures for the dispatch test suite."""
from __future__ import annotations

import json

import pytest

from config import BackendGroup
from tools.backend import BackendPool
from tools.dispatcher import Dispatcher
from tools.registry import ToolRegistry
from tests.utils import RecordingTransport, StubResponse, build_sample_registry


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(StubResponse(200, json.dumps({"id": "42"})))


@pytest.fixture
def registry(transport: RecordingTransport) -> ToolRegistry:
    return build_sample_registry(transport)


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> Dispatcher:
    return Dispatcher(registry)


@pytest.fixture
def stub_pool() -> BackendPool:
    """A backend pool whose every group is served by its own recording transport."""
    return BackendPool({group: RecordingTransport() for group in BackendGroup})
