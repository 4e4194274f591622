"""Shared HTTP transport for backend groups."""
from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol

import requests

from config import BackendGroup, BackendSettings, DispatchConfig
from errors import TransportFault

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendRequest:
    """An outbound request relative to a backend group's base URL."""

    method: str
    path: str
    params: Mapping[str, Any] = field(default_factory=dict)
    body: Any = None


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class BackendTransport(Protocol):
    """Anything able to send a ``BackendRequest`` and return a ``RawResponse``."""

    async def send(self, request: BackendRequest) -> RawResponse:
        ...


class BackendClient:
    """Pooled ``requests`` session bound to one base URL, timeout and header set.

    Blocking I/O runs in the loop's default executor so concurrent dispatches
    only suspend at the transport boundary.
    """

    def __init__(self, settings: BackendSettings, *, session: Optional[requests.Session] = None) -> None:
        if not settings.base_url or not settings.base_url.strip():
            raise ValueError("backend base URL must be non-empty")
        self.base_url = settings.base_url.strip().rstrip("/")
        self.timeout = settings.timeout_seconds
        self.headers: Dict[str, str] = dict(settings.headers)
        self._session = session or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _send_sync(self, request: BackendRequest) -> RawResponse:
        url = self.url_for(request.path)
        data: Optional[bytes] = None
        headers = dict(self.headers)
        if request.body is not None:
            if isinstance(request.body, (bytes, str)):
                raw = request.body
            else:
                raw = json.dumps(request.body, ensure_ascii=False)
            data = raw.encode("utf-8") if isinstance(raw, str) else raw
            headers.setdefault("Content-Type", "application/json")

        try:
            response = self._session.request(
                request.method,
                url,
                params=dict(request.params) or None,
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            raise TransportFault(f"{request.method} {url} timed out after {self.timeout}s", timeout=True) from exc
        except requests.ConnectionError as exc:
            raise TransportFault(f"{request.method} {url} failed to connect: {exc}") from exc
        except requests.RequestException as exc:
            raise TransportFault(f"{request.method} {url} failed: {exc}") from exc

        logger.debug("%s %s -> %s", request.method, url, response.status_code)
        return RawResponse(status_code=response.status_code, body=response.text or "")

    async def send(self, request: BackendRequest) -> RawResponse:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._send_sync, request)

    def close(self) -> None:
        self._session.close()


class BackendPool:
    """One ``BackendClient`` per backend group, built from configuration."""

    def __init__(self, clients: Mapping[BackendGroup, BackendTransport]) -> None:
        self._clients = dict(clients)

    @classmethod
    def from_config(cls, config: DispatchConfig) -> "BackendPool":
        return cls({group: BackendClient(settings) for group, settings in config.backends.items()})

    def client(self, group: BackendGroup) -> BackendTransport:
        try:
            return self._clients[group]
        except KeyError:
            raise KeyError(f"no backend client configured for group '{group.value}'") from None

    def close(self) -> None:
        for client in self._clients.values():
            close = getattr(client, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "BackendPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["BackendClient", "BackendPool", "BackendRequest", "BackendTransport", "RawResponse"]
