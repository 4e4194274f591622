"""Backend configuration: base URLs, timeouts and default headers per backend group."""
from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "numbers-agent-dispatch"


class BackendGroup(Enum):
    """Backend services reachable from the tool catalog."""

    CONNECT = "connect"
    MYNUMBERS = "mynumbers"
    ADDRESS_MANAGEMENT = "address_management"
    CDR = "cdr"
    DISCONNECTION = "disconnection"
    EMERGENCY_SERVICES = "emergency_services"
    NUMBER_PORTING = "number_porting"
    SMS = "sms"

    @property
    def env_var(self) -> str:
        return f"{self.value.upper()}_API_BASE_URL"


DEFAULT_BASE_URLS: Dict[BackendGroup, str] = {
    BackendGroup.CONNECT: "https://connect.bics.com",
    BackendGroup.MYNUMBERS: "https://mynumbers.bics.com",
    BackendGroup.ADDRESS_MANAGEMENT: "https://mynumbers.bics.com",
    BackendGroup.CDR: "https://mynumbers.bics.com",
    BackendGroup.DISCONNECTION: "https://mynumbers.bics.com",
    BackendGroup.EMERGENCY_SERVICES: "https://mynumbers.bics.com",
    BackendGroup.NUMBER_PORTING: "https://mynumbers.bics.com",
    BackendGroup.SMS: "https://sms.bics.com",
}


@dataclass(frozen=True)
class BackendSettings:
    """Transport configuration shared by every tool of one backend group."""

    base_url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DispatchConfig:
    backends: Mapping[BackendGroup, BackendSettings]

    def for_group(self, group: BackendGroup) -> BackendSettings:
        return self.backends[group]


def _parse_positive_float(raw: Optional[object], fallback: float) -> float:
    """Return a positive float parsed from *raw*, or *fallback* on failure."""

    if raw is None or isinstance(raw, bool):
        return fallback
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return fallback
    return value if value > 0 else fallback


def _clean(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _headers_from(value: object, where: str) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{where}.headers must be a table")
    return {str(key): str(val) for key, val in value.items()}


def _table(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = data.get(key, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{key}] section must be a table")
    return section


def default_config() -> DispatchConfig:
    headers = {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"}
    return DispatchConfig(
        backends={
            group: BackendSettings(base_url=url, headers=dict(headers))
            for group, url in DEFAULT_BASE_URLS.items()
        }
    )


def load_config_file(path: Path, base: Optional[DispatchConfig] = None) -> DispatchConfig:
    """Overlay settings from a TOML file onto *base*.

    Expected layout::

        [defaults]
        timeout_seconds = 20
        headers = { Authorization = "Bearer ..." }

        [backends.sms]
        base_url = "https://sms.example.test"
        timeout_seconds = 5
    """

    if not path.exists():
        raise FileNotFoundError(path)

    with path.open("rb") as fh:
        data = tomllib.load(fh)

    config = base or default_config()
    defaults = _table(data, "defaults")
    backends = _table(data, "backends")

    unknown = set(backends) - {group.value for group in BackendGroup}
    if unknown:
        raise ValueError(f"unknown backend group(s): {', '.join(sorted(unknown))}")

    default_headers = _headers_from(defaults.get("headers"), "defaults")
    updated: Dict[BackendGroup, BackendSettings] = {}
    for group, settings in config.backends.items():
        section = backends.get(group.value, {})
        if not isinstance(section, dict):
            raise ValueError(f"[backends.{group.value}] must be a table")

        timeout = _parse_positive_float(defaults.get("timeout_seconds"), settings.timeout_seconds)
        timeout = _parse_positive_float(section.get("timeout_seconds"), timeout)
        base_url = section.get("base_url", settings.base_url)
        if not isinstance(base_url, str) or not base_url.strip():
            raise ValueError(f"backends.{group.value}.base_url must be a non-empty string")

        headers = dict(settings.headers)
        headers.update(default_headers)
        headers.update(_headers_from(section.get("headers"), f"backends.{group.value}"))
        updated[group] = BackendSettings(
            base_url=base_url.strip().rstrip("/"),
            timeout_seconds=timeout,
            headers=headers,
        )
    return DispatchConfig(backends=updated)


def apply_env_overrides(config: DispatchConfig, env: Optional[Mapping[str, str]] = None) -> DispatchConfig:
    """Apply ``<GROUP>_API_BASE_URL``, ``DISPATCH_TIMEOUT_SECONDS`` and ``DISPATCH_AUTH_TOKEN``."""

    env = os.environ if env is None else env
    token = _clean(env.get("DISPATCH_AUTH_TOKEN"))
    raw_timeout = _clean(env.get("DISPATCH_TIMEOUT_SECONDS"))

    updated: Dict[BackendGroup, BackendSettings] = {}
    for group, settings in config.backends.items():
        base_url = _clean(env.get(group.env_var)) or settings.base_url
        timeout = _parse_positive_float(raw_timeout, settings.timeout_seconds)
        headers = dict(settings.headers)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        updated[group] = replace(
            settings,
            base_url=base_url.rstrip("/"),
            timeout_seconds=timeout,
            headers=headers,
        )
    return DispatchConfig(backends=updated)


def with_timeout(config: DispatchConfig, seconds: float) -> DispatchConfig:
    """Return *config* with every backend timeout set to *seconds*."""
    if seconds <= 0:
        raise ValueError("timeout must be positive")
    return DispatchConfig(
        backends={group: replace(settings, timeout_seconds=seconds) for group, settings in config.backends.items()}
    )


def load_dispatch_config(
    path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> DispatchConfig:
    """Load configuration: built-in defaults, then TOML (explicit or ``DISPATCH_CONFIG``), then env."""

    env = os.environ if env is None else env
    config = default_config()
    if path is None:
        raw_path = _clean(env.get("DISPATCH_CONFIG"))
        path = Path(raw_path) if raw_path else None
    if path is not None:
        config = load_config_file(path, config)
    return apply_env_overrides(config, env)


__all__ = [
    "BackendGroup",
    "BackendSettings",
    "DEFAULT_BASE_URLS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DispatchConfig",
    "apply_env_overrides",
    "default_config",
    "load_config_file",
    "load_dispatch_config",
    "with_timeout",
]
