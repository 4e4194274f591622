import logging
from typing import Any, Optional

from config import BackendGroup, DispatchConfig, load_dispatch_config
from tools.backend import BackendPool
from tools.dispatcher import Dispatcher
from tools.registry import ToolRegistry
from tools_address_management import address_management_tools
from tools_cdr import cdr_tools
from tools_connect import connect_tools
from tools_mynumbers import mynumbers_tools
from tools_number_services import disconnection_tools, emergency_services_tools, number_porting_tools
from tools_sms import sms_tools

logger = logging.getLogger(__name__)


def build_default_registry(pool: BackendPool) -> ToolRegistry:
    registry = ToolRegistry()
    registry.register_all(connect_tools(pool.client(BackendGroup.CONNECT)))
    registry.register_all(mynumbers_tools(pool.client(BackendGroup.MYNUMBERS)))
    registry.register_all(address_management_tools(pool.client(BackendGroup.ADDRESS_MANAGEMENT)))
    registry.register_all(cdr_tools(pool.client(BackendGroup.CDR)))
    registry.register_all(disconnection_tools(pool.client(BackendGroup.DISCONNECTION)))
    registry.register_all(emergency_services_tools(pool.client(BackendGroup.EMERGENCY_SERVICES)))
    registry.register_all(number_porting_tools(pool.client(BackendGroup.NUMBER_PORTING)))
    registry.register_all(sms_tools(pool.client(BackendGroup.SMS)))
    logger.info("Loaded %d tools", len(registry))
    return registry


def build_dispatcher(
    config: Optional[DispatchConfig] = None,
    *,
    pool: Optional[BackendPool] = None,
    telemetry: Any = None,
) -> tuple[Dispatcher, BackendPool]:
    """Build the default dispatcher; the caller owns (and closes) the returned pool."""
    if pool is None:
        pool = BackendPool.from_config(config or load_dispatch_config())
    registry = build_default_registry(pool)
    return Dispatcher(registry, telemetry=telemetry), pool
