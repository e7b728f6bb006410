"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from typing import Any

from dependency_injector import containers, providers

from src.application.use_cases.service_state_use_cases import GetServiceStateUseCase
from src.domain.services.calculator_registry import build_calculator_registry
from src.infrastructure.gateways.ambari_topology_gateway import AmbariTopologyGateway
from src.infrastructure.gateways.snapshot_topology_provider import (
    SnapshotTopologyProvider,
)
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _plain_value(value: Any) -> Any:
    """Unwrap enums and secrets coming from the settings tree."""
    if hasattr(value, "get_secret_value"):
        return value.get_secret_value()
    return value.value if hasattr(value, "value") else value


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    ambari_topology_gateway = providers.Singleton(
        AmbariTopologyGateway,
        ambari_url=config.ambari.url,
        username=config.ambari.username,
        password=providers.Callable(_plain_value, config.ambari.password),
        timeout=config.ambari.timeout,
        verify_ssl=config.ambari.verify_ssl,
    )

    snapshot_topology_provider = providers.Singleton(
        SnapshotTopologyProvider.from_file,
        path=config.topology.snapshot_path,
    )

    topology_provider = providers.Selector(
        providers.Callable(_plain_value, config.topology.source),
        ambari=ambari_topology_gateway,
        snapshot=snapshot_topology_provider,
    )

    # Domain
    calculator_registry = providers.Singleton(
        build_calculator_registry,
        topology_provider=topology_provider,
    )

    # Application (use cases)
    get_service_state_use_case = providers.Factory(
        GetServiceStateUseCase,
        calculator_registry=calculator_registry,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for the topology provider.

    The provider is built eagerly so that a misconfigured source (bad
    snapshot path, unknown source) fails at startup rather than on the
    first request.
    """
    container = get_container()

    topology_provider = container.topology_provider()
    logger.info(
        "container.topology_provider.ready",
        provider=type(topology_provider).__name__,
    )

    try:
        yield container
    finally:
        logger.info("container.resources.shutdown")
