"""
Service state calculators - Domain Layer

A service state calculator reduces the observed states of a service's host
components to a single lifecycle state for the service. All calculators
share the same collection pass: resolve the service, list its component
instances and keep the ones whose stack role is primary. Subclasses only
decide how the primary instances are combined.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional, Sequence

from src.domain.entities.errors import DomainError
from src.domain.entities.state import LifecycleState, is_running_class
from src.domain.entities.topology import (
    ComponentInstance,
    ServiceHandle,
    ServiceRef,
)
from src.domain.ports.topology_provider import ITopologyProvider
from src.shared import get_logger

logger = get_logger(__name__)


class ServiceStateCalculator(ABC):
    """Base class for per-service state calculators."""

    name: str = "base"

    def __init__(self, topology_provider: ITopologyProvider) -> None:
        self._topology_provider = topology_provider

    def compute_service_state(self, service_ref: ServiceRef) -> LifecycleState:
        """
        Compute the aggregate state of a service.

        Never raises: any failure to resolve the service or to read its
        topology is logged and reported as ``LifecycleState.UNKNOWN``.
        """
        try:
            service = self._topology_provider.resolve_service(service_ref)
            if service is None:
                logger.warning(
                    "service_state.service_not_found", service=str(service_ref)
                )
                return LifecycleState.UNKNOWN

            instances = self._topology_provider.list_component_instances(service)
            primary_instances = list(self._primary_instances(service, instances))
        except DomainError as exc:
            logger.error(
                "service_state.lookup_failed",
                service=str(service_ref),
                error=exc.message,
                details=exc.details,
                exc_info=exc,
            )
            return LifecycleState.UNKNOWN
        except Exception as exc:
            logger.error(
                "service_state.unexpected_error",
                service=str(service_ref),
                error=str(exc),
                exc_info=exc,
            )
            return LifecycleState.UNKNOWN

        state = self.aggregate(primary_instances)
        logger.info(
            "service_state.computed",
            service=str(service_ref),
            calculator=self.name,
            primary_components=len(primary_instances),
            state=state.value,
        )
        return state

    @abstractmethod
    def aggregate(
        self, primary_instances: Iterable[ComponentInstance]
    ) -> LifecycleState:
        """Reduce the primary component instances of a service to one state."""

    def _primary_instances(
        self, service: ServiceHandle, instances: Sequence[ComponentInstance]
    ) -> Iterator[ComponentInstance]:
        for instance in instances:
            role = self._topology_provider.describe_component_role(
                instance.component_kind, service
            )
            if role is None:
                logger.debug(
                    "service_state.component_unknown",
                    service=str(service.ref),
                    component=instance.component_kind,
                    stack=str(service.stack_id),
                )
                continue
            if not role.is_primary_role:
                continue
            yield instance


class DefaultServiceStateCalculator(ServiceStateCalculator):
    """
    Generic rule for services without a dedicated calculator.

    The service is STARTED when every primary component is running;
    otherwise it reports the last non-running state observed.
    """

    name = "default"

    def aggregate(
        self, primary_instances: Iterable[ComponentInstance]
    ) -> LifecycleState:
        non_running_state: Optional[LifecycleState] = None
        for instance in primary_instances:
            if not is_running_class(instance.lifecycle_state):
                non_running_state = instance.lifecycle_state

        if non_running_state is None:
            return LifecycleState.STARTED
        return non_running_state

