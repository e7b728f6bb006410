"""Use cases for service state endpoints."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from src.application.dtos.service_state_dto import ServiceStateDTO
from src.domain.entities.topology import ServiceRef
from src.domain.services.calculator_registry import ServiceStateCalculatorRegistry
from src.shared import get_logger

logger = get_logger(__name__)


class GetServiceStateUseCase:
    """Use case responsible for computing the state of one service."""

    def __init__(self, calculator_registry: ServiceStateCalculatorRegistry) -> None:
        self._calculator_registry = calculator_registry

    async def execute(self, cluster_name: str, service_name: str) -> ServiceStateDTO:
        """
        Compute the aggregate state of a service.

        The calculator performs blocking topology lookups, so it runs in a
        worker thread.
        """
        service_ref = ServiceRef(cluster_name=cluster_name, service_name=service_name)
        calculator = self._calculator_registry.get(service_name)

        logger.debug(
            "service_state.requested",
            service=str(service_ref),
            calculator=calculator.name,
        )
        state = await asyncio.to_thread(calculator.compute_service_state, service_ref)

        return ServiceStateDTO(
            cluster_name=cluster_name,
            service_name=service_name,
            state=state,
            calculator=calculator.name,
            checked_at=datetime.now(timezone.utc),
        )
