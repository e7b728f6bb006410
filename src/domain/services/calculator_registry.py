"""Lookup of the state calculator responsible for a service."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from src.domain.ports.topology_provider import ITopologyProvider
from src.domain.services.hive_service_state import (
    HIVE_SERVICE_NAME,
    HiveServiceStateCalculator,
)
from src.domain.services.service_state_calculator import (
    DefaultServiceStateCalculator,
    ServiceStateCalculator,
)


class ServiceStateCalculatorRegistry:
    """Maps service names to calculators, falling back to a default one."""

    def __init__(
        self,
        default_calculator: ServiceStateCalculator,
        calculators: Optional[Mapping[str, ServiceStateCalculator]] = None,
    ) -> None:
        self._default_calculator = default_calculator
        self._calculators: Dict[str, ServiceStateCalculator] = {}
        for service_name, calculator in (calculators or {}).items():
            self.register(service_name, calculator)

    def register(self, service_name: str, calculator: ServiceStateCalculator) -> None:
        self._calculators[service_name.upper()] = calculator

    def get(self, service_name: str) -> ServiceStateCalculator:
        return self._calculators.get(service_name.upper(), self._default_calculator)


def build_calculator_registry(
    topology_provider: ITopologyProvider,
) -> ServiceStateCalculatorRegistry:
    """Create the stock registry with every dedicated calculator registered."""
    return ServiceStateCalculatorRegistry(
        default_calculator=DefaultServiceStateCalculator(topology_provider),
        calculators={
            HIVE_SERVICE_NAME: HiveServiceStateCalculator(topology_provider),
        },
    )
