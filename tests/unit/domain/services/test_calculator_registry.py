from __future__ import annotations

from src.domain.services.calculator_registry import (
    ServiceStateCalculatorRegistry,
    build_calculator_registry,
)
from src.domain.services.hive_service_state import HiveServiceStateCalculator
from src.domain.services.service_state_calculator import DefaultServiceStateCalculator


def test_stock_registry_routes_hive_to_hive_calculator(topology) -> None:
    registry = build_calculator_registry(topology)

    assert isinstance(registry.get("HIVE"), HiveServiceStateCalculator)
    assert isinstance(registry.get("hive"), HiveServiceStateCalculator)


def test_stock_registry_falls_back_to_default(topology) -> None:
    registry = build_calculator_registry(topology)

    assert isinstance(registry.get("HDFS"), DefaultServiceStateCalculator)


def test_register_overrides_service(topology) -> None:
    default = DefaultServiceStateCalculator(topology)
    hive = HiveServiceStateCalculator(topology)
    registry = ServiceStateCalculatorRegistry(default_calculator=default)

    registry.register("yarn", hive)

    assert registry.get("YARN") is hive
    assert registry.get("HIVE") is default
