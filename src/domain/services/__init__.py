"""Domain services package."""

from .calculator_registry import (
    ServiceStateCalculatorRegistry,
    build_calculator_registry,
)
from .hive_service_state import AggregationTally, HiveServiceStateCalculator
from .service_state_calculator import (
    DefaultServiceStateCalculator,
    ServiceStateCalculator,
)

__all__ = [
    "AggregationTally",
    "DefaultServiceStateCalculator",
    "HiveServiceStateCalculator",
    "ServiceStateCalculator",
    "ServiceStateCalculatorRegistry",
    "build_calculator_registry",
]
