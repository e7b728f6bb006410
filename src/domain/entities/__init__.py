"""
Domain Entities Package

This package contains the core domain entities and value objects.
"""

from .errors import DomainError, TopologyLookupError
from .state import RUNNING_STATES, LifecycleState, is_running_class
from .topology import (
    ComponentCategory,
    ComponentInstance,
    ComponentRole,
    ServiceHandle,
    ServiceRef,
    StackId,
)

__all__ = [
    "LifecycleState",
    "RUNNING_STATES",
    "is_running_class",
    "ComponentCategory",
    "ComponentInstance",
    "ComponentRole",
    "ServiceHandle",
    "ServiceRef",
    "StackId",
    "DomainError",
    "TopologyLookupError",
]
