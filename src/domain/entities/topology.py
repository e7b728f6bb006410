"""
Topology domain entities.

Value objects describing a service deployment as seen by a topology
provider: the service reference, its stack, its host component instances
and the role metadata of each component kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.domain.entities.state import LifecycleState


class ComponentCategory(str, Enum):
    """Stack-level category of a component kind."""

    MASTER = "MASTER"
    SLAVE = "SLAVE"
    CLIENT = "CLIENT"


@dataclass(frozen=True, slots=True)
class ServiceRef:
    """Identifier of a service inside a cluster."""

    cluster_name: str
    service_name: str

    def __str__(self) -> str:
        return f"{self.cluster_name}/{self.service_name}"


@dataclass(frozen=True, slots=True)
class StackId:
    """Stack a service is deployed from, e.g. ``HDP-3.0``."""

    stack_name: str
    stack_version: str

    @classmethod
    def parse(cls, value: str) -> "StackId":
        name, sep, version = value.partition("-")
        if not sep or not name or not version:
            raise ValueError(f"Invalid stack id: {value!r}")
        return cls(stack_name=name, stack_version=version)

    def __str__(self) -> str:
        return f"{self.stack_name}-{self.stack_version}"


@dataclass(frozen=True, slots=True)
class ServiceHandle:
    """A resolved service together with its stack context."""

    ref: ServiceRef
    stack_id: StackId


@dataclass(frozen=True, slots=True)
class ComponentInstance:
    """Observed state of one component kind on one host."""

    component_kind: str
    lifecycle_state: LifecycleState
    host_name: Optional[str] = None
    service_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ComponentRole:
    """Stack metadata for a component kind."""

    component_kind: str
    category: ComponentCategory

    @property
    def is_primary_role(self) -> bool:
        return self.category is ComponentCategory.MASTER
