from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.errors import TopologyLookupError  # noqa: E402
from src.domain.entities.state import LifecycleState  # noqa: E402
from src.domain.entities.topology import (  # noqa: E402
    ComponentCategory,
    ComponentInstance,
    ComponentRole,
    ServiceHandle,
    ServiceRef,
    StackId,
)

HDP_30 = StackId(stack_name="HDP", stack_version="3.0")

HIVE_ROLES: Dict[str, ComponentCategory] = {
    "HIVE_METASTORE": ComponentCategory.MASTER,
    "HIVE_SERVER": ComponentCategory.MASTER,
    "MYSQL_SERVER": ComponentCategory.MASTER,
    "WEBHCAT_SERVER": ComponentCategory.MASTER,
    "HIVE_SERVER_INTERACTIVE": ComponentCategory.MASTER,
    "HIVE_CLIENT": ComponentCategory.CLIENT,
    "HCAT": ComponentCategory.CLIENT,
}


def component(
    kind: str, state: LifecycleState, host_name: str = "host-1"
) -> ComponentInstance:
    return ComponentInstance(
        component_kind=kind,
        lifecycle_state=state,
        host_name=host_name,
        service_name="HIVE",
    )


@dataclass
class FakeTopologyProvider:
    """In-memory topology provider recording the lookups it serves."""

    instances: List[ComponentInstance] = field(default_factory=list)
    roles: Dict[str, ComponentCategory] = field(
        default_factory=lambda: dict(HIVE_ROLES)
    )
    known_services: Tuple[str, ...] = ("HIVE", "HDFS")
    stack_id: StackId = HDP_30
    resolve_error: Optional[Exception] = None
    list_error: Optional[Exception] = None
    role_error: Optional[Exception] = None
    role_lookups: List[str] = field(default_factory=list)

    def resolve_service(self, service_ref: ServiceRef) -> Optional[ServiceHandle]:
        if self.resolve_error is not None:
            raise self.resolve_error
        if service_ref.service_name not in self.known_services:
            return None
        return ServiceHandle(ref=service_ref, stack_id=self.stack_id)

    def list_component_instances(
        self, service: ServiceHandle
    ) -> Sequence[ComponentInstance]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.instances)

    def describe_component_role(
        self, component_kind: str, stack_context: ServiceHandle
    ) -> Optional[ComponentRole]:
        self.role_lookups.append(component_kind)
        if self.role_error is not None:
            raise self.role_error
        category = self.roles.get(component_kind)
        if category is None:
            return None
        return ComponentRole(component_kind=component_kind, category=category)


@pytest.fixture()
def hive_ref() -> ServiceRef:
    return ServiceRef(cluster_name="c1", service_name="HIVE")


@pytest.fixture()
def topology() -> FakeTopologyProvider:
    return FakeTopologyProvider()


@pytest.fixture()
def lookup_error() -> TopologyLookupError:
    return TopologyLookupError("stack HDP-3.0 not found", details={"stack": "HDP-3.0"})
