"""
Snapshot topology provider - Infrastructure layer.

Serves topology lookups from a static snapshot instead of a live Ambari
server. A snapshot file looks like::

    {
      "stacks": {
        "HDP-3.0": {"HIVE": {"HIVE_SERVER": "MASTER", "HIVE_CLIENT": "CLIENT"}}
      },
      "clusters": {
        "c1": {
          "services": {
            "HIVE": {
              "stack": "HDP-3.0",
              "components": [
                {"component_name": "HIVE_SERVER", "host_name": "h1", "state": "STARTED"}
              ]
            }
          }
        }
      }
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.domain.entities.errors import TopologyLookupError
from src.domain.entities.state import LifecycleState
from src.domain.entities.topology import (
    ComponentCategory,
    ComponentInstance,
    ComponentRole,
    ServiceHandle,
    ServiceRef,
    StackId,
)
from src.domain.ports.topology_provider import ITopologyProvider
from src.shared import get_logger

logger = get_logger(__name__)


class SnapshotComponent(BaseModel):
    """One host component entry of a snapshot."""

    component_name: str
    state: LifecycleState = LifecycleState.UNKNOWN
    host_name: Optional[str] = None

    @field_validator("state", mode="before")
    @classmethod
    def parse_state(cls, value: object) -> LifecycleState:
        if isinstance(value, LifecycleState):
            return value
        return LifecycleState.parse(value if isinstance(value, str) else None)


class SnapshotService(BaseModel):
    stack: str
    components: List[SnapshotComponent] = Field(default_factory=list)


class SnapshotCluster(BaseModel):
    services: Dict[str, SnapshotService] = Field(default_factory=dict)


class TopologySnapshot(BaseModel):
    """Whole snapshot: stack role catalogue plus deployed clusters."""

    stacks: Dict[str, Dict[str, Dict[str, ComponentCategory]]] = Field(
        default_factory=dict
    )
    clusters: Dict[str, SnapshotCluster] = Field(default_factory=dict)


class SnapshotTopologyProvider(ITopologyProvider):
    """Topology provider backed by a ``TopologySnapshot``."""

    def __init__(self, snapshot: TopologySnapshot) -> None:
        self._snapshot = snapshot

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SnapshotTopologyProvider":
        """
        Load a snapshot from a JSON file.

        Raises:
            TopologyLookupError: If the file cannot be read or is not a valid snapshot.
        """
        snapshot_path = Path(path)
        try:
            raw = snapshot_path.read_text(encoding="utf-8")
            snapshot = TopologySnapshot.model_validate_json(raw)
        except OSError as exc:
            raise TopologyLookupError(
                f"Cannot read topology snapshot: {exc}",
                details={"path": str(snapshot_path)},
            ) from exc
        except ValidationError as exc:
            raise TopologyLookupError(
                "Invalid topology snapshot",
                details={"path": str(snapshot_path), "errors": exc.errors()},
            ) from exc

        logger.info(
            "snapshot.loaded",
            path=str(snapshot_path),
            clusters=len(snapshot.clusters),
            stacks=len(snapshot.stacks),
        )
        return cls(snapshot)

    def resolve_service(self, service_ref: ServiceRef) -> Optional[ServiceHandle]:
        service = self._find_service(service_ref)
        if service is None:
            return None
        try:
            stack_id = StackId.parse(service.stack)
        except ValueError as exc:
            raise TopologyLookupError(
                str(exc), details={"service": str(service_ref)}
            ) from exc
        return ServiceHandle(ref=service_ref, stack_id=stack_id)

    def list_component_instances(
        self, service: ServiceHandle
    ) -> List[ComponentInstance]:
        entry = self._find_service(service.ref)
        if entry is None:
            raise TopologyLookupError(
                f"Service {service.ref} is not part of the snapshot",
                details={"service": str(service.ref)},
            )
        return [
            ComponentInstance(
                component_kind=component.component_name,
                lifecycle_state=component.state,
                host_name=component.host_name,
                service_name=service.ref.service_name,
            )
            for component in entry.components
        ]

    def describe_component_role(
        self, component_kind: str, stack_context: ServiceHandle
    ) -> Optional[ComponentRole]:
        components = self._snapshot.stacks.get(str(stack_context.stack_id), {}).get(
            stack_context.ref.service_name, {}
        )
        category = components.get(component_kind)
        if category is None:
            return None
        return ComponentRole(component_kind=component_kind, category=category)

    def _find_service(self, service_ref: ServiceRef) -> Optional[SnapshotService]:
        cluster = self._snapshot.clusters.get(service_ref.cluster_name)
        if cluster is None:
            return None
        return cluster.services.get(service_ref.service_name)
