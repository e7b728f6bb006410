"""Domain port for topology lookups."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from src.domain.entities.topology import (
    ComponentInstance,
    ComponentRole,
    ServiceHandle,
    ServiceRef,
)


class ITopologyProvider(Protocol):
    """Interface for retrieving the deployed topology of a service."""

    def resolve_service(self, service_ref: ServiceRef) -> Optional[ServiceHandle]:
        """
        Resolve a service reference.

        Returns:
            The service handle, or None when the cluster or service does not exist.

        Raises:
            TopologyLookupError: If the lookup itself fails.
        """
        ...

    def list_component_instances(
        self, service: ServiceHandle
    ) -> Sequence[ComponentInstance]:
        """
        List every host component instance of the service, in no particular order.

        Raises:
            TopologyLookupError: If the lookup itself fails.
        """
        ...

    def describe_component_role(
        self, component_kind: str, stack_context: ServiceHandle
    ) -> Optional[ComponentRole]:
        """
        Look up stack metadata for a component kind.

        The stack context is the resolved service: its stack id and service
        name scope the lookup.

        Returns:
            The component role, or None when the stack does not define it.

        Raises:
            TopologyLookupError: If the lookup itself fails.
        """
        ...
