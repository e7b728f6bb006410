"""
Gateways Package - Infrastructure Layer

Implementations of the topology provider port.
"""

from .ambari_topology_gateway import AmbariTopologyGateway
from .snapshot_topology_provider import SnapshotTopologyProvider, TopologySnapshot

__all__ = ["AmbariTopologyGateway", "SnapshotTopologyProvider", "TopologySnapshot"]
