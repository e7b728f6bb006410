"""Domain ports package."""

from .topology_provider import ITopologyProvider

__all__ = ["ITopologyProvider"]
