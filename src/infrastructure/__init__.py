"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the Ambari server
and topology snapshots.
"""

from src.infrastructure import gateways

__all__ = ["gateways"]
