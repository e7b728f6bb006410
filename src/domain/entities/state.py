"""
Lifecycle state domain entities.

This module defines the lifecycle states shared by host components and
services, and the classification of those states into running and
non-running classes.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Optional


class LifecycleState(str, Enum):
    """Operational status of a host component or of a whole service."""

    INIT = "INIT"
    INSTALLING = "INSTALLING"
    INSTALL_FAILED = "INSTALL_FAILED"
    INSTALLED = "INSTALLED"
    STARTING = "STARTING"
    STARTED = "STARTED"
    STOPPING = "STOPPING"
    STOPPED = "STOPPED"
    UNINSTALLING = "UNINSTALLING"
    UNINSTALLED = "UNINSTALLED"
    WIPING_OUT = "WIPING_OUT"
    UPGRADING = "UPGRADING"
    DISABLED = "DISABLED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Optional[str]) -> "LifecycleState":
        """Read a state reported by an external source, defaulting to UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.UNKNOWN


RUNNING_STATES: FrozenSet[LifecycleState] = frozenset(
    {LifecycleState.STARTED, LifecycleState.DISABLED}
)


def is_running_class(state: LifecycleState) -> bool:
    """Return True when a component in ``state`` counts as actively serving."""
    return state in RUNNING_STATES
