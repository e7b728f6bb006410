"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application: environment names, log levels,
topology sources and structured logging helpers.

It must not depend on Infrastructure or Frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumTopologySource
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumTopologySource",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
