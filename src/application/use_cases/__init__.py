"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate the domain services
on behalf of the presentation layer.
"""

from .service_state_use_cases import GetServiceStateUseCase

__all__ = ["GetServiceStateUseCase"]
