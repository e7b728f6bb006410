"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .service_state_dto import LivenessDTO, ServiceStateDTO

__all__ = ["LivenessDTO", "ServiceStateDTO"]
