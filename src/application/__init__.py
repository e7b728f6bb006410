"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It orchestrates the flow of data to and from
the domain services and directs them to achieve the application's goals.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
