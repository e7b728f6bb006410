"""DTOs for service state responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from src.domain.entities.state import LifecycleState


class ServiceStateDTO(BaseModel):
    """DTO representing the computed state of a service."""

    cluster_name: str = Field(description="Cluster the service belongs to")
    service_name: str = Field(description="Service name, e.g. HIVE")
    state: LifecycleState = Field(
        description="Aggregate lifecycle state; UNKNOWN when it cannot be determined"
    )
    calculator: str = Field(description="Calculator that produced the state")
    checked_at: datetime = Field(description="Timestamp of the computation")

    model_config = {
        "json_schema_extra": {
            "example": {
                "cluster_name": "c1",
                "service_name": "HIVE",
                "state": "STARTED",
                "calculator": "hive",
                "checked_at": "2024-09-09T12:00:00Z",
            }
        }
    }


class LivenessDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: str = Field(default="up", description="Liveness of this application")
