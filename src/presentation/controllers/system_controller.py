"""System endpoints exposing liveness."""

from fastapi import APIRouter

from src.application.dtos.service_state_dto import LivenessDTO

router = APIRouter(tags=["System"])


@router.get("/health", response_model=LivenessDTO)
async def health() -> LivenessDTO:
    """Return the liveness of the application itself."""
    return LivenessDTO()
