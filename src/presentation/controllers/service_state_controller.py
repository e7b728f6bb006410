"""Service state endpoints."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.dtos.service_state_dto import ServiceStateDTO
from src.application.use_cases.service_state_use_cases import GetServiceStateUseCase
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/clusters", tags=["Service State"])


@router.get(
    "/{cluster_name}/services/{service_name}/state",
    response_model=ServiceStateDTO,
)
@inject
async def get_service_state(
    cluster_name: str,
    service_name: str,
    get_service_state_use_case: GetServiceStateUseCase = Depends(
        Provide["get_service_state_use_case"]
    ),
) -> ServiceStateDTO:
    """Return the aggregate lifecycle state of a service."""
    try:
        result = await get_service_state_use_case.execute(cluster_name, service_name)
        logger.debug(
            "service_state.response",
            cluster=cluster_name,
            service=service_name,
            state=result.state.value,
        )
        return result
    except Exception as exc:  # pragma: no cover - defensive logging path
        logger.error(
            "service_state.failure",
            cluster=cluster_name,
            service=service_name,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to compute service state",
        ) from exc
