from fastapi import APIRouter, Depends, Response, status
from dependency_injector.wiring import inject, Provide
from pydantic import BaseModel

from src.domain.health.service import HealthService
from src.domain.health.module import HealthModule


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatusDTO(BaseModel):
    status: str
    database: bool
    version: str


@router.get("", response_model=HealthStatusDTO, summary="Database connectivity check")
@inject
async def health_check(response: Response,
                       service: HealthService = Depends(Provide[HealthModule.service]),
                       ) -> HealthStatusDTO:
    db_health = await service.check_database_health()
    if not db_health:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthStatusDTO(
        status="healthy" if db_health else "unhealthy",
        database=db_health,
        version=service.app_version,
    )
