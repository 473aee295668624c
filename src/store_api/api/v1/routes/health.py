from fastapi import APIRouter, status

from store_api.api.v1.schemas import HealthResponse
from store_api.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
def healthcheck() -> HealthResponse:
    return HealthResponse(
        status="ok",
        environment=settings.environment.value,
        version=settings.api_version,
    )
