"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import utc_timestamp
from extraction_api.config import AppConfig, get_config
from extraction_api.models.status import EnvironmentStatus, HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(config: Annotated[AppConfig, Depends(get_config)]):
    """Report service health and which required settings are configured."""
    return HealthResponse(
        status="healthy",
        timestamp=utc_timestamp(),
        environment=EnvironmentStatus(**config.presence()),
    )
