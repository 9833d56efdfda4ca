"""Root liveness endpoint."""

from fastapi import APIRouter

from common.utils import utc_timestamp
from extraction_api.models.status import RootResponse

API_VERSION = "1.0.0"

router = APIRouter(tags=["root"])


@router.get("/", response_model=RootResponse)
async def root():
    """API root - reports that the service is live."""
    return RootResponse(
        status="live",
        message="Content Extraction API is running",
        timestamp=utc_timestamp(),
        version=API_VERSION,
    )
