"""Shared-secret authentication for the extraction endpoints."""

import hmac
from typing import Annotated

from fastapi import Depends, Header, HTTPException

from extraction_api.config import AppConfig, get_config

API_KEY_HEADER = "x-api-key"


def require_api_key(
    config: Annotated[AppConfig, Depends(get_config)],
    x_api_key: Annotated[str | None, Header(alias=API_KEY_HEADER)] = None,
) -> None:
    """Reject the request unless the x-api-key header matches EXTRACTION_API_KEY."""
    expected = config.extraction_api_key

    if not expected:
        raise HTTPException(
            status_code=500,
            detail="Server configuration error: API key not configured",
        )

    if not x_api_key:
        raise HTTPException(
            status_code=401,
            detail="Missing API key. Please provide x-api-key header.",
        )

    if not hmac.compare_digest(x_api_key.encode(), expected.encode()):
        raise HTTPException(status_code=403, detail="Invalid API key")
