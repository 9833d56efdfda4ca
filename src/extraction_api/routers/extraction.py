"""Content extraction API endpoints."""

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from common.serialization import serialize_dataclass
from common.utils import utc_timestamp
from extract_content.extract_content import ContentExtractor
from extraction_api.auth import require_api_key
from extraction_api.dependencies import get_extractor, get_store
from extraction_api.models.extraction import (
    BatchResultResponse,
    ExtractionFailureResponse,
    ExtractionResponse,
)
from process_articles.process_articles import process_articles
from store_content.store_content import ArticleStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["extraction"])

INVALID_BODY_ERROR = "Invalid request body. Expected an array of articles."
NO_ARTICLES_ERROR = "No articles provided for extraction."


async def read_articles(request: Request) -> list[Any]:
    """Dependency pulling the articles list out of the request body.

    Raises:
        HTTPException: 400 if the body is not JSON, has no articles list,
            or the list is empty
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(status_code=400, detail=INVALID_BODY_ERROR)

    articles = body.get("articles") if isinstance(body, dict) else None
    if not isinstance(articles, list):
        raise HTTPException(status_code=400, detail=INVALID_BODY_ERROR)

    if not articles:
        raise HTTPException(status_code=400, detail=NO_ARTICLES_ERROR)

    return articles


@router.post(
    "/trigger-content-extraction",
    response_model=ExtractionResponse,
    responses={500: {"model": ExtractionFailureResponse}},
    dependencies=[Depends(require_api_key)],
)
async def trigger_content_extraction(
    # Resolved in declaration order: body checks come before client lookup
    articles: Annotated[list[Any], Depends(read_articles)],
    extractor: Annotated[ContentExtractor, Depends(get_extractor)],
    store: Annotated[ArticleStore, Depends(get_store)],
):
    """Extract structured content from a batch of raw articles and store it.

    Articles are processed one at a time; individual failures are reported
    in result.errors and do not fail the request.
    """
    logger.info("Processing %d articles for content extraction...", len(articles))

    try:
        result = await run_in_threadpool(process_articles, articles, extractor, store)
    except Exception as exc:
        logger.exception("Content extraction error: %s", exc)
        return JSONResponse(
            status_code=500,
            content=ExtractionFailureResponse(
                error="Content extraction failed",
                message=str(exc),
                timestamp=utc_timestamp(),
            ).model_dump(),
        )

    return ExtractionResponse(
        success=True,
        message="Content extraction completed successfully",
        processed=len(articles),
        result=BatchResultResponse(**serialize_dataclass(result)),
        timestamp=utc_timestamp(),
    )
