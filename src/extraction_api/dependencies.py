"""FastAPI dependencies exposing the shared client handles."""

from fastapi import HTTPException, Request

from extract_content.extract_content import ContentExtractor
from store_content.store_content import ArticleStore


def get_extractor(request: Request) -> ContentExtractor:
    """Dependency to get the content extractor built at startup."""
    extractor = getattr(request.app.state, "extractor", None)
    if extractor is None:
        raise HTTPException(
            status_code=500,
            detail="Server configuration error: OpenAI not configured",
        )
    return extractor


def get_store(request: Request) -> ArticleStore:
    """Dependency to get the article store built at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(
            status_code=500,
            detail="Server configuration error: Supabase not configured",
        )
    return store
