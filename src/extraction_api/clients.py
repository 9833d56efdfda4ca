"""Construction of the long-lived model and store client handles."""

import logging

from openai import OpenAI
from supabase import create_client

from extract_content.extract_content import ContentExtractor
from extraction_api.config import AppConfig
from store_content.store_content import ArticleStore

logger = logging.getLogger(__name__)


def build_extractor(config: AppConfig) -> ContentExtractor | None:
    """Create the content extractor, or None if no OpenAI key is configured."""
    if not config.has_model:
        logger.warning("OPENAI_API_KEY not set; content extraction is unavailable")
        return None

    return ContentExtractor(
        client=OpenAI(api_key=config.openai_api_key),
        model=config.model.name,
        max_tokens=config.model.max_tokens,
        temperature=config.model.temperature,
        max_content_chars=config.model.max_content_chars,
        fallback_summary_chars=config.model.fallback_summary_chars,
    )


def build_store(config: AppConfig) -> ArticleStore | None:
    """Create the article store, or None if Supabase is not configured."""
    if not config.has_store:
        logger.warning(
            "SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY not set; article storage is unavailable"
        )
        return None

    client = create_client(config.supabase_url, config.supabase_service_role_key)
    return ArticleStore(
        client=client,
        table=config.store.table,
        include_extracted_fields=config.store.include_extracted_fields,
    )
