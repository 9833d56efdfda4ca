"""Sequential extract-and-store pipeline over a batch of raw articles."""

import logging
from typing import Any, Protocol

from common.utils import get_value, resolve_content
from extract_content.models import ExtractedRecord
from process_articles.models import ArticleError, BatchResult

logger = logging.getLogger(__name__)

MISSING_CONTENT_ERROR = "Article missing content field"


class Extractor(Protocol):
    def extract(self, content: str, article: Any) -> ExtractedRecord: ...


class Store(Protocol):
    def store(self, article: Any, record: ExtractedRecord) -> None: ...


class MissingContentError(ValueError):
    """Raised for an article with no content, text or body."""


def _process_article(article: Any, extractor: Extractor, store: Store) -> None:
    content = resolve_content(article)
    if not content:
        raise MissingContentError(MISSING_CONTENT_ERROR)

    record = extractor.extract(content, article)
    store.store(article, record)


def process_articles(
    articles: list[Any],
    extractor: Extractor,
    store: Store,
) -> BatchResult:
    """
    Extract and store each article in order, one at a time.

    A failing article is recorded in the result and the batch moves on to
    the next one.

    Args:
        articles: Raw article dicts or objects
        extractor: Object with extract(content, article)
        store: Object with store(article, record)

    Returns:
        BatchResult with counts and per-article errors in input order
    """
    result = BatchResult()
    total = len(articles)

    logger.info("Starting content extraction for %d articles", total)

    for article in articles:
        result.processed += 1
        try:
            _process_article(article, extractor, store)
        except Exception as exc:
            result.failed += 1
            article_id = get_value(article, "id") or f"article_{result.processed}"
            result.errors.append(ArticleError(articleId=article_id, error=str(exc)))
            logger.error("Failed to process article %d: %s", result.processed, exc)
            continue

        result.successful += 1
        logger.info("Successfully processed article %d/%d", result.processed, total)

    logger.info(
        "Content extraction completed. Success: %d, Failed: %d",
        result.successful,
        result.failed,
    )
    return result
