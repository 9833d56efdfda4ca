"""Data models for process_articles pipeline stage."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ArticleError:
    """Failure recorded for a single article in a batch."""
    # Caller-supplied id, returned unchanged; positional placeholder otherwise
    articleId: Any
    error: str


@dataclass
class BatchResult:
    """Aggregate outcome of processing a batch of articles."""
    processed: int = 0
    successful: int = 0
    failed: int = 0
    errors: list[ArticleError] = field(default_factory=list)
