"""Data models for store_content stage."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PersistenceRow:
    """Row inserted into the article table for one processed article."""
    external_id: Optional[str]
    title: str
    summary: str
    url: Optional[str]
    content: Optional[str]
    source: Optional[str]
    published_at: str
    created_at: str
    extraction_status: str = "success"
    extraction_error: Optional[str] = None
    # Only persisted when the table carries the extracted columns
    key_points: list[str] = field(default_factory=list)
    entities: list[str] = field(default_factory=list)
    sentiment: str = "neutral"
    category: str = "general"
    tags: list[str] = field(default_factory=list)
