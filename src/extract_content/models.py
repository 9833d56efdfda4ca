"""Data models for extract_content stage."""

from dataclasses import dataclass, field

SENTIMENTS = ("positive", "negative", "neutral")


@dataclass
class ExtractedRecord:
    """Structured fields extracted from a single article's text."""
    title: str
    summary: str
    key_points: list[str] = field(default_factory=list)
    entities: list[str] = field(default_factory=list)
    sentiment: str = "neutral"
    category: str = "general"
    tags: list[str] = field(default_factory=list)
