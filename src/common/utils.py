"""Common utility functions."""

from datetime import datetime, timezone
from typing import Any

CONTENT_FIELDS = ("content", "text", "body")


def get_value(obj: Any, key: str) -> Any:
    """Get value from dict or object attribute."""
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def resolve_content(article: Any) -> str | None:
    """Return the first non-empty textual payload of an article.

    Checks the content, text and body fields in that order.
    """
    for field_name in CONTENT_FIELDS:
        value = get_value(article, field_name)
        if value:
            return value
    return None


def utc_timestamp() -> str:
    """Current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()
