"""Persist extracted articles to the Supabase table store."""

import json
import logging
from typing import Any

from postgrest.exceptions import APIError
from supabase import Client

from common.serialization import serialize_dataclass
from common.utils import get_value, resolve_content, utc_timestamp
from extract_content.models import ExtractedRecord
from store_content.models import PersistenceRow

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "raw_articles"

EXTRACTED_COLUMNS = ("key_points", "entities", "sentiment", "category", "tags")


class StorageError(Exception):
    """Raised when the table store rejects an insert."""


def build_row(article: Any, record: ExtractedRecord) -> PersistenceRow:
    """Map a raw article and its extracted record into a persistence row."""
    now = utc_timestamp()
    return PersistenceRow(
        external_id=get_value(article, "external_id"),
        title=record.title,
        summary=record.summary,
        url=get_value(article, "url"),
        content=resolve_content(article),
        source=get_value(article, "source") or None,
        published_at=now,
        created_at=now,
        key_points=record.key_points,
        entities=record.entities,
        sentiment=record.sentiment,
        category=record.category,
        tags=record.tags,
    )


class ArticleStore:
    """Insert-only writer for processed articles.

    Every call is a single insert; repeated submissions produce repeated rows.
    """

    def __init__(
        self,
        client: Client,
        table: str = DEFAULT_TABLE,
        include_extracted_fields: bool = False,
    ):
        self.client = client
        self.table = table
        self.include_extracted_fields = include_extracted_fields

    def to_payload(self, row: PersistenceRow) -> dict[str, Any]:
        """Serialize a row to the column set written to the table."""
        payload = serialize_dataclass(row)
        if not self.include_extracted_fields:
            for column in EXTRACTED_COLUMNS:
                payload.pop(column)
        return payload

    def store(self, article: Any, record: ExtractedRecord) -> None:
        """
        Insert one row for an extracted article.

        Raises:
            StorageError: If the insert is rejected by the store
        """
        payload = self.to_payload(build_row(article, record))
        logger.debug("Inserting into %s: external_id=%s", self.table, payload["external_id"])

        try:
            self.client.table(self.table).insert([payload]).execute()
        except APIError as exc:
            detail = {
                "message": exc.message,
                "code": exc.code,
                "details": exc.details,
                "hint": exc.hint,
            }
            raise StorageError(f"Supabase storage error: {json.dumps(detail, default=str)}") from exc
