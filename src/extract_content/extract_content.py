"""Structured content extraction from article text using an LLM."""

import json
import logging
import re
from typing import Any

from openai import OpenAI, OpenAIError

from common.utils import get_value
from extract_content.instructions import (
    EXTRACTION_PROMPT_TEMPLATE,
    EXTRACTION_SYSTEM_INSTRUCTIONS,
)
from extract_content.models import SENTIMENTS, ExtractedRecord

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class ExtractionError(Exception):
    """Raised when the language model request itself fails."""


def _strip_code_fence(text: str) -> str:
    match = _CODE_FENCE_RE.match(text)
    return match.group(1) if match else text


def _as_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and str(item).strip()]


class ContentExtractor:
    """Turns article text into an ExtractedRecord via a chat completion call.

    The OpenAI client is passed in so a single handle can be shared across
    requests and replaced with a fake in tests.
    """

    def __init__(
        self,
        client: OpenAI,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 1000,
        temperature: float = 0.3,
        max_content_chars: int = 4000,
        fallback_summary_chars: int = 200,
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.max_content_chars = max_content_chars
        self.fallback_summary_chars = fallback_summary_chars

    def build_prompt(self, content: str) -> str:
        """Format the extraction instructions around truncated article content."""
        return EXTRACTION_PROMPT_TEMPLATE.format(content=content[: self.max_content_chars])

    def extract(self, content: str, article: Any) -> ExtractedRecord:
        """
        Extract structured fields from article content.

        Unparsable model output resolves to a fallback record, so the only
        exception this raises is ExtractionError for a failed provider call.

        Args:
            content: Textual payload of the article
            article: Original raw article (dict or object)

        Returns:
            Fully populated ExtractedRecord
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": EXTRACTION_SYSTEM_INSTRUCTIONS},
                    {"role": "user", "content": self.build_prompt(content)},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except OpenAIError as exc:
            raise ExtractionError(f"OpenAI request failed: {exc}") from exc

        raw_text = response.choices[0].message.content or ""
        return self.parse_response(raw_text, content, article)

    def parse_response(self, raw_text: str, content: str, article: Any) -> ExtractedRecord:
        """Parse model output into an ExtractedRecord, degrading to the fallback."""
        try:
            data = json.loads(_strip_code_fence(raw_text.strip()))
        except json.JSONDecodeError:
            logger.warning("Failed to parse OpenAI response as JSON, using fallback extraction")
            return self.fallback_record(content, article)

        if not isinstance(data, dict):
            logger.warning("OpenAI response was not a JSON object, using fallback extraction")
            return self.fallback_record(content, article)

        fallback = self.fallback_record(content, article)

        sentiment = str(data.get("sentiment") or "").strip().lower()
        if sentiment not in SENTIMENTS:
            sentiment = "neutral"

        return ExtractedRecord(
            title=str(data.get("title") or fallback.title),
            summary=str(data.get("summary") or fallback.summary),
            key_points=_as_str_list(data.get("key_points")),
            entities=_as_str_list(data.get("entities")),
            sentiment=sentiment,
            category=str(data.get("category") or fallback.category),
            tags=_as_str_list(data.get("tags")),
        )

    def fallback_record(self, content: str, article: Any) -> ExtractedRecord:
        """Degraded record used when the model output can't be used."""
        return ExtractedRecord(
            title=get_value(article, "title") or "Untitled",
            summary=content[: self.fallback_summary_chars] + "...",
        )
