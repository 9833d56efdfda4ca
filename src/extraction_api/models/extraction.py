"""Extraction API Pydantic models."""

from typing import Any

from pydantic import BaseModel, Field


class ArticleErrorResponse(BaseModel):
    """Failure recorded for one article."""

    articleId: Any
    error: str


class BatchResultResponse(BaseModel):
    """Per-batch success and failure accounting."""

    processed: int
    successful: int
    failed: int
    errors: list[ArticleErrorResponse] = Field(default_factory=list)


class ExtractionResponse(BaseModel):
    """Envelope returned after a batch has been processed."""

    success: bool
    message: str
    processed: int
    result: BatchResultResponse
    timestamp: str


class ExtractionFailureResponse(BaseModel):
    error: str
    message: str
    timestamp: str
