"""Liveness and health Pydantic models."""

from pydantic import BaseModel


class EnvironmentStatus(BaseModel):
    """Which required settings are present (values are never exposed)."""

    store: bool
    model: bool
    apiKey: bool


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: EnvironmentStatus


class RootResponse(BaseModel):
    status: str
    message: str
    timestamp: str
    version: str
