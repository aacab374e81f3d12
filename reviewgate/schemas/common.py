"""Common schema module."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorEnvelope(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str
    version: str
