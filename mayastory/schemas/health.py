"""Pydantic schemas for health and store-connectivity responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness check; does not touch the store."""

    ok: bool = True
    message: str = Field(default="Server is running", description="Process status")


class StoreTimeResponse(BaseModel):
    """Store connectivity check: current time reported by the database."""

    ok: bool = True
    time: datetime = Field(description="Database server time (SELECT NOW())")
