"""Pydantic request/response schemas."""

from mayastory.schemas.auth import (
    AccountResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
)
from mayastory.schemas.health import HealthResponse, StoreTimeResponse

__all__ = [
    "AccountResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "StoreTimeResponse",
]
