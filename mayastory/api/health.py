"""Liveness and store-connectivity endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mayastory.core.database import fetch_store_time, get_db
from mayastory.core.exceptions import StoreUnavailableError
from mayastory.schemas import ErrorResponse, HealthResponse, StoreTimeResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def get_health() -> HealthResponse:
    """Process liveness; answers even when the database is down or not configured."""
    return HealthResponse()


@router.get("/test-db", response_model=StoreTimeResponse, responses={500: {"model": ErrorResponse}})
def get_store_time(db: Annotated[Session, Depends(get_db)]) -> StoreTimeResponse:
    """
    Return the database server time.

    500 with "DATABASE_URL environment variable not set" when no store is
    configured; 500 with "Database test failed" when the store is unreachable.
    """
    try:
        current_time = fetch_store_time(db)
    except SQLAlchemyError as e:
        logger.error(
            "Database test failed",
            extra={"operation": "test_db", "reason": str(e)[:500]},
        )
        raise StoreUnavailableError("Database test failed") from e
    return StoreTimeResponse(time=current_time)
