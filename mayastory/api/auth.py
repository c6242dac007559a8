"""Registration and login endpoints."""

import logging
from collections.abc import Generator
from typing import Annotated

from fastapi import APIRouter, Depends

from mayastory.core.config import Settings, get_settings
from mayastory.core.database import SessionLocal
from mayastory.core.exceptions import StoreUnavailableError
from mayastory.schemas.auth import (
    AccountResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
)
from mayastory.services.account_store import AccountStore, SqlAccountStore
from mayastory.services.accounts import login_account, register_account

logger = logging.getLogger(__name__)
router = APIRouter()


def get_account_store() -> Generator[AccountStore, None, None]:
    """
    Dependency: account store for this request.

    The session opens on the first query, so input validation runs even when
    the database is not configured. It is closed when the request ends.
    """
    store = SqlAccountStore(session_factory=SessionLocal)
    try:
        yield store
    finally:
        store.close()


def _log_store_failure(operation: str, exc: StoreUnavailableError) -> None:
    cause = exc.__cause__ or exc
    logger.error(
        "Account store failure",
        extra={"operation": operation, "reason": str(cause)[:500]},
    )


@router.post(
    "/register",
    response_model=AccountResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def register(
    body: RegisterRequest,
    store: Annotated[AccountStore, Depends(get_account_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AccountResponse:
    """
    Create an account from username, password and optional email.

    Username must be 3-13 characters and password 6-50. Returns the new
    accountId, or 409 if the username is taken.
    """
    try:
        account_id = register_account(
            store,
            body.username,
            body.password,
            body.email,
            rounds=settings.BCRYPT_ROUNDS,
        )
    except StoreUnavailableError as e:
        _log_store_failure("register", e)
        raise StoreUnavailableError("Registration failed") from e
    return AccountResponse(message="Account created successfully", account_id=account_id)


@router.post(
    "/login",
    response_model=AccountResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def login(
    body: LoginRequest,
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountResponse:
    """
    Check username and password; returns the accountId.
    Unknown users and wrong passwords both get 401; banned accounts get 403.
    """
    try:
        account_id = login_account(store, body.username, body.password)
    except StoreUnavailableError as e:
        _log_store_failure("login", e)
        raise StoreUnavailableError("Login failed") from e
    return AccountResponse(message="Login successful", account_id=account_id)
