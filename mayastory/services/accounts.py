"""Registration and login pipelines. Each check exits early; the order is part of the contract."""

import logging

from mayastory.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidInputError,
)
from mayastory.core.security import (
    DEFAULT_BCRYPT_ROUNDS,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    hash_password,
    verify_password,
)
from mayastory.services.account_store import AccountStore

logger = logging.getLogger(__name__)


def _require_credentials(username: str | None, password: str | None) -> None:
    if not username or not password:
        raise InvalidInputError("Username and password are required")


def validate_registration(username: str | None, password: str | None) -> None:
    """Reject missing fields and out-of-range lengths before touching the store."""
    _require_credentials(username, password)
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise InvalidInputError(
            f"Username must be {USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} characters"
        )
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        raise InvalidInputError(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters"
        )


def register_account(
    store: AccountStore,
    username: str | None,
    password: str | None,
    email: str | None = None,
    *,
    rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> int:
    """
    Create an account and return its id.

    Validation -> uniqueness lookup -> bcrypt hash -> insert. A taken name
    raises ConflictError without hashing; the insert itself raises
    ConflictError if another request claimed the name in between.
    """
    validate_registration(username, password)

    if store.find_by_name(username) is not None:
        raise ConflictError("Username already exists")

    password_hash = hash_password(password, rounds=rounds)
    account_id = store.create(username, password_hash, email)
    logger.info("Account created", extra={"account_id": account_id})
    return account_id


def login_account(store: AccountStore, username: str | None, password: str | None) -> int:
    """
    Verify credentials and return the account id.

    Unknown name and wrong password raise the same InvalidCredentialsError.
    The ban check runs after the lookup and before password verification.
    """
    _require_credentials(username, password)

    account = store.find_by_name(username)
    if account is None:
        raise InvalidCredentialsError("Invalid username or password")

    if account.is_banned:
        raise ForbiddenError("Account is banned")

    if not verify_password(password, account.password_hash):
        raise InvalidCredentialsError("Invalid username or password")

    return account.id
