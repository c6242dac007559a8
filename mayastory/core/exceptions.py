"""Account error taxonomy. Each kind maps to one stable HTTP status."""

from fastapi import status


class AccountError(Exception):
    """Base for errors reported to the caller as {ok: false, error: message}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(AccountError):
    """Request body is missing fields or has out-of-range values."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(AccountError):
    """Username already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Username already exists"


class InvalidCredentialsError(AccountError):
    """Unknown username or wrong password; the two cases share one message."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid username or password"


class ForbiddenError(AccountError):
    """Account exists but is banned."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Account is banned"


class StoreUnavailableError(AccountError):
    """Account store connection or query failed."""

    default_message = "Account store unavailable"


class StoreNotConfiguredError(StoreUnavailableError):
    """DATABASE_URL is not set, so no store connection can be made."""

    default_message = "DATABASE_URL environment variable not set"
