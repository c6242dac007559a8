"""Request/response schemas for registration and login."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials for login. Presence is checked by the login pipeline, not here."""

    username: str | None = Field(default=None, description="Account name")
    password: str | None = Field(default=None, description="Password")


class RegisterRequest(LoginRequest):
    """New account: credentials plus an optional, unvalidated email."""

    email: str | None = Field(default=None, description="Contact email (optional)")


class AccountResponse(BaseModel):
    """Successful register or login."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    message: str
    account_id: int = Field(..., alias="accountId", description="Account id")


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    ok: bool = False
    error: str
