"""SQLAlchemy ORM models."""

from mayastory.models.account import Account
from mayastory.models.base import Base

__all__ = ["Account", "Base"]
