"""Core app configuration, database and error taxonomy."""

from mayastory.core.config import get_settings, settings
from mayastory.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
