"""Core app configuration, database and security."""

from pesca_api.core.config import Settings, get_settings
from pesca_api.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
