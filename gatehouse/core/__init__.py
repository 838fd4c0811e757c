"""Core app configuration, database handle, security and session primitives."""

from gatehouse.core.config import Settings, get_settings
from gatehouse.core.database import Database, get_db

__all__ = ["Database", "Settings", "get_db", "get_settings"]
