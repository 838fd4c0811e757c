"""SQLAlchemy ORM models."""

from gatehouse.models.base import Base
from gatehouse.models.user import User

__all__ = ["Base", "User"]
