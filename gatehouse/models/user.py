"""ORM model for application users."""

from sqlalchemy import Column, Integer, String

from gatehouse.models.base import Base


class User(Base):
    """
    User account for email/password login.

    password holds the digest only, never plain text.
    role: 'user' (default) or 'admin'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user", server_default="user")
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
