"""User store: lookup and creation of User rows keyed by unique email."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gatehouse.core.errors import UserAlreadyExistsError
from gatehouse.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "user"
ADMIN_ROLE = "admin"
ROLES = (DEFAULT_ROLE, ADMIN_ROLE)


class UserRepository:
    """User store backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        role: str = DEFAULT_ROLE,
    ) -> User:
        """
        Insert a user and commit.

        Raises UserAlreadyExistsError when the unique email constraint rejects the row.
        """
        user = User(
            email=email,
            password=password_hash,
            first_name=first_name,
            last_name=last_name,
            role=role or DEFAULT_ROLE,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise UserAlreadyExistsError(email) from e
        self.db.refresh(user)
        return user

    def upsert_admin(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
    ) -> User:
        """Create the user with role admin, or promote and reset the password of an existing one."""
        user = self.find_by_email(email)
        if user is None:
            return self.create(email, password_hash, first_name, last_name, role=ADMIN_ROLE)
        user.password = password_hash
        user.role = ADMIN_ROLE
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete_all(self) -> int:
        deleted = self.db.query(User).delete(synchronize_session=False)
        self.db.commit()
        logger.info("Deleted users: count=%s", deleted)
        return deleted
