"""Shared fakes and settings builders for tests."""

from types import SimpleNamespace

from gatehouse.core.config import Settings
from gatehouse.core.errors import UserAlreadyExistsError


def make_settings(**overrides: object) -> Settings:
    """Settings isolated from .env, with a cheap iteration count and in-memory SQLite."""
    values: dict[str, object] = {
        "DATABASE_URL": "sqlite://",
        "PASSWORD_ITERATIONS": 1000,
        "BCRYPT_ROUNDS": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class InMemoryUserRepository:
    """User store fake keyed by email; ids are assigned in insertion order."""

    def __init__(self) -> None:
        self.users: dict[str, SimpleNamespace] = {}
        self.create_calls = 0

    def find_by_email(self, email: str) -> SimpleNamespace | None:
        return self.users.get(email)

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        role: str = "user",
    ) -> SimpleNamespace:
        self.create_calls += 1
        if email in self.users:
            raise UserAlreadyExistsError(email)
        user = SimpleNamespace(
            id=len(self.users) + 1,
            email=email,
            password=password_hash,
            role=role,
            first_name=first_name,
            last_name=last_name,
        )
        self.users[email] = user
        return user
