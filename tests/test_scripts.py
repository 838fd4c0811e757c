"""Tests for the provisioning scripts and the SQLAlchemy-backed user store."""

import unittest

from gatehouse.core.database import Database
from gatehouse.core.errors import UserAlreadyExistsError
from gatehouse.scripts import create_user, seed
from gatehouse.services.users import UserRepository
from tests.helpers import make_settings


class DatabaseTestCase(unittest.TestCase):
    """Fresh in-memory SQLite database and user repository per test."""

    def setUp(self) -> None:
        self.database = Database(make_settings())
        self.database.create_all()
        self.db = self.database.session()
        self.users = UserRepository(self.db)
        self.addCleanup(self.database.dispose)
        self.addCleanup(self.db.close)


class TestUserRepository(DatabaseTestCase):
    """UserRepository lookups, defaults and uniqueness handling."""

    def test_create_defaults_role(self) -> None:
        user = self.users.create("a@example.com", "digest", "Ada", "Lovelace")
        self.assertEqual(user.role, "user")
        self.assertIsNotNone(user.id)
        self.assertEqual(self.users.find_by_email("a@example.com").id, user.id)

    def test_find_missing(self) -> None:
        self.assertIsNone(self.users.find_by_email("missing@example.com"))

    def test_duplicate_email_raises_user_already_exists(self) -> None:
        self.users.create("a@example.com", "digest", "Ada", "Lovelace")
        with self.assertRaises(UserAlreadyExistsError):
            self.users.create("a@example.com", "digest2", "Other", "Person")
        # Session is usable after the rollback.
        self.assertIsNotNone(self.users.find_by_email("a@example.com"))

    def test_upsert_admin_promotes_existing_user(self) -> None:
        self.users.create("admin@example.com", "old", "Admin", "User")
        user = self.users.upsert_admin("admin@example.com", "new", "Admin", "User")
        self.assertEqual(user.role, "admin")
        self.assertEqual(user.password, "new")


class TestSeed(DatabaseTestCase):
    """seed replaces all users with the admin account."""

    def test_seed_replaces_users_with_admin(self) -> None:
        self.users.create("someone@example.com", "digest", "Some", "One")
        seed.seed(self.users, "admin-digest")
        self.assertIsNone(self.users.find_by_email("someone@example.com"))
        admin = self.users.find_by_email(seed.ADMIN_EMAIL)
        self.assertEqual(admin.role, "admin")
        self.assertEqual(admin.first_name, "Admin")
        self.assertEqual(admin.password, "admin-digest")

    def test_main_returns_zero(self) -> None:
        self.assertEqual(seed.main(database=self.database), 0)
        self.db.expire_all()
        self.assertEqual(self.users.find_by_email(seed.ADMIN_EMAIL).role, "admin")


class TestCreateUser(DatabaseTestCase):
    """create_user provisions one user and refuses duplicates or bad input."""

    def test_creates_admin(self) -> None:
        code = create_user.main(
            ["ops@example.com", "s3cret-pass", "Ops", "Team", "admin"],
            database=self.database,
        )
        self.assertEqual(code, 0)
        self.assertEqual(self.users.find_by_email("ops@example.com").role, "admin")

    def test_refuses_duplicate(self) -> None:
        argv = ["ops@example.com", "s3cret-pass", "Ops", "Team"]
        self.assertEqual(create_user.main(argv, database=self.database), 0)
        self.assertEqual(create_user.main(argv, database=self.database), 1)

    def test_refuses_short_password(self) -> None:
        code = create_user.main(
            ["ops@example.com", "abc", "Ops", "Team"], database=self.database
        )
        self.assertEqual(code, 1)
        self.assertIsNone(self.users.find_by_email("ops@example.com"))


if __name__ == "__main__":
    unittest.main()
