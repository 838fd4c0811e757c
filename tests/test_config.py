"""Unit tests for gatehouse.core.config validators."""

import unittest

from pydantic import ValidationError

from tests.helpers import make_settings


class TestSettingsDefaults(unittest.TestCase):
    """Defaults reproduce the deployed hashing and session behaviour."""

    def test_defaults(self) -> None:
        settings = make_settings()
        self.assertEqual(settings.PASSWORD_SCHEME, "pbkdf2_static")
        self.assertEqual(settings.PASSWORD_SALT, "salt")
        self.assertEqual(settings.PASSWORD_KEY_LENGTH, 64)
        self.assertEqual(settings.PASSWORD_MIN_LEN, 6)
        self.assertEqual(settings.SIGNUP_SUCCESS_MODE, "return_flag")
        self.assertIsNone(settings.SESSION_MAX_AGE_SECONDS)


class TestSettingsValidation(unittest.TestCase):
    """Out-of-range or malformed settings raise ValidationError."""

    def test_rejects_unknown_database_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://root@localhost/db")

    def test_accepts_postgres_url(self) -> None:
        settings = make_settings(DATABASE_URL=" postgresql+psycopg2://u:p@localhost/db ")
        self.assertEqual(settings.DATABASE_URL, "postgresql+psycopg2://u:p@localhost/db")

    def test_rejects_short_session_secret(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(SESSION_SECRET="short")

    def test_prod_requires_changed_secret(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(APP_ENV="prod")
        settings = make_settings(
            APP_ENV="prod", SESSION_SECRET="a-production-secret-with-enough-length"
        )
        self.assertEqual(settings.APP_ENV, "prod")

    def test_rejects_out_of_range_values(self) -> None:
        for field, value in (
            ("PASSWORD_ITERATIONS", 0),
            ("PASSWORD_KEY_LENGTH", 8),
            ("BCRYPT_ROUNDS", 3),
            ("PASSWORD_MIN_LEN", 0),
            ("SESSION_MAX_AGE_SECONDS", 10),
        ):
            with self.subTest(field=field):
                with self.assertRaises(ValidationError):
                    make_settings(**{field: value})

    def test_rejects_unknown_scheme_and_mode(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(PASSWORD_SCHEME="md5")
        with self.assertRaises(ValidationError):
            make_settings(SIGNUP_SUCCESS_MODE="throw")

    def test_landing_path_must_be_relative(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(LANDING_PATH="https://example.com/")
        with self.assertRaises(ValidationError):
            make_settings(LANDING_PATH="//example.com")


if __name__ == "__main__":
    unittest.main()
