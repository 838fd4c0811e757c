"""Unit tests for gatehouse.services.validation."""

import unittest

from gatehouse.schemas.auth import LoginInput, SignupInput
from gatehouse.services.validation import Invalid, Valid, validate_login, validate_signup


def _signup(**overrides: object) -> dict:
    data = {
        "email": "new@example.com",
        "password": "abcdef",
        "first_name": "New",
        "last_name": "User",
    }
    data.update(overrides)
    return data


class TestValidateSignup(unittest.TestCase):
    """validate_signup returns Valid or Invalid with every issue found."""

    def test_password_of_six_characters_is_accepted(self) -> None:
        result = validate_signup(_signup(password="abcdef"))
        self.assertIsInstance(result, Valid)
        self.assertIsInstance(result.value, SignupInput)
        self.assertEqual(result.value.email, "new@example.com")

    def test_password_of_five_characters_is_rejected(self) -> None:
        result = validate_signup(_signup(password="abcde"))
        self.assertIsInstance(result, Invalid)
        self.assertEqual([i.field for i in result.issues], ["password"])

    def test_malformed_email_is_rejected(self) -> None:
        result = validate_signup(_signup(email="not-an-email"))
        self.assertIsInstance(result, Invalid)
        self.assertIn("email", [i.field for i in result.issues])

    def test_empty_names_are_rejected(self) -> None:
        result = validate_signup(_signup(first_name="", last_name=""))
        self.assertIsInstance(result, Invalid)
        fields = {i.field for i in result.issues}
        self.assertEqual(fields, {"first_name", "last_name"})

    def test_all_issues_are_reported_together(self) -> None:
        result = validate_signup(_signup(email="x", password="abc", first_name=""))
        self.assertIsInstance(result, Invalid)
        fields = {i.field for i in result.issues}
        self.assertEqual(fields, {"email", "password", "first_name"})

    def test_missing_fields_are_reported(self) -> None:
        result = validate_signup({})
        self.assertIsInstance(result, Invalid)
        fields = {i.field for i in result.issues}
        self.assertEqual(fields, {"email", "password", "first_name", "last_name"})

    def test_non_object_payload(self) -> None:
        result = validate_signup(["new@example.com"])
        self.assertIsInstance(result, Invalid)
        self.assertEqual(result.issues[0].field, "body")

    def test_redirect_url_alias(self) -> None:
        result = validate_signup(_signup(redirectUrl="/home"))
        self.assertIsInstance(result, Valid)
        self.assertEqual(result.value.redirect_url, "/home")

    def test_configured_minimum_length(self) -> None:
        self.assertIsInstance(validate_signup(_signup(password="abcdef"), 8), Invalid)
        self.assertIsInstance(validate_signup(_signup(password="abcdefgh"), 8), Valid)


class TestValidateLogin(unittest.TestCase):
    """validate_login checks email shape and password length."""

    def test_valid(self) -> None:
        result = validate_login({"email": "a@example.com", "password": "abcdef"})
        self.assertIsInstance(result, Valid)
        self.assertIsInstance(result.value, LoginInput)

    def test_short_password(self) -> None:
        result = validate_login({"email": "a@example.com", "password": "abcde"})
        self.assertIsInstance(result, Invalid)

    def test_none_payload(self) -> None:
        self.assertIsInstance(validate_login(None), Invalid)


if __name__ == "__main__":
    unittest.main()
