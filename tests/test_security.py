"""Unit tests for gatehouse.core.security: static-salt PBKDF2 and bcrypt hashers."""

import hashlib
import unittest

from gatehouse.core.security import (
    BcryptHasher,
    Pbkdf2StaticHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)
from tests.helpers import make_settings


class TestPbkdf2StaticHasher(unittest.TestCase):
    """Default scheme: deterministic digest, shared salt."""

    def setUp(self) -> None:
        self.settings = make_settings()

    def test_same_password_hashes_identically(self) -> None:
        first = hash_password("adminpassword", self.settings)
        second = hash_password("adminpassword", self.settings)
        self.assertEqual(first, second)

    def test_digest_matches_pbkdf2_hmac_hex(self) -> None:
        expected = hashlib.pbkdf2_hmac(
            "sha256", b"adminpassword", b"salt", 1000, dklen=64
        ).hex()
        self.assertEqual(hash_password("adminpassword", self.settings), expected)

    def test_digest_is_hex_of_key_length(self) -> None:
        digest = hash_password("abcdef", self.settings)
        self.assertEqual(len(digest), 128)
        int(digest, 16)

    def test_different_passwords_differ(self) -> None:
        self.assertNotEqual(
            hash_password("abcdef", self.settings),
            hash_password("abcdeg", self.settings),
        )

    def test_salt_changes_digest(self) -> None:
        other = make_settings(PASSWORD_SALT="pepper")
        self.assertNotEqual(
            hash_password("abcdef", self.settings),
            hash_password("abcdef", other),
        )

    def test_verify(self) -> None:
        digest = hash_password("abcdef", self.settings)
        self.assertTrue(verify_password("abcdef", digest, self.settings))
        self.assertFalse(verify_password("abcdeg", digest, self.settings))

    def test_default_scheme_is_pbkdf2(self) -> None:
        self.assertIsInstance(get_password_hasher(self.settings), Pbkdf2StaticHasher)


class TestBcryptHasher(unittest.TestCase):
    """bcrypt scheme: random salt per password."""

    def setUp(self) -> None:
        self.settings = make_settings(PASSWORD_SCHEME="bcrypt")

    def test_scheme_selected(self) -> None:
        self.assertIsInstance(get_password_hasher(self.settings), BcryptHasher)

    def test_hashes_are_salted(self) -> None:
        self.assertNotEqual(
            hash_password("abcdef", self.settings),
            hash_password("abcdef", self.settings),
        )

    def test_verify(self) -> None:
        digest = hash_password("abcdef", self.settings)
        self.assertTrue(verify_password("abcdef", digest, self.settings))
        self.assertFalse(verify_password("abcdeg", digest, self.settings))

    def test_verify_rejects_non_bcrypt_digest(self) -> None:
        pbkdf2_digest = hash_password("abcdef", make_settings())
        self.assertFalse(verify_password("abcdef", pbkdf2_digest, self.settings))


if __name__ == "__main__":
    unittest.main()
