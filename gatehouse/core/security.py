"""Password hashing for signup and login.

Two schemes are supported, selected by PASSWORD_SCHEME:

- pbkdf2_static: PBKDF2-HMAC over a single configured salt, hex encoded. The same
  password always produces the same digest, for every user. Digests are
  bit-for-bit compatible with accounts created by earlier deployments, which is
  the only reason this is the default. A shared salt lets one precomputed
  dictionary attack every account; prefer bcrypt for new deployments.
- bcrypt: per-password random salt, verified with bcrypt.checkpw.
"""

import hashlib

import bcrypt

from gatehouse.core.config import Settings

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


class Pbkdf2StaticHasher:
    """Deterministic PBKDF2 hasher with a fixed salt and iteration count."""

    def __init__(self, salt: str, iterations: int, key_length: int, digest: str) -> None:
        self.salt = salt.encode("utf-8")
        self.iterations = iterations
        self.key_length = key_length
        self.digest = digest

    def hash(self, plain_password: str) -> str:
        derived = hashlib.pbkdf2_hmac(
            self.digest,
            plain_password.encode("utf-8"),
            self.salt,
            self.iterations,
            dklen=self.key_length,
        )
        return derived.hex()

    def verify(self, plain_password: str, hashed: str) -> bool:
        # Plain equality, as deployed; not constant-time.
        return self.hash(plain_password) == hashed


class BcryptHasher:
    """bcrypt hasher with a random salt per password."""

    def __init__(self, rounds: int) -> None:
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, plain_password: str, hashed: str) -> bool:
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash (e.g. a pbkdf2 digest).
            return False


PasswordHasher = Pbkdf2StaticHasher | BcryptHasher


def get_password_hasher(settings: Settings) -> PasswordHasher:
    """Build the hasher selected by settings.PASSWORD_SCHEME."""
    if settings.PASSWORD_SCHEME == "bcrypt":
        return BcryptHasher(rounds=settings.BCRYPT_ROUNDS)
    return Pbkdf2StaticHasher(
        salt=settings.PASSWORD_SALT,
        iterations=settings.PASSWORD_ITERATIONS,
        key_length=settings.PASSWORD_KEY_LENGTH,
        digest=settings.PASSWORD_DIGEST,
    )


def hash_password(plain_password: str, settings: Settings) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    return get_password_hasher(settings).hash(plain_password)


def verify_password(plain_password: str, hashed: str, settings: Settings) -> bool:
    """Verify a plain password against a stored digest."""
    return get_password_hasher(settings).verify(plain_password, hashed)
