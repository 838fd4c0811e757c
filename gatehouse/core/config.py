"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "sqlite://",
)

# Secret shipped for local development only; refused when APP_ENV=prod.
DEFAULT_SESSION_SECRET = "ChangeThisBeforeShippingToProdOrYouWillBeFired"
SESSION_SECRET_MIN_LEN = 32


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"

    # SQLite for local development; PostgreSQL in deployed environments
    DATABASE_URL: str = "sqlite:///./gatehouse.db"

    # Signed session cookie holding {email, role, id}
    SESSION_SECRET: SecretStr = SecretStr(DEFAULT_SESSION_SECRET)
    SESSION_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "gatehouse_session"
    SESSION_COOKIE_SECURE: bool = False
    # None keeps the cookie for the browser session only (no exp claim)
    SESSION_MAX_AGE_SECONDS: int | None = None

    # Password hashing. pbkdf2_static reproduces digests stored by existing deployments
    # (one shared salt for every user); bcrypt salts each password individually.
    PASSWORD_SCHEME: Literal["pbkdf2_static", "bcrypt"] = "pbkdf2_static"
    PASSWORD_SALT: str = "salt"
    PASSWORD_ITERATIONS: int = 100_000
    PASSWORD_KEY_LENGTH: int = 64
    PASSWORD_DIGEST: Literal["sha256", "sha512"] = "sha256"
    BCRYPT_ROUNDS: int = 12
    PASSWORD_MIN_LEN: int = 6

    # return_flag: signup answers with a result body; redirect: signup answers 303
    SIGNUP_SUCCESS_MODE: Literal["return_flag", "redirect"] = "return_flag"
    LANDING_PATH: str = "/"

    CORS_ORIGINS: list[str] = []

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL or SQLite URL "
                "(e.g. postgresql+psycopg2:// or sqlite:///./gatehouse.db)"
            )
        return v.strip()

    @field_validator("SESSION_SECRET")
    @classmethod
    def validate_session_secret(cls, v: SecretStr) -> SecretStr:
        secret = v.get_secret_value()
        if not secret or not secret.strip():
            raise ValueError("SESSION_SECRET must be set and non-empty")
        if len(secret) < SESSION_SECRET_MIN_LEN:
            raise ValueError(
                f"SESSION_SECRET must be at least {SESSION_SECRET_MIN_LEN} characters"
            )
        return v

    @field_validator("SESSION_ALGORITHM", "SESSION_COOKIE_NAME")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Session algorithm and cookie name must be non-empty")
        return v.strip()

    @field_validator("SESSION_MAX_AGE_SECONDS")
    @classmethod
    def validate_session_max_age(cls, v: int | None) -> int | None:
        if v is None:
            return None
        if v < 60 or v > 2_592_000:
            raise ValueError(
                "SESSION_MAX_AGE_SECONDS must be between 60 and 2592000 (1 min to 30 days)"
            )
        return v

    @field_validator("PASSWORD_SALT")
    @classmethod
    def validate_password_salt(cls, v: str) -> str:
        if not v:
            raise ValueError("PASSWORD_SALT must be non-empty")
        return v

    @field_validator("PASSWORD_ITERATIONS")
    @classmethod
    def validate_password_iterations(cls, v: int) -> int:
        if v < 1 or v > 10_000_000:
            raise ValueError("PASSWORD_ITERATIONS must be between 1 and 10000000")
        return v

    @field_validator("PASSWORD_KEY_LENGTH")
    @classmethod
    def validate_password_key_length(cls, v: int) -> int:
        if v < 16 or v > 256:
            raise ValueError("PASSWORD_KEY_LENGTH must be between 16 and 256 bytes")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 16:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 16")
        return v

    @field_validator("PASSWORD_MIN_LEN")
    @classmethod
    def validate_password_min_len(cls, v: int) -> int:
        if v < 1 or v > 128:
            raise ValueError("PASSWORD_MIN_LEN must be between 1 and 128")
        return v

    @field_validator("LANDING_PATH")
    @classmethod
    def validate_landing_path(cls, v: str) -> str:
        if not v.startswith("/") or v.startswith("//"):
            raise ValueError("LANDING_PATH must be a site-relative path such as /")
        return v

    @model_validator(mode="after")
    def validate_prod_secret(self) -> "Settings":
        if (
            self.APP_ENV == "prod"
            and self.SESSION_SECRET.get_secret_value() == DEFAULT_SESSION_SECRET
        ):
            raise ValueError("SESSION_SECRET must be changed from the default when APP_ENV=prod")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
