"""Request/response schemas for auth endpoints and the session blob."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignupInput(BaseModel):
    """Validated signup payload."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    password: str
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    redirect_url: str | None = Field(default=None, alias="redirectUrl")


class LoginInput(BaseModel):
    """Validated login payload."""

    email: EmailStr
    password: str


class SessionUser(BaseModel):
    """Session blob: the subset of User captured at login or signup time."""

    email: str
    role: str
    id: int


class UserProfile(BaseModel):
    """Canonical profile fields re-read from the user store (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: str
    first_name: str
    last_name: str


class ValidationIssue(BaseModel):
    """One problem found while validating input."""

    field: str
    message: str


class AuthOutcome(str, Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    USER_EXISTS = "user_exists"
    USER_NOT_FOUND = "user_not_found"
    WRONG_PASSWORD = "wrong_password"


class AuthResult(BaseModel):
    """Result of signup or login. Expected failures are results, not exceptions."""

    model_config = ConfigDict(populate_by_name=True)

    error: bool
    kind: AuthOutcome
    message: str
    user_exists: bool = Field(default=False, alias="userExists")
    user_not_found: bool = Field(default=False, alias="userNotFound")
    issues: list[ValidationIssue] | None = None

    @classmethod
    def ok(cls, message: str) -> "AuthResult":
        return cls(error=False, kind=AuthOutcome.OK, message=message)

    @classmethod
    def invalid(cls, issues: list[ValidationIssue]) -> "AuthResult":
        return cls(
            error=True,
            kind=AuthOutcome.INVALID_INPUT,
            message="Invalid input",
            issues=issues,
        )

    @classmethod
    def user_already_exists(cls) -> "AuthResult":
        return cls(
            error=True,
            kind=AuthOutcome.USER_EXISTS,
            message="User already exists",
            user_exists=True,
        )

    @classmethod
    def not_found(cls) -> "AuthResult":
        return cls(
            error=True,
            kind=AuthOutcome.USER_NOT_FOUND,
            message="User not found",
            user_not_found=True,
        )

    @classmethod
    def wrong_password(cls) -> "AuthResult":
        return cls(error=True, kind=AuthOutcome.WRONG_PASSWORD, message="Incorrect password")


class LogoutResponse(BaseModel):
    error: bool = False
    message: str = "Logged out"
