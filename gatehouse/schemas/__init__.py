"""Pydantic request/response schemas."""

from gatehouse.schemas.auth import (
    AuthOutcome,
    AuthResult,
    LoginInput,
    LogoutResponse,
    SessionUser,
    SignupInput,
    UserProfile,
    ValidationIssue,
)
from gatehouse.schemas.health import HealthResponse

__all__ = [
    "AuthOutcome",
    "AuthResult",
    "HealthResponse",
    "LoginInput",
    "LogoutResponse",
    "SessionUser",
    "SignupInput",
    "UserProfile",
    "ValidationIssue",
]
