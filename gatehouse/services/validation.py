"""Input validation for signup and login. Returns Valid or Invalid; never raises."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from gatehouse.schemas.auth import LoginInput, SignupInput, ValidationIssue

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    issues: tuple[ValidationIssue, ...]


def _issues_from_error(exc: ValidationError) -> list[ValidationIssue]:
    issues = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "body"
        issues.append(ValidationIssue(field=field, message=err.get("msg", "Invalid value")))
    return issues


def _password_issue(password: str, min_len: int) -> ValidationIssue | None:
    if len(password) < min_len:
        return ValidationIssue(
            field="password",
            message=f"Password must contain at least {min_len} character(s)",
        )
    return None


def _validate(model: type[T], data: Any, min_password_len: int) -> Valid[T] | Invalid:
    if not isinstance(data, dict):
        return Invalid(issues=(ValidationIssue(field="body", message="Expected an object"),))

    issues: list[ValidationIssue] = []
    parsed: T | None = None
    try:
        parsed = model.model_validate(data)
    except ValidationError as exc:
        issues.extend(_issues_from_error(exc))

    password = data.get("password")
    if isinstance(password, str):
        issue = _password_issue(password, min_password_len)
        if issue is not None:
            issues.append(issue)

    if issues or parsed is None:
        return Invalid(issues=tuple(issues))
    return Valid(value=parsed)


def validate_signup(data: Any, min_password_len: int = 6) -> Valid[SignupInput] | Invalid:
    """Check email shape, password length and non-empty names."""
    return _validate(SignupInput, data, min_password_len)


def validate_login(data: Any, min_password_len: int = 6) -> Valid[LoginInput] | Invalid:
    """Check email shape and password length."""
    return _validate(LoginInput, data, min_password_len)
