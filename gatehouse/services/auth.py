"""Signup, login and logout: validates input, consults the user store, issues the session."""

import logging
from typing import TYPE_CHECKING, Any, Protocol

from gatehouse.core.errors import SignupRedirect, UserAlreadyExistsError
from gatehouse.core.security import get_password_hasher
from gatehouse.schemas.auth import AuthResult, SessionUser
from gatehouse.services.users import DEFAULT_ROLE, UserRepository
from gatehouse.services.validation import Invalid, validate_login, validate_signup

if TYPE_CHECKING:
    from gatehouse.core.config import Settings

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    def read(self) -> SessionUser | None: ...

    def update(self, data: SessionUser) -> None: ...

    def clear(self) -> None: ...


def safe_redirect_target(url: str | None, default: str) -> str:
    """Return url if it is a same-site relative path, else default."""
    if url and url.startswith("/") and not url.startswith("//") and "\\" not in url:
        return url
    return default


class AuthService:
    """Orchestrates signup and login for one request."""

    def __init__(
        self,
        users: UserRepository,
        session: SessionStore,
        settings: "Settings",
    ) -> None:
        self.users = users
        self.session = session
        self.settings = settings
        self.hasher = get_password_hasher(settings)

    def signup(self, data: Any) -> AuthResult:
        """
        Create a user and start a session.

        Returns an invalid_input or user_exists result without side effects when
        the input is rejected. In redirect mode a successful signup raises
        SignupRedirect after the session write instead of returning.
        """
        checked = validate_signup(data, self.settings.PASSWORD_MIN_LEN)
        if isinstance(checked, Invalid):
            logger.info(
                "Signup rejected: invalid input",
                extra={"fields": [i.field for i in checked.issues]},
            )
            return AuthResult.invalid(list(checked.issues))
        body = checked.value

        if self.users.find_by_email(body.email) is not None:
            logger.info("Signup rejected: user exists", extra={"email": body.email})
            return AuthResult.user_already_exists()

        password_hash = self.hasher.hash(body.password)
        try:
            user = self.users.create(
                email=body.email,
                password_hash=password_hash,
                first_name=body.first_name,
                last_name=body.last_name,
            )
        except UserAlreadyExistsError:
            # Lost a race with a concurrent signup for the same email.
            logger.info("Signup rejected: user exists", extra={"email": body.email})
            return AuthResult.user_already_exists()

        self.session.update(
            SessionUser(email=user.email, role=user.role or DEFAULT_ROLE, id=user.id)
        )
        logger.info("User created", extra={"email": user.email, "user_id": user.id})

        if self.settings.SIGNUP_SUCCESS_MODE == "redirect":
            raise SignupRedirect(
                safe_redirect_target(body.redirect_url, self.settings.LANDING_PATH)
            )
        return AuthResult.ok("user created")

    def login(self, data: Any) -> AuthResult:
        """Check credentials and start a session on success."""
        checked = validate_login(data, self.settings.PASSWORD_MIN_LEN)
        if isinstance(checked, Invalid):
            return AuthResult.invalid(list(checked.issues))
        body = checked.value

        found = self.users.find_by_email(body.email)
        if found is None:
            logger.info("Login failed: user not found", extra={"email": body.email})
            return AuthResult.not_found()

        if not self.hasher.verify(body.password, found.password):
            logger.info("Login failed: incorrect password", extra={"email": body.email})
            return AuthResult.wrong_password()

        self.session.update(SessionUser(email=found.email, role=found.role, id=found.id))
        logger.info("Logged in", extra={"email": found.email, "user_id": found.id})
        return AuthResult.ok("Logged in")

    def logout(self) -> None:
        self.session.clear()
        logger.info("Logged out")
