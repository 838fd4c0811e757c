"""Signed session cookie holding {email, role, id} for one browser client."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from fastapi import Request, Response
from pydantic import ValidationError

from gatehouse.core.config import Settings
from gatehouse.schemas.auth import SessionUser

logger = logging.getLogger(__name__)


def encode_session(data: SessionUser, settings: Settings) -> str:
    """Sign the session blob as a JWT. exp is only set when SESSION_MAX_AGE_SECONDS is."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "email": data.email,
        "role": data.role,
        "id": data.id,
        "iat": now,
    }
    if settings.SESSION_MAX_AGE_SECONDS is not None:
        payload["exp"] = now + timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)
    return jwt.encode(
        payload,
        settings.SESSION_SECRET.get_secret_value(),
        algorithm=settings.SESSION_ALGORITHM,
    )


def decode_session(token: str, settings: Settings) -> SessionUser | None:
    """
    Verify and decode a session token.

    Returns None for a bad signature, an expired token or a payload without an email.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SESSION_SECRET.get_secret_value(),
            algorithms=[settings.SESSION_ALGORITHM],
        )
    except jwt.PyJWTError as e:
        logger.debug("Rejected session cookie: %s", e)
        return None
    if not payload.get("email"):
        return None
    try:
        return SessionUser.model_validate(payload)
    except ValidationError:
        logger.debug("Rejected session cookie: malformed payload")
        return None


class CookieSessionStore:
    """
    Session store for the current request.

    read() sees writes made earlier in the same request. update() and clear()
    write the cookie to the bound response; apply() copies the pending write
    to a response built later (e.g. a redirect).
    """

    def __init__(self, request: Request, response: Response, settings: Settings) -> None:
        self.request = request
        self.response = response
        self.settings = settings
        self._written = False
        self._data: SessionUser | None = None
        self._token: str | None = None

    def read(self) -> SessionUser | None:
        if self._written:
            return self._data
        token = self.request.cookies.get(self.settings.SESSION_COOKIE_NAME)
        if not token:
            return None
        return decode_session(token, self.settings)

    def update(self, data: SessionUser) -> None:
        self._written = True
        self._data = data
        self._token = encode_session(data, self.settings)
        self.apply(self.response)

    def clear(self) -> None:
        self._written = True
        self._data = None
        self._token = None
        self.apply(self.response)

    def apply(self, response: Response) -> None:
        if not self._written:
            return
        if self._token is None:
            response.delete_cookie(self.settings.SESSION_COOKIE_NAME, path="/")
            return
        response.set_cookie(
            self.settings.SESSION_COOKIE_NAME,
            self._token,
            max_age=self.settings.SESSION_MAX_AGE_SECONDS,
            path="/",
            secure=self.settings.SESSION_COOKIE_SECURE,
            httponly=True,
            samesite="lax",
        )
