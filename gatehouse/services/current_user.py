"""Resolve who is logged in: a non-failing session probe and a strict profile accessor."""

from gatehouse.core.errors import NotAuthenticatedError
from gatehouse.schemas.auth import SessionUser, UserProfile
from gatehouse.services.auth import SessionStore
from gatehouse.services.users import UserRepository


def fetch_session_user(session: SessionStore) -> SessionUser | None:
    """Return the session data, or None when nobody is logged in."""
    data = session.read()
    if data is None or not data.email:
        return None
    return data


def get_current_user(session: SessionStore, users: UserRepository) -> UserProfile:
    """
    Re-read the logged-in user's profile from the user store.

    Raises NotAuthenticatedError when there is no session, or when the session
    points at a user that no longer exists.
    """
    data = session.read()
    if data is None or not data.email:
        raise NotAuthenticatedError()
    user = users.find_by_email(data.email)
    if user is None:
        raise NotAuthenticatedError()
    return UserProfile.model_validate(user)
