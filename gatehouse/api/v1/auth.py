"""Signup, login, logout and session endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Response, status
from fastapi.responses import RedirectResponse

from gatehouse.api.deps import AuthServiceDep, SessionStoreDep, UsersDep
from gatehouse.core.errors import SignupRedirect
from gatehouse.schemas.auth import (
    AuthOutcome,
    AuthResult,
    LogoutResponse,
    SessionUser,
    UserProfile,
)
from gatehouse.services.current_user import fetch_session_user, get_current_user

router = APIRouter()

STATUS_BY_OUTCOME = {
    AuthOutcome.OK: status.HTTP_200_OK,
    AuthOutcome.INVALID_INPUT: 422,
    AuthOutcome.USER_EXISTS: status.HTTP_409_CONFLICT,
    AuthOutcome.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    AuthOutcome.WRONG_PASSWORD: status.HTTP_401_UNAUTHORIZED,
}


@router.post("/signup", response_model=AuthResult, responses={303: {"description": "Redirect mode"}})
def signup(
    response: Response,
    service: AuthServiceDep,
    session: SessionStoreDep,
    payload: Annotated[Any, Body()] = None,
) -> AuthResult | RedirectResponse:
    """
    Create an account from {email, password, first_name, last_name, redirectUrl?}
    and start a session.

    Returns the result body (200, 409 or 422). With SIGNUP_SUCCESS_MODE=redirect a
    successful signup answers 303 to redirectUrl (same-site paths only) or the landing page.
    """
    try:
        result = service.signup(payload)
    except SignupRedirect as e:
        redirect = RedirectResponse(e.location, status_code=status.HTTP_303_SEE_OTHER)
        session.apply(redirect)
        return redirect
    response.status_code = STATUS_BY_OUTCOME[result.kind]
    return result


@router.post("/login", response_model=AuthResult)
def login(
    response: Response,
    service: AuthServiceDep,
    payload: Annotated[Any, Body()] = None,
) -> AuthResult:
    """Check {email, password}; on success the session cookie is set."""
    result = service.login(payload)
    response.status_code = STATUS_BY_OUTCOME[result.kind]
    return result


@router.post("/logout", response_model=LogoutResponse)
def logout(service: AuthServiceDep) -> LogoutResponse:
    """Clear the session cookie."""
    service.logout()
    return LogoutResponse()


@router.get("/session", response_model=SessionUser | None)
def who_am_i(session: SessionStoreDep) -> SessionUser | None:
    """Session data {email, role, id}, or null when nobody is logged in."""
    return fetch_session_user(session)


@router.get("/me", response_model=UserProfile)
def me(session: SessionStoreDep, users: UsersDep) -> UserProfile:
    """Current user's profile from the user store. 401 when not authenticated."""
    return get_current_user(session, users)
