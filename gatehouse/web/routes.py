"""Page routes: public landing, form login and signup, logout and the protected home page."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse

from gatehouse.api.deps import AuthServiceDep, SessionStoreDep, UsersDep
from gatehouse.api.guard import require_session
from gatehouse.core.errors import SignupRedirect
from gatehouse.schemas.auth import AuthOutcome, AuthResult, SessionUser
from gatehouse.services.auth import safe_redirect_target
from gatehouse.services.current_user import fetch_session_user, get_current_user
from gatehouse.web.pages import render_home_page, render_landing_page, render_login_page

router = APIRouter()

_FAILURE_STATUS = {
    AuthOutcome.INVALID_INPUT: 422,
    AuthOutcome.USER_EXISTS: status.HTTP_409_CONFLICT,
    AuthOutcome.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    AuthOutcome.WRONG_PASSWORD: status.HTTP_401_UNAUTHORIZED,
}


def _form_failure(result: AuthResult, next_path: str) -> HTMLResponse:
    return HTMLResponse(
        render_login_page(next_path=next_path, message=result.message, issues=result.issues),
        status_code=_FAILURE_STATUS.get(result.kind, status.HTTP_400_BAD_REQUEST),
    )


@router.get("/", response_class=HTMLResponse)
def landing(session: SessionStoreDep) -> HTMLResponse:
    """Public landing page: login form, or links when already logged in."""
    return HTMLResponse(render_landing_page(fetch_session_user(session)))


@router.post("/login", response_model=None)
def login_form(
    service: AuthServiceDep,
    session: SessionStoreDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    next_path: Annotated[str, Form(alias="next")] = "/home",
) -> HTMLResponse | RedirectResponse:
    """Form login; redirects to the next path on success, re-renders the form on failure."""
    result = service.login({"email": email, "password": password})
    if result.error:
        return _form_failure(result, next_path)
    redirect = RedirectResponse(
        safe_redirect_target(next_path, "/home"), status_code=status.HTTP_303_SEE_OTHER
    )
    session.apply(redirect)
    return redirect


@router.post("/signup", response_model=None)
def signup_form(
    service: AuthServiceDep,
    session: SessionStoreDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    first_name: Annotated[str, Form()] = "",
    last_name: Annotated[str, Form()] = "",
    redirect_url: Annotated[str, Form(alias="redirectUrl")] = "",
) -> HTMLResponse | RedirectResponse:
    """
    Form signup. In redirect mode the service picks the target (redirectUrl or the
    landing page); otherwise the page navigates to redirectUrl or /home itself.
    """
    payload = {
        "email": email,
        "password": password,
        "first_name": first_name,
        "last_name": last_name,
        "redirectUrl": redirect_url or None,
    }
    try:
        result = service.signup(payload)
    except SignupRedirect as e:
        target = e.location
    else:
        if result.error:
            return _form_failure(result, redirect_url or "/home")
        target = safe_redirect_target(redirect_url, "/home")
    redirect = RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)
    session.apply(redirect)
    return redirect


@router.get("/logout")
def logout(service: AuthServiceDep, session: SessionStoreDep) -> RedirectResponse:
    service.logout()
    redirect = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    session.apply(redirect)
    return redirect


@router.get("/home", response_class=HTMLResponse)
def home(
    session_user: Annotated[SessionUser, Depends(require_session)],
    session: SessionStoreDep,
    users: UsersDep,
) -> HTMLResponse:
    """Protected page. A session whose user row is gone renders the login form instead."""
    profile = get_current_user(session, users)
    return HTMLResponse(render_home_page(profile, session_user))
