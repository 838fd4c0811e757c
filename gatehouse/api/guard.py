"""Gate for protected pages and the error boundary for unauthenticated access."""

import logging

from fastapi import HTTPException, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, Response

from gatehouse.api.deps import SessionStoreDep, SettingsDep
from gatehouse.core.errors import NotAuthenticatedError
from gatehouse.schemas.auth import SessionUser
from gatehouse.services.current_user import fetch_session_user
from gatehouse.web.pages import render_login_page

logger = logging.getLogger(__name__)


def require_session(
    request: Request,
    session: SessionStoreDep,
    settings: SettingsDep,
) -> SessionUser:
    """
    Dependency for protected routes: redirect to the landing page when there is no session.

    The session user is also attached to request.state.user for the view.
    """
    user = fetch_session_user(session)
    if user is None:
        logger.debug("No session for %s; redirecting", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_301_MOVED_PERMANENTLY,
            headers={"Location": settings.LANDING_PATH, "Cache-Control": "no-store"},
        )
    request.state.user = user
    return user


async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError) -> Response:
    """Render the login form in place of a page; API callers get a 401 body."""
    settings = request.app.state.settings
    if request.url.path.startswith(settings.API_V1_PREFIX):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": exc.message},
        )
    return HTMLResponse(
        render_login_page(next_path=request.url.path),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )
