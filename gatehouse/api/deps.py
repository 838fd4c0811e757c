"""Request-scoped dependencies: settings, session store, user store, auth service."""

from typing import Annotated

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from gatehouse.core.config import Settings
from gatehouse.core.database import get_db
from gatehouse.core.session import CookieSessionStore
from gatehouse.services.auth import AuthService
from gatehouse.services.users import UserRepository


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_session_store(
    request: Request,
    response: Response,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CookieSessionStore:
    return CookieSessionStore(request, response, settings)


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    return UserRepository(db)


def get_auth_service(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    session: Annotated[CookieSessionStore, Depends(get_session_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    return AuthService(users, session, settings)


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
SessionStoreDep = Annotated[CookieSessionStore, Depends(get_session_store)]
UsersDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
