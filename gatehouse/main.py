"""FastAPI application entrypoint. No business logic; only wiring, lifecycle and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gatehouse.api.guard import not_authenticated_handler
from gatehouse.api.v1 import router as v1_router
from gatehouse.core.config import Settings, get_settings
from gatehouse.core.database import Database
from gatehouse.core.errors import NotAuthenticatedError
from gatehouse.web.routes import router as pages_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Build the application.

    The database handle is created at startup (unless one is passed in) and
    disposed at shutdown. SQLite databases get their tables created on startup;
    PostgreSQL schemas are managed with Alembic.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = database or Database(settings)
        if settings.DATABASE_URL.startswith("sqlite"):
            db.create_all()
        app.state.database = db
        logger.info("Database ready", extra={"env": settings.APP_ENV})
        try:
            yield
        finally:
            if database is None:
                db.dispose()

    app = FastAPI(
        title="Gatehouse",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
    app.include_router(v1_router, prefix=settings.API_V1_PREFIX)
    app.include_router(pages_router)
    return app


app = create_app()
