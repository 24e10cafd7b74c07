"""
Job Board API - Main Application Entry Point

This module builds the FastAPI application with:
- Store engine and session factory created once per process
- Repository injected through app.state (no module-level client)
- CORS middleware for the page-rendering frontend
- Prometheus metrics and store error handling

Architecture:
    FastAPI App
    ├── Lifespan Management (engine startup/shutdown)
    ├── CORS Middleware
    ├── Prometheus Middleware (/metrics)
    └── API Router (/api)
        ├── /home, /jobs - Job listings, search and detail pages
        ├── /companies - Company directory and company pages
        ├── /categories - Category list for filters
        └── /alerts - Job alert subscriptions
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jobboard.api import api_router
from jobboard.config import Settings, get_settings
from jobboard.database import create_engine_from_settings, create_session_factory, init_db
from jobboard.exceptions import StoreError
from jobboard.middleware import setup_metrics
from jobboard.services.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle events.

    Startup:
        1. Create the store engine and session factory (unless injected)
        2. Create tables when enabled in settings

    Shutdown:
        1. Dispose the engine created at startup
    """
    settings: Settings = app.state.settings
    engine = None

    if getattr(app.state, "repository", None) is None:
        engine = create_engine_from_settings(settings)
        if settings.create_tables:
            await init_db(engine)
        app.state.repository = SQLAlchemyRepository(create_session_factory(engine))
        logger.info("Store connected")

    yield

    if engine is not None:
        await engine.dispose()
        app.state.repository = None


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(
    settings: Optional[Settings] = None,
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use (defaults to environment/.env)
        session_factory: Pre-built session factory; when given, the
            lifespan does not create its own engine
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        description="Job listings, companies and job alerts",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.repository = SQLAlchemyRepository(session_factory) if session_factory else None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_metrics(app)

    app.add_exception_handler(StoreError, store_error_handler)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
