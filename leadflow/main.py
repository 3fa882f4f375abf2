"""Leadflow — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leadflow.adapters.persistence.database import engine
from leadflow.config import settings
from leadflow.infrastructure.api.routes_agents import router as agents_router
from leadflow.infrastructure.api.routes_health import router as health_router
from leadflow.infrastructure.api.routes_settings import router as settings_router
from leadflow.infrastructure.api.routes_webhook import router as webhook_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Leadflow — lead distribution engine",
        description="Assigns inbound CRM leads to agents by qualification, percentage or score",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the dashboard frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(webhook_router, prefix="/api")
    app.include_router(agents_router, prefix="/api")
    app.include_router(settings_router, prefix="/api")

    return app


app = create_app()
