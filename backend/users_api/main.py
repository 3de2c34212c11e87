"""Users API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (health, users)
    - Global error handlers map every failure to {"error": <message>}
    - The store gateway is attached to app.state; never a module-level singleton
    - A gateway built by the lifespan is disposed by the lifespan; an injected one is left alone

Design Decisions:
    - Lifespan over @app.on_event: startup/shutdown live in one place
    - create_app() takes settings and gateway so tests build isolated apps
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import Settings, get_settings
from users_api.infrastructure.database import DatabaseGateway, create_gateway
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    gateway: DatabaseGateway | None = None,
) -> FastAPI:
    """Build the application around the given (or environment) settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        owned = app.state.gateway is None
        if owned:
            app.state.gateway = create_gateway(
                settings.sqlalchemy_url,
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
            )
        logger.info("Users API started")
        yield
        logger.info("Users API shutting down")
        if owned:
            await app.state.gateway.dispose()
            app.state.gateway = None

    app = FastAPI(title="Users API", version="1.0.0", lifespan=lifespan)
    app.state.gateway = gateway

    app.include_router(health.router)
    app.include_router(users.router)
    register_error_handlers(app)
    return app


app = create_app()
