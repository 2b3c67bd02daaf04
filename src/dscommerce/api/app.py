"""
dscommerce.api.app

FastAPI app factory.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dscommerce import __version__
from dscommerce.api.errors import domain_error_handler, unhandled_error_handler
from dscommerce.api.routers.health import router as health_router
from dscommerce.api.routers.orders import router as orders_router
from dscommerce.api.routers.users import router as users_router
from dscommerce.db.init_db import init_db
from dscommerce.db.seed import seed_demo_data
from dscommerce.db.session import create_engine, create_sessionmaker
from dscommerce.errors import DomainError
from dscommerce.observability.logging import configure_logging, get_logger
from dscommerce.observability.middleware import RequestContextMiddleware
from dscommerce.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env == "prod",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schema comes from Alembic migrations.
            await init_db(engine)
            await seed_demo_data(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="dscommerce",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(health_router, tags=["health"])
    app.include_router(orders_router)
    app.include_router(users_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; authorization decisions live in `auth` and `orders`.
