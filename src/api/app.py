"""
FastAPI application factory.

* Registers the health and ride routes.
* Creates the ``Rides`` table on startup via lifespan events.
* Installs the error handlers that render every failure as
  ``{error_code, message}``.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.errors import register_error_handlers
from src.api.middleware import limiter
from src.api.routes import health, rides
from src.config import settings
from src.infrastructure.database import create_tables

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Make sure the schema exists before serving requests."""
    await create_tables()
    logger.info("Rides service ready")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Rides API",
        description=(
            "Micro service for maintaining rides information: records "
            "validated rides and serves them by id or page by page."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(rides.router)

    return app
