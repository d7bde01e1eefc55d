"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import PVMarketError
from modules.advisor.routes import router as advisor_router
from modules.auth.routes import router as auth_router
from modules.locations.routes import router as locations_router
from modules.notifications.routes import router as inquiries_router
from modules.pole_requests.routes import router as pole_requests_router
from modules.poles.routes import router as poles_router, my_poles_router
from modules.profiles.routes import router as profiles_router

from .models.errors import ErrorResponse
from .routes import health

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def handle_pvmarket_error(request: Request, exc: PVMarketError) -> JSONResponse:
    """Render a domain error with the status code of its base class."""
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    body = ErrorResponse(error=exc.message, code=exc.code, details=exc.details or None)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything unclassified becomes a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = ErrorResponse(error="Internal server error", code="INTERNAL_ERROR")
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Marketplace for renting, lending and selling pole-vault poles in Norway",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(PVMarketError, handle_pvmarket_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api", tags=["auth"])
    app.include_router(profiles_router, prefix="/api/profile", tags=["profiles"])
    app.include_router(poles_router, prefix="/api/poles", tags=["poles"])
    app.include_router(my_poles_router, prefix="/api", tags=["poles"])
    app.include_router(pole_requests_router, prefix="/api", tags=["requests"])
    app.include_router(locations_router, prefix="/api/locations", tags=["locations"])
    app.include_router(advisor_router, prefix="/api/advisor", tags=["advisor"])
    app.include_router(inquiries_router, prefix="/api/inquiries", tags=["inquiries"])

    return app


# Application instance for uvicorn
app = create_app()
