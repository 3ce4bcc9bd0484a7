"""
FastAPI application with assembled routers.

Builds the FastAPI app, registers routers, middleware and exception handlers,
and owns the database lifecycle through the lifespan context.

Dependencies: fastapi, catalog.api.routers, catalog.boundary.db
System role: API assembly and resource lifecycle
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.boundary.db.connection import Database
from catalog.configs import Settings, get_settings
from catalog.observability.logger import configure_logging
from catalog.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import courses_router, health_router

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings, database: Database | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Opens the database at startup (tables created when configured)
        and disposes its connection pool at shutdown.
        """
        configure_logging(settings.log_level)
        logger.info("Application startup", extra={"environment": settings.environment})

        db = database or Database.from_settings(settings.database)
        try:
            if settings.database.create_tables:
                await db.create_tables()
        except Exception:
            await db.dispose()
            logger.exception("Failed to initialize database")
            raise
        app.state.database = db
        logger.info("Database opened")

        yield

        # Shutdown
        app.state.database = None
        await db.dispose()
        logger.info("Application shutdown")

    return lifespan


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies, params and JSON as 400 Bad Request."""
    logger.info(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(
    database: Database | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        database: Pre-built Database to own (tests); built from settings when None
        settings: Settings override; defaults to get_settings()

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Course Catalog API",
        description="Course CRUD with soft deletion and optimistic concurrency",
        version="0.1.0",
        debug=settings.debug,
        lifespan=_build_lifespan(settings, database),
    )
    app.state.database = None

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    # Add observability middleware (added last = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(health_router)
    app.include_router(courses_router)

    return app
