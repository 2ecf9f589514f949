"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, installs
the JSON error envelope and configures lifespan.

Dependencies: fastapi, micourses.api, micourses.observability, micourses.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from micourses.api import api_router
from micourses.boundary.db.create_tables import create_all_tables
from micourses.configs import get_settings
from micourses.observability.logger import configure_logging
from micourses.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events. Startup fails when the settings
    are invalid, e.g. no AUTH_SECRET_KEY outside development.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )
    if settings.auth.uses_dev_secret:
        logger.warning("AUTH_SECRET_KEY is not set; using the development signing secret")

    try:
        await create_all_tables()
        logger.info("Application startup complete: database schema ready")
    except Exception as e:
        logger.exception(
            "Failed to initialize database schema",
            extra={"error": str(e)},
        )
        raise

    yield

    # Shutdown
    logger.info("Application shutdown")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as {"message": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors, reported as 400."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Micourses API",
        description="Course marketplace with admin catalogs, learner accounts and a social feed",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Register API routes
    app.include_router(api_router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "micourses.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )
