"""
Main FastAPI application for the Task Lists backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import init_database
from ..database.connection import test_database_connection
from ..errors import ValidationError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import DataStore

configure_logging(settings.log_level, json_output=not settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Task Lists API...")
    init_database()

    ok, error = await test_database_connection()
    if ok:
        logger.info("Database connection verified")
    else:
        logger.error("Database connection check failed", error=error)
        if settings.environment.lower() in ("production", "prod"):
            raise ValidationError("Database unavailable in production")

    yield

    logger.info("Shutting down Task Lists API...")


def create_app(store: DataStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Task Lists API",
        description="Shared task lists with collaborators and progress tracking",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(store), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tasklists.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
