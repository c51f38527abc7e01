"""
Main FastAPI application for foodgraph
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, get_settings
from ..database.client import DataAccessClient
from ..database.connection import check_database_connection, get_client, reset_client
from ..graphql.schema import build_schema, create_graphql_router
from ..logging import REQUEST_ID_HEADER, configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None, client: DataAccessClient | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings; read from the environment when omitted
        client: Data access client to inject; the shared client when omitted

    Raises:
        StartupConfigError: If settings are read from an invalid environment
        SchemaCompositionError: If the schema modules cannot be composed
    """
    settings = settings or get_settings()
    configure_logging(debug=not settings.is_production, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting foodgraph API...", node_env=settings.node_env, port=settings.port)

        db = client or get_client(settings)
        connected, error_message = await check_database_connection(db)
        if connected:
            logger.info("Database connection verified")
        else:
            # The store may come up later; requests surface errors until it does
            logger.warning("Database connection check failed", error=error_message)

        yield

        logger.info("Shutting down foodgraph API...")
        if client is None:
            await reset_client()

    app = FastAPI(
        title="foodgraph API",
        description="Read-only GraphQL API over a food composition database",
        version=__version__,
        lifespan=lifespan,
        debug=not settings.is_production,
    )

    app.add_middleware(LoggingContextMiddleware)

    # Any origin may call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    logger.info("Composing GraphQL schema...")
    composed = build_schema()

    app.include_router(create_graphql_router(composed.schema, settings, client), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
