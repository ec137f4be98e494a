"""
Main FastAPI application for the Library API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth.adapters.base import TokenAdapter
from ..auth.factory import get_auth_adapter
from ..config import settings
from ..database.connection import check_store_connection, close_store, init_store
from ..database.store import LibraryStore
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Opens the document store unless one was injected into ``create_app`` and
    refuses to start if the store cannot be reached.
    """
    logger.info("Starting Library API...")

    if app.state.token_adapter is None:
        # Raises when LIBRARY_JWT_SECRET is unset
        app.state.token_adapter = get_auth_adapter()

    owns_store = app.state.store is None
    if owns_store:
        app.state.store = init_store()

    ok, error = await check_store_connection(app.state.store)
    if not ok:
        logger.error("Document store unreachable, aborting startup", error=error)
        if owns_store:
            close_store()
        raise RuntimeError(f"Document store unreachable: {error}")

    await app.state.store.ensure_indexes()
    logger.info("Document store connected")

    yield

    logger.info("Shutting down Library API...")
    if owns_store:
        close_store()


def create_app(
    store: LibraryStore | None = None,
    token_adapter: TokenAdapter | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Pre-built document store; when None the lifespan opens one from settings
        token_adapter: Pre-built token adapter; when None one is built from settings
    """
    app = FastAPI(
        title="Library API",
        description="GraphQL catalog of books and authors",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store
    app.state.token_adapter = token_adapter

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
        ok, error = await check_store_connection(app.state.store)
        return {
            "status": "healthy" if ok else "degraded",
            "version": __version__,
            "store": "ok" if ok else error,
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "library_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
