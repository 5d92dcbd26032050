"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests pass their own Settings and an in-memory CatalogDatabase

2. Lifespan Events
   - startup: open the document store, then seed it if RESET_DATABASE is
     set. Seeding finishes (or fails startup) before the first request is
     accepted, so no client ever sees a half-seeded catalog.
   - shutdown: close the store connection

3. Middleware Stack
   - CORS: cross-origin requests allowed (any origin by default)

4. Exception Handlers
   - CatalogError subclasses -> their status code, {"error": message}
   - pymongo errors -> 503, {"error": "Document store unavailable"}
   - anything else -> 500
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError
from starlette.concurrency import run_in_threadpool

from catalog_api import __version__
from catalog_api.config import Settings, get_settings
from catalog_api.database import CatalogDatabase
from catalog_api.exceptions import CatalogError, StoreUnavailableError
from catalog_api.routers import authors_router, books_router
from catalog_api.services.seeder import seed_database

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup, before connections are accepted
    Code after yield: Runs on shutdown
    """
    app_settings: Settings = app.state.settings

    # ----- STARTUP -----
    logger.info(f"Starting {app_settings.app_name}...")

    # A database handed to create_app() belongs to the caller
    owns_database = app.state.database is None
    if owns_database:
        app.state.database = CatalogDatabase.from_settings(app_settings)
    database: CatalogDatabase = app.state.database

    if app_settings.reset_database:
        try:
            await run_in_threadpool(seed_database, database)
        except Exception:
            logger.exception("Database seeding failed, aborting startup")
            if owns_database:
                database.close()
            raise

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {app_settings.app_name}...")
    if owns_database:
        database.close()


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    app_settings: Settings | None = None,
    database: CatalogDatabase | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to get_settings())
        database: An already constructed CatalogDatabase. When omitted the
            lifespan connects using app_settings.mongo_url.

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or get_settings()

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Catalog API

Read-only access to a catalog of authors and their books.

- **Authors**: list authors, fetch one, list an author's books
- **Books**: list books with their authors expanded
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = database

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(CatalogError)
    async def catalog_exception_handler(
        request: Request,
        exc: CatalogError,
    ) -> JSONResponse:
        """Render classified errors as {"error": message}."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path}: {exc.message}")
        else:
            logger.info(
                f"{request.method} {request.url.path} -> "
                f"{exc.status_code} {exc.message}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(PyMongoError)
    async def store_exception_handler(
        request: Request,
        exc: PyMongoError,
    ) -> JSONResponse:
        """
        Handle pymongo errors (timeouts, lost connections, server errors).

        Logs the driver error and hides the details from clients.
        """
        logger.error(f"Document store error: {exc}")
        return await catalog_exception_handler(request, StoreUnavailableError())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        message = str(exc) if app_settings.debug else "An internal error occurred."
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": message},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(authors_router)
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and can reach the document store.",
    )
    def health_check(request: Request) -> JSONResponse:
        """
        Health check endpoint.

        Used by load balancers and container orchestrators. Returns 503
        when the document store does not answer a ping.
        """
        body = {
            "status": "healthy",
            "app": app_settings.app_name,
            "version": __version__,
            "database": "connected",
        }
        try:
            request.app.state.database.ping()
        except PyMongoError as exc:
            logger.warning(f"Health check failed: {exc}")
            body["status"] = "unhealthy"
            body["database"] = "unreachable"
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content=body,
            )
        return JSONResponse(content=body)

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        response_class=PlainTextResponse,
    )
    async def root() -> str:
        """Plain-text greeting."""
        return "Hello Technigo!"

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn catalog_api.main:app

app = create_app()


def run() -> None:
    """Run the development server (the `catalog-api` console script)."""
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


# =============================================================================
# Development Server
# =============================================================================
# python -m catalog_api.main
# In production, use: uvicorn catalog_api.main:app --host 0.0.0.0 --port 8080

if __name__ == "__main__":
    run()
