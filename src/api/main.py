"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from src.adapters.repository.mongo import connect, ensure_indexes, get_waitlist_collection
from src.api.errors import register_exception_handlers
from src.api.routes import router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "api",
        "description": "Waitlist registration and wallet signature verification",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Connects to MongoDB on startup (fails startup if unreachable)
    - Ensures the unique email index on startup
    - Closes the MongoDB client on shutdown
    """
    settings: Settings = app.state.settings

    logger.info("Starting application...")
    logger.info("Connecting to MongoDB...")

    # Raises StoreUnavailable, which aborts startup
    client = connect(settings)
    collection = get_waitlist_collection(client, settings)
    try:
        ensure_indexes(collection)
    except Exception:
        client.close()
        raise

    # Store client and collection in app state for dependency injection
    app.state.mongo_client = client
    app.state.waitlist_collection = collection

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    client.close()
    logger.info("MongoDB client closed")


def create_app(settings: Settings) -> FastAPI:
    """Build the application with CORS, routes and exception handlers."""
    app = FastAPI(
        title="waitlist-api",
        description="Waitlist registration and wallet signature verification API",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
    )
    register_exception_handlers(app)

    app.include_router(router, prefix="/api")

    @app.get("/health")
    def health_check(request: Request):
        """
        Health check endpoint with database validation.

        Returns 200 OK if application and database are healthy,
        503 if MongoDB does not answer a ping.
        """
        client = request.app.state.mongo_client
        try:
            client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"message": "Database unavailable"},
            )
        return {"status": "healthy"}

    return app


def run() -> None:
    """
    Console entry point: load settings and serve with uvicorn.

    Exits with status 1 before serving anything if required settings
    (MONGO_DB_SERVER) are missing.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Invalid configuration (MONGO_DB_SERVER is required): {e}")
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting server on port {settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
