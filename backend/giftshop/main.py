"""
Gift Shop Backend - FastAPI Application

Users register and log in, then manage the gifts they own.
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from giftshop.config import Settings, get_settings
from giftshop.context import AppContext
from giftshop.core.exceptions import (
    DuplicateEmail,
    GiftShopError,
    InvalidCredentials,
    NotFound,
    StorageError,
    TokenError,
    Unauthenticated,
)
from giftshop.database.connections import create_mongo_client
from giftshop.database.giftshop_db import create_indexes
from giftshop.routers import auth, gifts, health

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"

# Duplicate emails are reported as a plain server error, like any other
# storage failure.
EXCEPTION_MAPPING = {
    Unauthenticated: 401,
    TokenError: 401,
    InvalidCredentials: 400,
    NotFound: 404,
    DuplicateEmail: 500,
    StorageError: 500,
}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def gift_shop_error_handler(request: Request, exc: GiftShopError):
    """Map gift shop exceptions to a plain-text response."""
    status_code = next(
        (EXCEPTION_MAPPING[cls] for cls in type(exc).__mro__ if cls in EXCEPTION_MAPPING),
        500,
    )
    message = exc.message if status_code < 500 else SERVER_ERROR_MESSAGE
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return PlainTextResponse(message, status_code=status_code, headers=headers)


def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=500)


def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Reject malformed request bodies with a plain server error.

    Bodies missing a required field never reach storage, but clients see the
    same response a failed insert would give them.
    """
    logger.warning(
        "Invalid request body on %s %s: %s",
        request.method,
        request.url.path,
        exc.errors(),
    )
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=500)


async def log_requests(request: Request, call_next):
    """Middleware to log request processing time and status."""
    start_time = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        logger.info(
            "%s %s - %s - %.4fs",
            request.method,
            request.url.path,
            status_code,
            time.perf_counter() - start_time,
        )


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use, defaults to the environment
        mongo_client: Client to use instead of connecting to ``settings.mongo_uri``;
            an injected client is left open on shutdown

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Create the MongoDB client and application context
        - Create indexes

        Shutdown:
        - Close the MongoDB client if this app created it
        """
        logger.info("Starting up Gift Shop backend...")

        client = mongo_client if mongo_client is not None else create_mongo_client(settings)
        context = AppContext.build(settings, client)
        app.state.context = context

        # The unique email index is what rejects duplicate registrations,
        # so the app does not start without it.
        try:
            await create_indexes(context.db)
            logger.info("Database indexes created")
        except PyMongoError as e:
            logger.error("Database initialization failed: %s", e)
            raise

        yield

        logger.info("Shutting down Gift Shop backend...")
        if mongo_client is None:
            client.close()
            logger.info("Database connection closed")

    app = FastAPI(
        title="Gift Shop API",
        description="""
## Gift Shop API

Register or log in to receive a bearer token, then manage your own gifts.

### Authentication
Protected endpoints require the token in the `Authorization` header:
```
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /api/register` or `POST /api/login`. Tokens expire
after one hour.
        """,
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(GiftShopError, gift_shop_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(gifts.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Gift Shop API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
