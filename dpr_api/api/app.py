"""
Main FastAPI Application

This module initializes and configures the FastAPI application for the members API.
It sets up middleware, error handlers, and includes all route modules.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Callable, cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from dpr_api.data.data_store import DataStore
from dpr_api.data.errors import DataStoreError
from .config import settings
from .error_handlers import (
    APIError,
    api_error_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .middleware import RequestLoggingMiddleware
from .routes import (
    health_router,
    members_router,
    search_router,
    stats_router,
    export_router,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Application Lifecycle Handler
# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the DataStore before serving and close it on shutdown.
    """
    from . import dependencies  # pylint: disable=C0415

    try:
        dependencies.data_store = DataStore(
            db_url=settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            recent_limit=settings.RECENT_MEMBERS_LIMIT,
            include_gender=settings.STATS_INCLUDE_GENDER
        )
        logger.info("DataStore initialized on startup (%s).", settings.ENVIRONMENT)
    except DataStoreError as e:
        logger.critical("Failed to initialize DataStore: %s", e, exc_info=True)
        raise

    yield

    if dependencies.data_store:
        try:
            dependencies.data_store.close()
            logger.info("DataStore closed on shutdown.")
        except DataStoreError as e:
            logger.error("Error closing DataStore: %s", e, exc_info=True)

    dependencies.data_store = None

# -----------------------------------------------------------------------------
# FastAPI Application Setup
# -----------------------------------------------------------------------------

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Search, statistics and export for members of the Indonesian House of Representatives",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",  # noqa: cSpell
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# -----------------------------------------------------------------------------
# Exception Handlers
# -----------------------------------------------------------------------------

app.add_exception_handler(APIError, cast(Callable, api_error_handler))
app.add_exception_handler(StarletteHTTPException, cast(Callable, http_exception_handler))
app.add_exception_handler(RequestValidationError, cast(Callable, validation_exception_handler))
app.add_exception_handler(Exception, general_exception_handler)

# -----------------------------------------------------------------------------
# Middleware Setup
# -----------------------------------------------------------------------------

# The last middleware added is the outermost
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "X-Total-Count", "X-Page-Count", "X-Current-Page",
        "X-Page-Size", "Content-Disposition"
    ]
)

# -----------------------------------------------------------------------------
# Router Registration
# -----------------------------------------------------------------------------

app.include_router(health_router, prefix=settings.API_PREFIX, tags=["Health"])
app.include_router(members_router, prefix=settings.API_PREFIX, tags=["Members"])
app.include_router(search_router, prefix=settings.API_PREFIX, tags=["Search"])
app.include_router(stats_router, prefix=settings.API_PREFIX, tags=["Statistics"])
app.include_router(export_router, prefix=settings.API_PREFIX, tags=["Export"])
