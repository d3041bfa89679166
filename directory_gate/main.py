"""
Main FastAPI application entry point.

Run with:
    uvicorn directory_gate.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from directory_gate.core.config import settings
from directory_gate.core.container import get_database, get_logger
from directory_gate.presentation.routers import auth_router, system_router
from directory_gate.presentation.routers.api import api_router
from directory_gate.presentation.routers.api.errors import register_exception_handlers
from directory_gate.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Shutdown disposes the database engine (connection pools).

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Staff directory gateway with Zoho sign-in",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# RFC 9457 error responses
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(auth_router)
app.include_router(api_router)
