"""
ProEdit Backend API

Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proedit.api import api_router
from proedit.core.config import Settings, get_settings
from proedit.core.errors import (
    DanglingReferenceError,
    InvalidEntityError,
    InvalidTransitionError,
    StorageError,
)
from proedit.core.logging import configure_logging
from proedit.store import EntityStore, create_store

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[EntityStore] = None,
) -> FastAPI:
    """
    Build the application around an explicitly owned entity store.

    Args:
        settings: Application settings (defaults to environment settings)
        store: Entity store to serve; built from settings when omitted
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.store.close()

    app = FastAPI(
        title=settings.app_name,
        description="Video editing project backend",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or create_store(settings)

    # CORS configuration (loaded from environment)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DanglingReferenceError)
    async def dangling_reference_handler(request: Request, exc: DanglingReferenceError):
        return JSONResponse(
            status_code=422,
            content={
                "detail": {
                    "error": "dangling_reference",
                    "message": str(exc),
                    "resource_type": exc.kind,
                    "field": exc.field,
                    "resource_id": exc.ref_id,
                }
            },
        )

    @app.exception_handler(InvalidEntityError)
    async def invalid_entity_handler(request: Request, exc: InvalidEntityError):
        return JSONResponse(
            status_code=422,
            content={
                "detail": {
                    "error": "invalid_entity",
                    "message": str(exc),
                    "resource_type": exc.kind,
                    "field": exc.field,
                }
            },
        )

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition_handler(request: Request, exc: InvalidTransitionError):
        return JSONResponse(
            status_code=409,
            content={
                "detail": {
                    "error": "invalid_transition",
                    "message": str(exc),
                    "from_status": exc.from_status,
                    "to_status": exc.to_status,
                }
            },
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": {
                    "error": "storage_error",
                    "message": "Storage backend failure",
                }
            },
        )

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint - API info."""
        return {
            "name": settings.app_name,
            "version": settings.version,
            "status": "running",
        }

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint for Docker/orchestration."""
        backend = request.app.state.store.backend
        try:
            backend.check_health()
            checks = {"storage": {"status": "healthy", "backend": backend.name}}
            healthy = True
        except StorageError as e:
            checks = {"storage": {"status": "unhealthy", "backend": backend.name, "error": str(e)}}
            healthy = False

        return {
            "status": "healthy" if healthy else "unhealthy",
            "checks": checks,
            "version": settings.version,
        }

    return app
