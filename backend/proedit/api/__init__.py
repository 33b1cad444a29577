"""
ProEdit API routes package.

Contains all API endpoint routers for the application.
"""

from fastapi import APIRouter

from .assets import router as assets_router
from .clips import router as clips_router
from .exports import router as exports_router
from .projects import router as projects_router
from .tracks import router as tracks_router

# Main API router that includes all sub-routers
api_router = APIRouter()

# Include projects routes
api_router.include_router(projects_router, prefix="/projects", tags=["projects"])

# Asset, track, clip and export routes (some under /projects, some top-level)
api_router.include_router(assets_router, tags=["assets"])
api_router.include_router(tracks_router, tags=["tracks"])
api_router.include_router(clips_router, tags=["clips"])
api_router.include_router(exports_router, tags=["exports"])

__all__ = [
    "api_router",
    "assets_router",
    "clips_router",
    "exports_router",
    "projects_router",
    "tracks_router",
]
