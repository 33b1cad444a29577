"""
Common dependencies for ProEdit API endpoints.
"""

from fastapi import HTTPException, Request, status

from proedit.store import EntityStore


def get_store(request: Request) -> EntityStore:
    """
    Entity store dependency.

    The store is created once by ``create_app`` and kept on app.state.
    Store calls block (store lock, SQL I/O), so routes using it are plain
    ``def`` functions and run in FastAPI's threadpool.

    Usage:
        @router.get("/items")
        def get_items(store: EntityStore = Depends(get_store)):
            ...
    """
    return request.app.state.store


def not_found(resource_type: str, resource_id: str) -> HTTPException:
    """Build the 404 raised for an unknown id."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error": "not_found",
            "message": f"{resource_type.replace('_', ' ').capitalize()} not found",
            "resource_type": resource_type,
            "resource_id": resource_id,
        },
    )


__all__ = [
    "get_store",
    "not_found",
]
