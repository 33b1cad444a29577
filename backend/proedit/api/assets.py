"""
Asset endpoints for ProEdit.

Listing is nested under projects; single-asset operations live under /assets.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from proedit.api.deps import get_store, not_found
from proedit.schemas import Asset, AssetCreate, AssetPatch
from proedit.store import EntityStore

router = APIRouter()


@router.get(
    "/projects/{project_id}/assets",
    response_model=List[Asset],
    summary="List project assets",
    description="Assets of a project, newest first.",
)
def list_assets(
    project_id: str,
    store: EntityStore = Depends(get_store),
) -> List[Asset]:
    return store.assets.list_by_parent(project_id)


@router.post(
    "/assets",
    response_model=Asset,
    status_code=status.HTTP_201_CREATED,
    summary="Register asset",
)
def create_asset(
    data: AssetCreate,
    store: EntityStore = Depends(get_store),
) -> Asset:
    return store.assets.create(data)


@router.get("/assets/{asset_id}", response_model=Asset, summary="Get asset")
def get_asset(
    asset_id: str,
    store: EntityStore = Depends(get_store),
) -> Asset:
    asset = store.assets.get(asset_id)
    if asset is None:
        raise not_found("asset", asset_id)
    return asset


@router.patch("/assets/{asset_id}", response_model=Asset, summary="Update asset")
def update_asset(
    asset_id: str,
    data: AssetPatch,
    store: EntityStore = Depends(get_store),
) -> Asset:
    asset = store.assets.update(asset_id, data)
    if asset is None:
        raise not_found("asset", asset_id)
    return asset


@router.delete(
    "/assets/{asset_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete asset",
    description="Delete an asset. Clips using it are kept (see ASSET_DELETE_POLICY).",
)
def delete_asset(
    asset_id: str,
    store: EntityStore = Depends(get_store),
) -> None:
    if not store.assets.delete(asset_id):
        raise not_found("asset", asset_id)
    return None
