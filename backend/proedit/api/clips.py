"""
Clip endpoints for ProEdit.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from proedit.api.deps import get_store, not_found
from proedit.schemas import Clip, ClipCreate, ClipPatch
from proedit.store import EntityStore

router = APIRouter()


@router.get(
    "/tracks/{track_id}/clips",
    response_model=List[Clip],
    summary="List track clips",
    description="Clips of a track ordered by start time.",
)
def list_clips(
    track_id: str,
    store: EntityStore = Depends(get_store),
) -> List[Clip]:
    return store.clips.list_by_parent(track_id)


@router.post(
    "/clips",
    response_model=Clip,
    status_code=status.HTTP_201_CREATED,
    summary="Place clip",
)
def create_clip(
    data: ClipCreate,
    store: EntityStore = Depends(get_store),
) -> Clip:
    return store.clips.create(data)


@router.get("/clips/{clip_id}", response_model=Clip, summary="Get clip")
def get_clip(
    clip_id: str,
    store: EntityStore = Depends(get_store),
) -> Clip:
    clip = store.clips.get(clip_id)
    if clip is None:
        raise not_found("clip", clip_id)
    return clip


@router.patch("/clips/{clip_id}", response_model=Clip, summary="Update clip")
def update_clip(
    clip_id: str,
    data: ClipPatch,
    store: EntityStore = Depends(get_store),
) -> Clip:
    clip = store.clips.update(clip_id, data)
    if clip is None:
        raise not_found("clip", clip_id)
    return clip


@router.delete(
    "/clips/{clip_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete clip",
)
def delete_clip(
    clip_id: str,
    store: EntityStore = Depends(get_store),
) -> None:
    if not store.clips.delete(clip_id):
        raise not_found("clip", clip_id)
    return None
