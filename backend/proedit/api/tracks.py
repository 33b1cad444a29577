"""
Track endpoints for ProEdit.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from proedit.api.deps import get_store, not_found
from proedit.schemas import Track, TrackCreate, TrackPatch
from proedit.store import EntityStore

router = APIRouter()


@router.get(
    "/projects/{project_id}/tracks",
    response_model=List[Track],
    summary="List project tracks",
    description="Tracks of a project in stacking order.",
)
def list_tracks(
    project_id: str,
    store: EntityStore = Depends(get_store),
) -> List[Track]:
    return store.tracks.list_by_parent(project_id)


@router.post(
    "/tracks",
    response_model=Track,
    status_code=status.HTTP_201_CREATED,
    summary="Add track",
)
def create_track(
    data: TrackCreate,
    store: EntityStore = Depends(get_store),
) -> Track:
    return store.tracks.create(data)


@router.get("/tracks/{track_id}", response_model=Track, summary="Get track")
def get_track(
    track_id: str,
    store: EntityStore = Depends(get_store),
) -> Track:
    track = store.tracks.get(track_id)
    if track is None:
        raise not_found("track", track_id)
    return track


@router.patch("/tracks/{track_id}", response_model=Track, summary="Update track")
def update_track(
    track_id: str,
    data: TrackPatch,
    store: EntityStore = Depends(get_store),
) -> Track:
    track = store.tracks.update(track_id, data)
    if track is None:
        raise not_found("track", track_id)
    return track


@router.delete(
    "/tracks/{track_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete track",
    description="Delete a track and all of its clips.",
)
def delete_track(
    track_id: str,
    store: EntityStore = Depends(get_store),
) -> None:
    if not store.tracks.delete(track_id):
        raise not_found("track", track_id)
    return None
