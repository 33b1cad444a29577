"""
Export job endpoints for ProEdit.

These only record export requests and their status; no media is produced.
completed_at is set by the store when a job reaches completed or failed.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from proedit.api.deps import get_store, not_found
from proedit.schemas import ExportJob, ExportJobCreate, ExportJobPatch
from proedit.store import EntityStore

router = APIRouter()


@router.get(
    "/projects/{project_id}/exports",
    response_model=List[ExportJob],
    summary="List export jobs",
    description="Export history of a project, newest first.",
)
def list_export_jobs(
    project_id: str,
    store: EntityStore = Depends(get_store),
) -> List[ExportJob]:
    return store.exports.list_by_parent(project_id)


@router.post(
    "/exports",
    response_model=ExportJob,
    status_code=status.HTTP_201_CREATED,
    summary="Record export job",
)
def create_export_job(
    data: ExportJobCreate,
    store: EntityStore = Depends(get_store),
) -> ExportJob:
    return store.exports.create(data)


@router.get("/exports/{job_id}", response_model=ExportJob, summary="Get export job")
def get_export_job(
    job_id: str,
    store: EntityStore = Depends(get_store),
) -> ExportJob:
    job = store.exports.get(job_id)
    if job is None:
        raise not_found("export_job", job_id)
    return job


@router.patch(
    "/exports/{job_id}",
    response_model=ExportJob,
    summary="Update export job",
    description="Update status, progress, output or error of an export job.",
)
def update_export_job(
    job_id: str,
    data: ExportJobPatch,
    store: EntityStore = Depends(get_store),
) -> ExportJob:
    job = store.exports.update(job_id, data)
    if job is None:
        raise not_found("export_job", job_id)
    return job


@router.delete(
    "/exports/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete export job",
)
def delete_export_job(
    job_id: str,
    store: EntityStore = Depends(get_store),
) -> None:
    if not store.exports.delete(job_id):
        raise not_found("export_job", job_id)
    return None
