"""
Project CRUD endpoints for ProEdit.

Deleting a project also deletes its assets, tracks, clips and export jobs.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from proedit.api.deps import get_store, not_found
from proedit.schemas import Project, ProjectCreate, ProjectPatch
from proedit.store import EntityStore

router = APIRouter()


@router.get(
    "",
    response_model=List[Project],
    summary="List all projects",
    description="All projects, most recently updated first.",
)
def list_projects(store: EntityStore = Depends(get_store)) -> List[Project]:
    return store.projects.list_all()


@router.post(
    "",
    response_model=Project,
    status_code=status.HTTP_201_CREATED,
    summary="Create new project",
)
def create_project(
    data: ProjectCreate,
    store: EntityStore = Depends(get_store),
) -> Project:
    return store.projects.create(data)


@router.get(
    "/{project_id}",
    response_model=Project,
    summary="Get project",
)
def get_project(
    project_id: str,
    store: EntityStore = Depends(get_store),
) -> Project:
    project = store.projects.get(project_id)
    if project is None:
        raise not_found("project", project_id)
    return project


@router.patch(
    "/{project_id}",
    response_model=Project,
    summary="Update project",
    description="Update the supplied fields. updated_at is refreshed on every call.",
)
def update_project(
    project_id: str,
    data: ProjectPatch,
    store: EntityStore = Depends(get_store),
) -> Project:
    project = store.projects.update(project_id, data)
    if project is None:
        raise not_found("project", project_id)
    return project


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project and all associated assets, tracks, clips and export jobs.",
)
def delete_project(
    project_id: str,
    store: EntityStore = Depends(get_store),
) -> None:
    if not store.projects.delete(project_id):
        raise not_found("project", project_id)

    # Return 204 No Content (no response body)
    return None
