"""
Shared test fixtures for ProEdit Backend tests.

Provides:
- Entity stores for both backends (in-memory and SQLite in-memory)
- Test settings and FastAPI application
- Async HTTP client (httpx over ASGI)
- Small entity factories
"""

import os
from datetime import datetime, timedelta
from typing import AsyncGenerator, Callable, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep a developer's .env or shell from leaking into tests
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

from proedit.core.clock import Clock
from proedit.core.config import Settings
from proedit.core.database import drop_all_tables
from proedit.main import create_app
from proedit.schemas import (
    Asset,
    AssetCreate,
    Clip,
    ClipCreate,
    ExportJob,
    ExportJobCreate,
    Project,
    ProjectCreate,
    Track,
    TrackCreate,
)
from proedit.store import EntityStore, MemoryBackend, SqlBackend


# =============================================================================
# Clock Fixtures
# =============================================================================


class FrozenTime:
    """Time source that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def frozen_time() -> FrozenTime:
    """A controllable time source for Clock."""
    return FrozenTime()


# =============================================================================
# Store Fixtures
# =============================================================================


def build_backend(kind: str):
    if kind == "sql":
        return SqlBackend.from_url("sqlite://")
    return MemoryBackend()


@pytest.fixture(params=["memory", "sql"])
def backend_kind(request) -> str:
    """Run the test once per storage backend."""
    return request.param


@pytest.fixture
def make_store(backend_kind: str) -> Generator[Callable[..., EntityStore], None, None]:
    """
    Factory for fresh stores on the current backend.

    Keyword arguments are passed to EntityStore.
    """
    stores = []

    def _make(**kwargs) -> EntityStore:
        store = EntityStore(backend=build_backend(backend_kind), **kwargs)
        stores.append(store)
        return store

    yield _make

    for store in stores:
        if isinstance(store.backend, SqlBackend):
            drop_all_tables(store.backend.engine)
        store.close()


@pytest.fixture
def store(make_store) -> EntityStore:
    """A fresh store with default policies."""
    return make_store()


@pytest.fixture
def memory_store() -> EntityStore:
    """A fresh in-memory store (for tests that are backend specific)."""
    return EntityStore(backend=MemoryBackend())


# =============================================================================
# Entity Factories
# =============================================================================


@pytest.fixture
def project(store: EntityStore) -> Project:
    """A project named Demo."""
    return store.projects.create(ProjectCreate(name="Demo"))


@pytest.fixture
def video_track(store: EntityStore, project: Project) -> Track:
    return store.tracks.create(TrackCreate(project_id=project.id, type="video", order=0))


@pytest.fixture
def audio_track(store: EntityStore, project: Project) -> Track:
    return store.tracks.create(TrackCreate(project_id=project.id, type="audio", order=1))


def asset_payload(project_id: str, **overrides) -> AssetCreate:
    values = {
        "project_id": project_id,
        "name": "beach.mp4",
        "type": "video",
        "url": "/uploads/beach.mp4",
        "duration": 12_000,
        "file_size": 4_200_000,
    }
    values.update(overrides)
    return AssetCreate(**values)


def clip_payload(track_id: str, **overrides) -> ClipCreate:
    values = {"track_id": track_id, "start_time": 0, "duration": 2_000}
    values.update(overrides)
    return ClipCreate(**values)


def export_payload(project_id: str, **overrides) -> ExportJobCreate:
    values = {"project_id": project_id, "resolution": "1920x1080"}
    values.update(overrides)
    return ExportJobCreate(**values)


@pytest.fixture
def add_asset(store: EntityStore, project: Project) -> Callable[..., Asset]:
    """Create an asset (on the Demo project unless project_id is given)."""

    def _add(**overrides) -> Asset:
        overrides.setdefault("project_id", project.id)
        return store.assets.create(asset_payload(**overrides))

    return _add


@pytest.fixture
def add_clip(store: EntityStore) -> Callable[..., Clip]:
    """Create a clip on the given track."""

    def _add(track_id: str, **overrides) -> Clip:
        return store.clips.create(clip_payload(track_id, **overrides))

    return _add


@pytest.fixture
def add_export(store: EntityStore, project: Project) -> Callable[..., ExportJob]:
    """Create an export job (on the Demo project unless project_id is given)."""

    def _add(**overrides) -> ExportJob:
        overrides.setdefault("project_id", project.id)
        return store.exports.create(export_payload(**overrides))

    return _add


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings independent of the environment and any .env file."""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        log_level="WARNING",
        cors_origins="http://testserver",
    )


@pytest.fixture
def app_store() -> EntityStore:
    """Store served by the test application."""
    return EntityStore(backend=MemoryBackend(), clock=Clock())


@pytest_asyncio.fixture(scope="function")
async def async_client(
    test_settings: Settings,
    app_store: EntityStore,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Provide an async HTTP client for testing the FastAPI application.

    Each test gets a new application around a new store.
    """
    app = create_app(test_settings, store=app_store)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def test_project(async_client: AsyncClient) -> dict:
    """Create a project through the API and return its JSON."""
    response = await async_client.post("/api/projects", json={"name": "Demo"})
    assert response.status_code == 201, f"Failed to create project: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def test_track(async_client: AsyncClient, test_project: dict) -> dict:
    """Create a video track on the test project."""
    response = await async_client.post(
        "/api/tracks",
        json={"project_id": test_project["id"], "type": "video", "order": 0},
    )
    assert response.status_code == 201, f"Failed to create track: {response.text}"
    return response.json()
