"""
Unit tests for the SQLAlchemy backend.

Tests:
- Data persists in a file database across backend instances
- Insertion order survives replace and reopen
- Database errors surface as StorageError and roll back
- Health check
- Dropped tables fail store calls but not the health check
"""

from pathlib import Path

import pytest

from proedit.core.database import create_db_engine, drop_all_tables
from proedit.core.errors import StorageError
from proedit.schemas import ClipCreate, ClipPatch, ProjectCreate, Track, TrackCreate
from proedit.store import EntityKind, EntityStore, SqlBackend


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'proedit.db'}"


class TestPersistence:
    """A file database outlives the backend that wrote it."""

    def test_reopen_sees_committed_data(self, db_url):
        writer = EntityStore(backend=SqlBackend.from_url(db_url))
        project = writer.projects.create(ProjectCreate(name="Persisted"))
        track = writer.tracks.create(TrackCreate(project_id=project.id, type="video", order=0))
        clip = writer.clips.create(
            ClipCreate(track_id=track.id, start_time=0, duration=1_000, filters={"fade": 250})
        )
        writer.close()

        reader = EntityStore(backend=SqlBackend.from_url(db_url))
        try:
            assert reader.projects.get(project.id) == project
            assert reader.tracks.list_by_parent(project.id) == [track]
            assert reader.clips.get(clip.id).filters == {"fade": 250}
        finally:
            reader.close()

    def test_replace_keeps_insertion_position(self, db_url):
        store = EntityStore(backend=SqlBackend.from_url(db_url))
        try:
            track = store.tracks.create(TrackCreate(project_id="p", type="video", order=0))
            first = store.clips.create(ClipCreate(track_id=track.id, start_time=0, duration=10))
            second = store.clips.create(ClipCreate(track_id=track.id, start_time=0, duration=10))
            store.clips.update(first.id, ClipPatch(volume=50))

            with store.transaction() as tx:
                scanned = tx.scan(EntityKind.CLIP, "track_id", track.id)
            assert [clip.id for clip in scanned] == [first.id, second.id]
        finally:
            store.close()


class TestScan:
    """Filtered scans behave the same on both backends."""

    def test_scan_for_null_value(self, store, video_track, add_clip):
        text_clip = add_clip(video_track.id, text_content="Title")
        add_clip(video_track.id, asset_id="some-asset")

        with store.transaction() as tx:
            unassigned = tx.scan(EntityKind.CLIP, "asset_id", None)
        assert [clip.id for clip in unassigned] == [text_clip.id]


class TestStorageErrors:
    """Database failures are reported as StorageError."""

    def test_duplicate_id_raises_storage_error(self, db_url):
        backend = SqlBackend.from_url(db_url)
        store = EntityStore(backend=backend)
        try:
            project = store.projects.create(ProjectCreate(name="Demo"))

            with pytest.raises(StorageError) as exc_info:
                with store.transaction() as tx:
                    tx.insert(EntityKind.TRACK, _track(project.id, "t-1"))
                    tx.insert(EntityKind.PROJECT, project)
            assert exc_info.value.operation == "transaction"

            # The track inserted before the failure was rolled back
            assert store.tracks.get("t-1") is None
            assert store.projects.get(project.id) == project
        finally:
            store.close()

    def test_health_ok(self):
        backend = SqlBackend.from_url("sqlite://")
        try:
            backend.check_health()
        finally:
            backend.close()

    def test_table_creation_failure(self, tmp_path):
        missing_dir = tmp_path / "does" / "not" / "exist"
        with pytest.raises(StorageError) as exc_info:
            SqlBackend.from_url(f"sqlite:///{missing_dir / 'proedit.db'}")
        assert exc_info.value.operation == "create_tables"

    def test_health_failure(self, tmp_path):
        missing_dir = tmp_path / "does" / "not" / "exist"
        engine = create_db_engine(f"sqlite:///{missing_dir / 'proedit.db'}")
        backend = SqlBackend(engine, create_tables=False)
        try:
            with pytest.raises(StorageError) as exc_info:
                backend.check_health()
            assert exc_info.value.operation == "health"
        finally:
            backend.close()

    def test_dropped_tables(self, db_url):
        store = EntityStore(backend=SqlBackend.from_url(db_url))
        try:
            store.projects.create(ProjectCreate(name="Demo"))
            drop_all_tables(store.backend.engine)

            with pytest.raises(StorageError) as exc_info:
                store.projects.list_all()
            assert exc_info.value.operation == "transaction"
            store.backend.check_health()
        finally:
            store.close()


def _track(project_id: str, track_id: str) -> Track:
    return Track(id=track_id, project_id=project_id, type="video", order=0, locked=False, muted=False)
