"""
Unit tests for the entity repositories.

Every test runs against both the in-memory and the SQL backend.

Tests:
- Create/get round trip for all five kinds
- Partial updates merge only supplied fields
- Project updated_at always advances
- Unknown ids report None / False instead of raising
- Returned entities are detached copies
"""

import pytest

from proedit.core.errors import InvalidEntityError
from proedit.schemas import (
    AssetPatch,
    ClipPatch,
    ExportJobPatch,
    ProjectCreate,
    ProjectPatch,
    TrackCreate,
    TrackPatch,
)


class TestRoundTrip:
    """get(create(x).id) == create(x) for every kind."""

    def test_project_round_trip(self, store):
        created = store.projects.create(
            ProjectCreate(name="Holiday", aspect_ratio="9:16", resolution="1080x1920", fps=60)
        )
        assert store.projects.get(created.id) == created

    def test_project_defaults(self, store):
        created = store.projects.create(ProjectCreate(name="Defaults"))
        assert created.aspect_ratio == "16:9"
        assert created.resolution == "1920x1080"
        assert created.fps == 30
        assert created.duration == 0
        assert created.thumbnail_url is None
        assert created.created_at == created.updated_at

    def test_asset_round_trip(self, store, add_asset):
        created = add_asset(type="audio", name="song.mp3", waveform_data=[0.1, 0.5, 0.25])
        assert store.assets.get(created.id) == created

    def test_image_asset_without_duration(self, store, add_asset):
        created = add_asset(type="image", name="logo.png", duration=None)
        assert store.assets.get(created.id).duration is None

    def test_track_round_trip(self, store, video_track):
        assert store.tracks.get(video_track.id) == video_track
        assert video_track.locked is False
        assert video_track.muted is False

    def test_clip_round_trip(self, store, video_track, add_asset, add_clip):
        asset = add_asset()
        created = add_clip(
            video_track.id,
            asset_id=asset.id,
            start_time=500,
            duration=1500,
            trim_start=250,
            filters={"brightness": 1.2, "chain": ["blur", "sharpen"]},
        )
        assert store.clips.get(created.id) == created
        assert created.volume == 100
        assert created.opacity == 100

    def test_text_clip_round_trip(self, store, add_clip):
        text_track = store.tracks.create(
            TrackCreate(project_id="p", type="text", order=2)
        )
        created = add_clip(
            text_track.id,
            text_content="Hello",
            text_style={"font": "Inter", "size": 48},
        )
        fetched = store.clips.get(created.id)
        assert fetched == created
        assert fetched.asset_id is None

    def test_export_job_round_trip(self, store, add_export):
        created = add_export(format="webm", quality="medium")
        assert store.exports.get(created.id) == created
        assert created.status == "pending"
        assert created.progress == 0
        assert created.completed_at is None

    def test_ids_are_unique(self, store):
        ids = {store.projects.create(ProjectCreate(name=f"P{i}")).id for i in range(20)}
        assert len(ids) == 20


class TestUpdate:
    """Partial-update merge semantics."""

    def test_update_changes_only_supplied_fields(self, store, project):
        updated = store.projects.update(project.id, ProjectPatch(name="Renamed"))
        assert updated.name == "Renamed"
        assert updated.fps == project.fps
        assert updated.resolution == project.resolution
        assert updated.created_at == project.created_at
        assert store.projects.get(project.id) == updated

    def test_empty_project_update_only_bumps_updated_at(self, store, project):
        updated = store.projects.update(project.id, ProjectPatch())

        assert updated.updated_at > project.updated_at
        before = project.model_dump(exclude={"updated_at"})
        after = updated.model_dump(exclude={"updated_at"})
        assert after == before

    def test_repeated_empty_updates_keep_advancing(self, store, project):
        first = store.projects.update(project.id, ProjectPatch())
        second = store.projects.update(project.id, ProjectPatch())
        assert second.updated_at > first.updated_at

    def test_empty_update_leaves_other_kinds_unchanged(self, store, video_track, add_clip, add_asset, add_export):
        clip = add_clip(video_track.id)
        asset = add_asset()
        job = add_export()

        assert store.tracks.update(video_track.id, TrackPatch()) == video_track
        assert store.clips.update(clip.id, ClipPatch()) == clip
        assert store.assets.update(asset.id, AssetPatch()) == asset
        assert store.exports.update(job.id, ExportJobPatch()) == job

    def test_explicit_null_clears_nullable_field(self, store, video_track, add_clip):
        clip = add_clip(video_track.id, filters={"sepia": True}, text_content="hi")
        updated = store.clips.update(clip.id, ClipPatch(filters=None))
        assert updated.filters is None
        assert updated.text_content == "hi"

    def test_explicit_null_ignored_for_required_field(self, store, project):
        updated = store.projects.update(project.id, ProjectPatch(name=None, fps=24))
        assert updated.name == "Demo"
        assert updated.fps == 24

    def test_track_update(self, store, video_track):
        updated = store.tracks.update(video_track.id, TrackPatch(locked=True, order=5))
        assert updated.locked is True
        assert updated.order == 5
        assert updated.muted is False
        assert updated.type == "video"


class TestAssetDurationRule:
    """Only image assets may lack a duration, also after an update."""

    def test_clearing_video_duration_rejected(self, store, add_asset):
        video = add_asset(type="video", duration=4_000)

        with pytest.raises(InvalidEntityError) as exc_info:
            store.assets.update(video.id, AssetPatch(duration=None))

        assert exc_info.value.field == "duration"
        assert store.assets.get(video.id) == video

    def test_retyping_image_without_duration_rejected(self, store, add_asset):
        image = add_asset(type="image", name="logo.png", duration=None)

        with pytest.raises(InvalidEntityError):
            store.assets.update(image.id, AssetPatch(type="video"))

        assert store.assets.get(image.id).type == "image"

    def test_retyping_with_duration_allowed(self, store, add_asset):
        image = add_asset(type="image", name="logo.png", duration=None)
        updated = store.assets.update(image.id, AssetPatch(type="video", duration=3_000))
        assert updated.type == "video"
        assert updated.duration == 3_000

    def test_clearing_image_duration_allowed(self, store, add_asset):
        image = add_asset(type="image", name="logo.png", duration=500)
        assert store.assets.update(image.id, AssetPatch(duration=None)).duration is None


class TestNotFound:
    """Unknown ids are reported, not raised."""

    def test_get_unknown(self, store):
        assert store.projects.get("missing") is None
        assert store.assets.get("missing") is None
        assert store.tracks.get("missing") is None
        assert store.clips.get("missing") is None
        assert store.exports.get("missing") is None

    def test_update_unknown(self, store):
        assert store.projects.update("missing", ProjectPatch(name="x")) is None
        assert store.tracks.update("missing", TrackPatch(order=1)) is None
        assert store.exports.update("missing", ExportJobPatch(status="completed")) is None

    def test_delete_unknown(self, store):
        assert store.projects.delete("missing") is False
        assert store.assets.delete("missing") is False
        assert store.tracks.delete("missing") is False
        assert store.clips.delete("missing") is False
        assert store.exports.delete("missing") is False

    def test_delete_reports_existence(self, store, video_track, add_clip):
        clip = add_clip(video_track.id)
        assert store.clips.delete(clip.id) is True
        assert store.clips.get(clip.id) is None
        assert store.clips.delete(clip.id) is False

    def test_delete_export_job(self, store, project, add_export):
        job = add_export()
        assert store.exports.delete(job.id) is True
        assert store.exports.list_by_parent(project.id) == []


class TestIsolation:
    """Returned entities do not alias stored state."""

    def test_mutating_returned_entity_does_not_change_store(self, store, project):
        fetched = store.projects.get(project.id)
        fetched.name = "Changed locally"
        assert store.projects.get(project.id).name == "Demo"

    def test_mutating_nested_json_does_not_change_store(self, store, video_track, add_clip):
        clip = add_clip(video_track.id, filters={"blur": 1})
        clip.filters["blur"] = 99
        assert store.clips.get(clip.id).filters == {"blur": 1}

    @pytest.mark.parametrize("count", [1, 3])
    def test_fresh_stores_are_independent(self, make_store, count):
        first = make_store()
        second = make_store()
        for i in range(count):
            first.projects.create(ProjectCreate(name=f"P{i}"))
        assert len(first.projects.list_all()) == count
        assert second.projects.list_all() == []
