from datetime import datetime, timezone

import pytest

from conftest import failing_commit
from kisaanmitra.auth.models import User
from kisaanmitra.core.errors import NotFoundError, PersistenceError
from kisaanmitra.journey.models import Journey, JourneyStatus, JourneyStepState
from kisaanmitra.journey.store import JourneyStore


def _journey(journey_id, crop_id="c1", **kwargs):
    return Journey(
        id=journey_id,
        crop_id=crop_id,
        crop_name="Wheat (Grade A)",
        start_date=datetime(2026, 10, 1, 6, 30, tzinfo=timezone.utc),
        steps=[JourneyStepState(step_id="s1"), JourneyStepState(step_id="s2")],
        **kwargs,
    )


def test_load_all_is_empty_for_new_user(db, farmer):
    assert JourneyStore(db, farmer.id).load_all() == []


def test_save_all_round_trips_every_field(db, farmer):
    verified_at = datetime(2026, 10, 2, 8, 0, tzinfo=timezone.utc)
    journey = _journey("j-1", current_step_index=1, reset_count=2, health_score=90)
    journey.steps[0] = JourneyStepState(
        step_id="s1", verified=True, verified_at=verified_at,
        proof_image_url="data:image/jpeg;base64,AAAA", ai_feedback="Field ploughed.",
    )

    store = JourneyStore(db, farmer.id)
    store.save_all([journey])

    loaded = store.load_all()
    assert loaded == [journey]
    assert loaded[0].steps[0].verified_at == verified_at
    assert loaded[0].status is JourneyStatus.active


def test_save_all_replaces_the_whole_collection(db, farmer):
    store = JourneyStore(db, farmer.id)
    store.save_all([_journey("j-1"), _journey("j-2", crop_id="c2")])
    store.save_all([_journey("j-2", crop_id="c2")])

    assert [j.id for j in store.load_all()] == ["j-2"]


def test_collections_are_scoped_per_user(db, farmer):
    other = User(email="sita@example.com", username="sita", password_hash="x:y")
    db.add(other)
    db.commit()

    JourneyStore(db, farmer.id).save_all([_journey("j-1")])

    assert JourneyStore(db, other.id).load_all() == []


def test_replace_updates_in_place_and_appends_new(db, farmer):
    store = JourneyStore(db, farmer.id)
    store.save_all([_journey("j-1"), _journey("j-2", crop_id="c2")])

    store.replace(_journey("j-1", status=JourneyStatus.completed))
    store.replace(_journey("j-3", crop_id="c5"))

    journeys = store.load_all()
    assert [j.id for j in journeys] == ["j-1", "j-2", "j-3"]
    assert journeys[0].status is JourneyStatus.completed


def test_get_unknown_journey_is_not_found(db, farmer):
    with pytest.raises(NotFoundError):
        JourneyStore(db, farmer.id).get("j-missing")


def test_failed_commit_rolls_back_and_raises(db, farmer, monkeypatch):
    store = JourneyStore(db, farmer.id)
    store.save_all([_journey("j-1")])

    monkeypatch.setattr(db, "commit", failing_commit)
    with pytest.raises(PersistenceError):
        store.save_all([_journey("j-2", crop_id="c2")])
    monkeypatch.undo()

    assert [j.id for j in store.load_all()] == ["j-1"]


def test_staged_save_is_kept_only_after_commit(db, farmer):
    store = JourneyStore(db, farmer.id)
    store.save_all([_journey("j-1")], commit=False)
    db.rollback()

    assert store.load_all() == []

    store.save_all([_journey("j-1")], commit=False)
    store.commit()
    db.rollback()

    assert [j.id for j in store.load_all()] == ["j-1"]
