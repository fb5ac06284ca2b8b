import asyncio
import threading
from datetime import datetime, timezone

import pytest

from conftest import FakeVerifier, failing_commit
from kisaanmitra.ai.verifier import Verdict
from kisaanmitra.catalog.library import CULTIVATION_LIBRARY, WHEAT
from kisaanmitra.catalog.models import (
    CropDefinition,
    Season,
    StepCategory,
    WaterRequirement,
    WorkflowStep,
)
from kisaanmitra.core.errors import (
    JourneyError,
    NotFoundError,
    PersistenceError,
    StepLockedError,
    VerificationServiceError,
)
from kisaanmitra.journey.engine import (
    SENSOR_FAILURE_REASONING,
    ProgressionEngine,
    can_attempt,
    progress_percentage,
    reward_key,
    session_totals,
)
from kisaanmitra.journey.models import JourneyStatus, JourneyStepState
from kisaanmitra.journey.store import JourneyStore
from kisaanmitra.rewards.ledger import RewardLedger

NOW = datetime(2026, 10, 19, 7, 0, tzinfo=timezone.utc)
IMAGE = "data:image/jpeg;base64,/9j/4AAQSkZJRg=="


def make_engine(db, user, verifier=None, catalog=CULTIVATION_LIBRARY):
    return ProgressionEngine(
        store=JourneyStore(db, user.id),
        ledger=RewardLedger(db, user.id),
        verifier=verifier or FakeVerifier(),
        catalog=catalog,
        clock=lambda: NOW,
    )


def start(engine, crop=WHEAT):
    result = engine.start_journey(crop, engine.store.load_all())
    assert result.created
    return result.journey


def submit(engine, journey, step_index, image=IMAGE):
    step = engine.resolve_step(journey, step_index)
    return asyncio.run(engine.submit_proof(journey, step_index, step, image))


# ---------------------------------------------------------------------------
# start_journey
# ---------------------------------------------------------------------------

def test_start_creates_fresh_journey(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)

    assert journey.crop_id == "c1"
    assert journey.status is JourneyStatus.active
    assert journey.current_step_index == 0
    assert journey.health_score == 100
    assert journey.start_date == NOW
    assert [s.step_id for s in journey.steps] == ["s1", "s2", "s3", "s4"]
    assert not any(s.verified for s in journey.steps)
    assert engine.store.load_all() == [journey]


def test_start_twice_redirects_to_the_active_journey(db, farmer):
    engine = make_engine(db, farmer)
    first = start(engine)

    again = engine.start_journey(WHEAT, engine.store.load_all())

    assert not again.created
    assert again.redirect_to == first.id
    assert len(engine.store.load_all()) == 1


def test_start_after_completion_creates_a_second_journey(db, farmer):
    engine = make_engine(db, farmer)
    first = start(engine)
    for i in range(len(first.steps)):
        first = submit(engine, first, i).journey
    assert first.status is JourneyStatus.completed

    second = start(engine)

    assert second.id != first.id
    assert len(engine.store.load_all()) == 2


def test_different_crops_can_run_side_by_side(db, farmer):
    engine = make_engine(db, farmer)
    start(engine, WHEAT)
    tomato = next(c for c in CULTIVATION_LIBRARY if c.id == "c5")
    start(engine, tomato)

    assert sorted(j.crop_id for j in engine.store.load_all()) == ["c1", "c5"]


def test_crop_without_workflow_starts_with_no_steps(db, farmer):
    bare = CropDefinition(id="x1", name="Fallow", category="None",
                          season=Season.zaid, water_requirement=WaterRequirement.low)
    engine = make_engine(db, farmer, catalog=(bare,))
    journey = start(engine, bare)

    assert journey.steps == []
    assert progress_percentage(journey) == 0.0
    with pytest.raises(NotFoundError):
        engine.resolve_step(journey, 0)


# ---------------------------------------------------------------------------
# submit_proof
# ---------------------------------------------------------------------------

def test_verified_first_step_advances_and_pays(db, farmer):
    verifier = FakeVerifier(Verdict(True, "Soil is ploughed and levelled."))
    engine = make_engine(db, farmer, verifier)
    journey = start(engine)

    result = submit(engine, journey, 0)

    assert result.verified
    assert result.transitioned
    assert result.reward_applied
    assert result.journey.current_step_index == 1
    state = result.journey.steps[0]
    assert state.verified
    assert state.verified_at == NOW
    assert state.proof_image_url == IMAGE
    assert state.ai_feedback == "Soil is ploughed and levelled."
    assert engine.ledger.totals() == (100, 50)
    assert engine.store.get(journey.id) == result.journey

    title, description, image = verifier.calls[0]
    assert title == "Land Preparation & Soil Testing"
    assert image == IMAGE


def test_submit_does_not_mutate_the_caller_journey(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)

    submit(engine, journey, 0)

    assert journey.current_step_index == 0
    assert not journey.steps[0].verified


def test_locked_step_is_rejected_before_the_verifier(db, farmer):
    verifier = FakeVerifier()
    engine = make_engine(db, farmer, verifier)
    journey = start(engine)

    assert not can_attempt(journey, 1)
    with pytest.raises(StepLockedError) as exc:
        submit(engine, journey, 1)

    assert exc.value.step_index == 1
    assert verifier.calls == []
    assert engine.store.get(journey.id) == journey
    assert engine.ledger.totals() == (0, 0)


def test_rejected_proof_keeps_cursor_and_records_feedback(db, farmer):
    engine = make_engine(db, farmer, FakeVerifier(Verdict(False, "Image shows a kitchen, not a field.")))
    journey = start(engine)

    result = submit(engine, journey, 0)

    assert not result.verified
    assert not result.reward_applied
    assert result.reasoning == "Image shows a kitchen, not a field."
    stored = engine.store.get(journey.id)
    assert stored.current_step_index == 0
    assert not stored.steps[0].verified
    assert stored.steps[0].ai_feedback == "Image shows a kitchen, not a field."
    assert stored.steps[0].proof_image_url == IMAGE
    assert engine.ledger.totals() == (0, 0)


def test_rejected_then_accepted_proof_verifies_the_step(db, farmer):
    engine = make_engine(db, farmer, FakeVerifier(Verdict(False, "Blurry."), Verdict(True, "Clear now.")))
    journey = start(engine)

    journey = submit(engine, journey, 0).journey
    result = submit(engine, journey, 0)

    assert result.verified
    assert result.journey.current_step_index == 1
    assert engine.ledger.totals() == (100, 50)


@pytest.mark.parametrize("failure", [
    VerificationServiceError("verifier timed out after 20s"),
    RuntimeError("connection reset"),
])
def test_verifier_failure_is_reported_as_not_verified(db, farmer, failure):
    engine = make_engine(db, farmer, FakeVerifier(failure))
    journey = start(engine)

    result = submit(engine, journey, 0)

    assert not result.verified
    assert result.reasoning == SENSOR_FAILURE_REASONING
    assert engine.store.get(journey.id) == journey
    assert engine.ledger.totals() == (0, 0)


def test_empty_image_is_rejected(db, farmer):
    verifier = FakeVerifier()
    engine = make_engine(db, farmer, verifier)
    journey = start(engine)

    with pytest.raises(ValueError):
        submit(engine, journey, 0, image="")
    assert verifier.calls == []


def test_completing_every_step_finishes_the_journey(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)

    cursors = []
    for i in range(4):
        journey = submit(engine, journey, i).journey
        cursors.append(journey.current_step_index)

    assert cursors == [1, 2, 3, 3]
    assert journey.status is JourneyStatus.completed
    assert all(s.verified for s in journey.steps)
    assert progress_percentage(journey) == 75.0
    assert session_totals(journey) == (400, 200)
    assert engine.ledger.totals() == (100 + 120 + 200 + 250, 50 + 80 + 60 + 150)


def test_duplicate_submission_of_verified_step_pays_nothing(db, farmer):
    verifier = FakeVerifier(Verdict(True, "Ploughed."))
    engine = make_engine(db, farmer, verifier)
    journey = submit(engine, start(engine), 0).journey

    again = submit(engine, journey, 0)

    assert again.verified
    assert again.already_verified
    assert not again.transitioned
    assert not again.reward_applied
    assert again.reasoning == "Ploughed."
    assert len(verifier.calls) == 1
    assert engine.store.get(journey.id).current_step_index == 1
    assert engine.ledger.totals() == (100, 50)


def test_resubmitting_final_step_after_completion_changes_nothing(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)
    for i in range(4):
        journey = submit(engine, journey, i).journey
    totals = engine.ledger.totals()

    again = submit(engine, journey, 3)

    assert again.already_verified
    assert engine.store.get(journey.id) == journey
    assert engine.ledger.totals() == totals


def test_earlier_step_can_be_revisited_without_moving_cursor_back(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)
    journey = submit(engine, journey, 0).journey
    journey = submit(engine, journey, 1).journey
    assert journey.current_step_index == 2

    # Simulate an earlier step that lost its verification without a reset
    journey.steps[0] = JourneyStepState(step_id="s1")
    engine.store.replace(journey)

    result = submit(engine, journey, 0)

    assert result.verified
    assert result.journey.current_step_index == 2


def test_catalog_mismatch_is_not_found(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)
    journey.steps[0] = JourneyStepState(step_id="renamed")

    with pytest.raises(NotFoundError):
        engine.resolve_step(journey, 0)
    with pytest.raises(NotFoundError):
        asyncio.run(engine.submit_proof(journey, 0, WHEAT.workflow[0], IMAGE))


def test_out_of_range_step_is_not_found(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)

    with pytest.raises(NotFoundError):
        engine.resolve_step(journey, 4)


def test_failed_journey_accepts_no_proofs(db, farmer):
    verifier = FakeVerifier()
    engine = make_engine(db, farmer, verifier)
    journey = start(engine).copy(status=JourneyStatus.failed)

    with pytest.raises(JourneyError):
        submit(engine, journey, 0)
    assert verifier.calls == []


def test_step_rewards_come_from_the_catalog(db, farmer):
    custom = CropDefinition(
        id="x2", name="Test Crop", category="Test",
        season=Season.kharif, water_requirement=WaterRequirement.high,
        workflow=(
            WorkflowStep(id="x2a", title="Only", description="d",
                         category=StepCategory.harvest, points=7, eco_points=3),
        ),
    )
    engine = make_engine(db, farmer, catalog=(custom,))
    journey = start(engine, custom)

    result = submit(engine, journey, 0)

    assert result.journey.status is JourneyStatus.completed
    assert result.journey.current_step_index == 0
    assert engine.ledger.totals() == (7, 3)


def test_failed_write_keeps_step_open_and_pays_nothing(db, farmer, monkeypatch):
    engine = make_engine(db, farmer)
    journey = start(engine)

    monkeypatch.setattr(db, "commit", failing_commit)
    with pytest.raises(PersistenceError):
        submit(engine, journey, 0)
    monkeypatch.undo()

    stored = engine.store.get(journey.id)
    assert stored.current_step_index == 0
    assert not stored.steps[0].verified
    assert engine.ledger.totals() == (0, 0)
    assert not engine.ledger.has_grant(reward_key(stored, "s1"))

    retry = submit(engine, stored, 0)

    assert retry.verified
    assert retry.reward_applied
    assert engine.ledger.totals() == (100, 50)


def test_verdict_is_recorded_off_the_event_loop(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)
    step = engine.resolve_step(journey, 0)

    writer_threads = []
    save = engine.store.replace

    def recording_replace(j, **kwargs):
        writer_threads.append(threading.get_ident())
        return save(j, **kwargs)

    engine.store.replace = recording_replace

    async def run():
        return threading.get_ident(), await engine.submit_proof(journey, 0, step, IMAGE)

    loop_thread, result = asyncio.run(run())

    assert result.verified
    assert writer_threads
    assert loop_thread not in writer_threads


# ---------------------------------------------------------------------------
# reset_journey
# ---------------------------------------------------------------------------

def test_reset_clears_progress_but_keeps_ledger(db, farmer):
    engine = make_engine(db, farmer)
    journey = start(engine)
    for i in range(4):
        journey = submit(engine, journey, i).journey
    totals = engine.ledger.totals()

    reset = engine.reset_journey(journey)

    assert reset.id == journey.id
    assert reset.status is JourneyStatus.active
    assert reset.current_step_index == 0
    assert reset.reset_count == 1
    assert reset.start_date == journey.start_date
    for state in reset.steps:
        assert not state.verified
        assert state.verified_at is None
        assert state.proof_image_url is None
        assert state.ai_feedback is None
    assert engine.store.get(journey.id) == reset
    assert engine.ledger.totals() == totals


def test_steps_verified_again_after_reset_pay_again(db, farmer):
    engine = make_engine(db, farmer)
    journey = submit(engine, start(engine), 0).journey
    journey = engine.reset_journey(journey)

    result = submit(engine, journey, 0)

    assert result.reward_applied
    assert engine.ledger.totals() == (200, 100)


def test_reset_refused_while_another_journey_for_the_crop_is_active(db, farmer):
    engine = make_engine(db, farmer)
    first = start(engine)
    for i in range(4):
        first = submit(engine, first, i).journey
    start(engine)

    with pytest.raises(JourneyError):
        engine.reset_journey(first)
    assert engine.store.get(first.id).status is JourneyStatus.completed
