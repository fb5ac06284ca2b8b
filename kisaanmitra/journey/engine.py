"""
Cultivation journey progression.

Rules:
  - Step i can be attempted only when i <= current_step_index
  - A verified proof moves the cursor to i + 1, or pins it on the last step
    and marks the journey completed
  - The cursor never moves backwards except through reset_journey
  - Step rewards go to the ledger once per unverified -> verified transition
  - Verifier failures come back as an ordinary "not verified" result
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Sequence

from fastapi.concurrency import run_in_threadpool

from kisaanmitra.ai.verifier import ProofVerifier, Verdict
from kisaanmitra.catalog.library import CULTIVATION_LIBRARY
from kisaanmitra.catalog.lookup import find_crop, find_step
from kisaanmitra.catalog.models import CropDefinition, WorkflowStep
from kisaanmitra.core.config import (
    INITIAL_HEALTH_SCORE,
    SESSION_ECO_PER_STEP,
    SESSION_XP_PER_STEP,
)
from kisaanmitra.core.errors import JourneyError, NotFoundError, StepLockedError
from kisaanmitra.journey.models import (
    Journey,
    JourneyStatus,
    JourneyStepState,
    new_journey_id,
)
from kisaanmitra.journey.store import JourneyStore
from kisaanmitra.rewards.ledger import RewardLedger

logger = logging.getLogger(__name__)

SENSOR_FAILURE_REASONING = "Sensor link failed. Capture again."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProofResult:
    verified: bool
    reasoning: str
    journey: Journey
    # True only for the submission that flipped the step to verified
    transitioned: bool = False
    reward_applied: bool = False
    already_verified: bool = False


@dataclass(frozen=True)
class StartResult:
    journey: Optional[Journey] = None
    redirect_to: Optional[str] = None

    @property
    def created(self) -> bool:
        return self.journey is not None


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def can_attempt(journey: Journey, step_index: int) -> bool:
    return 0 <= step_index <= journey.current_step_index


def progress_percentage(journey: Journey) -> float:
    if not journey.steps:
        return 0.0
    return journey.current_step_index / len(journey.steps) * 100


def session_totals(journey: Journey) -> tuple[int, int]:
    """Display-only (xp, eco) for the journey screen; independent of the ledger."""
    count = journey.verified_count
    return count * SESSION_XP_PER_STEP, count * SESSION_ECO_PER_STEP


def reward_key(journey: Journey, step_id: str) -> str:
    return f"{journey.id}:{step_id}:{journey.reset_count}"


def find_active_journey(journeys: Iterable[Journey], crop_id: str) -> Optional[Journey]:
    for journey in journeys:
        if journey.crop_id == crop_id and journey.status == JourneyStatus.active:
            return journey
    return None


def new_journey(crop: CropDefinition, now: datetime) -> Journey:
    return Journey(
        id=new_journey_id(),
        crop_id=crop.id,
        crop_name=crop.name,
        start_date=now,
        status=JourneyStatus.active,
        current_step_index=0,
        steps=[JourneyStepState(step_id=step.id) for step in crop.workflow],
        health_score=INITIAL_HEALTH_SCORE,
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class ProgressionEngine:
    def __init__(
        self,
        store: JourneyStore,
        ledger: RewardLedger,
        verifier: ProofVerifier,
        catalog: Sequence[CropDefinition] = CULTIVATION_LIBRARY,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.store = store
        self.ledger = ledger
        self.verifier = verifier
        self.catalog = catalog
        self.clock = clock

    # -- lookups -------------------------------------------------------------

    def resolve_step(self, journey: Journey, step_index: int) -> WorkflowStep:
        """Catalog step behind journey.steps[step_index]; NotFoundError if they disagree."""
        crop = find_crop(self.catalog, journey.crop_id)
        step = find_step(crop, step_index)
        self._check_step_matches(journey, step_index, step)
        return step

    @staticmethod
    def _check_step_matches(journey: Journey, step_index: int, step: WorkflowStep):
        if step_index < 0 or step_index >= len(journey.steps):
            raise NotFoundError(f"journey '{journey.id}' has no step {step_index}")
        if journey.steps[step_index].step_id != step.id:
            raise NotFoundError(
                f"journey '{journey.id}' step {step_index} is '{journey.steps[step_index].step_id}', "
                f"catalog has '{step.id}'"
            )

    # -- operations ----------------------------------------------------------

    def start_journey(self, crop: CropDefinition, existing_journeys: Iterable[Journey]) -> StartResult:
        active = find_active_journey(existing_journeys, crop.id)
        if active is not None:
            logger.info("[JOURNEY] user=%s crop=%s already active as %s", self.store.user_id, crop.id, active.id)
            return StartResult(redirect_to=active.id)

        journey = new_journey(crop, self.clock())
        self.store.replace(journey)
        logger.info("[JOURNEY] user=%s started %s crop=%s steps=%d",
                    self.store.user_id, journey.id, crop.id, len(journey.steps))
        return StartResult(journey=journey)

    async def submit_proof(
        self,
        journey: Journey,
        step_index: int,
        step: WorkflowStep,
        proof_image: str,
    ) -> ProofResult:
        self._check_step_matches(journey, step_index, step)
        if not can_attempt(journey, step_index):
            raise StepLockedError(step_index, journey.current_step_index)
        if journey.status == JourneyStatus.failed:
            raise JourneyError(f"journey '{journey.id}' has failed and accepts no proofs")
        if not proof_image:
            raise ValueError("proof image is empty")

        state = journey.steps[step_index]
        if state.verified:
            # Duplicate event for a finished step: nothing moves, nothing is paid
            return ProofResult(
                verified=True,
                reasoning=state.ai_feedback or "",
                journey=journey,
                already_verified=True,
            )

        try:
            verdict = await self.verifier.verify(step.title, step.description, proof_image)
        except Exception as e:
            logger.warning("[JOURNEY] %s step=%d verifier failed: %r", journey.id, step_index, e)
            return ProofResult(verified=False, reasoning=SENSOR_FAILURE_REASONING, journey=journey)

        # Session I/O is blocking; keep it off the event loop
        return await run_in_threadpool(
            self.record_verdict, journey, step_index, step, proof_image, verdict
        )

    def record_verdict(
        self,
        journey: Journey,
        step_index: int,
        step: WorkflowStep,
        proof_image: str,
        verdict: Verdict,
    ) -> ProofResult:
        """Persist a verifier answer. A verified step and its reward commit together."""
        state = journey.steps[step_index]
        updated = journey.copy()
        if not verdict.verified:
            updated.steps[step_index] = JourneyStepState(
                step_id=state.step_id,
                proof_image_url=proof_image,
                ai_feedback=verdict.reasoning,
            )
            self.store.replace(updated)
            logger.info("[JOURNEY] %s step=%d rejected", journey.id, step_index)
            return ProofResult(verified=False, reasoning=verdict.reasoning, journey=updated)

        updated.steps[step_index] = JourneyStepState(
            step_id=state.step_id,
            verified=True,
            verified_at=self.clock(),
            proof_image_url=proof_image,
            ai_feedback=verdict.reasoning,
        )
        is_last_step = step_index == len(updated.steps) - 1
        next_index = step_index if is_last_step else step_index + 1
        updated.current_step_index = max(journey.current_step_index, next_index)
        updated.status = JourneyStatus.completed if is_last_step else JourneyStatus.active

        self.store.replace(updated, commit=False)
        reward_applied = self.ledger.apply(
            step.points, step.eco_points, reward_key(updated, step.id), commit=False
        )
        self.store.commit()
        logger.info("[JOURNEY] %s step=%d verified cursor=%d status=%s reward_applied=%s",
                    journey.id, step_index, updated.current_step_index,
                    updated.status.value, reward_applied)

        return ProofResult(
            verified=True,
            reasoning=verdict.reasoning,
            journey=updated,
            transitioned=True,
            reward_applied=reward_applied,
        )

    def reset_journey(self, journey: Journey) -> Journey:
        """Clear progress; ledger totals are left as they are."""
        other = find_active_journey(
            (j for j in self.store.load_all() if j.id != journey.id), journey.crop_id
        )
        if other is not None:
            raise JourneyError(
                f"journey '{other.id}' is already active for crop '{journey.crop_id}'"
            )

        reset = journey.copy(
            steps=[s.cleared() for s in journey.steps],
            current_step_index=0,
            status=JourneyStatus.active,
            reset_count=journey.reset_count + 1,
        )
        self.store.replace(reset)
        logger.info("[JOURNEY] %s reset (reset_count=%d)", journey.id, reset.reset_count)
        return reset
