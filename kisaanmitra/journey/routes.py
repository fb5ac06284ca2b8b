import base64
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from kisaanmitra.ai.summary import generate_journey_summary
from kisaanmitra.ai.verifier import OpenAIProofVerifier, ProofVerifier
from kisaanmitra.auth.achievements import (
    check_eco_champion,
    check_first_harvest,
    check_first_verification,
)
from kisaanmitra.auth.models import User
from kisaanmitra.catalog.library import CULTIVATION_LIBRARY
from kisaanmitra.catalog.lookup import find_crop
from kisaanmitra.core.deps import get_current_user
from kisaanmitra.core.errors import (
    JourneyError,
    NotFoundError,
    PersistenceError,
    StepLockedError,
)
from kisaanmitra.db.session import get_db
from kisaanmitra.journey.engine import (
    ProgressionEngine,
    ProofResult,
    can_attempt,
    progress_percentage,
    session_totals,
)
from kisaanmitra.journey.models import Journey, JourneyStatus
from kisaanmitra.journey.store import JourneyStore
from kisaanmitra.rewards.ledger import RewardLedger

router = APIRouter(prefix="/journeys", tags=["journeys"])


def get_verifier() -> ProofVerifier:
    return OpenAIProofVerifier()


def get_engine(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    verifier: ProofVerifier = Depends(get_verifier),
) -> ProgressionEngine:
    return ProgressionEngine(
        store=JourneyStore(db, user.id),
        ledger=RewardLedger(db, user.id),
        verifier=verifier,
    )


def _http_error(e: Exception) -> HTTPException:
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, StepLockedError):
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, PersistenceError):
        return HTTPException(status_code=503, detail="Progress could not be saved, please retry.")
    if isinstance(e, JourneyError):
        return HTTPException(status_code=409, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


def serialize_journey(journey: Journey, include_steps: bool = True) -> dict:
    xp, eco = session_totals(journey)
    data = {
        "id": journey.id,
        "crop_id": journey.crop_id,
        "crop_name": journey.crop_name,
        "start_date": journey.start_date.isoformat(),
        "status": journey.status.value,
        "current_step_index": journey.current_step_index,
        "health_score": journey.health_score,
        "reset_count": journey.reset_count,
        "progress_percentage": round(progress_percentage(journey)),
        "session_xp": xp,
        "session_eco": eco,
        "step_count": len(journey.steps),
    }
    if not include_steps:
        return data

    try:
        workflow = find_crop(CULTIVATION_LIBRARY, journey.crop_id).workflow
    except NotFoundError:
        workflow = ()

    steps = []
    for i, state in enumerate(journey.steps):
        step = workflow[i] if i < len(workflow) and workflow[i].id == state.step_id else None
        steps.append({
            "index": i,
            "step_id": state.step_id,
            "title": step.title if step else None,
            "points": step.points if step else None,
            "eco_points": step.eco_points if step else None,
            "locked": not can_attempt(journey, i),
            "verified": state.verified,
            "verified_at": state.verified_at.isoformat() if state.verified_at else None,
            "proof_image_url": state.proof_image_url,
            "ai_feedback": state.ai_feedback,
        })
    data["steps"] = steps
    return data


# ======================================================
# LIST / DETAIL
# ======================================================
@router.get("")
def list_journeys(engine: ProgressionEngine = Depends(get_engine)):
    journeys = engine.store.load_all()
    return {"journeys": [serialize_journey(j, include_steps=False) for j in journeys]}


@router.get("/preview/{crop_id}")
async def preview_journey(
    crop_id: str,
    user: User = Depends(get_current_user),
):
    """Summary text for the confirmation dialog shown before starting a crop."""
    try:
        crop = find_crop(CULTIVATION_LIBRARY, crop_id)
    except NotFoundError as e:
        raise _http_error(e)
    summary = await generate_journey_summary(crop)
    return {"crop": crop.to_dict(include_workflow=False), "summary": summary}


@router.get("/{journey_id}")
def get_journey(journey_id: str, engine: ProgressionEngine = Depends(get_engine)):
    try:
        journey = engine.store.get(journey_id)
    except NotFoundError as e:
        raise _http_error(e)
    return serialize_journey(journey)


# ======================================================
# START
# ======================================================
@router.post("/start")
def start_journey(
    crop_id: str = Form(...),
    engine: ProgressionEngine = Depends(get_engine),
):
    try:
        crop = find_crop(CULTIVATION_LIBRARY, crop_id)
        result = engine.start_journey(crop, engine.store.load_all())
    except (NotFoundError, PersistenceError) as e:
        raise _http_error(e)

    if not result.created:
        # Existing active journey for this crop: send the client there instead
        return {"created": False, "redirect_to": result.redirect_to}

    return JSONResponse(
        status_code=201,
        content={"created": True, "journey": serialize_journey(result.journey)},
    )


# ======================================================
# SUBMIT PROOF
# ======================================================
def _load_step(engine: ProgressionEngine, journey_id: str, step_index: int):
    journey = engine.store.get(journey_id)
    return journey, engine.resolve_step(journey, step_index)


def _award_badges(db: Session, user_id: int, engine: ProgressionEngine, result: ProofResult):
    """Badge checks after a proof; returns the ledger totals for the response."""
    if result.reward_applied:
        check_first_verification(db, user_id)
        check_eco_champion(db, user_id, engine.ledger.totals()[1])
    if result.transitioned and result.journey.status == JourneyStatus.completed:
        check_first_harvest(db, user_id)
    return engine.ledger.totals()


@router.post("/{journey_id}/steps/{step_index}/proof")
async def submit_proof(
    journey_id: str,
    step_index: int,
    proof: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    engine: ProgressionEngine = Depends(get_engine),
):
    content = await proof.read() if proof is not None else b""
    if not content:
        raise HTTPException(status_code=400, detail="Proof image is empty")
    mime_type = (proof.content_type or "image/jpeg") if proof is not None else "image/jpeg"
    proof_image = f"data:{mime_type};base64,{base64.b64encode(content).decode('ascii')}"

    try:
        journey, step = await run_in_threadpool(_load_step, engine, journey_id, step_index)
        result = await engine.submit_proof(journey, step_index, step, proof_image)
    except (JourneyError, ValueError) as e:
        raise _http_error(e)

    points, eco_points = await run_in_threadpool(
        _award_badges, db, engine.store.user_id, engine, result
    )
    return {
        "verified": result.verified,
        "reasoning": result.reasoning,
        "already_verified": result.already_verified,
        "reward_applied": result.reward_applied,
        "points": points,
        "eco_points": eco_points,
        "journey": serialize_journey(result.journey),
    }


# ======================================================
# RESET
# ======================================================
@router.post("/{journey_id}/reset")
def reset_journey(journey_id: str, engine: ProgressionEngine = Depends(get_engine)):
    try:
        journey = engine.store.get(journey_id)
        reset = engine.reset_journey(journey)
    except JourneyError as e:
        raise _http_error(e)
    return serialize_journey(reset)
