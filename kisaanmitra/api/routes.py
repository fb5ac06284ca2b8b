"""
API routes for the farmer profile and overall progress.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from kisaanmitra.auth.models import User
from kisaanmitra.auth.achievements import get_user_badges, check_eco_champion
from kisaanmitra.core.deps import get_current_user
from kisaanmitra.db.session import get_db
from kisaanmitra.journey.models import JourneyStatus
from kisaanmitra.journey.store import JourneyStore

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/me/progress")
def get_me_progress(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Return the profile, ledger totals, badges and journey counts for UI display.
    """
    # Badge may be due from grants made before the badge existed
    check_eco_champion(db, user.id, user.eco_points or 0)

    journeys = JourneyStore(db, user.id).load_all()
    counts = {status.value: 0 for status in JourneyStatus}
    for journey in journeys:
        counts[journey.status.value] += 1

    return {
        "username": user.username,
        "name": user.name,
        "role": user.role,
        "location": user.location,
        "soil_type": user.soil_type,
        "points": user.points or 0,
        "eco_points": user.eco_points or 0,
        "verified_steps": sum(j.verified_count for j in journeys),
        "journeys": counts,
        "badges": get_user_badges(db, user.id),
    }
