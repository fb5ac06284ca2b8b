"""
Badge system.
Awards: first_verification, first_harvest, eco_champion
Each awarded at most once (UNIQUE user_id+key).
"""
from sqlalchemy.orm import Session
from kisaanmitra.rewards.models import UserBadge

ECO_CHAMPION_THRESHOLD = 1000

# Badge definitions for display
BADGES = {
    "first_verification": {"icon": "BadgeCheck", "label": "First Proof",    "desc": "Had your first cultivation step verified"},
    "first_harvest":      {"icon": "Wheat",      "label": "First Harvest",  "desc": "Completed a full cultivation journey"},
    "eco_champion":       {"icon": "Recycle",    "label": "Eco Champion",   "desc": f"Earned {ECO_CHAMPION_THRESHOLD} eco points"},
}


def _award(db: Session, user_id: int, key: str) -> bool:
    """Try to award a badge. Returns True if newly awarded, False if already had."""
    existing = db.query(UserBadge).filter_by(user_id=user_id, key=key).first()
    if existing:
        return False
    db.add(UserBadge(user_id=user_id, key=key))
    db.commit()
    print(f"[BADGE] user={user_id} earned '{key}'", flush=True)
    return True


def check_first_verification(db: Session, user_id: int):
    """Award after any verified step."""
    _award(db, user_id, "first_verification")


def check_first_harvest(db: Session, user_id: int):
    """Award when a journey reaches completed."""
    _award(db, user_id, "first_harvest")


def check_eco_champion(db: Session, user_id: int, eco_points: int):
    if eco_points >= ECO_CHAMPION_THRESHOLD:
        _award(db, user_id, "eco_champion")


def get_user_badges(db: Session, user_id: int) -> list[dict]:
    """Return every badge with its earned flag."""
    rows = db.query(UserBadge).filter_by(user_id=user_id).all()
    earned_keys = {r.key: r.earned_at for r in rows}
    result = []
    for key, meta in BADGES.items():
        badge = {"key": key, **meta, "earned": key in earned_keys}
        if key in earned_keys:
            badge["earned_at"] = str(earned_keys[key]) if earned_keys[key] else None
        result.append(badge)
    return result
