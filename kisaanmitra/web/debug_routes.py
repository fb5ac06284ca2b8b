from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pathlib import Path

from kisaanmitra.ai.openai_client import key_present, key_fingerprint, get_last_error
from kisaanmitra.db.session import get_db
from kisaanmitra.auth.models import User
from kisaanmitra.db.base import engine
from kisaanmitra.journey.store import JourneyStore

router = APIRouter(prefix="/debug", tags=["debug"])


@router.get("/users")
def debug_users(db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.id.asc()).all()
    return [
        {
            "id": u.id,
            "username": u.username,
            "role": u.role,
            "points": u.points,
            "eco_points": u.eco_points,
            "journeys": len(JourneyStore(db, u.id).load_all()),
            "created_at": str(getattr(u, "created_at", "")),
        }
        for u in users
    ]


@router.get("/ai-status")
def ai_status():
    return {
        "key_present": key_present(),
        "key_fingerprint": key_fingerprint(),
        "last_error": get_last_error(),
    }


@router.get("/diagnostics/db")
def db_diagnostics():
    """
    Lightweight DB diagnostics for debugging deployments.

    This endpoint is meant to be exposed only when ENABLE_DEBUG_ROUTES=1.
    """
    url = engine.url
    backend = url.get_backend_name()

    info = {
        "backend": backend,
        "url": url.render_as_string(hide_password=True),
    }

    if backend == "sqlite" and url.database:
        db_path = Path(url.database).resolve()
        exists = db_path.exists()
        info.update(
            {
                "sqlite_path": str(db_path),
                "sqlite_exists": exists,
                "sqlite_size_bytes": db_path.stat().st_size if exists else 0,
            }
        )
    else:
        info.update({"database": url.database, "host": url.host, "port": url.port})

    return info
