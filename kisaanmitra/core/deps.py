from datetime import datetime, timezone

from fastapi import Request, Depends, HTTPException
from sqlalchemy.orm import Session

from kisaanmitra.db.session import get_db
from kisaanmitra.auth.models import User
from kisaanmitra.core.security import decode_access_token


def _extract_token(request: Request):
    # Cookie first (browser), then Authorization header (mobile / API clients)
    token = request.cookies.get("access_token")
    if not token:
        token = request.headers.get("authorization")
    if not token:
        return None
    if token.lower().startswith("bearer "):
        token = token[7:].strip()
    return token or None


def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> User:
    token = _extract_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    payload = decode_access_token(token)
    if not payload:
        raise HTTPException(status_code=401, detail="Invalid token")

    username = payload.get("sub")
    if not username:
        raise HTTPException(status_code=401, detail="Invalid token payload")

    user = db.query(User).filter(User.username == username).first()
    if not user:
        print(f"[AUTH] reject reason=user_not_found username={username} path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="User not found")

    try:
        user.last_active = datetime.now(timezone.utc)
        db.commit()
    except Exception:
        db.rollback()

    return user
