from fastapi import APIRouter, Depends, HTTPException, Form
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from kisaanmitra.db.session import get_db
from kisaanmitra.auth.models import User
from kisaanmitra.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    hash_password,
    verify_password,
)

router = APIRouter(prefix="/auth", tags=["auth"])

ROLES = ("Farmer", "Learner", "Expert")


# =========================
# SIGNUP
# =========================
@router.post("/signup", status_code=201)
def signup(
    email: str = Form(...),
    username: str = Form(...),
    password: str = Form(...),
    name: str = Form(""),
    role: str = Form("Farmer"),
    location: str = Form(""),
    soil_type: str = Form(""),
    db: Session = Depends(get_db),
):
    if role not in ROLES:
        raise HTTPException(status_code=400, detail=f"role must be one of {', '.join(ROLES)}")

    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail="Email already registered")

    if db.query(User).filter(User.username == username).first():
        raise HTTPException(status_code=400, detail="Username already taken")

    user = User(
        email=email,
        username=username,
        name=name or username,
        password_hash=hash_password(password),
        role=role,
        location=location,
        soil_type=soil_type,
    )

    db.add(user)
    db.commit()
    db.refresh(user)
    print(f"[AUTH] signup user={user.id} role={user.role}", flush=True)

    return {"message": "Signup successful", "user_id": user.id}


# =========================
# LOGIN
# =========================
@router.post("/login")
def login(
    email_or_username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    # Try to find user by email first, then by username
    user = db.query(User).filter(User.email == email_or_username).first()
    if not user:
        user = db.query(User).filter(User.username == email_or_username).first()

    if not user or not verify_password(password, user.password_hash):
        print("[AUTH] Invalid credentials for:", email_or_username, flush=True)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token(user.username)
    print("[AUTH] Login successful for:", user.username, flush=True)

    response = JSONResponse({"access_token": token, "token_type": "bearer"})
    response.set_cookie(
        "access_token",
        token,
        httponly=True,
        samesite="lax",
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    return response
