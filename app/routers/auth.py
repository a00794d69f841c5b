# app/routers/auth.py
"""Admin login / logout / current user. The session cookie is the only auth carrier."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from app.config import Settings
from app.dependencies import get_sessions, get_settings, get_storage, require_admin
from app.models import User
from app.schemas.user import LoginRequest, LoginResponse, UserEnvelope
from app.services.auth_service import authenticate, create_access_token
from app.services.session_store import SessionStore
from app.services.storage_service import Storage

router = APIRouter()


@router.post("/auth/login", response_model=LoginResponse, summary="Sign in as admin")
def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    cfg: Settings = Depends(get_settings),
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions),
):
    user = authenticate(storage, body.email, body.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(user.id, secret=cfg.JWT_SECRET, ttl_seconds=cfg.TOKEN_TTL_SECONDS)

    # Never reuse a session id that existed before login
    sessions.destroy(request.cookies.get(cfg.SESSION_COOKIE_NAME))
    session_id = sessions.create({"token": token})
    response.set_cookie(
        cfg.SESSION_COOKIE_NAME,
        session_id,
        max_age=cfg.SESSION_TTL_SECONDS,
        httponly=True,
        samesite="lax",
        secure=cfg.COOKIE_SECURE,
    )
    return {"message": "Login successful", "user": user}


@router.post("/auth/logout", summary="Destroy the current session")
def logout(
    request: Request,
    response: Response,
    cfg: Settings = Depends(get_settings),
    sessions: SessionStore = Depends(get_sessions),
):
    sessions.destroy(request.cookies.get(cfg.SESSION_COOKIE_NAME))
    response.delete_cookie(cfg.SESSION_COOKIE_NAME, httponly=True, samesite="lax", secure=cfg.COOKIE_SECURE)
    return {"message": "Logout successful"}


@router.get("/auth/me", response_model=UserEnvelope, summary="Current admin")
def me(user: User = Depends(require_admin)):
    return {"user": user}
