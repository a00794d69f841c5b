# app/dependencies.py
"""
FastAPI dependencies: application-scoped objects from app.state, and the admin gate.
"""

from fastapi import Depends, HTTPException, Request, status

from app.config import Settings
from app.models import User
from app.services.auth_service import InvalidToken, decode_access_token
from app.services.session_store import SessionStore
from app.services.storage_service import Storage
from app.utils.logger import get_logger

logger = get_logger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def require_admin(
    request: Request,
    cfg: Settings = Depends(get_settings),
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions),
) -> User:
    """
    Resolve the signed-in admin from the session cookie.
    Missing session, bad/expired token, unknown user and non-admin user all
    produce the same 401 so callers cannot tell which check failed.
    """
    session = sessions.get(request.cookies.get(cfg.SESSION_COOKIE_NAME))
    token = session.get("token") if session else None
    if not token:
        raise _unauthorized()

    try:
        user_id = decode_access_token(token, secret=cfg.JWT_SECRET)
    except InvalidToken as e:
        logger.debug(f"Rejected session token: {e}")
        raise _unauthorized()

    user = storage.get_user(user_id)
    if user is None or not user.is_admin:
        raise _unauthorized()

    request.state.user = user
    return user
