# app/services/auth_service.py
"""
Credential helpers for admin login.

- Password hashing with passlib/bcrypt.
- Signed, expiring access tokens (JWT, HS256) carrying the user id.

Tokens are only ever stored inside a server-side session (see session_store);
nothing here knows about cookies or HTTP.
"""

from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import settings
from app.models import User, UserId
from app.services.storage_service import Storage
from app.utils.logger import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)
MAX_BCRYPT_BYTES = 72  # bcrypt limit


class InvalidToken(Exception):
    """Token is malformed, has a bad signature, or has expired."""


def hash_password(password: str) -> str:
    return pwd_context.hash(_truncate(password))


def verify_password(raw: str, hashed: str) -> bool:
    return pwd_context.verify(_truncate(raw), hashed)


def _truncate(password: str) -> str:
    b = password.encode("utf-8")
    if len(b) <= MAX_BCRYPT_BYTES:
        return password
    return b[:MAX_BCRYPT_BYTES].decode("utf-8", errors="ignore")


def create_access_token(user_id: UserId, secret: str = None, ttl_seconds: int = None) -> str:
    payload = {
        "sub": str(user_id),
        "exp": datetime.utcnow() + timedelta(seconds=ttl_seconds or settings.TOKEN_TTL_SECONDS),
    }
    return jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, secret: str = None) -> UserId:
    """Verify signature and expiry and return the user id. Raises InvalidToken."""
    try:
        payload = jwt.decode(token, secret or settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        return UserId(int(payload["sub"]))
    except (JWTError, KeyError, ValueError) as e:
        raise InvalidToken(str(e)) from e


def authenticate(storage: Storage, email: str, password: str) -> Optional[User]:
    """Return the user for valid credentials, None otherwise."""
    user = storage.get_user_by_email(email)
    if user is None or not verify_password(password, user.password):
        logger.warning(f"Failed login attempt for {email}")
        return None
    logger.info(f"User {user.username} logged in")
    return user
