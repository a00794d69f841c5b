# app/services/session_store.py
"""
Server-side session store.

Maps opaque random session ids (the only thing the cookie carries) to a payload
dict. Every entry lives for a fixed wall-clock TTL. Expired entries are dropped
when read and swept in bulk at most once per check period, during normal calls;
there is no background task.
"""

import secrets
import time
from typing import Callable, Optional

from app.utils.logger import get_logger

logger = get_logger(__name__)


class SessionStore:
    def __init__(self, ttl_seconds: int, check_period_seconds: int, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self.check_period_seconds = check_period_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, dict]] = {}
        self._last_sweep = clock()

    def create(self, payload: dict) -> str:
        self._maybe_sweep()
        session_id = secrets.token_urlsafe(32)
        self._entries[session_id] = (self._clock() + self.ttl_seconds, dict(payload))
        return session_id

    def get(self, session_id: Optional[str]) -> Optional[dict]:
        self._maybe_sweep()
        if not session_id:
            return None
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        expires_at, payload = entry
        if expires_at <= self._clock():
            del self._entries[session_id]
            return None
        return payload

    def destroy(self, session_id: Optional[str]) -> bool:
        if not session_id:
            return False
        return self._entries.pop(session_id, None) is not None

    def sweep(self) -> int:
        """Remove every expired entry. Returns how many were removed."""
        now = self._clock()
        expired = [sid for sid, (expires_at, _) in list(self._entries.items()) if expires_at <= now]
        for sid in expired:
            self._entries.pop(sid, None)
        self._last_sweep = now
        if expired:
            logger.info(f"Pruned {len(expired)} expired session(s)")
        return len(expired)

    def _maybe_sweep(self):
        if self._clock() - self._last_sweep >= self.check_period_seconds:
            self.sweep()

    def __len__(self):
        return len(self._entries)
