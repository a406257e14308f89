# dubai_horizon/services/auth.py
"""Password hashing, sessions and password-reset tokens."""

import logging
import secrets
import time
from datetime import datetime
from functools import lru_cache
from typing import Dict, Optional

import bcrypt

from dubai_horizon.config import get_admin_email, get_reset_token_duration, get_session_duration

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        logger.error("Stored password hash is malformed")
        return False


def is_admin_email(email: Optional[str]) -> bool:
    return email is not None and email == get_admin_email()


class SessionStore:
    """Bearer-token sessions held in memory for the lifetime of the app."""

    def __init__(self, session_duration: Optional[int] = None, reset_duration: Optional[int] = None):
        self.session_duration = session_duration or get_session_duration()
        self.reset_duration = reset_duration or get_reset_token_duration()
        self._sessions = {}  # type: Dict[str, dict]
        self._reset_tokens = {}  # type: Dict[str, dict]

    def create_session(self, user_id: str) -> dict:
        """Create a new session and return it, token included."""
        token = secrets.token_urlsafe(32)
        session = {
            "token": token,
            "user_id": str(user_id),
            "created": time.time(),
            "expires": time.time() + self.session_duration,
        }
        self._sessions[token] = session
        return session

    def validate_session(self, token: Optional[str]) -> Optional[dict]:
        if not token:
            return None
        session = self._sessions.get(token)
        if not session:
            return None
        if time.time() > session["expires"]:
            del self._sessions[token]
            return None
        return session

    def destroy_session(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None

    def destroy_user_sessions(self, user_id: str):
        for token in [t for t, s in self._sessions.items() if s["user_id"] == str(user_id)]:
            del self._sessions[token]

    def issue_reset_token(self, user_id: str) -> str:
        token = secrets.token_urlsafe(32)
        self._reset_tokens[token] = {
            "user_id": str(user_id),
            "expires": time.time() + self.reset_duration,
        }
        return token

    def consume_reset_token(self, token: str) -> Optional[str]:
        """Return the user id for a valid token; tokens are single use."""
        entry = self._reset_tokens.pop(token, None)
        if not entry or time.time() > entry["expires"]:
            return None
        return entry["user_id"]


def expires_at(session: dict) -> datetime:
    return datetime.fromtimestamp(session["expires"])


@lru_cache
def get_session_store():
    return SessionStore()
