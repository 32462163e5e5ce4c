# app/core/security.py
from __future__ import annotations

import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from app.core.config import settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
SESSION_TOKEN_TYPE = "admin_session"


# ---- Shared-secret gate ----

def authorize(credential: Optional[str], secret: Optional[str] = None) -> bool:
    """
    True only when credential is exactly the configured admin secret.
    Missing or empty credentials are never accepted, whatever the secret is.
    """
    expected = settings.ADMIN_PASSWORD if secret is None else secret
    if not credential or not expected:
        return False
    # constant-time compare; still exact string equality
    return hmac.compare_digest(credential.encode("utf-8"), expected.encode("utf-8"))


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extract the credential from an 'Authorization: Bearer <x>' header value.
    Returns None if the header is absent or uses another scheme.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):]


# ---- Session tokens (JWT) ----

class AdminAuthenticator:
    """
    Exchanges the admin password for short-lived signed session tokens,
    so operator clients don't have to keep the raw secret around.
    """

    def __init__(
        self,
        password: Optional[str] = None,
        signing_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
    ):
        self.password = settings.ADMIN_PASSWORD if password is None else password
        self.signing_key = signing_key or settings.SECRET_KEY or self.password
        self.algorithm = algorithm or settings.JWT_ALGO
        self.expire_minutes = expire_minutes or settings.ADMIN_SESSION_EXPIRE_MIN

    def issue_session(self, password: Optional[str]) -> tuple[str, datetime]:
        """
        Return (token, expires_at). Raises ValueError when the password is wrong.
        """
        if not authorize(password, self.password):
            raise ValueError("Invalid admin credentials")

        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(minutes=self.expire_minutes)
        payload = {
            "sub": "admin",
            "type": SESSION_TOKEN_TYPE,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self.signing_key, algorithm=self.algorithm)
        return token, expires_at

    def verify_session(self, token: Optional[str]) -> bool:
        if not token:
            return False
        try:
            payload = jwt.decode(token, self.signing_key, algorithms=[self.algorithm])
        except JWTError:
            return False
        return payload.get("type") == SESSION_TOKEN_TYPE and payload.get("sub") == "admin"

    def check(self, credential: Optional[str]) -> bool:
        """Accept either the raw shared secret or a valid session token."""
        return authorize(credential, self.password) or self.verify_session(credential)
