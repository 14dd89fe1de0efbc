from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS
from ..core.enums import Role
from .model import Principal

logger = logging.getLogger(__name__)

JWT_ALGO = "HS256"


class TokenService:
    """Issue and verify signed, time-limited identity tokens.

    There is no revocation list: a token is valid while its signature matches
    and its ``exp`` lies in the future.
    """

    def __init__(self, secret: str, *, ttl: timedelta = timedelta(hours=DEFAULT_TOKEN_TTL_HOURS)):
        self._secret = secret
        self._ttl = ttl

    def issue(self, principal: Principal, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "id": int(principal.id),
            "email": principal.email,
            "role": principal.role.value,
            "name": principal.name,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGO)

    def verify(self, token: str) -> Optional[Principal]:
        """Return the Principal, or None for any malformed, forged or expired token."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGO],
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError as e:
            logger.debug("Token verification failed: %s", e)
            return None

        try:
            return Principal(
                id=int(payload["id"]),
                email=str(payload["email"]),
                role=Role(payload["role"]),
                name=str(payload["name"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.debug("Token payload rejected: %s", e)
            return None
