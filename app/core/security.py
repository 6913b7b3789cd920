from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import jwt

from app.config import get_settings
from app.core.errors import InvalidToken, Unauthorized

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    user_id: int
    issued_at: datetime
    expires_at: datetime


@lru_cache
def _signing_secret() -> str:
    settings = get_settings()
    if settings.JWT_SECRET:
        return settings.JWT_SECRET
    logger.warning(
        "JWT_SECRET is not configured; using a per-process secret. "
        "Tokens will not survive a restart."
    )
    return secrets.token_urlsafe(32)


def _get_bearer_token(authorization: Optional[str]) -> str:
    if not authorization or not authorization.strip():
        raise Unauthorized()
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    raise InvalidToken()


def issue_token(user_id: int, *, now: datetime | None = None) -> str:
    settings = get_settings()
    if now is None:
        now = datetime.now(timezone.utc)
    payload = {
        "id": str(user_id),
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRES_MINUTES),
    }
    if settings.JWT_ISSUER:
        payload["iss"] = settings.JWT_ISSUER
    if settings.JWT_AUDIENCE:
        payload["aud"] = settings.JWT_AUDIENCE
    return jwt.encode(payload, _signing_secret(), algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Identity:
    settings = get_settings()
    options = {
        "verify_aud": bool(settings.JWT_AUDIENCE),
        "require": ["exp", "iat"],
    }
    try:
        payload = jwt.decode(
            token,
            _signing_secret(),
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options=options,
        )
        user_id = int(payload["id"])
    except (jwt.PyJWTError, KeyError, TypeError, ValueError) as exc:
        raise InvalidToken() from exc

    return Identity(
        user_id=user_id,
        issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


def authenticate_request(authorization: Optional[str]) -> Identity:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header.

    A missing header raises ``Unauthorized``; anything else that fails to yield
    a valid, unexpired token raises ``InvalidToken``.
    """
    return decode_token(_get_bearer_token(authorization))


__all__ = ["Identity", "authenticate_request", "decode_token", "issue_token"]
