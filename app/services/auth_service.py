import hashlib
import logging
import secrets
from datetime import datetime
from functools import lru_cache

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import InvalidCredentials
from app.core.passwords import hash_password, verify_password
from app.core.security import issue_token
from app.models.user import User
from app.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


def _email_fingerprint(email: str) -> str:
    normalized = (email or "").strip().lower().encode("utf-8")
    return hashlib.sha256(normalized).hexdigest()[:12]


@lru_cache
def _dummy_password_hash() -> str:
    # Unknown emails are checked against this so both failures cost the same.
    return hash_password(secrets.token_hex(16))


def register_user(db: Session, payload: RegisterRequest) -> User:
    user = User(
        name=payload.name,
        email=payload.email,
        password_hash=hash_password(payload.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User registered: id=%s", user.id)
    return user


def login(db: Session, payload: LoginRequest, *, now: datetime | None = None) -> str:
    user = db.execute(select(User).where(User.email == payload.email)).scalars().first()
    if user is None:
        verify_password(payload.password, _dummy_password_hash())
        valid = False
    else:
        valid = verify_password(payload.password, user.password_hash)
    if not valid:
        logger.info("Login failed: email_fingerprint=%s", _email_fingerprint(payload.email))
        raise InvalidCredentials()

    token = issue_token(user.id, now=now)
    logger.info("User logged in: id=%s", user.id)
    return token


__all__ = ["login", "register_user"]
