from typing import Optional

from fastapi import Header, Request

from app.core.security import Identity, authenticate_request
from app.database.session import get_db


def require_user(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Identity:
    identity = authenticate_request(authorization)
    request.state.user = identity
    return identity


__all__ = ["get_db", "require_user"]
