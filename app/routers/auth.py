from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.services.auth_service import login, register_user

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_class=PlainTextResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    register_user(db, payload)
    return "User registered"


@router.post("/login", response_model=TokenResponse)
def login_submit(payload: LoginRequest, db: Session = Depends(get_db)):
    return TokenResponse(token=login(db, payload))


@router.post("/logout", response_class=PlainTextResponse)
def logout():
    # Tokens are stateless; the client just discards its copy.
    return "User logged out"


__all__ = ["router"]
