from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.dependencies import get_db, require_user
from app.schemas.order import OrderCreate, OrderRead
from app.services.order_service import create_order, list_orders

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.post("/create", response_class=PlainTextResponse)
def create(
    payload: OrderCreate,
    db: Session = Depends(get_db),
    _auth=Depends(require_user),
):
    create_order(db, payload)
    return "Order created"


@router.get("/list", response_model=List[OrderRead])
def list_all(db: Session = Depends(get_db), _auth=Depends(require_user)):
    return list_orders(db)


__all__ = ["router"]
