import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.order import Order
from app.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


def create_order(db: Session, payload: OrderCreate) -> Order:
    order = Order(
        items=[line.model_dump(by_alias=True) for line in payload.items],
        total_amount=payload.total_amount,
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info("Order created: id=%s lines=%d total=%s", order.id, len(order.items), order.total_amount)
    return order


def list_orders(db: Session) -> list[Order]:
    return list(db.execute(select(Order).order_by(Order.id)).scalars())


__all__ = ["create_order", "list_orders"]
