from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.inventory_item import InventoryItem
from app.models.order import Order


def dashboard_stats(db: Session) -> dict:
    # Two independent counts; no snapshot is shared between them.
    inventory_count = db.execute(select(func.count()).select_from(InventoryItem)).scalar_one()
    order_count = db.execute(select(func.count()).select_from(Order)).scalar_one()
    return {"inventory_count": inventory_count, "order_count": order_count}


__all__ = ["dashboard_stats"]
