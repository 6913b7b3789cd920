import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.dates import explicit_range, time_frame_start, to_utc
from app.core.errors import NotFound, StoreFailure
from app.models.inventory_item import InventoryItem
from app.schemas.inventory import InventoryCreate, InventoryUpdate
from app.services.sequence_service import next_sequence_value

logger = logging.getLogger(__name__)

INVENTORY_KEY_SEQUENCE = "inventory_key"


def _max_inventory_key(db: Session) -> int:
    return db.execute(select(func.max(InventoryItem.key))).scalar() or 0


def add_inventory_item(db: Session, payload: InventoryCreate) -> InventoryItem:
    item = InventoryItem(
        item_name=payload.item_name,
        key=next_sequence_value(db, INVENTORY_KEY_SEQUENCE, seed=_max_inventory_key),
    )
    item.apply_stock(payload.stock_taken, payload.total_stock)
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Inventory item added: id=%s key=%s", item.id, item.key)
    return item


def _list_between(db: Session, start: datetime, end: datetime) -> list[InventoryItem]:
    return list(
        db.execute(
            select(InventoryItem)
            .where(InventoryItem.date_time >= start, InventoryItem.date_time < end)
            .order_by(InventoryItem.id)
        ).scalars()
    )


def list_by_time_frame(db: Session, time_frame: str, *, now: datetime | None = None) -> list[InventoryItem]:
    if now is None:
        now = datetime.now()
    start = time_frame_start(time_frame, now=now)
    items = _list_between(db, start, to_utc(now))
    logger.info("Inventory list for %s: %d records", time_frame, len(items))
    return items


def list_by_range(db: Session, start_value, end_value) -> list[InventoryItem]:
    try:
        start, end = explicit_range(start_value, end_value)
    except ValueError as exc:
        raise StoreFailure("Invalid date range") from exc
    items = _list_between(db, start, end)
    logger.info("Inventory list from %s to %s: %d records", start_value, end_value, len(items))
    return items


def _get_or_404(db: Session, item_id: int) -> InventoryItem:
    item = db.get(InventoryItem, item_id)
    if item is None:
        raise NotFound("Inventory item not found")
    return item


def update_inventory_item(db: Session, item_id: int, payload: InventoryUpdate) -> InventoryItem:
    item = _get_or_404(db, item_id)
    item.apply_stock(payload.stock_taken, payload.total_stock)
    db.commit()
    db.refresh(item)
    logger.info(
        "Inventory updated: id=%s stock_taken=%s stock_remaining=%s total_stock=%s",
        item.id,
        item.stock_taken,
        item.stock_remaining,
        item.total_stock,
    )
    return item


def delete_inventory_item(db: Session, item_id: int) -> None:
    item = _get_or_404(db, item_id)
    db.delete(item)
    db.commit()
    logger.info("Inventory item deleted: id=%s", item_id)


__all__ = [
    "add_inventory_item",
    "delete_inventory_item",
    "list_by_range",
    "list_by_time_frame",
    "update_inventory_item",
]
