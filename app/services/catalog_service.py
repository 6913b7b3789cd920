import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateItem
from app.models.catalog_item import CatalogItem

logger = logging.getLogger(__name__)


def add_catalog_item(db: Session, name: str) -> CatalogItem:
    existing = db.execute(select(CatalogItem.id).where(CatalogItem.name == name)).first()
    if existing:
        raise DuplicateItem()

    item = CatalogItem(name=name)
    db.add(item)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateItem() from exc
    db.refresh(item)
    logger.info("Item name added: id=%s name=%s", item.id, item.name)
    return item


def list_catalog_items(db: Session) -> list[CatalogItem]:
    return list(db.execute(select(CatalogItem).order_by(CatalogItem.id)).scalars())


__all__ = ["add_catalog_item", "list_catalog_items"]
