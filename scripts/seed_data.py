import argparse
import logging

from sqlalchemy import delete, select

from app.core.errors import DuplicateItem
from app.core.logging import setup_logging
from app.database import engine, init_schema, session_scope
from app.models.catalog_item import CatalogItem
from app.models.counter import Counter
from app.models.inventory_item import InventoryItem
from app.models.order import Order
from app.models.user import User
from app.schemas.auth import RegisterRequest
from app.schemas.inventory import InventoryCreate
from app.services.auth_service import register_user
from app.services.catalog_service import add_catalog_item
from app.services.inventory_service import add_inventory_item

logger = logging.getLogger(__name__)

CATALOG_NAMES = ("Rice", "Urad Dal", "Ghee", "Coconut", "Coffee Powder")


def parse_args():
    parser = argparse.ArgumentParser(description="Seed a demo user, catalog names and stock.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    parser.add_argument("--email", default="demo@restaurant.local")
    parser.add_argument("--password", default="demo")
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    init_schema(engine)

    with session_scope() as db:
        if args.reset:
            for model in (Order, InventoryItem, CatalogItem, Counter, User):
                db.execute(delete(model))
            db.commit()

        has_user = db.execute(select(User.id).where(User.email == args.email)).first()
        if has_user:
            logger.info("Seed user %s already exists", args.email)
        else:
            register_user(db, RegisterRequest(name="Demo", email=args.email, password=args.password))

        for name in CATALOG_NAMES:
            try:
                add_catalog_item(db, name)
            except DuplicateItem:
                continue

        if not db.execute(select(InventoryItem.id).limit(1)).first():
            for name in CATALOG_NAMES[:3]:
                add_inventory_item(db, InventoryCreate(itemName=name, stockTaken=0, totalStock=50))

    print("Seed completed.")


if __name__ == "__main__":
    main()
