import importlib

from app.models.catalog_item import CatalogItem
from app.models.counter import Counter
from app.models.inventory_item import InventoryItem
from app.models.order import Order
from app.models.user import User


def import_all_models() -> None:
    for module_name in (
        "app.models.catalog_item",
        "app.models.counter",
        "app.models.inventory_item",
        "app.models.order",
        "app.models.user",
    ):
        importlib.import_module(module_name)


__all__ = [
    "CatalogItem",
    "Counter",
    "InventoryItem",
    "Order",
    "User",
    "import_all_models",
]
