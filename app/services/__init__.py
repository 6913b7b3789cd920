from app.services.auth_service import login, register_user
from app.services.catalog_service import add_catalog_item, list_catalog_items
from app.services.dashboard_service import dashboard_stats
from app.services.inventory_service import (
    add_inventory_item,
    delete_inventory_item,
    list_by_range,
    list_by_time_frame,
    update_inventory_item,
)
from app.services.order_service import create_order, list_orders

__all__ = [
    "add_catalog_item",
    "add_inventory_item",
    "create_order",
    "dashboard_stats",
    "delete_inventory_item",
    "list_by_range",
    "list_by_time_frame",
    "list_catalog_items",
    "list_orders",
    "login",
    "register_user",
    "update_inventory_item",
]
