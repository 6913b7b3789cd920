from app.routers.auth import router as auth_router
from app.routers.dashboard import router as dashboard_router
from app.routers.health import router as health_router
from app.routers.inventory import router as inventory_router
from app.routers.items import router as items_router
from app.routers.orders import router as orders_router

__all__ = [
    "auth_router",
    "dashboard_router",
    "health_router",
    "inventory_router",
    "items_router",
    "orders_router",
]
