from app.schemas.common import CamelModel


class DashboardStats(CamelModel):
    inventory_count: int
    order_count: int
