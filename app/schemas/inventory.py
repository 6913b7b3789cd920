from datetime import datetime

from pydantic import field_validator

from app.core.dates import ensure_utc
from app.schemas.common import CamelModel, CamelReadModel


class InventoryCreate(CamelModel):
    item_name: str
    stock_taken: float
    total_stock: float


class InventoryUpdate(CamelModel):
    stock_taken: float
    total_stock: float


class InventoryRead(CamelReadModel):
    id: int
    item_name: str
    key: int
    stock_taken: float
    stock_remaining: float
    total_stock: float
    date_time: datetime

    @field_validator("date_time")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)
