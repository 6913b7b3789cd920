from datetime import datetime
from typing import List

from pydantic import Field, field_validator

from app.core.dates import ensure_utc
from app.schemas.common import CamelModel, CamelReadModel


class OrderLine(CamelModel):
    item_name: str
    quantity: float
    price: float


class OrderCreate(CamelModel):
    items: List[OrderLine] = Field(default_factory=list)
    total_amount: float


class OrderRead(CamelReadModel):
    id: int
    items: List[OrderLine]
    total_amount: float
    date: datetime

    @field_validator("date")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)
