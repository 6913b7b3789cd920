from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Float, Integer

from app.database.base import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    # [{"itemName": str, "quantity": float, "price": float}, ...]
    items = Column(JSON, nullable=False, default=list)
    total_amount = Column(Float, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))


__all__ = ["Order"]
