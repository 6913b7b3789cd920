from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Index, Integer, String

from app.database.base import Base


class InventoryItem(Base):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True)
    item_name = Column(String, nullable=False)
    key = Column(Integer, nullable=False, unique=True)

    stock_taken = Column(Float, nullable=False)
    stock_remaining = Column(Float, nullable=False)
    total_stock = Column(Float, nullable=False)

    date_time = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("idx_inventory_date_time", "date_time"),
    )

    def apply_stock(self, stock_taken: float, total_stock: float) -> None:
        self.stock_taken = stock_taken
        self.total_stock = total_stock
        self.stock_remaining = total_stock - stock_taken


__all__ = ["InventoryItem"]
