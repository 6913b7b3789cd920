from sqlalchemy import Column, Integer, String

from app.database.base import Base


class Counter(Base):
    """Named monotonic sequence, advanced with a single UPDATE per value."""

    __tablename__ = "counters"

    name = Column(String(40), primary_key=True)
    value = Column(Integer, nullable=False, default=0)


__all__ = ["Counter"]
