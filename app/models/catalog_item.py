from sqlalchemy import Column, Integer, String

from app.database.base import Base


class CatalogItem(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)


__all__ = ["CatalogItem"]
