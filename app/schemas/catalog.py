from pydantic import BaseModel, ConfigDict, Field


class CatalogItemCreate(BaseModel):
    name: str = Field(min_length=1)


class CatalogItemRead(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
