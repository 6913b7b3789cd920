from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.dependencies import get_db, require_user
from app.schemas.catalog import CatalogItemCreate, CatalogItemRead
from app.services.catalog_service import add_catalog_item, list_catalog_items

router = APIRouter(prefix="/api/items", tags=["Items"])


@router.post("/add", response_class=PlainTextResponse)
def add_name(
    payload: CatalogItemCreate,
    db: Session = Depends(get_db),
    _auth=Depends(require_user),
):
    add_catalog_item(db, payload.name)
    return "Item name added"


@router.get("/list", response_model=List[CatalogItemRead])
def list_names(db: Session = Depends(get_db), _auth=Depends(require_user)):
    return list_catalog_items(db)


__all__ = ["router"]
