from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.dependencies import get_db, require_user
from app.schemas.inventory import InventoryCreate, InventoryRead, InventoryUpdate
from app.services.inventory_service import (
    add_inventory_item,
    delete_inventory_item,
    list_by_range,
    list_by_time_frame,
    update_inventory_item,
)

router = APIRouter(prefix="/api/inventory", tags=["Inventory"])


@router.post("/add", response_class=PlainTextResponse)
def add_item(
    payload: InventoryCreate,
    db: Session = Depends(get_db),
    _auth=Depends(require_user),
):
    add_inventory_item(db, payload)
    return "Item added to inventory"


@router.get("/list/{time_frame}", response_model=List[InventoryRead])
def list_for_time_frame(
    time_frame: str,
    db: Session = Depends(get_db),
    _auth=Depends(require_user),
):
    return list_by_time_frame(db, time_frame)


@router.get("/list", response_model=List[InventoryRead])
def list_for_range(
    start_date: Optional[str] = Query(None, alias="startDate", description="First day (ISO date)"),
    end_date: Optional[str] = Query(None, alias="endDate", description="Last day, inclusive (ISO date)"),
    db: Session = Depends(get_db),
    _auth=Depends(require_user),
):
    return list_by_range(db, start_date, end_date)


@router.put("/update/{item_id}", response_class=PlainTextResponse)
def update_item(
    item_id: int,
    payload: InventoryUpdate,
    db: Session = Depends(get_db),
    _auth=Depends(require_user),
):
    update_inventory_item(db, item_id, payload)
    return "Inventory updated"


@router.delete("/delete/{item_id}", response_class=PlainTextResponse)
def delete_item(
    item_id: int,
    db: Session = Depends(get_db),
    _auth=Depends(require_user),
):
    delete_inventory_item(db, item_id)
    return "Item deleted from inventory"


__all__ = ["router"]
