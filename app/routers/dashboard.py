from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dependencies import get_db, require_user
from app.schemas.dashboard import DashboardStats
from app.services.dashboard_service import dashboard_stats

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
def stats(db: Session = Depends(get_db), _auth=Depends(require_user)):
    return DashboardStats(**dashboard_stats(db))


__all__ = ["router"]
