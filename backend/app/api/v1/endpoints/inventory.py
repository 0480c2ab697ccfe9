from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from backend.app.api.deps import Period, get_db, get_period
from backend.app.api.outcomes import unwrap
from backend.app.schemas.analytics import InventoryValue, MonthlyLoad
from backend.services import analytics

router = APIRouter(prefix="/inventory")


@router.get("/withdrawn", response_model=list[str])
def get_withdrawn_materials(
    period: Period = Depends(get_period),
    db: Session = Depends(get_db),
):
    return unwrap(analytics.withdrawn_materials(db, period.start, period.end))


@router.get("/stock-value", response_model=list[InventoryValue])
def get_current_inventory_value(db: Session = Depends(get_db)):
    """
    Stock (READ ONLY)
    - un matériau sans ligne en stock n'apparaît pas
    - tri par valeur décroissante
    """
    return unwrap(analytics.current_inventory_value(db))


@router.get("/monthly-load/{year}", response_model=list[MonthlyLoad])
def get_monthly_load(
    year: int = Path(ge=1, le=9999),
    db: Session = Depends(get_db),
):
    return unwrap(analytics.monthly_load(db, year))
