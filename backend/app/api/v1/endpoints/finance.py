from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.api.deps import Period, get_db, get_period
from backend.app.api.outcomes import unwrap
from backend.app.schemas.analytics import TotalAmount
from backend.services import analytics

router = APIRouter(prefix="/finance")


@router.get("/total-spent", response_model=TotalAmount)
def get_total_spent_by_period(
    period: Period = Depends(get_period),
    db: Session = Depends(get_db),
):
    return unwrap(analytics.total_spent(db, period.start, period.end))
