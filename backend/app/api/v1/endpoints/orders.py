from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.api.deps import get_db
from backend.app.api.outcomes import unwrap
from backend.app.schemas.analytics import OrderBankInfo
from backend.services import analytics

router = APIRouter(prefix="/orders")


@router.get("/{order_number}/bank-info", response_model=OrderBankInfo)
def get_bank_info_by_order(order_number: int, db: Session = Depends(get_db)):
    return unwrap(analytics.bank_info_by_order(db, order_number))
