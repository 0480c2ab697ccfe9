from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.api.deps import get_db
from backend.app.api.outcomes import unwrap
from backend.app.schemas.analytics import MaterialAssortment
from backend.services import analytics

router = APIRouter(prefix="/materials")


@router.get("/by-group/{group_code}", response_model=list[MaterialAssortment])
def get_materials_by_group(group_code: str, db: Session = Depends(get_db)):
    return unwrap(analytics.materials_by_group(db, group_code))
