from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.api.deps import get_db
from backend.app.api.outcomes import unwrap
from backend.app.schemas.analytics import BankSupplierCount, SupplierShare
from backend.services import analytics

router = APIRouter(prefix="/analytics")


@router.get("/bank-supplier-count", response_model=list[BankSupplierCount])
def get_suppliers_per_bank(db: Session = Depends(get_db)):
    return unwrap(analytics.supplier_count_per_bank_city(db))


@router.get("/supplier-share/{supplier_id}/{group_code}", response_model=SupplierShare)
def get_supplier_share(supplier_id: int, group_code: str, db: Session = Depends(get_db)):
    """
    supplier_share = null si le groupe n'a aucune valeur livrée
    (ratio indéfini, ce n'est pas une erreur).
    """
    return unwrap(analytics.supplier_share(db, supplier_id, group_code))
