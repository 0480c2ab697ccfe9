from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.api.deps import get_db, get_supplier_name_cache
from backend.app.api.outcomes import unwrap
from backend.app.schemas.analytics import SupplierBankInfo, SupplierName
from backend.services import analytics
from backend.services.supplier_cache import SupplierNameCache

router = APIRouter(prefix="/suppliers")


@router.get("/by-tax/{tax_id}", response_model=SupplierName)
def get_supplier_name_by_tax(
    tax_id: str,
    db: Session = Depends(get_db),
    cache: SupplierNameCache = Depends(get_supplier_name_cache),
):
    return unwrap(analytics.cached_supplier_name_by_tax_id(db, tax_id, cache))


@router.get("/by-bank-city/{city}", response_model=list[SupplierBankInfo])
def get_suppliers_by_bank_city(city: str, db: Session = Depends(get_db)):
    return unwrap(analytics.suppliers_by_bank_city(db, city))
