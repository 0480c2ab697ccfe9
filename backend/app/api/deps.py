from __future__ import annotations

from datetime import date
from typing import Generator

from fastapi import HTTPException, Query
from pydantic import BaseModel

from backend.app.db.session import SessionLocal
from backend.services.supplier_cache import SupplierNameCache

# Un seul cache pour tout le process, partagé par toutes les requêtes
supplier_name_cache = SupplierNameCache()


class Period(BaseModel):
    start: date
    end: date


def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_supplier_name_cache() -> SupplierNameCache:
    return supplier_name_cache


def get_period(
    start: date = Query(..., description="Début de période (inclus)"),
    end: date = Query(..., description="Fin de période (incluse)"),
) -> Period:
    if start > end:
        raise HTTPException(status_code=422, detail="start must be on or before end")
    return Period(start=start, end=end)
