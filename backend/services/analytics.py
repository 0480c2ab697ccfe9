"""
Analytics service.

Point d'entrée du cœur métier : chaque opération exécute une requête
du catalogue (backend.services.queries) et renvoie un Outcome.

Règles :
- entité absente (fournisseur, ordre)      -> NOT_FOUND
- agrégat absent (SUM vide, ratio indéfini) -> SUCCESS avec None dans le payload
- erreur base (SQLAlchemyError)             -> UPSTREAM_FAILURE, pas de retry,
  message sans aucune donnée de ligne
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.schemas.analytics import (
    BankSupplierCount,
    InventoryValue,
    MaterialAssortment,
    MonthlyLoad,
    OrderBankInfo,
    SupplierBankInfo,
    SupplierName,
    SupplierShare,
    TotalAmount,
)
from backend.services import queries
from backend.services.outcomes import Outcome
from backend.services.supplier_cache import SupplierNameCache

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _guarded(operation: str, run: Callable[[], Outcome[T]]) -> Outcome[T]:
    try:
        return run()
    except SQLAlchemyError as exc:
        logger.error("%s failed: %s", operation, type(exc).__name__, exc_info=True)
        return Outcome.upstream_failure(f"Database error during {operation}")


def _supplier_name_outcome(tax_id: str, name: str | None) -> Outcome[SupplierName]:
    if name is None:
        return Outcome.not_found(f"Supplier with tax id {tax_id} not found")
    return Outcome.success(SupplierName(name=name))


def supplier_name_by_tax_id(db: Session, tax_id: str) -> Outcome[SupplierName]:
    return _guarded(
        "supplier_name_by_tax_id",
        lambda: _supplier_name_outcome(tax_id, queries.fetch_supplier_name(db, tax_id)),
    )


def cached_supplier_name_by_tax_id(
    db: Session,
    tax_id: str,
    cache: SupplierNameCache,
) -> Outcome[SupplierName]:
    """Même contrat que supplier_name_by_tax_id, avec le cache devant."""
    return _guarded(
        "supplier_name_by_tax_id",
        lambda: _supplier_name_outcome(
            tax_id,
            cache.get_or_load(tax_id, lambda key: queries.fetch_supplier_name(db, key)),
        ),
    )


def suppliers_by_bank_city(db: Session, city: str) -> Outcome[list[SupplierBankInfo]]:
    # Liste vide == succès : aucun fournisseur pour cette banque n'est pas une erreur
    return _guarded(
        "suppliers_by_bank_city",
        lambda: Outcome.success(queries.fetch_suppliers_by_bank_city(db, city)),
    )


def supplier_count_per_bank_city(db: Session) -> Outcome[list[BankSupplierCount]]:
    return _guarded(
        "supplier_count_per_bank_city",
        lambda: Outcome.success(queries.fetch_supplier_count_per_bank_city(db)),
    )


def materials_by_group(db: Session, group_code: str) -> Outcome[list[MaterialAssortment]]:
    return _guarded(
        "materials_by_group",
        lambda: Outcome.success(queries.fetch_materials_by_group(db, group_code)),
    )


def total_spent(db: Session, start: date, end: date) -> Outcome[TotalAmount]:
    return _guarded(
        "total_spent",
        lambda: Outcome.success(queries.fetch_total_spent(db, start, end)),
    )


def current_inventory_value(db: Session) -> Outcome[list[InventoryValue]]:
    return _guarded(
        "current_inventory_value",
        lambda: Outcome.success(queries.fetch_current_inventory_value(db)),
    )


def supplier_share(db: Session, supplier_id: int, group_code: str) -> Outcome[SupplierShare]:
    return _guarded(
        "supplier_share",
        lambda: Outcome.success(queries.fetch_supplier_share(db, supplier_id, group_code)),
    )


def monthly_load(db: Session, year: int) -> Outcome[list[MonthlyLoad]]:
    return _guarded(
        "monthly_load",
        lambda: Outcome.success(queries.fetch_monthly_load(db, year)),
    )


def bank_info_by_order(db: Session, order_number: int) -> Outcome[OrderBankInfo]:
    def run() -> Outcome[OrderBankInfo]:
        info = queries.fetch_bank_info_by_order(db, order_number)
        if info is None:
            return Outcome.not_found(f"Order {order_number} not found")
        return Outcome.success(info)

    return _guarded("bank_info_by_order", run)


def withdrawn_materials(db: Session, start: date, end: date) -> Outcome[list[str]]:
    """
    Rapport des matériaux sortis du stock sur une période.

    Le schéma n'a pas de registre de sorties (storage_units ne trace que
    les entrées) : opération connue mais non disponible.
    """
    return Outcome.not_implemented("Withdrawn materials report is not available: no withdrawal ledger")
