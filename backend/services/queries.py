"""
Catalogue de requêtes analytiques (lecture seule).

Chaque fonction prend une Session + des paramètres typés et renvoie
le payload métier. Conventions :
- absence d'entité (fournisseur, ordre)  -> None
- SUM sur zéro ligne                     -> None (jamais 0)
- listes                                 -> ordre déterministe (clé secondaire stable)

Aucune gestion d'erreur ici : les erreurs SQLAlchemy remontent
telles quelles, la projection se fait dans backend.services.analytics.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Float, Integer, case, cast, extract, func, select
from sqlalchemy.orm import Session

from backend.app.db.models.models_v1 import MaterialCatalog, StorageUnit, Supplier
from backend.app.schemas.analytics import (
    BankSupplierCount,
    InventoryValue,
    MaterialAssortment,
    MonthlyLoad,
    OrderBankInfo,
    SupplierBankInfo,
    SupplierShare,
    TotalAmount,
)

# Valeur monétaire d'une ligne de registre
LINE_VALUE = StorageUnit.quantity * StorageUnit.unit_price


def _float_sum(expr):
    return cast(func.sum(expr), Float)


def _as_float(value) -> float | None:
    return float(value) if value is not None else None


def fetch_supplier_name(db: Session, tax_id: str) -> str | None:
    return db.execute(
        select(Supplier.name).where(Supplier.tax_id == tax_id)
    ).scalar_one_or_none()


def fetch_suppliers_by_bank_city(db: Session, city: str) -> list[SupplierBankInfo]:
    rows = db.execute(
        select(Supplier.name, Supplier.tax_id)
        .where(Supplier.bank_address_city == city)
        .order_by(Supplier.name, Supplier.id)
    ).all()
    return [SupplierBankInfo(**r._mapping) for r in rows]


def fetch_supplier_count_per_bank_city(db: Session) -> list[BankSupplierCount]:
    supplier_count = func.count(Supplier.id).label("supplier_count")
    rows = db.execute(
        select(Supplier.bank_address_city, supplier_count)
        .where(Supplier.bank_address_city.is_not(None))
        .group_by(Supplier.bank_address_city)
        .order_by(supplier_count.desc(), Supplier.bank_address_city)
    ).all()
    return [BankSupplierCount(**r._mapping) for r in rows]


def fetch_materials_by_group(db: Session, group_code: str) -> list[MaterialAssortment]:
    rows = db.execute(
        select(MaterialCatalog.material_name, MaterialCatalog.class_code)
        .where(MaterialCatalog.group_code == group_code)
        .order_by(MaterialCatalog.material_name, MaterialCatalog.id)
    ).all()
    return [MaterialAssortment(**r._mapping) for r in rows]


def fetch_total_spent(db: Session, start: date, end: date) -> TotalAmount:
    """Bornes incluses. Période sans ligne -> total_amount = None."""
    total = db.execute(
        select(_float_sum(LINE_VALUE)).where(StorageUnit.date.between(start, end))
    ).scalar_one()
    return TotalAmount(total_amount=_as_float(total))


def fetch_current_inventory_value(db: Session) -> list[InventoryValue]:
    """
    Stock et valeur par matériau.

    JOIN interne : un matériau sans ligne de registre n'apparaît pas
    (il n'est pas listé à zéro). Regroupement par id pour ne pas
    fusionner deux matériaux homonymes.
    """
    total_quantity = _float_sum(StorageUnit.quantity).label("total_quantity")
    total_value = _float_sum(LINE_VALUE).label("total_value")
    rows = db.execute(
        select(MaterialCatalog.material_name, total_quantity, total_value)
        .select_from(StorageUnit)
        .join(MaterialCatalog, MaterialCatalog.id == StorageUnit.material_id)
        .group_by(MaterialCatalog.id, MaterialCatalog.material_name)
        .order_by(total_value.desc(), MaterialCatalog.material_name, MaterialCatalog.id)
    ).all()
    return [InventoryValue(**r._mapping) for r in rows]


def fetch_supplier_share(db: Session, supplier_id: int, group_code: str) -> SupplierShare:
    """
    Part du fournisseur dans la valeur livrée d'un groupe de matériaux.

    Les deux agrégats sont lus dans la même requête (même snapshot) :
        part = COALESCE(valeur_fournisseur, 0) / NULLIF(valeur_groupe, 0)
    """
    group_total, supplier_total = db.execute(
        select(
            _float_sum(LINE_VALUE),
            _float_sum(case((StorageUnit.supplier_id == supplier_id, LINE_VALUE))),
        )
        .select_from(StorageUnit)
        .join(MaterialCatalog, MaterialCatalog.id == StorageUnit.material_id)
        .where(MaterialCatalog.group_code == group_code)
    ).one()

    if not group_total:
        return SupplierShare(supplier_share=None)
    return SupplierShare(supplier_share=(supplier_total or 0.0) / group_total)


def fetch_monthly_load(db: Session, year: int) -> list[MonthlyLoad]:
    """Valeur entrée en stock par mois ; les mois sans ligne sont omis."""
    month = cast(extract("month", StorageUnit.date), Integer)
    rows = db.execute(
        select(month.label("month"), _float_sum(LINE_VALUE).label("monthly_value"))
        .where(cast(extract("year", StorageUnit.date), Integer) == year)
        .group_by(month)
        .order_by(month)
    ).all()
    return [MonthlyLoad(**r._mapping) for r in rows]


def fetch_bank_info_by_order(db: Session, order_number: int) -> OrderBankInfo | None:
    """
    Ville de la banque du fournisseur + montant de la ligne d'ordre.

    order_number est la clé primaire de storage_units. Si la base contient
    malgré tout plusieurs lignes, one_or_none() lève MultipleResultsFound :
    on refuse de choisir une ligne arbitraire.
    """
    row = db.execute(
        select(Supplier.bank_address_city, cast(LINE_VALUE, Float).label("total_amount"))
        .select_from(StorageUnit)
        .join(Supplier, Supplier.id == StorageUnit.supplier_id)
        .where(StorageUnit.order_number == order_number)
    ).one_or_none()
    if row is None:
        return None
    return OrderBankInfo(**row._mapping)
