from __future__ import annotations

import datetime
from decimal import Decimal

from sqlalchemy import (
    String,
    Integer,
    Date,
    ForeignKey,
    ForeignKeyConstraint,
    Numeric,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.db.base import Base


# ---------- MASTER DATA ----------
class Supplier(Base):
    __tablename__ = "suppliers"
    id: Mapped[int] = mapped_column("supplier_id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # INN : clé métier, absente pour certains fournisseurs
    tax_id: Mapped[str | None] = mapped_column(String(12), unique=True)

    legal_address_zip: Mapped[str | None] = mapped_column(String(10))
    legal_address_city: Mapped[str | None] = mapped_column(String(100))
    legal_address_street: Mapped[str | None] = mapped_column(String(100))
    legal_address_house: Mapped[str | None] = mapped_column(String(20))

    bank_address_zip: Mapped[str | None] = mapped_column(String(10))
    bank_address_city: Mapped[str | None] = mapped_column(String(100), index=True)
    bank_address_street: Mapped[str | None] = mapped_column(String(100))
    bank_address_house: Mapped[str | None] = mapped_column(String(20))
    bank_account_number: Mapped[str | None] = mapped_column(String(50), unique=True)


class MaterialCatalog(Base):
    __tablename__ = "material_catalog"
    id: Mapped[int] = mapped_column("material_id", Integer, primary_key=True)
    class_code: Mapped[str | None] = mapped_column(String(50))
    group_code: Mapped[str | None] = mapped_column(String(50), index=True)
    material_name: Mapped[str] = mapped_column(String(255), nullable=False)

    units: Mapped[list["UnitOfMeasure"]] = relationship(back_populates="material", cascade="all, delete-orphan")


class UnitOfMeasure(Base):
    __tablename__ = "units_of_measure"
    material_id: Mapped[int] = mapped_column(
        ForeignKey("material_catalog.material_id", ondelete="CASCADE"),
        primary_key=True,
    )
    unit_name: Mapped[str] = mapped_column(String(50), primary_key=True)

    material: Mapped[MaterialCatalog] = relationship(back_populates="units")


# ---------- LEDGER ----------
class StorageUnit(Base):
    """
    Ligne de registre : un lot reçu en stock.

    Valeur monétaire du lot = quantity * unit_price.
    Le numéro d'ordre est la clé primaire : un ordre == une ligne.
    """

    __tablename__ = "storage_units"
    order_number: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    supplier_id: Mapped[int | None] = mapped_column(ForeignKey("suppliers.supplier_id", ondelete="RESTRICT"))
    balance_sheet_account: Mapped[str | None] = mapped_column(String(50))
    document_code: Mapped[str | None] = mapped_column(String(50))
    document_number: Mapped[str | None] = mapped_column(String(50))
    material_id: Mapped[int | None] = mapped_column(ForeignKey("material_catalog.material_id", ondelete="RESTRICT"))
    material_account: Mapped[str | None] = mapped_column(String(50))
    unit_of_measure_code: Mapped[str] = mapped_column(String(50), nullable=False)
    quantity: Mapped[Decimal] = mapped_column(Numeric(10, 3), nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="storage_units_quantity_check"),
        CheckConstraint("unit_price >= 0", name="storage_units_unit_price_check"),
        ForeignKeyConstraint(
            ["material_id", "unit_of_measure_code"],
            ["units_of_measure.material_id", "units_of_measure.unit_name"],
            onupdate="CASCADE",
            ondelete="RESTRICT",
            name="storage_units_material_id_unit_of_measure_code_fkey",
        ),
        Index("ix_storage_units_date", "date"),
    )
