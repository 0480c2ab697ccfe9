"""create stock ledger tables

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-19 09:12:05.118302
"""
from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "suppliers",
        sa.Column("supplier_id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("tax_id", sa.String(12), unique=True),
        sa.Column("legal_address_zip", sa.String(10)),
        sa.Column("legal_address_city", sa.String(100)),
        sa.Column("legal_address_street", sa.String(100)),
        sa.Column("legal_address_house", sa.String(20)),
        sa.Column("bank_address_zip", sa.String(10)),
        sa.Column("bank_address_city", sa.String(100)),
        sa.Column("bank_address_street", sa.String(100)),
        sa.Column("bank_address_house", sa.String(20)),
        sa.Column("bank_account_number", sa.String(50), unique=True),
    )
    op.create_index("ix_suppliers_bank_address_city", "suppliers", ["bank_address_city"])

    op.create_table(
        "material_catalog",
        sa.Column("material_id", sa.Integer(), primary_key=True),
        sa.Column("class_code", sa.String(50)),
        sa.Column("group_code", sa.String(50)),
        sa.Column("material_name", sa.String(255), nullable=False),
    )
    op.create_index("ix_material_catalog_group_code", "material_catalog", ["group_code"])

    op.create_table(
        "units_of_measure",
        sa.Column(
            "material_id",
            sa.Integer(),
            sa.ForeignKey("material_catalog.material_id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("unit_name", sa.String(50), primary_key=True),
    )

    op.create_table(
        "storage_units",
        sa.Column("order_number", sa.Integer(), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.supplier_id", ondelete="RESTRICT")),
        sa.Column("balance_sheet_account", sa.String(50)),
        sa.Column("document_code", sa.String(50)),
        sa.Column("document_number", sa.String(50)),
        sa.Column(
            "material_id",
            sa.Integer(),
            sa.ForeignKey("material_catalog.material_id", ondelete="RESTRICT"),
        ),
        sa.Column("material_account", sa.String(50)),
        sa.Column("unit_of_measure_code", sa.String(50), nullable=False),
        sa.Column("quantity", sa.Numeric(10, 3), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.CheckConstraint("quantity > 0", name="storage_units_quantity_check"),
        sa.CheckConstraint("unit_price >= 0", name="storage_units_unit_price_check"),
        sa.ForeignKeyConstraint(
            ["material_id", "unit_of_measure_code"],
            ["units_of_measure.material_id", "units_of_measure.unit_name"],
            onupdate="CASCADE",
            ondelete="RESTRICT",
            name="storage_units_material_id_unit_of_measure_code_fkey",
        ),
    )
    op.create_index("ix_storage_units_date", "storage_units", ["date"])


def downgrade() -> None:
    op.drop_index("ix_storage_units_date", table_name="storage_units")
    op.drop_table("storage_units")
    op.drop_table("units_of_measure")
    op.drop_index("ix_material_catalog_group_code", table_name="material_catalog")
    op.drop_table("material_catalog")
    op.drop_index("ix_suppliers_bank_address_city", table_name="suppliers")
    op.drop_table("suppliers")
