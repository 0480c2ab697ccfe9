from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from backend.app.db.session import SessionLocal
from backend.app.db.models.models_v1 import (
    MaterialCatalog,
    StorageUnit,
    Supplier,
    UnitOfMeasure,
)

logger = logging.getLogger(__name__)

# Jeu de démo (même contenu que le dump de référence)
SUPPLIERS = [
    dict(id=1, name='ООО "СтройМастер"', tax_id="7701001001", legal_address_city="Москва",
         legal_address_street="ул. Ленина, д. 10", bank_account_number="40702810100000001001"),
    dict(id=2, name='АО "МеталлСнаб"', tax_id="5002002002", legal_address_city="Санкт-Петербург",
         legal_address_street="Невский пр-т, д. 5", bank_account_number="40702810200000002002"),
    dict(id=3, name="ИП Иванов А.В.", tax_id="2703003003", legal_address_city="Казань",
         legal_address_street="ул. Пушкина, д. 1", bank_account_number="40702810300000003003"),
]

MATERIALS = [
    dict(id=5, class_code="LKM", group_code="KRASK", material_name="Краска акриловая белая"),
    dict(id=6, class_code="DEREV", group_code="BRUS", material_name="Брус сосновый 50x50x3000"),
    dict(id=7, class_code="METALL", group_code="ARM", material_name="Арматура строительная d12"),
    dict(id=8, class_code="ELEKTR", group_code="KAB", material_name="Кабель ВВГ-Пнг(А)-LS 3x2.5"),
]

UNITS = {
    5: ["литры"],
    6: ["штуки", "метры"],
    7: ["тонны", "метры"],
    8: ["метры"],
}

STORAGE_UNITS = [
    dict(order_number=4, date=date(2025, 11, 1), supplier_id=1, document_code="ПРИХ1", document_number="125",
         material_id=5, material_account="10.01", unit_of_measure_code="литры",
         quantity=Decimal("500.000"), unit_price=Decimal("550.50")),
    dict(order_number=5, date=date(2025, 11, 5), supplier_id=2, document_code="ПРИХ2", document_number="0098",
         material_id=7, material_account="10.02", unit_of_measure_code="тонны",
         quantity=Decimal("5.500"), unit_price=Decimal("75000.00")),
    dict(order_number=6, date=date(2025, 11, 10), supplier_id=3, document_code="ПРИХ3", document_number="10/11",
         material_id=8, material_account="10.01", unit_of_measure_code="метры",
         quantity=Decimal("1200.000"), unit_price=Decimal("95.20")),
]


def run_seed(db: Session) -> None:
    """Idempotent : ne crée que les lignes absentes."""
    for data in SUPPLIERS:
        if not db.get(Supplier, data["id"]):
            db.add(Supplier(**data))

    for data in MATERIALS:
        if not db.get(MaterialCatalog, data["id"]):
            db.add(MaterialCatalog(**data))
    db.flush()

    for material_id, unit_names in UNITS.items():
        for unit_name in unit_names:
            if not db.get(UnitOfMeasure, (material_id, unit_name)):
                db.add(UnitOfMeasure(material_id=material_id, unit_name=unit_name))
    db.flush()

    for data in STORAGE_UNITS:
        if not db.get(StorageUnit, data["order_number"]):
            db.add(StorageUnit(**data))

    db.commit()
    logger.info(
        "SEED OK: suppliers=%d materials=%d storage_units=%d",
        len(SUPPLIERS), len(MATERIALS), len(STORAGE_UNITS),
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        run_seed(db)
    finally:
        db.close()
