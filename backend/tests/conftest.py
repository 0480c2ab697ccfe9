from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from backend.app.api.deps import get_db, get_supplier_name_cache
from backend.app.db.base import Base
from backend.app.db.models.models_v1 import (
    MaterialCatalog,
    StorageUnit,
    Supplier,
    UnitOfMeasure,
)
from backend.app.main import app
from backend.services.supplier_cache import SupplierNameCache


@pytest.fixture(scope="function")
def engine():
    """
    Base SQLite en mémoire, recréée pour chaque test.

    StaticPool : une seule connexion partagée, sinon chaque checkout
    ouvrirait une base vide.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def add_storage_unit(db, order_number, material_id, supplier_id, day, quantity, unit_price, uom="kg"):
    db.add(
        StorageUnit(
            order_number=order_number,
            date=day,
            supplier_id=supplier_id,
            material_id=material_id,
            unit_of_measure_code=uom,
            quantity=Decimal(quantity),
            unit_price=Decimal(unit_price),
        )
    )


@pytest.fixture(scope="function")
def scenario(db_session) -> Session:
    """
    GIVEN
    - Acme (id=1, INN 111, banque à Riga)
    - Bolts (id=10, groupe G1)
    - ordre 500 : 100 x 2.5 le 2024-03-01
    """
    db_session.add(Supplier(id=1, name="Acme", tax_id="111", bank_address_city="Riga"))
    db_session.add(MaterialCatalog(id=10, material_name="Bolts", group_code="G1"))
    db_session.flush()
    db_session.add(UnitOfMeasure(material_id=10, unit_name="kg"))
    db_session.flush()
    add_storage_unit(db_session, 500, 10, 1, date(2024, 3, 1), "100", "2.5")
    db_session.commit()
    return db_session


@pytest.fixture(scope="function")
def ledger(db_session) -> Session:
    """
    Registre plus large :

    suppliers : Acme/Riga, Borealis/Riga, Corvus/Tallinn (sans INN),
                Delta (sans banque), Echo/Oslo
    materials : Bolts G1, Nuts G1, Paint G2, Glue G3 (jamais en stock),
                Samples G4 (prix 0)
    """
    db_session.add_all(
        [
            Supplier(id=1, name="Acme", tax_id="111", bank_address_city="Riga"),
            Supplier(id=2, name="Borealis", tax_id="222", bank_address_city="Riga"),
            Supplier(id=3, name="Corvus", tax_id=None, bank_address_city="Tallinn"),
            Supplier(id=4, name="Delta", tax_id="444", bank_address_city=None),
            Supplier(id=5, name="Echo", tax_id="555", bank_address_city="Oslo"),
            MaterialCatalog(id=10, material_name="Bolts", class_code="C1", group_code="G1"),
            MaterialCatalog(id=11, material_name="Nuts", class_code=None, group_code="G1"),
            MaterialCatalog(id=12, material_name="Paint", class_code="P", group_code="G2"),
            MaterialCatalog(id=13, material_name="Glue", class_code="P", group_code="G3"),
            MaterialCatalog(id=14, material_name="Samples", class_code=None, group_code="G4"),
        ]
    )
    db_session.flush()
    db_session.add_all([UnitOfMeasure(material_id=mid, unit_name="kg") for mid in (10, 11, 12, 13, 14)])
    db_session.flush()

    add_storage_unit(db_session, 500, 10, 1, date(2024, 3, 1), "100", "2.5")   # 250
    add_storage_unit(db_session, 501, 11, 2, date(2024, 5, 15), "10", "5")     # 50
    add_storage_unit(db_session, 502, 12, 3, date(2023, 12, 31), "4", "25")    # 100
    add_storage_unit(db_session, 503, 10, 2, date(2024, 5, 20), "20", "2.5")   # 50
    add_storage_unit(db_session, 504, 12, 4, date(2024, 7, 1), "2", "25")      # 50
    add_storage_unit(db_session, 505, 14, 1, date(2024, 8, 1), "1", "0")       # 0
    db_session.commit()
    return db_session


@pytest.fixture(scope="function")
def client(session_factory):
    """TestClient branché sur la base SQLite du test, avec un cache neuf."""
    cache = SupplierNameCache()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_supplier_name_cache] = lambda: cache
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def lookalikes(db_session) -> Session:
    """
    Homonymes et ex aequo :
    - deux fournisseurs "Zeta" + "Alpha", tous à Bergen
    - deux matériaux "Washer" (ids 20 et 21) + "Anchor" + "Zinc", groupe G5,
      chacun valorisé 1.5 en stock

    Insertion volontairement dans le désordre (ids décroissants).
    """
    db_session.add_all(
        [
            Supplier(id=7, name="Zeta", tax_id="777", bank_address_city="Bergen"),
            Supplier(id=6, name="Zeta", tax_id="666", bank_address_city="Bergen"),
            Supplier(id=8, name="Alpha", tax_id=None, bank_address_city="Bergen"),
            MaterialCatalog(id=23, material_name="Zinc", class_code="Z", group_code="G5"),
            MaterialCatalog(id=21, material_name="Washer", class_code="W-B", group_code="G5"),
            MaterialCatalog(id=20, material_name="Washer", class_code="W-A", group_code="G5"),
            MaterialCatalog(id=22, material_name="Anchor", class_code="A", group_code="G5"),
        ]
    )
    db_session.flush()
    db_session.add_all([UnitOfMeasure(material_id=mid, unit_name="kg") for mid in (20, 21, 22, 23)])
    db_session.flush()

    add_storage_unit(db_session, 600, 23, 6, date(2024, 9, 1), "3", "0.5")    # 1.5
    add_storage_unit(db_session, 601, 21, 7, date(2024, 9, 2), "1", "1.5")    # 1.5
    add_storage_unit(db_session, 602, 20, 6, date(2024, 9, 3), "0.5", "3")    # 1.5
    add_storage_unit(db_session, 603, 22, 8, date(2024, 9, 4), "1.5", "1")    # 1.5
    db_session.commit()
    return db_session
