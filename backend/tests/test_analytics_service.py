from datetime import date

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session

from backend.services import analytics
from backend.services.outcomes import OutcomeKind
from backend.services.supplier_cache import SupplierNameCache


@pytest.fixture
def statement_counter(engine):
    """Compte les requêtes SQL réellement envoyées à la base."""
    counter = {"n": 0}

    @event.listens_for(engine, "before_cursor_execute")
    def count(conn, cursor, statement, parameters, context, executemany):
        counter["n"] += 1

    try:
        yield counter
    finally:
        event.remove(engine, "before_cursor_execute", count)


@pytest.fixture
def broken_session(tmp_path):
    """Session sur une base inaccessible : toute requête lève OperationalError."""
    eng = create_engine(f"sqlite:///{tmp_path / 'missing' / 'ledger.db'}")
    session = Session(bind=eng)
    try:
        yield session
    finally:
        session.close()
        eng.dispose()


def test_cached_lookup_second_call_skips_database(scenario, statement_counter):
    cache = SupplierNameCache()

    first = analytics.cached_supplier_name_by_tax_id(scenario, "111", cache)
    after_first = statement_counter["n"]
    second = analytics.cached_supplier_name_by_tax_id(scenario, "111", cache)

    assert first.kind is OutcomeKind.success
    assert first.data.name == "Acme"
    assert second.data == first.data
    assert after_first >= 1
    assert statement_counter["n"] == after_first


def test_cached_lookup_unknown_tax_id(scenario, statement_counter):
    cache = SupplierNameCache()

    for _ in range(2):
        outcome = analytics.cached_supplier_name_by_tax_id(scenario, "000", cache)
        assert outcome.kind is OutcomeKind.not_found
        assert "000" in outcome.message

    assert len(cache) == 0
    assert statement_counter["n"] == 2


def test_uncached_lookup(scenario):
    assert analytics.supplier_name_by_tax_id(scenario, "111").data.name == "Acme"
    assert analytics.supplier_name_by_tax_id(scenario, "000").kind is OutcomeKind.not_found


def test_empty_results_are_success(db_session):
    assert analytics.suppliers_by_bank_city(db_session, "Riga").data == []
    assert analytics.supplier_count_per_bank_city(db_session).data == []
    assert analytics.materials_by_group(db_session, "G1").data == []
    assert analytics.current_inventory_value(db_session).data == []
    assert analytics.monthly_load(db_session, 2024).data == []


def test_absent_aggregates_are_success_with_none(db_session):
    spent = analytics.total_spent(db_session, date(2024, 1, 1), date(2024, 12, 31))
    assert spent.kind is OutcomeKind.success
    assert spent.data.total_amount is None

    share = analytics.supplier_share(db_session, 1, "G1")
    assert share.kind is OutcomeKind.success
    assert share.data.supplier_share is None


def test_bank_info_outcomes(scenario):
    found = analytics.bank_info_by_order(scenario, 500)
    assert found.ok
    assert (found.data.bank_address_city, found.data.total_amount) == ("Riga", 250.0)

    missing = analytics.bank_info_by_order(scenario, 404)
    assert missing.kind is OutcomeKind.not_found
    assert missing.data is None


def test_withdrawn_materials_is_not_implemented(scenario):
    outcome = analytics.withdrawn_materials(scenario, date(2024, 1, 1), date(2024, 12, 31))
    assert outcome.kind is OutcomeKind.not_implemented
    assert not outcome.ok


@pytest.mark.parametrize(
    "call",
    [
        lambda db: analytics.supplier_name_by_tax_id(db, "111"),
        lambda db: analytics.cached_supplier_name_by_tax_id(db, "111", SupplierNameCache()),
        lambda db: analytics.suppliers_by_bank_city(db, "Riga"),
        lambda db: analytics.supplier_count_per_bank_city(db),
        lambda db: analytics.materials_by_group(db, "G1"),
        lambda db: analytics.total_spent(db, date(2024, 1, 1), date(2024, 12, 31)),
        lambda db: analytics.current_inventory_value(db),
        lambda db: analytics.supplier_share(db, 1, "G1"),
        lambda db: analytics.monthly_load(db, 2024),
        lambda db: analytics.bank_info_by_order(db, 500),
    ],
)
def test_store_errors_become_upstream_failure(broken_session, call):
    outcome = call(broken_session)

    assert outcome.kind is OutcomeKind.upstream_failure
    assert outcome.data is None
    assert outcome.message.startswith("Database error during ")


def test_store_error_does_not_populate_cache(broken_session):
    cache = SupplierNameCache()
    outcome = analytics.cached_supplier_name_by_tax_id(broken_session, "111", cache)

    assert outcome.kind is OutcomeKind.upstream_failure
    assert len(cache) == 0
