"""Tests for the Orders dataset and the stdlib sqlite3 suites."""

import sqlite3

import pytest

from dbperf.benchmarks import CaseRunner, Reporter
from dbperf.models import RunConfig
from dbperf.suites import SuiteRegistry
from dbperf.suites.dataset import (
    FIRST_ORDER_ID,
    ORDER_COLUMNS,
    DatasetError,
    Order,
    create_database,
    ensure_database,
    open_readonly,
)
from dbperf.suites.stdlib_sqlite import (
    CUSTOMER_ID,
    DictFactorySuite,
    IndexMappedSuite,
    RawTupleSuite,
    RowFactorySuite,
)


@pytest.fixture
def database(tmp_path):
    """A small generated Orders database."""
    return create_database(tmp_path / "data" / "northwind.db", rows=60)


def test_create_database(database):
    """Test the generated table has the Northwind Orders layout."""
    with sqlite3.connect(database) as conn:
        columns = [row[1] for row in conn.execute("PRAGMA table_info(Orders)")]
        count = conn.execute("SELECT COUNT(*) FROM Orders").fetchone()[0]
        first = conn.execute("SELECT MIN(OrderID) FROM Orders").fetchone()[0]

    assert tuple(columns) == ORDER_COLUMNS
    assert count == 60
    assert first == FIRST_ORDER_ID


def test_create_database_is_deterministic(tmp_path):
    """Test the same seed produces the same rows."""
    first = create_database(tmp_path / "a.db", rows=20, seed=7)
    second = create_database(tmp_path / "b.db", rows=20, seed=7)

    with sqlite3.connect(first) as a, sqlite3.connect(second) as b:
        assert a.execute("SELECT * FROM Orders").fetchall() == b.execute(
            "SELECT * FROM Orders"
        ).fetchall()


def test_ensure_database_keeps_existing(database):
    """Test an existing dataset is not regenerated."""
    before = database.stat().st_mtime_ns
    assert ensure_database(database, rows=5) == database
    assert database.stat().st_mtime_ns == before


def test_ensure_database_creates_missing(tmp_path):
    """Test a missing dataset is generated."""
    path = ensure_database(tmp_path / "new.db", rows=5)
    with sqlite3.connect(path) as conn:
        assert conn.execute("SELECT COUNT(*) FROM Orders").fetchone()[0] == 5


def test_open_readonly(database):
    """Test the connection can read but not write."""
    conn = open_readonly(database)
    try:
        assert conn.execute("SELECT COUNT(*) FROM Orders").fetchone()[0] == 60
        with pytest.raises(sqlite3.OperationalError):
            conn.execute("DELETE FROM Orders")
    finally:
        conn.close()


def test_open_readonly_missing(tmp_path):
    """Test opening a missing dataset raises DatasetError."""
    with pytest.raises(DatasetError):
        open_readonly(tmp_path / "missing.db")


@pytest.mark.parametrize(
    "suite_cls",
    [RowFactorySuite, IndexMappedSuite, DictFactorySuite],
)
def test_mapping_suites_build_orders(suite_cls, database):
    """Test each mapping strategy yields the same Order objects."""
    suite = suite_cls()
    conn = suite.connect(database)
    try:
        orders = suite.fetch_all(conn)
    finally:
        conn.close()

    raw = RawTupleSuite()
    conn = raw.connect(database)
    try:
        expected = [Order(*row) for row in raw.fetch_all(conn)]
    finally:
        conn.close()

    assert len(orders) == 60
    assert orders == expected


def test_disconnect_closes_connection(database):
    """Test the teardown hook closes the case's connection."""
    suite = RawTupleSuite()
    conn = suite.connect(database)
    suite.disconnect(conn)

    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_fetch_by_customer_filters(database):
    """Test the customer query only returns that customer's orders."""
    suite = IndexMappedSuite()
    conn = suite.connect(database)
    try:
        orders = suite.fetch_by_customer(conn)
    finally:
        conn.close()

    assert all(order.CustomerID == CUSTOMER_ID for order in orders)


def test_all_suites_run_and_report(database):
    """Test every discovered suite runs against the dataset and is reported."""
    registry = SuiteRegistry().build_case_registry(database)

    CaseRunner(RunConfig(rampup_count=1, iterations=2)).run(registry)
    report = Reporter().render(registry)

    assert all(case.is_complete for _, cases in registry.items() for case in cases)
    lines = report.splitlines()
    assert lines[0].startswith("Orders.fetchAll ")
    assert lines[7].startswith("Orders.fetchByCustomer ")
    assert len(lines) == 14


def test_missing_dataset_fails_in_setup(tmp_path):
    """Test a missing dataset surfaces as a setup failure at run time."""
    registry = SuiteRegistry().build_case_registry(tmp_path / "nope.db", ["sqlite3"])

    with pytest.raises(DatasetError):
        CaseRunner(RunConfig(rampup_count=1, iterations=1)).run(registry)
