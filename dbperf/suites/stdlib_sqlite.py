"""Suites reading Orders through the standard library sqlite3 module.

All suites run the same two queries and differ only in how result rows are
turned into Python objects, so the report isolates mapping cost:

- sqlite3: rows stay tuples
- sqlite3(Row): sqlite3.Row factory, mapped to Order by column name
- sqlite3(manu): tuples, mapped to Order by hand-written indexes
- sqlite3(dict): dict row factory, mapped with Order(**row)
"""

import sqlite3
from abc import abstractmethod
from functools import partial
from pathlib import Path
from typing import Any

from dbperf.benchmarks.base import PerfCase
from dbperf.suites.base import Suite
from dbperf.suites.dataset import ORDER_COLUMNS, Order, open_readonly

_COLUMNS = ", ".join(ORDER_COLUMNS)

FETCH_ALL_SQL = f"SELECT {_COLUMNS} FROM Orders"
FETCH_BY_CUSTOMER_SQL = f"SELECT {_COLUMNS} FROM Orders WHERE CustomerID = ?"

CUSTOMER_ID = "VINET"


class _SqliteSuite(Suite):
    """Shared case layout; subclasses pick the connection and row mapping."""

    def connect(self, database: Path) -> sqlite3.Connection:
        """Open a private read-only connection (one per case)."""
        return open_readonly(database)

    def disconnect(self, conn: sqlite3.Connection) -> None:
        conn.close()

    @abstractmethod
    def map_rows(self, cursor: sqlite3.Cursor) -> list[Any]:
        """Materialize every row of an executed query."""
        pass

    def fetch_all(self, conn: sqlite3.Connection) -> list[Any]:
        return self.map_rows(conn.execute(FETCH_ALL_SQL))

    def fetch_by_customer(self, conn: sqlite3.Connection) -> list[Any]:
        return self.map_rows(conn.execute(FETCH_BY_CUSTOMER_SQL, (CUSTOMER_ID,)))

    def get_cases(self, database: Path) -> list[PerfCase]:
        return [
            PerfCase(
                "Orders.fetchAll",
                partial(self.connect, database),
                self.fetch_all,
                self.disconnect,
            ),
            PerfCase(
                "Orders.fetchByCustomer",
                partial(self.connect, database),
                self.fetch_by_customer,
                self.disconnect,
            ),
        ]


class RawTupleSuite(_SqliteSuite):
    label = "sqlite3"
    description = "Plain cursor; rows stay tuples, no mapping"

    def map_rows(self, cursor: sqlite3.Cursor) -> list[Any]:
        return cursor.fetchall()


class RowFactorySuite(_SqliteSuite):
    label = "sqlite3(Row)"
    description = "sqlite3.Row factory, Order built by column name"

    def connect(self, database: Path) -> sqlite3.Connection:
        conn = super().connect(database)
        conn.row_factory = sqlite3.Row
        return conn

    def map_rows(self, cursor: sqlite3.Cursor) -> list[Any]:
        return [Order(*(row[name] for name in ORDER_COLUMNS)) for row in cursor]


class IndexMappedSuite(_SqliteSuite):
    label = "sqlite3(manu)"
    description = "Tuples mapped to Order by hand-written column indexes"

    def map_rows(self, cursor: sqlite3.Cursor) -> list[Any]:
        return [
            Order(
                OrderID=row[0],
                CustomerID=row[1],
                EmployeeID=row[2],
                OrderDate=row[3],
                RequiredDate=row[4],
                ShippedDate=row[5],
                ShipVia=row[6],
                Freight=row[7],
                ShipName=row[8],
                ShipAddress=row[9],
                ShipCity=row[10],
                ShipRegion=row[11],
                ShipPostalCode=row[12],
                ShipCountry=row[13],
            )
            for row in cursor
        ]


def _dict_factory(cursor: sqlite3.Cursor, row: tuple) -> dict[str, Any]:
    return {column[0]: value for column, value in zip(cursor.description, row)}


class DictFactorySuite(_SqliteSuite):
    label = "sqlite3(dict)"
    description = "dict row factory, Order built with keyword unpacking"

    def connect(self, database: Path) -> sqlite3.Connection:
        conn = super().connect(database)
        conn.row_factory = _dict_factory
        return conn

    def map_rows(self, cursor: sqlite3.Cursor) -> list[Any]:
        return [Order(**row) for row in cursor]
