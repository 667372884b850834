"""Northwind-style Orders dataset shared by all suites.

The suites only read from the dataset. ``ensure_database`` creates a
synthetic copy of the Northwind ``Orders`` table when the file is missing,
so a run does not depend on a downloaded database; a real
``northwind.db`` can be passed instead.
"""

import random
import sqlite3
from contextlib import closing
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path

ORDER_COLUMNS: tuple[str, ...] = (
    "OrderID",
    "CustomerID",
    "EmployeeID",
    "OrderDate",
    "RequiredDate",
    "ShippedDate",
    "ShipVia",
    "Freight",
    "ShipName",
    "ShipAddress",
    "ShipCity",
    "ShipRegion",
    "ShipPostalCode",
    "ShipCountry",
)

CUSTOMERS: tuple[tuple[str, str, str, str | None, str], ...] = (
    # CustomerID, ShipName, ShipCity, ShipRegion, ShipCountry
    ("VINET", "Vins et alcools Chevalier", "Reims", None, "France"),
    ("TOMSP", "Toms Spezialitäten", "Münster", None, "Germany"),
    ("HANAR", "Hanari Carnes", "Rio de Janeiro", "RJ", "Brazil"),
    ("VICTE", "Victuailles en stock", "Lyon", None, "France"),
    ("SUPRD", "Suprêmes délices", "Charleroi", None, "Belgium"),
    ("CHOPS", "Chop-suey Chinese", "Bern", None, "Switzerland"),
    ("RICSU", "Richter Supermarkt", "Genève", None, "Switzerland"),
    ("WELLI", "Wellington Importadora", "Resende", "SP", "Brazil"),
    ("HILAA", "HILARION-Abastos", "San Cristóbal", "Táchira", "Venezuela"),
    ("ERNSH", "Ernst Handel", "Graz", None, "Austria"),
    ("CENTC", "Centro comercial Moctezuma", "México D.F.", None, "Mexico"),
    ("OLDWO", "Old World Delicatessen", "Anchorage", "AK", "USA"),
)

FIRST_ORDER_ID = 10248
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class DatasetError(Exception):
    """Raised when the dataset cannot be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot open dataset {path}: {reason}")


@dataclass
class Order:
    """One row of the Orders table."""

    OrderID: int
    CustomerID: str | None
    EmployeeID: int | None
    OrderDate: str | None
    RequiredDate: str | None
    ShippedDate: str | None
    ShipVia: int | None
    Freight: float | None
    ShipName: str | None
    ShipAddress: str | None
    ShipCity: str | None
    ShipRegion: str | None
    ShipPostalCode: str | None
    ShipCountry: str | None


def _generate_orders(rows: int, seed: int) -> list[tuple]:
    rng = random.Random(seed)
    start = datetime(2016, 7, 4)
    orders = []
    for offset in range(rows):
        customer_id, ship_name, city, region, country = rng.choice(CUSTOMERS)
        ordered = start + timedelta(days=offset // 3, seconds=rng.randrange(86400))
        shipped = ordered + timedelta(days=rng.randint(1, 30))
        orders.append(
            (
                FIRST_ORDER_ID + offset,
                customer_id,
                rng.randint(1, 9),
                ordered.strftime(DATE_FORMAT),
                (ordered + timedelta(days=28)).strftime(DATE_FORMAT),
                shipped.strftime(DATE_FORMAT) if rng.random() > 0.03 else None,
                rng.randint(1, 3),
                round(rng.uniform(0.02, 1007.64), 2),
                ship_name,
                f"{rng.randint(1, 999)} Rue {customer_id.title()}",
                city,
                region,
                f"{rng.randint(1000, 99999)}",
                country,
            )
        )
    return orders


def create_database(path: str | Path, rows: int = 830, seed: int = 0) -> Path:
    """Create (or replace) a synthetic Orders database.

    Args:
        path: Target file; parent directories are created.
        rows: Number of orders to generate.
        seed: Random seed, the same seed always yields the same rows.

    Returns:
        The database path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        path.unlink()

    columns = ", ".join(ORDER_COLUMNS)
    placeholders = ", ".join("?" for _ in ORDER_COLUMNS)
    with closing(sqlite3.connect(path)) as conn, conn:
        conn.execute(
            """
            CREATE TABLE Orders (
                OrderID INTEGER PRIMARY KEY,
                CustomerID TEXT,
                EmployeeID INTEGER,
                OrderDate TEXT,
                RequiredDate TEXT,
                ShippedDate TEXT,
                ShipVia INTEGER,
                Freight NUMERIC,
                ShipName TEXT,
                ShipAddress TEXT,
                ShipCity TEXT,
                ShipRegion TEXT,
                ShipPostalCode TEXT,
                ShipCountry TEXT
            )
            """
        )
        conn.execute("CREATE INDEX idx_orders_customer ON Orders (CustomerID)")
        conn.executemany(
            f"INSERT INTO Orders ({columns}) VALUES ({placeholders})",
            _generate_orders(rows, seed),
        )
    return path


def ensure_database(path: str | Path, rows: int = 830) -> Path:
    """Return the dataset path, generating the dataset if it does not exist."""
    path = Path(path)
    if not path.exists():
        create_database(path, rows)
    return path


def open_readonly(path: str | Path) -> sqlite3.Connection:
    """Open the dataset read-only.

    Raises:
        DatasetError: If the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetError(path, "no such file")
    return sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)
