"""Suites reading Orders through SQLAlchemy.

The engines get their connections from ``open_readonly``, so they sit on the
same stdlib sqlite3 driver as the ``sqlite3`` suites and the report shows
what SQLAlchemy adds on top:

- sqlalchemy(core): textual SQL on a Core connection, rows mapped to Order
- sqlalchemy(orm): select() of the mapped OrderRecord class in a Session
"""

from abc import abstractmethod
from functools import partial
from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine, select, text
from sqlalchemy.engine import Connection
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column
from sqlalchemy.pool import StaticPool

from dbperf.benchmarks.base import PerfCase
from dbperf.suites.base import Suite
from dbperf.suites.dataset import ORDER_COLUMNS, Order, open_readonly
from dbperf.suites.stdlib_sqlite import CUSTOMER_ID

_COLUMNS = ", ".join(ORDER_COLUMNS)

FETCH_ALL = text(f"SELECT {_COLUMNS} FROM Orders")
FETCH_BY_CUSTOMER = text(f"SELECT {_COLUMNS} FROM Orders WHERE CustomerID = :customer_id")


class Base(DeclarativeBase):
    pass


class OrderRecord(Base):
    """ORM mapping of the Orders table."""

    __tablename__ = "Orders"

    OrderID: Mapped[int] = mapped_column(primary_key=True)
    CustomerID: Mapped[str | None]
    EmployeeID: Mapped[int | None]
    OrderDate: Mapped[str | None]
    RequiredDate: Mapped[str | None]
    ShippedDate: Mapped[str | None]
    ShipVia: Mapped[int | None]
    Freight: Mapped[float | None]
    ShipName: Mapped[str | None]
    ShipAddress: Mapped[str | None]
    ShipCity: Mapped[str | None]
    ShipRegion: Mapped[str | None]
    ShipPostalCode: Mapped[str | None]
    ShipCountry: Mapped[str | None]


def create_readonly_engine(database: Path) -> Engine:
    """Engine over a single read-only sqlite3 connection to the dataset."""
    return create_engine(
        "sqlite://",
        creator=partial(open_readonly, database),
        poolclass=StaticPool,
    )


class _SqlAlchemySuite(Suite):
    """Shared case layout; subclasses pick Core or ORM access."""

    @abstractmethod
    def connect(self, database: Path) -> Any:
        pass

    @abstractmethod
    def disconnect(self, ctx: Any) -> None:
        pass

    @abstractmethod
    def fetch_all(self, ctx: Any) -> list[Any]:
        pass

    @abstractmethod
    def fetch_by_customer(self, ctx: Any) -> list[Any]:
        pass

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


class CoreSuite(_SqlAlchemySuite):
    label = "sqlalchemy(core)"
    description = "SQLAlchemy Core text() queries, rows mapped to Order"

    def connect(self, database: Path) -> Connection:
        return create_readonly_engine(database).connect()

    def disconnect(self, conn: Connection) -> None:
        conn.close()
        conn.engine.dispose()

    def fetch_all(self, conn: Connection) -> list[Order]:
        return [Order(*row) for row in conn.execute(FETCH_ALL)]

    def fetch_by_customer(self, conn: Connection) -> list[Order]:
        result = conn.execute(FETCH_BY_CUSTOMER, {"customer_id": CUSTOMER_ID})
        return [Order(*row) for row in result]


class OrmSuite(_SqlAlchemySuite):
    label = "sqlalchemy(orm)"
    description = "SQLAlchemy ORM select() of the mapped OrderRecord class"

    def connect(self, database: Path) -> Session:
        return Session(create_readonly_engine(database))

    def disconnect(self, session: Session) -> None:
        engine = session.get_bind()
        session.close()
        engine.dispose()

    def fetch_all(self, session: Session) -> list[OrderRecord]:
        return self._fetch(session, select(OrderRecord))

    def fetch_by_customer(self, session: Session) -> list[OrderRecord]:
        return self._fetch(
            session, select(OrderRecord).where(OrderRecord.CustomerID == CUSTOMER_ID)
        )

    @staticmethod
    def _fetch(session: Session, statement) -> list[OrderRecord]:
        records = list(session.scalars(statement))
        # Empty the identity map so every call builds its objects again
        session.expunge_all()
        return records
