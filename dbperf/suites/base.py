"""Base class for data-access suites."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from dbperf.benchmarks.base import PerfCase


class Suite(ABC):
    """One data-access strategy, contributing a labeled list of cases.

    Subclasses placed in ``dbperf/suites/`` are discovered by
    ``SuiteRegistry``. The ``label`` names the variant in the report and
    must be unique across suites; case names are shared between suites so
    that the same logical operation can be compared.

    Example:
        >>> class RawTuples(Suite):
        ...     label = "sqlite3"
        ...     description = "Plain cursor, rows stay tuples"
        ...
        ...     def get_cases(self, database):
        ...         return [PerfCase("Orders.fetchAll", ..., ...)]
    """

    label: ClassVar[str] = ""
    description: ClassVar[str] = ""

    @abstractmethod
    def get_cases(self, database: Path) -> list[PerfCase]:
        """Build this suite's cases against a dataset.

        Must not open the database; opening belongs to each case's setup
        so that it is timed as part of the setup phase.

        Args:
            database: Path of the SQLite dataset.

        Returns:
            Cases in execution order.
        """
        pass
