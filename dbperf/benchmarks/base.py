"""Benchmark case: a named setup step plus a repeatable timed operation."""

import logging
import time
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dbperf.models.run_models import RunConfig

Context = TypeVar("Context")

_NO_CONTEXT = object()


class PerfCase(Generic[Context]):
    """One timed unit of work under one variant.

    A case is built from a setup callable producing an opaque context (a
    connection, a handle, a pool) and a test callable that performs one
    unit of work against that context. Cases sharing a ``name`` across
    variants are compared against each other in the report.

    Lifecycle of ``run()``:
        1. setup - called exactly once, produces the context
        2. ramp-up - ``rampup_count`` test calls, timed, not ranked
        3. measured - ``iterations`` test calls, the ranked figure
        4. total - elapsed time of the whole case, recorded even on failure
        5. teardown - optional, receives the context once setup succeeded,
           runs after ``total`` is recorded and also on failure

    Timing fields are ``None`` until the corresponding phase finished.
    Setup never runs before ``run()``, so building a registry of cases has
    no side effects.

    Example:
        >>> case = PerfCase(
        ...     "Orders.fetchAll",
        ...     lambda: sqlite3.connect("northwind.db"),
        ...     lambda db: db.execute("SELECT * FROM Orders").fetchall(),
        ... )
        >>> case.run(RunConfig(rampup_count=10, iterations=500))
        >>> case.duration
        0.412
    """

    def __init__(
        self,
        name: str,
        setup: Callable[[], Context],
        test: Callable[[Context], Any],
        teardown: Callable[[Context], Any] | None = None,
    ) -> None:
        self.name = name
        self._setup = setup
        self._test = test
        self._teardown = teardown

        self.setup_duration: float | None = None
        self.rampup_duration: float | None = None
        self.duration: float | None = None
        self.total: float | None = None

    def __repr__(self) -> str:
        return f"PerfCase(name={self.name!r}, duration={self.duration!r})"

    @property
    def is_complete(self) -> bool:
        """True once every phase of ``run()`` has been measured."""
        return None not in (
            self.setup_duration,
            self.rampup_duration,
            self.duration,
            self.total,
        )

    def run(self, config: RunConfig | None = None) -> None:
        """Run setup, ramp-up and measured phases, recording their timings.

        Args:
            config: Ramp-up and iteration counts for this run. Defaults to
                ``RunConfig()`` (3 ramp-up calls, 10 measured calls).

        Raises:
            Exception: Whatever setup or the test operation raised. Later
                phases are skipped; ``total`` is still recorded.
        """
        if config is None:
            config = RunConfig()

        self.logger.debug("Running setup...")
        ctx: Any = _NO_CONTEXT
        start = time.perf_counter()
        try:
            ctx = self._setup()
            self.setup_duration = time.perf_counter() - start

            self.logger.debug(f"Ramping up ({config.rampup_count} calls)...")
            phase_start = time.perf_counter()
            for _ in range(config.rampup_count):
                self._test(ctx)
            self.rampup_duration = time.perf_counter() - phase_start

            self.logger.debug(f"Measuring ({config.iterations} calls)...")
            phase_start = time.perf_counter()
            for _ in range(config.iterations):
                self._test(ctx)
            self.duration = time.perf_counter() - phase_start
        finally:
            self.total = time.perf_counter() - start
            if self._teardown is not None and ctx is not _NO_CONTEXT:
                self.logger.debug("Tearing down...")
                self._teardown(ctx)

        self.logger.debug(f"Case complete in {self.total:.3f}s")

    def to_dict(self) -> dict[str, Any]:
        """Convert the case's timings to a dictionary."""
        return {
            "name": self.name,
            "setup_duration": self.setup_duration,
            "rampup_duration": self.rampup_duration,
            "duration": self.duration,
            "total": self.total,
        }

    @property
    def logger(self) -> logging.Logger:
        """Get the logger for this case.

        Falls back to a plain ``dbperf.benchmark.<name>`` logger when the
        application never configured Logger, so cases run standalone.
        """
        from dbperf.utils.logger import Logger

        if Logger.is_configured():
            return Logger.get(f"benchmark.{self.name}")
        return logging.getLogger(f"dbperf.benchmark.{self.name}")
