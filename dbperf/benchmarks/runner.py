"""Runner executing every case of a registry, sequentially and fail-fast.

Usage:
    from dbperf.benchmarks.runner import CaseRunner
    from dbperf.models import RunConfig

    runner = CaseRunner(RunConfig(rampup_count=10, iterations=500))
    runner.run(registry)  # raises on the first failing case
"""

import logging
from datetime import UTC, datetime

from dbperf.benchmarks.registry import CaseRegistry
from dbperf.models.run_models import RunConfig


class CaseRunner:
    """Runs all cases of a CaseRegistry one after another.

    Cases run in registry order and never overlap. The first exception,
    from a setup or from a test call, stops the run and is re-raised as is:
    a partially run registry is not reported.

    Example:
        >>> runner = CaseRunner(RunConfig(rampup_count=1, iterations=1))
        >>> Reporter().emit(runner.run(registry))
    """

    def __init__(self, config: RunConfig | None = None) -> None:
        """Initialize the runner.

        Args:
            config: Ramp-up and iteration counts shared by every case.
        """
        self.config = config if config is not None else RunConfig()

    def run(self, registry: CaseRegistry) -> CaseRegistry:
        """Run every case of the registry.

        Args:
            registry: Labels and their cases, in execution order.

        Returns:
            The same registry, with every case's timings filled in.

        Raises:
            Exception: The first failure from any case, unchanged.
        """
        self.logger.info(
            f"Start running {registry.case_count} cases "
            f"(rampup={self.config.rampup_count}, "
            f"iterations={self.config.iterations}): {self._now()}"
        )

        for label, cases in registry.items():
            self.logger.info(f"  {label}: {self._now()}")
            for case in cases:
                try:
                    case.run(self.config)
                except Exception:
                    self.logger.error(f"Case '{case.name}' of '{label}' failed")
                    raise

        self.logger.info(f"Finished running cases: {self._now()}")
        return registry

    @staticmethod
    def _now() -> str:
        return datetime.now(UTC).isoformat()

    @property
    def logger(self) -> logging.Logger:
        """Get the logger for the runner, a plain one if Logger is unconfigured."""
        from dbperf.utils.logger import Logger

        if Logger.is_configured():
            return Logger.get("runner")
        return logging.getLogger("dbperf.runner")
