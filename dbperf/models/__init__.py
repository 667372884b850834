"""Pydantic models for run configuration."""

from dbperf.models.run_models import (
    DEFAULT_DATABASE,
    DEFAULT_ITERATIONS,
    DEFAULT_RAMPUP_COUNT,
    DEFAULT_ROWS,
    HARNESS_ITERATIONS,
    HARNESS_RAMPUP_COUNT,
    RunConfig,
    RunFileConfig,
)

__all__ = [
    "DEFAULT_DATABASE",
    "DEFAULT_ITERATIONS",
    "DEFAULT_RAMPUP_COUNT",
    "DEFAULT_ROWS",
    "HARNESS_ITERATIONS",
    "HARNESS_RAMPUP_COUNT",
    "RunConfig",
    "RunFileConfig",
]
