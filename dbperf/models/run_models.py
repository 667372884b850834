"""Models for run configuration."""

from pydantic import BaseModel, ConfigDict, Field

# Defaults when a RunConfig is built without arguments
DEFAULT_RAMPUP_COUNT = 3
DEFAULT_ITERATIONS = 10

# What the command line harness uses unless told otherwise
HARNESS_RAMPUP_COUNT = 10
HARNESS_ITERATIONS = 500

DEFAULT_DATABASE = "/tmp/dbperf/northwind.db"
DEFAULT_ROWS = 830  # size of the Northwind Orders table


class RunConfig(BaseModel):
    """Run-scoped tunables shared by every case of one run."""

    model_config = ConfigDict(frozen=True)

    rampup_count: int = Field(
        DEFAULT_RAMPUP_COUNT,
        ge=1,
        description="Warm-up invocations per case (timed, not ranked)",
    )
    iterations: int = Field(
        DEFAULT_ITERATIONS,
        ge=1,
        description="Measured invocations per case",
    )


class RunFileConfig(BaseModel):
    """Contents of a YAML run file.

    Example:
        rampup_count: 10
        iterations: 500
        database: /tmp/dbperf/northwind.db
        rows: 830
        suites:
          - sqlite3
          - sqlite3(manu)
    """

    model_config = ConfigDict(extra="forbid")

    rampup_count: int | None = Field(None, ge=1, description="Warm-up invocations")
    iterations: int | None = Field(None, ge=1, description="Measured invocations")
    database: str | None = Field(None, description="Path of the SQLite dataset")
    rows: int | None = Field(
        None, ge=1, description="Rows to generate when the dataset is missing"
    )
    suites: list[str] = Field(
        default_factory=list, description="Suite labels to run (empty runs all)"
    )
