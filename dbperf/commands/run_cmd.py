"""Run command - executes the suites and prints the ranked report.

CLI Examples:
    dbperf run                              # All suites, 10 ramp-up / 500 measured
    dbperf run --list                       # List available suites
    dbperf run -s sqlite3 -s "sqlite3(manu)"  # Compare two suites
    dbperf run -r 3 -n 50                   # Quick run
    dbperf run -d ~/northwind.db            # Use an existing dataset
    dbperf run --config run.yaml            # Settings from a YAML run file
"""

import locale
import sys
import textwrap
from pathlib import Path

import click
import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from dbperf.benchmarks import CaseRunner, Reporter
from dbperf.models import (
    DEFAULT_DATABASE,
    DEFAULT_ROWS,
    HARNESS_ITERATIONS,
    HARNESS_RAMPUP_COUNT,
    RunConfig,
    RunFileConfig,
)
from dbperf.suites import SuiteNotFoundError, SuiteRegistry
from dbperf.suites.dataset import ensure_database
from dbperf.utils.env import EnvVarError, get_env
from dbperf.utils.logger import Logger


def load_config(config_path: str) -> RunFileConfig:
    """Load a YAML run file.

    Config format:
        rampup_count: 10
        iterations: 500
        database: /tmp/dbperf/northwind.db
        rows: 830
        suites:
          - sqlite3
          - sqlite3(manu)

    Raises:
        click.ClickException: If the file is missing, not YAML, or invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Error parsing config: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise click.ClickException("Config must be a YAML dictionary")

    try:
        return RunFileConfig(**data)
    except ValidationError as e:
        raise click.ClickException(f"Invalid config {config_path}:\n{e}") from e


def list_suites(suites: SuiteRegistry) -> None:
    """List all discovered suites."""
    click.echo("\nSuites\n")
    click.echo("-" * 60)

    summaries = suites.list_suites()
    if not summaries:
        click.echo("  No suites registered.")
        return

    for summary in summaries:
        click.echo(f"  {summary['label']:<20} {summary['suite']}")
        click.echo(
            textwrap.fill(
                summary["description"],
                width=70,
                initial_indent="      ",
                subsequent_indent="      ",
            )
        )

    click.echo("-" * 60)
    click.echo(f"Total: {len(summaries)} suites registered")


def _use_system_locale() -> None:
    """Format report numbers with the user's locale."""
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error as e:
        Logger.get("run").warning(f"Keeping default number format: {e}")


def run_perf(
    rampup: int | None = None,
    iterations: int | None = None,
    database: str | None = None,
    rows: int | None = None,
    suites: tuple[str, ...] = (),
    config: str | None = None,
    list_only: bool = False,
) -> None:
    """Run the selected suites and print the report to stdout.

    Command-line values win over the run file, which wins over DBPERF_*
    environment variables and then defaults.
    Exits with status 2 when any case fails.
    """
    log = Logger.get("run")
    registry = SuiteRegistry()

    if list_only:
        list_suites(registry)
        return

    file_config = load_config(config) if config else RunFileConfig()

    run_config = RunConfig(
        rampup_count=_first(rampup, file_config.rampup_count, HARNESS_RAMPUP_COUNT),
        iterations=_first(iterations, file_config.iterations, HARNESS_ITERATIONS),
    )
    try:
        env_database = get_env("DBPERF_DATABASE", default=DEFAULT_DATABASE, log=True)
        env_rows = get_env("DBPERF_ROWS", default=DEFAULT_ROWS, as_type=int, log=True)
        env_suites = get_env("DBPERF_SUITES", default=[], as_type=list, log=True)
    except EnvVarError as e:
        raise click.ClickException(str(e)) from e

    database_path = Path(_first(database, file_config.database, env_database)).expanduser()
    labels = list(suites) or file_config.suites or env_suites

    database_path = ensure_database(
        database_path, rows=_first(rows, file_config.rows, env_rows)
    )
    log.info(f"Dataset: {database_path}")

    try:
        case_registry = registry.build_case_registry(database_path, labels)
    except SuiteNotFoundError as e:
        valid = ", ".join(s["label"] for s in registry.list_suites())
        raise click.ClickException(f"{e}. Valid: {valid}") from e

    try:
        CaseRunner(run_config).run(case_registry)
    except Exception as e:
        click.echo(f"Something failed: {e}", err=True)
        sys.exit(2)

    _use_system_locale()
    Reporter().emit(case_registry)


def _first(*values):
    """Return the first value that is not None."""
    return next(value for value in values if value is not None)
