#!/usr/bin/env python3
"""dbperf CLI - Command-line interface for dbperf."""

import click

from dbperf.models import DEFAULT_DATABASE
from dbperf.utils.env import get_env
from dbperf.utils.logger import Logger


@click.group()
def dbperf():
    """Compare the speed of data-access strategies on one dataset."""
    if not Logger.is_configured():
        # Logs go to stderr; stdout carries the report
        Logger.configure(
            level=get_env("DBPERF_LOG_LEVEL", default="INFO"),
            output="stderr",
            timestamps=True,
        )


@dbperf.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display dbperf version information."""
    from dbperf.commands.version_cmd import run_version

    run_version(verbose=verbose)


@dbperf.command()
@click.option(
    "--list",
    "-l",
    "list_only",
    is_flag=True,
    help="List available suites",
)
@click.option(
    "--suite",
    "-s",
    "suites",
    multiple=True,
    help="Run specific suite(s) by label (e.g., 'sqlite3(manu)'). Repeatable.",
)
@click.option(
    "--rampup",
    "-r",
    type=click.IntRange(min=1),
    default=None,
    help="Ramp-up calls per case (default: 10)",
)
@click.option(
    "--iterations",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Measured calls per case (default: 500)",
)
@click.option(
    "--database",
    "-d",
    default=None,
    help=f"SQLite dataset, generated if missing (default: $DBPERF_DATABASE or {DEFAULT_DATABASE})",
)
@click.option(
    "--rows",
    type=click.IntRange(min=1),
    default=None,
    help="Orders to generate when the dataset is missing (default: 830)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    default=None,
    help="YAML run file with rampup_count, iterations, database, rows, suites",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output",
)
def run(list_only, suites, rampup, iterations, database, rows, config, verbose):
    r"""Run the benchmark suites and print a ranked report.

    \b
    Examples:
      dbperf run                               # Run every suite
      dbperf run --list                        # List available suites
      dbperf run -s sqlite3 -s "sqlite3(Row)"  # Compare two suites
      dbperf run -r 3 -n 50                    # Quick run
      dbperf run --config run.yaml             # Use a run file
    """
    from dbperf.commands.run_cmd import run_perf

    if verbose:
        Logger.set_level("DEBUG")

    run_perf(
        rampup=rampup,
        iterations=iterations,
        database=database,
        rows=rows,
        suites=suites,
        config=config,
        list_only=list_only,
    )


if __name__ == "__main__":
    dbperf()
