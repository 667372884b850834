"""
Version command - displays dbperf version information
"""

import platform
import sqlite3

import click

from dbperf import __version__


def run_version(verbose: bool = False) -> None:
    """
    Display dbperf version information.

    Args:
        verbose: If True, also show the Python and SQLite versions in use
    """
    click.echo(f"dbperf {__version__}")
    if verbose:
        click.echo("\nDetailed version information:")
        click.echo(f"  Python:  {platform.python_version()}")
        click.echo(f"  SQLite:  {sqlite3.sqlite_version}")
