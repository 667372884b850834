"""Shared fixtures for the dbperf test suite."""

import locale
from io import StringIO

import pytest

from dbperf.utils.logger import Logger


@pytest.fixture(autouse=True)
def configured_logger():
    """Configure logging into a buffer so cases and the runner can log."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    return output


@pytest.fixture(autouse=True)
def c_numeric_locale():
    """Pin number formatting to the C locale."""
    previous = locale.setlocale(locale.LC_NUMERIC)
    locale.setlocale(locale.LC_NUMERIC, "C")
    yield
    locale.setlocale(locale.LC_NUMERIC, previous)
