"""Grouping and ranking of finished cases into a column report.

The report has one block per logical test name. Within a block every
variant that implements the test is listed, fastest measured duration
first:

    Orders.fetchAll  setup    rampup   duration
      sqlite3        0.001    0.02     0.98
      sqlite3(manu)  0.001    0.041    2.015

Usage:
    from dbperf.benchmarks.report import Reporter

    Reporter().emit(registry)           # to stdout
    text = Reporter().render(registry)  # as a string
"""

import locale
import math
import sys
from io import StringIO
from typing import TextIO

from dbperf.benchmarks.base import PerfCase
from dbperf.benchmarks.registry import CaseRegistry

COLUMN_WIDTH = 8
PLACEHOLDER = "-"


def format_duration(value: float | None) -> str:
    """Format seconds as a localized decimal with at most 3 fraction digits.

    Uses the decimal point of the current ``LC_NUMERIC`` locale, without
    thousands separators. Unset, non-finite or unformattable values become ``"-"``.

    Examples:
        >>> format_duration(0.01234)
        '0.012'
        >>> format_duration(2.5)
        '2.5'
        >>> format_duration(None)
        '-'
    """
    if value is None:
        return PLACEHOLDER
    try:
        if not math.isfinite(value):
            return PLACEHOLDER
        text = locale.format_string("%.3f", value, grouping=False)
    except (TypeError, ValueError):
        return PLACEHOLDER

    decimal_point = locale.localeconv()["decimal_point"]
    if decimal_point and decimal_point in text:
        text = text.rstrip("0").rstrip(decimal_point)
    return text


def _fit(text: str, width: int) -> str:
    """Pad with spaces or truncate to exactly ``width`` characters."""
    return text[:width].ljust(width)


def group_cases(registry: CaseRegistry) -> dict[str, dict[str, PerfCase]]:
    """Group cases by test name, then by label.

    A later case with the same name and label replaces the earlier one.

    Returns:
        ``{test name: {label: case}}``
    """
    groups: dict[str, dict[str, PerfCase]] = {}
    for label, cases in registry.items():
        for case in cases:
            groups.setdefault(case.name, {})[label] = case
    return groups


def _rank_key(entry: tuple[str, PerfCase]) -> tuple[bool, float, str]:
    label, case = entry
    # Unmeasured cases go last
    return (case.duration is None, case.duration or 0.0, label)


class Reporter:
    """Renders a finished CaseRegistry as one ranked block per test name."""

    def render(self, registry: CaseRegistry) -> str:
        """Render the report.

        Blocks are ordered by test name; rows within a block by measured
        duration, ascending.

        Args:
            registry: A registry whose cases have run.

        Returns:
            The report text, one line per header or row.
        """
        groups = group_cases(registry)
        width = max(
            [len(name) for name in groups] + [len(label) for label in registry],
            default=0,
        )

        output = StringIO()
        for name in sorted(groups):
            header = [
                _fit(name, width + 2),
                "setup   ",
                "rampup  ",
                "duration",
            ]
            output.write(" ".join(header) + "\n")

            for label, case in sorted(groups[name].items(), key=_rank_key):
                row = [
                    " ",
                    _fit(label, width),
                    _fit(format_duration(case.setup_duration), COLUMN_WIDTH),
                    _fit(format_duration(case.rampup_duration), COLUMN_WIDTH),
                    _fit(format_duration(case.duration), COLUMN_WIDTH),
                ]
                output.write(" ".join(row) + "\n")

        return output.getvalue()

    def emit(self, registry: CaseRegistry, output: TextIO | None = None) -> None:
        """Write the report to a stream.

        Args:
            registry: A registry whose cases have run.
            output: Target stream, stdout if None.
        """
        stream = output if output is not None else sys.stdout
        stream.write(self.render(registry))
        if stream is not sys.stdout and stream is not sys.stderr:
            stream.flush()
