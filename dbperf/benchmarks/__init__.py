"""Benchmark engine for dbperf.

This module provides:
- PerfCase: a named setup step plus a repeatable timed operation
- CaseRegistry: labeled, ordered collections of cases
- CaseRunner: sequential, fail-fast execution of a registry
- Reporter: per-test-name ranking of the finished cases

Quick Start:
    from dbperf.benchmarks import CaseRegistry, CaseRunner, PerfCase, Reporter
    from dbperf.models import RunConfig

    registry = CaseRegistry()
    registry.add("sqlite3", [PerfCase("Orders.fetchAll", setup, test)])
    CaseRunner(RunConfig(rampup_count=10, iterations=500)).run(registry)
    Reporter().emit(registry)
"""

from dbperf.benchmarks.base import PerfCase
from dbperf.benchmarks.registry import CaseRegistry
from dbperf.benchmarks.report import Reporter, format_duration, group_cases
from dbperf.benchmarks.runner import CaseRunner

__all__ = [
    "CaseRegistry",
    "CaseRunner",
    "PerfCase",
    "Reporter",
    "format_duration",
    "group_cases",
]
