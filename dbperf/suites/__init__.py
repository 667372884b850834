"""Data-access strategy suites compared by dbperf.

Every concrete ``Suite`` subclass in this package is picked up by
``SuiteRegistry``; each contributes one label and its cases.
"""

from dbperf.suites.base import Suite
from dbperf.suites.registry import (
    SuiteLabelCollisionError,
    SuiteNotFoundError,
    SuiteRegistry,
    SuiteRegistryError,
)

__all__ = [
    "Suite",
    "SuiteLabelCollisionError",
    "SuiteNotFoundError",
    "SuiteRegistry",
    "SuiteRegistryError",
]
