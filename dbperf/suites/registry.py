"""Registry for automatic discovery of data-access suites.

Usage:
    from dbperf.suites.registry import SuiteRegistry

    # Discover all suites from dbperf/suites/
    suites = SuiteRegistry()

    # Summaries for --list
    suites.list_suites()

    # Build the case registry for a run
    registry = suites.build_case_registry(Path("/tmp/dbperf/northwind.db"))
"""

import importlib.util
import inspect
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any, ClassVar

from dbperf.benchmarks.registry import CaseRegistry
from dbperf.suites.base import Suite


class SuiteRegistryError(Exception):
    """Base exception for suite registry errors."""

    pass


class SuiteLabelCollisionError(SuiteRegistryError):
    """Raised when two suites declare the same label."""

    def __init__(self, label: str, suite1: type, suite2: type) -> None:
        self.label = label
        self.suite1 = suite1
        self.suite2 = suite2
        super().__init__(
            f"Suite label collision: '{label}' is declared by both "
            f"{suite1.__module__}.{suite1.__name__} and "
            f"{suite2.__module__}.{suite2.__name__}"
        )


class SuiteNotFoundError(SuiteRegistryError):
    """Raised when a requested suite label is not registered."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Suite not found: '{label}'")


class SuiteRegistry:
    """Discovers ``Suite`` subclasses and turns them into a CaseRegistry.

    Scans ``dbperf/suites/`` plus any extra search paths for concrete
    ``Suite`` subclasses, keyed by their ``label``.

    Raises SuiteLabelCollisionError if two suites declare the same label.

    Example:
        >>> suites = SuiteRegistry()
        >>> suites.list_suites()
        [{'label': 'sqlite3', 'suite': 'RawTupleSuite', ...}, ...]
        >>> registry = suites.build_case_registry(db_path, ["sqlite3"])
    """

    DEFAULT_PATHS: ClassVar[list[Path]] = [
        Path(__file__).parent,  # dbperf/suites/
    ]

    def __init__(
        self,
        search_paths: list[str | Path] | None = None,
        include_defaults: bool = True,
        lazy: bool = True,
    ) -> None:
        """Initialize the suite registry.

        Args:
            search_paths: Additional directories or files to search for suites.
            include_defaults: If True, include the default dbperf/suites/ directory.
            lazy: If True, defer discovery until first access.

        Raises:
            SuiteLabelCollisionError: If two suites declare the same label.
        """
        self._suites: dict[str, type[Suite]] = {}
        self._paths: list[Path] = []
        self._discovered: bool = False

        if include_defaults:
            self._paths.extend(self.DEFAULT_PATHS)

        if search_paths:
            self._paths.extend(Path(p) for p in search_paths)

        if not lazy:
            self._discover_suites()
            self._discovered = True

    def _ensure_discovered(self) -> None:
        """Ensure suites have been discovered."""
        if not self._discovered:
            self._discover_suites()
            self._discovered = True

    def _discover_suites(self) -> None:
        """Discover all Suite subclasses in registered paths."""
        for path in self._paths:
            if not path.exists():
                continue

            if path.is_file() and path.suffix == ".py":
                self._load_suites_from_file(path)
            elif path.is_dir():
                for py_file in sorted(path.glob("*.py")):
                    if py_file.name.startswith("_"):
                        continue
                    self._load_suites_from_file(py_file)

    def _load_suites_from_file(self, filepath: Path) -> None:
        """Load all Suite subclasses from a Python file."""
        module_name = f"dbperf.suites.{filepath.stem}"

        if module_name in sys.modules:
            module = sys.modules[module_name]
        else:
            spec = importlib.util.spec_from_file_location(module_name, filepath)
            if spec is None or spec.loader is None:
                return
            module = importlib.util.module_from_spec(spec)
            sys.modules[module_name] = module
            try:
                spec.loader.exec_module(module)
            except BaseException:
                del sys.modules[module_name]
                raise

        for _name, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, Suite)
                and obj is not Suite
                and not inspect.isabstract(obj)
                and obj.__module__ == module_name
            ):
                self._register_suite(obj)

    def _register_suite(self, suite_cls: type[Suite]) -> None:
        """Register a suite class, checking for label collisions."""
        label = suite_cls.label or suite_cls.__name__

        if label in self._suites:
            existing = self._suites[label]
            if existing is not suite_cls:
                raise SuiteLabelCollisionError(label, existing, suite_cls)
        else:
            self._suites[label] = suite_cls

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def get_all_suites(self) -> list[type[Suite]]:
        """Get all registered suite classes, sorted by label."""
        self._ensure_discovered()
        return [self._suites[label] for label in sorted(self._suites)]

    def get_suite(self, label: str) -> type[Suite]:
        """Get a suite class by label.

        Raises:
            SuiteNotFoundError: If no suite has this label.
        """
        self._ensure_discovered()
        if label not in self._suites:
            raise SuiteNotFoundError(label)
        return self._suites[label]

    def list_suites(self) -> list[dict[str, Any]]:
        """Get a summary of all registered suites.

        Returns:
            List of dicts with label, suite class name and description.
        """
        self._ensure_discovered()
        return [
            {
                "label": label,
                "suite": suite_cls.__name__,
                "description": suite_cls.description,
            }
            for label, suite_cls in sorted(self._suites.items())
        ]

    def build_case_registry(
        self,
        database: Path,
        labels: Iterable[str] | None = None,
    ) -> CaseRegistry:
        """Instantiate suites and collect their cases.

        Args:
            database: Path of the SQLite dataset handed to every suite.
            labels: Labels to include, in execution order. None means all
                suites, sorted by label.

        Returns:
            A CaseRegistry whose setups have not run yet.

        Raises:
            SuiteNotFoundError: If a requested label is not registered.
        """
        self._ensure_discovered()
        selected = list(labels) if labels else sorted(self._suites)

        registry = CaseRegistry()
        for label in selected:
            suite = self.get_suite(label)()
            registry.add(label, suite.get_cases(database))
        return registry

    def __len__(self) -> int:
        """Return number of registered suites."""
        self._ensure_discovered()
        return len(self._suites)

    def __contains__(self, label: str) -> bool:
        """Check if a suite label is registered."""
        self._ensure_discovered()
        return label in self._suites
