"""Tests for suite discovery."""

import sys
import textwrap
from unittest.mock import patch

import pytest

from dbperf.suites import (
    Suite,
    SuiteLabelCollisionError,
    SuiteNotFoundError,
    SuiteRegistry,
)

BUILTIN_LABELS = [
    "sqlalchemy(core)",
    "sqlalchemy(orm)",
    "sqlite3",
    "sqlite3(Row)",
    "sqlite3(dict)",
    "sqlite3(manu)",
]


class MockSuite(Suite):
    """A mock suite for registry testing."""

    label = "mock"
    description = "Mock"

    def get_cases(self, database):
        """Mock cases."""
        _ = database
        return []


@pytest.fixture
def suite_file(tmp_path):
    """Write a suite module to a temp dir and unload it afterwards."""
    created = []

    def write(stem, label):
        path = tmp_path / f"{stem}.py"
        path.write_text(
            textwrap.dedent(
                f"""
                from dbperf.benchmarks.base import PerfCase
                from dbperf.suites.base import Suite


                class ExtraSuite(Suite):
                    label = {label!r}
                    description = "Extra"

                    def get_cases(self, database):
                        return [PerfCase("Extra.op", lambda: database, lambda db: None)]
                """
            )
        )
        created.append(f"dbperf.suites.{stem}")
        return path

    yield write

    for module_name in created:
        sys.modules.pop(module_name, None)


def test_registry_lazy_discovery():
    """Test that suite discovery is lazy by default."""
    with patch.object(SuiteRegistry, "_discover_suites") as mock_discover:
        registry = SuiteRegistry(lazy=True)
        assert not registry._discovered
        mock_discover.assert_not_called()

        _ = registry.get_all_suites()
        assert registry._discovered
        mock_discover.assert_called_once()


def test_builtin_suites_discovered():
    """Test the bundled suites are found under their labels."""
    registry = SuiteRegistry()

    assert [summary["label"] for summary in registry.list_suites()] == BUILTIN_LABELS
    assert len(registry) == 6
    assert "sqlite3(manu)" in registry
    assert registry.get_suite("sqlite3").__name__ == "RawTupleSuite"


def test_abstract_suites_skipped():
    """Test abstract helper bases are not registered."""
    registry = SuiteRegistry()
    assert all(not cls.__name__.startswith("_") for cls in registry.get_all_suites())


def test_get_suite_not_found():
    """Test looking up an unknown label."""
    registry = SuiteRegistry(include_defaults=False)
    registry._suites["mock"] = MockSuite
    registry._discovered = True

    assert registry.get_suite("mock") is MockSuite
    with pytest.raises(SuiteNotFoundError):
        registry.get_suite("GRDB")


def test_extra_search_path(suite_file):
    """Test suites are loaded from additional files."""
    path = suite_file("dbperf_extra_suite", "extra")

    registry = SuiteRegistry(search_paths=[path], include_defaults=False)

    assert [summary["label"] for summary in registry.list_suites()] == ["extra"]


def test_label_collision(suite_file):
    """Test two suites declaring the same label are rejected."""
    path = suite_file("dbperf_duplicate_suite", "sqlite3")

    with pytest.raises(SuiteLabelCollisionError) as exc_info:
        SuiteRegistry(search_paths=[path], lazy=False)

    assert exc_info.value.label == "sqlite3"


def test_build_case_registry_order(tmp_path):
    """Test requested labels keep their order and setups stay unrun."""
    registry = SuiteRegistry()
    database = tmp_path / "missing.db"

    cases = registry.build_case_registry(database, ["sqlite3(manu)", "sqlite3"])

    assert cases.labels() == ["sqlite3(manu)", "sqlite3"]
    assert [case.name for case in cases.cases("sqlite3")] == [
        "Orders.fetchAll",
        "Orders.fetchByCustomer",
    ]
    # Building must not open the dataset
    assert not database.exists()


def test_build_case_registry_defaults_to_all(tmp_path):
    """Test all suites are included, sorted by label, when none are requested."""
    cases = SuiteRegistry().build_case_registry(tmp_path / "nw.db")
    assert cases.labels() == BUILTIN_LABELS


def test_build_case_registry_unknown_label(tmp_path):
    """Test requesting an unknown label raises."""
    with pytest.raises(SuiteNotFoundError):
        SuiteRegistry().build_case_registry(tmp_path / "nw.db", ["Lighter"])
