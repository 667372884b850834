"""Tests for the case registry."""

import pytest

from dbperf.benchmarks import CaseRegistry, PerfCase


def _case(name):
    return PerfCase(name, lambda: None, lambda ctx: None)


def test_registration_order_is_kept():
    """Test labels and cases come back in insertion order."""
    registry = CaseRegistry()
    registry.add("zeta", [_case("Q1"), _case("Q2")])
    registry.add("alpha", [_case("Q1")])

    assert registry.labels() == ["zeta", "alpha"]
    assert list(registry) == ["zeta", "alpha"]
    assert [case.name for case in registry.cases("zeta")] == ["Q1", "Q2"]
    assert [label for label, _ in registry.items()] == ["zeta", "alpha"]


def test_add_extends_existing_label():
    """Test adding to an existing label appends its cases."""
    registry = CaseRegistry()
    registry.add("sqlite3", [_case("Q1")])
    registry.add("sqlite3", [_case("Q2")])

    assert len(registry) == 1
    assert [case.name for case in registry.cases("sqlite3")] == ["Q1", "Q2"]


def test_counts_and_membership():
    """Test label count, case count and membership."""
    registry = CaseRegistry()
    registry.add("a", [_case("Q1"), _case("Q1")])
    registry.add("b", [_case("Q1")])

    assert len(registry) == 2
    assert registry.case_count == 3
    assert "a" in registry
    assert "c" not in registry


def test_cases_returns_copy():
    """Test callers cannot reorder the registry through returned lists."""
    registry = CaseRegistry()
    registry.add("a", [_case("Q1"), _case("Q2")])

    registry.cases("a").reverse()

    assert [case.name for case in registry.cases("a")] == ["Q1", "Q2"]


def test_unknown_label():
    """Test looking up an unregistered label."""
    with pytest.raises(KeyError):
        CaseRegistry().cases("missing")
