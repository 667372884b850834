"""Tests for run configuration models."""

import pytest
from pydantic import ValidationError

from dbperf.models import (
    DEFAULT_ITERATIONS,
    DEFAULT_RAMPUP_COUNT,
    RunConfig,
    RunFileConfig,
)


def test_run_config_defaults():
    """Test the default ramp-up and iteration counts."""
    config = RunConfig()
    assert config.rampup_count == DEFAULT_RAMPUP_COUNT == 3
    assert config.iterations == DEFAULT_ITERATIONS == 10


@pytest.mark.parametrize("field", ["rampup_count", "iterations"])
def test_run_config_rejects_zero(field):
    """Test both counts must be at least one."""
    with pytest.raises(ValidationError):
        RunConfig(**{field: 0})


def test_run_config_is_frozen():
    """Test a run config cannot change once built."""
    config = RunConfig(rampup_count=10, iterations=500)
    with pytest.raises(ValidationError):
        config.iterations = 1


def test_run_file_config():
    """Test parsing a complete run file."""
    config = RunFileConfig(
        rampup_count=5,
        iterations=50,
        database="/tmp/northwind.db",
        rows=100,
        suites=["sqlite3", "sqlite3(manu)"],
    )
    assert config.suites == ["sqlite3", "sqlite3(manu)"]
    assert RunFileConfig().suites == []
    assert RunFileConfig().iterations is None


def test_run_file_config_rejects_unknown_keys():
    """Test typos in a run file are reported."""
    with pytest.raises(ValidationError):
        RunFileConfig(iteration=5)
