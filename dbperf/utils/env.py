"""Environment variable lookup with type coercion.

Usage:
    from dbperf.utils.env import get_env

    level = get_env("DBPERF_LOG_LEVEL", default="INFO")
    rows = get_env("DBPERF_ROWS", default=830, as_type=int)
    labels = get_env("DBPERF_SUITES", default=[], as_type=list)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to int, str or a comma-separated list.

    Raises:
        EnvVarTypeError: If conversion fails or the type is unsupported.
    """
    if as_type is str:
        return value
    if as_type is int:
        try:
            return int(value)
        except ValueError as e:
            raise EnvVarTypeError(name, value, as_type) from e
    # DBPERF_SUITES="sqlite3,sqlite3(Row)"
    if as_type is list:
        return [item.strip() for item in value.split(",") if item.strip()]

    raise EnvVarTypeError(name, value, as_type)


def _log_access(name: str, value: str | None) -> None:
    """Log an environment lookup if the logger is configured."""
    from dbperf.utils.logger import Logger

    if Logger.is_configured():
        Logger.get("env").debug(f"ENV GET {name}={value}")


@overload
def get_env(name: str, *, default: T, as_type: type, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T | str:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type | None = None,
    log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        as_type: ``int``, ``str`` or ``list`` (comma-separated, blanks dropped).
        log: If True, log the access at DEBUG (only once the logger is configured).

    Returns:
        The environment variable value, converted to as_type if specified,
        or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("DBPERF_ROWS", default=830, as_type=int)
        830
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value
