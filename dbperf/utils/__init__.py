"""dbperf utilities - environment lookup and logging."""

from dbperf.utils.env import EnvVarError, EnvVarTypeError, get_env
from dbperf.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
]
