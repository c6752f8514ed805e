"""clientbench utilities - shared helper functions."""

from clientbench.utils.env import (
    EnvVarError,
    EnvVarNotSetError,
    EnvVarTypeError,
    env_is_set,
    get_env,
    missing_env,
    require_env,
)
from clientbench.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarNotSetError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "env_is_set",
    "get_env",
    "missing_env",
    "require_env",
]
