"""Environment variable helpers with type coercion and logging.

Usage:
    from clientbench.utils.env import get_env, require_env, missing_env

    debug = get_env("DEBUG", default=False, as_type=bool)
    build_id = require_env("BUILD_ID")

    # Collect every unset name at once instead of failing on the first
    missing = missing_env(["ELASTICSEARCH_TARGET_URL", "BUILD_ID"])
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarNotSetError(EnvVarError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Required environment variable not set: {name}")


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        # "false", "0", "" and friends are False
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")

        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value

        # list[str] as comma-separated
        origin = getattr(as_type, "__origin__", None)
        if as_type is list or origin is list:
            return [item.strip() for item in value.split(",") if item.strip()]

        return as_type(value)

    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None, masked: bool = False) -> None:
    """Log environment variable access if the logger is configured."""
    from clientbench.utils.logger import Logger

    if not Logger.is_configured():
        return

    display_value = "***" if masked else value
    Logger.get("env").debug(f"ENV GET {name}={display_value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
    mask_in_log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is not set.
        as_type: Type to convert the value to. Supports:
            - bool: "false", "0", "", "no", "off" -> False, else True
            - int, float, str: Direct conversion
            - list: Comma-separated string -> list of strings
        log: If True, log the access (uses Logger if configured).
        mask_in_log: If True, mask the value in logs (for secrets).

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("DEBUG", default=False, as_type=bool)
        False
        >>> get_env("FILTER", default=[], as_type=list)
        []
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value, masked=mask_in_log)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def require_env(
    name: str,
    *,
    as_type: type[T] | None = None,
    log: bool = False,
    mask_in_log: bool = False,
) -> T | str:
    """Get a required environment variable (raises if not set or empty).

    Raises:
        EnvVarNotSetError: If the variable is not set.
        EnvVarTypeError: If as_type is specified and conversion fails.
    """
    value = os.environ.get(name)

    if not value:
        raise EnvVarNotSetError(name)

    if log:
        _log_access(name, value, masked=mask_in_log)

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def env_is_set(name: str) -> bool:
    """Check if an environment variable is set (not empty)."""
    value = os.environ.get(name)
    return value is not None and value != ""


def missing_env(names: Iterable[str]) -> list[str]:
    """Return the names from ``names`` that are unset or empty, in order."""
    return [name for name in names if not env_is_set(name)]
