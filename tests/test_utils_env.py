"""Tests for the environment variable utility."""

import pytest

from clientbench.utils.env import (
    EnvVarNotSetError,
    EnvVarTypeError,
    env_is_set,
    get_env,
    missing_env,
    require_env,
)


def test_get_env_basic(monkeypatch: pytest.MonkeyPatch):
    """Test getting set variables and missing variables with defaults."""
    monkeypatch.setenv("CLIENTBENCH_TEST_VAR", "test_value")
    monkeypatch.delenv("CLIENTBENCH_MISSING_VAR", raising=False)

    assert get_env("CLIENTBENCH_TEST_VAR") == "test_value"
    assert get_env("CLIENTBENCH_MISSING_VAR", default="default") == "default"
    assert get_env("CLIENTBENCH_MISSING_VAR") is None


def test_get_env_coercion(monkeypatch: pytest.MonkeyPatch):
    """Test type coercion for common types."""
    monkeypatch.setenv("CLIENTBENCH_BOOL_TRUE", "true")
    monkeypatch.setenv("CLIENTBENCH_BOOL_FALSE", "0")
    monkeypatch.setenv("CLIENTBENCH_INT", "123")
    monkeypatch.setenv("CLIENTBENCH_FLOAT", "1.23")
    monkeypatch.setenv("CLIENTBENCH_LIST", "ping, get ,")

    assert get_env("CLIENTBENCH_BOOL_TRUE", as_type=bool) is True
    assert get_env("CLIENTBENCH_BOOL_FALSE", as_type=bool) is False
    assert get_env("CLIENTBENCH_INT", as_type=int) == 123
    assert get_env("CLIENTBENCH_FLOAT", as_type=float) == 1.23
    assert get_env("CLIENTBENCH_LIST", as_type=list) == ["ping", "get"]

    monkeypatch.setenv("CLIENTBENCH_INVALID_INT", "not_an_int")
    with pytest.raises(EnvVarTypeError):
        get_env("CLIENTBENCH_INVALID_INT", as_type=int)


def test_get_env_logs_masked_access(monkeypatch: pytest.MonkeyPatch, log_output):
    """Logged access can hide secret values."""
    monkeypatch.setenv("CLIENTBENCH_SECRET", "hunter2")

    get_env("CLIENTBENCH_SECRET", log=True, mask_in_log=True)

    assert "ENV GET CLIENTBENCH_SECRET=***" in log_output.getvalue()
    assert "hunter2" not in log_output.getvalue()


def test_require_env(monkeypatch: pytest.MonkeyPatch):
    """Test getting required variables."""
    monkeypatch.setenv("CLIENTBENCH_REQUIRED", "exists")
    monkeypatch.setenv("CLIENTBENCH_EMPTY", "")
    monkeypatch.delenv("CLIENTBENCH_NON_EXISTENT", raising=False)

    assert require_env("CLIENTBENCH_REQUIRED") == "exists"

    with pytest.raises(EnvVarNotSetError):
        require_env("CLIENTBENCH_NON_EXISTENT")
    with pytest.raises(EnvVarNotSetError):
        require_env("CLIENTBENCH_EMPTY")


def test_missing_env(monkeypatch: pytest.MonkeyPatch):
    """Unset and empty names are collected in order."""
    monkeypatch.setenv("CLIENTBENCH_A", "1")
    monkeypatch.setenv("CLIENTBENCH_B", "")
    monkeypatch.delenv("CLIENTBENCH_C", raising=False)

    assert env_is_set("CLIENTBENCH_A")
    assert not env_is_set("CLIENTBENCH_B")
    assert missing_env(["CLIENTBENCH_C", "CLIENTBENCH_A", "CLIENTBENCH_B"]) == [
        "CLIENTBENCH_C",
        "CLIENTBENCH_B",
    ]
