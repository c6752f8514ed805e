"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from clientbench.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")

    with pytest.raises(LoggerNotConfiguredError):
        Logger.set_level("DEBUG")


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    log = Logger.get("test_config")
    log.debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[clientbench.test_config]" in content
    assert "Debug message" in content


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_dim_debug_only_styles_debug():
    """Debug records are dimmed, higher levels are left alone."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False, dim_debug=True)

    log = Logger.get("transport")
    log.debug("trace")
    log.error("failure")

    debug_line, error_line = output.getvalue().splitlines()
    assert debug_line.startswith("\x1b[2m")
    assert not error_line.startswith("\x1b[")


def test_invalid_output():
    """Unsupported outputs are rejected."""
    with pytest.raises(ValueError):
        Logger.configure(output=42)  # type: ignore[arg-type]


def test_component_logger_before_configuration(monkeypatch: pytest.MonkeyPatch):
    """component() works unconfigured and picks up the handler once configured."""
    monkeypatch.setattr(Logger, "_configured", False)

    log = Logger.component("runner")
    assert log.name == "clientbench.runner"

    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    Logger.component("runner").debug("configured now")

    assert "[clientbench.runner] configured now" in output.getvalue()
