"""Tests for the clientbench CLI and run command."""

from datetime import UTC, datetime

import pytest
from click.testing import CliRunner

from clientbench.cli import clientbench
from clientbench.commands import run_cmd
from clientbench.config import HarnessConfig
from clientbench.runner import Operation, Outcome, Runner, Sample
from clientbench.scenarios import Scenario

NOW = datetime(2026, 10, 19, tzinfo=UTC)


class FakeSearchClient:
    """SearchClient stand-in serving both the target and the report cluster."""

    instances: list["FakeSearchClient"] = []

    def __init__(self, url, timeout=None, retries=0):
        self.url = url
        self.timeout = timeout
        self.retries = retries
        self.bulk_calls = []
        FakeSearchClient.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None

    def ping(self):
        return True

    def info(self):
        return {}

    def bulk(self, index, operations):
        self.bulk_calls.append((index, list(operations)))
        return {"errors": False, "items": [{"index": {"status": 201}} for _ in operations]}


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Complete environment for a run."""
    for name in HarnessConfig.REQUIRED_VARIABLES:
        monkeypatch.setenv(name, "x")
    monkeypatch.setenv("DATA_SOURCE", str(tmp_path))
    monkeypatch.setenv("ELASTICSEARCH_TARGET_URL", "http://target:9200")
    monkeypatch.setenv("ELASTICSEARCH_REPORT_URL", "http://report:9200")
    monkeypatch.delenv("FILTER", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    FakeSearchClient.instances = []
    monkeypatch.setattr(run_cmd, "SearchClient", FakeSearchClient)


def test_version_command():
    """version prints the semantic version."""
    result = CliRunner().invoke(clientbench, ["version"])

    assert result.exit_code == 0
    assert result.output.startswith("clientbench ")


def test_run_reports_missing_configuration(monkeypatch: pytest.MonkeyPatch):
    """Missing variables print an error and exit 1."""
    for name in HarnessConfig.REQUIRED_VARIABLES:
        monkeypatch.delenv(name, raising=False)

    result = CliRunner().invoke(clientbench, ["run"])

    assert result.exit_code == 1
    assert "ERROR: Required environment variables" in result.output


def test_run_selected_scenarios(env):
    """A filtered run prints one summary per scenario and reports the samples."""
    result = CliRunner().invoke(clientbench, ["run", "-f", "ping", "-f", "info", "-n", "3"])

    assert result.exit_code == 0, result.output
    assert "[ping]" in result.output
    assert "[info]" in result.output
    assert "[get]" not in result.output
    assert "3x" in result.output
    assert "runner=success report=success" in result.output
    assert "Finished in 00:00:" in result.output

    target, report = FakeSearchClient.instances
    assert target.url == "http://target:9200"
    assert (report.url, report.timeout, report.retries) == ("http://report:9200", 300, 10)
    assert [len(ops) for _, ops in report.bulk_calls] == [3, 3]


def test_run_scenarios_continues_after_setup_failure(identity, reporter, bulk_client):
    """A scenario that cannot start is reported and the next one still runs."""

    def broken(runner):
        raise RuntimeError("no cluster")

    scenarios = [
        Scenario(
            action="get",
            warmups=0,
            repetitions=2,
            setup=Operation.contextual(broken),
            measure=Operation.indexed(lambda n, r: True),
        ),
        Scenario(
            action="ping",
            warmups=0,
            repetitions=2,
            measure=Operation.indexed(lambda n, r: True),
        ),
    ]
    runner = Runner(identity=identity, reporter=reporter)

    assert run_cmd.run_scenarios(runner, scenarios) is False
    assert len(bulk_client.calls) == 1


def test_format_helpers():
    """Summary helpers format means, statuses and elapsed time."""
    samples = [
        Sample(start=NOW, duration=2_000_000, outcome=Outcome.SUCCESS),
        Sample(start=NOW, duration=4_000_000, outcome=Outcome.FAILURE),
    ]

    assert run_cmd.format_mean(samples) == "3ms"
    assert run_cmd.format_mean([]) == "n/a"
    assert run_cmd.format_elapsed(3_725) == "01:02:05"
    assert "runner=" in run_cmd.format_summary(
        Scenario("ping", 0, 2, Operation.plain(lambda: True)), samples, True
    )
