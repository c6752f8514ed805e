"""Shared fixtures for clientbench tests."""

from io import StringIO
from typing import Any

import pytest

from clientbench.models.identity_models import BenchmarkIdentity, ClientIdentity
from clientbench.report.reporter import Reporter
from clientbench.utils.logger import Logger


def ok_response(operations: list[Any]) -> dict[str, Any]:
    """Build a successful bulk response for ``operations``."""
    return {
        "took": 3,
        "errors": False,
        "items": [{"index": {"status": 201, "result": "created"}} for _ in operations],
    }


class FakeBulkClient:
    """Records bulk calls and replays queued responses or exceptions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[Any]]] = []
        self.responses: list[Any] = []

    def bulk(self, index: str, operations: list[Any]) -> Any:
        self.calls.append((index, list(operations)))
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return ok_response(operations)


@pytest.fixture(autouse=True)
def log_output():
    """Configure the Logger to an in-memory stream for every test."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    return output


@pytest.fixture
def bulk_client():
    """A fake bulk client accepting every batch by default."""
    return FakeBulkClient()


@pytest.fixture
def identity():
    """Benchmark identity shaped like the CLI builds it."""
    return BenchmarkIdentity(
        build_id="build-42",
        environment="ci",
        category="core",
        target={
            "service": {"type": "elasticsearch", "name": "es", "version": "8.15.0"},
            "os": {"family": "linux"},
        },
        runner={"service": {"git": {"branch": "main", "commit": "abc123"}}},
    )


@pytest.fixture
def client_identity():
    """Deterministic client identity."""
    return ClientIdentity(
        name="clientbench",
        version="0.1.0",
        runtime_name="python",
        runtime_version="3.12.1",
        os_family="linux",
    )


@pytest.fixture
def reporter(bulk_client, client_identity):
    """Reporter writing to the fake bulk client."""
    return Reporter(
        bulk_client, index_name="metrics-intake-2026-10", client_identity=client_identity
    )
