"""Stock benchmark scenarios for an Elasticsearch-compatible target.

Each scenario is a named measure operation with its warmup/repetition counts
and an optional setup. Operations receive ``(index, runner)`` and reach the
target through ``runner.client``.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from clientbench.runner.operation import Operation

GET_INDEX = "test-bench-get"
INDEX_INDEX = "test-bench-index"
DEFAULT_REPETITIONS = 1000


@dataclass(frozen=True)
class Scenario:
    """A named benchmark definition."""

    action: str
    warmups: int
    repetitions: int
    measure: Operation
    setup: Operation | None = None

    def with_repetitions(self, repetitions: int) -> Scenario:
        """Return a copy running ``repetitions`` measured repetitions."""
        return Scenario(
            action=self.action,
            warmups=self.warmups,
            repetitions=repetitions,
            measure=self.measure,
            setup=self.setup,
        )


def _setup_get(runner: Any) -> None:
    client = runner.client
    client.delete_index(GET_INDEX)
    client.index(GET_INDEX, {"title": "Test"}, id="1")
    client.refresh(GET_INDEX)


def _measure_get(n: int, runner: Any) -> None:
    response = runner.client.get(GET_INDEX, "1")
    if response.get("_source", {}).get("title") != "Test":
        raise RuntimeError(f"Incorrect data: {response}")


def _setup_index(runner: Any) -> None:
    runner.client.delete_index(INDEX_INDEX)
    runner.client.create_index(INDEX_INDEX)


def _make_measure_index(data_source: Path) -> Operation:
    doc_path = data_source / "small" / "document.json"

    def measure_index(n: int, runner: Any) -> None:
        if not doc_path.exists():
            raise RuntimeError(f"Document at {doc_path} not found")
        doc_id = "%04d-%04d" % (n, random.randint(1, 1000))
        response = runner.client.index(INDEX_INDEX, doc_path.read_bytes(), id=doc_id)
        if response.get("result") != "created":
            raise RuntimeError(f"Incorrect response: {response}")

    return Operation.indexed(measure_index)


def default_scenarios(
    data_source: Path, repetitions: int = DEFAULT_REPETITIONS
) -> list[Scenario]:
    """Return the stock ping/info/get/index scenarios.

    Args:
        data_source: Directory containing ``small/document.json``.
        repetitions: Measured repetitions per scenario.
    """
    return [
        Scenario(
            action="ping",
            warmups=0,
            repetitions=repetitions,
            measure=Operation.indexed(lambda n, runner: runner.client.ping()),
        ),
        Scenario(
            action="info",
            warmups=0,
            repetitions=repetitions,
            measure=Operation.indexed(lambda n, runner: runner.client.info()),
        ),
        Scenario(
            action="get",
            warmups=100,
            repetitions=repetitions,
            setup=Operation.contextual(_setup_get),
            measure=Operation.indexed(_measure_get),
        ),
        Scenario(
            action="index",
            warmups=1,
            repetitions=repetitions,
            setup=Operation.contextual(_setup_index),
            measure=_make_measure_index(data_source),
        ),
    ]


def select_scenarios(
    scenarios: Sequence[Scenario], actions: Iterable[str] | None
) -> list[Scenario]:
    """Keep scenarios whose action is listed in ``actions`` (all when empty)."""
    wanted = {action.strip() for action in actions or () if action.strip()}
    if not wanted:
        return list(scenarios)
    return [scenario for scenario in scenarios if scenario.action in wanted]
