"""Benchmark runner: setup, warmup, measured repetitions, report.

Usage:
    from clientbench.runner import Runner

    runner = Runner(identity=identity, reporter=reporter, client=target_client)
    ok = (
        runner.setup(lambda r: r.client.create_index("test-bench"))
        .measure(
            action="ping",
            warmups=0,
            repetitions=1000,
            operation=lambda n, r: r.client.ping(),
        )
        .run()
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from clientbench.models.identity_models import BenchmarkIdentity
from clientbench.runner.operation import Operation, as_measure, as_setup
from clientbench.runner.sample import Outcome, Sample
from clientbench.runner.timer import Timer

if TYPE_CHECKING:
    from clientbench.report.reporter import Reporter


class BenchmarkError(Exception):
    """Base exception for benchmarks that could not produce data."""

    pass


class SetupError(BenchmarkError):
    """Raised when the one-time setup operation fails."""

    pass


class WarmupError(BenchmarkError):
    """Raised when a warmup invocation fails."""

    pass


class Phase(Enum):
    """Lifecycle phase of a run."""

    INIT = "init"
    SETUP = "setup"
    WARMUP = "warmup"
    MEASURE = "measure"
    REPORT = "report"
    DONE = "done"


class Runner:
    """Runs a measured operation repeatedly and reports the samples.

    A runner can be reconfigured with setup()/measure() and run again; every
    run() starts from an empty sample sequence.

    Lifecycle:
        1. setup - once, any exception raises SetupError
        2. warmup - ``warmups`` untimed invocations, any exception raises WarmupError
        3. measure - ``repetitions`` timed invocations, exceptions mark the sample failed
        4. report - samples go to the reporter, failures make run() return False
    """

    def __init__(
        self,
        identity: BenchmarkIdentity,
        reporter: Reporter,
        client: Any = None,
        timer_factory: Callable[[], Timer] = Timer,
    ) -> None:
        """Initialize the runner.

        Args:
            identity: Metadata attached to every reported document.
            reporter: Reporter receiving the samples of each run.
            client: Client for the system under measurement, available to
                operations as ``runner.client``.
            timer_factory: Creates the timer used for measured repetitions.
        """
        self.identity = identity
        self.reporter = reporter
        self.client = client
        self._timer_factory = timer_factory

        self.action = ""
        self.warmups = 0
        self.repetitions = 0
        self.phase = Phase.INIT

        self._setup: Operation | None = None
        self._measure: Operation | None = None
        self._stats: list[Sample] = []

    @property
    def stats(self) -> list[Sample]:
        """Samples collected by the most recent run."""
        return list(self._stats)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger for the runner."""
        from clientbench.utils.logger import Logger

        return Logger.component("runner")

    def setup(self, operation: Operation | Callable[..., Any] | None) -> Runner:
        """Configure the one-time setup operation.

        Bare callables are invoked with the runner. Pass None to clear a
        previously configured setup.
        """
        self._setup = as_setup(operation) if operation is not None else None
        return self

    def measure(
        self,
        action: str,
        warmups: int,
        repetitions: int,
        operation: Operation | Callable[..., Any],
    ) -> Runner:
        """Configure the measured operation.

        Args:
            action: Human-readable name of the operation.
            warmups: Number of untimed warmup invocations.
            repetitions: Number of measured invocations.
            operation: Operation, or a callable invoked with (index, runner).

        Raises:
            ValueError: If warmups or repetitions is negative.
        """
        if warmups < 0 or repetitions < 0:
            raise ValueError(
                f"warmups and repetitions must be non-negative, "
                f"got warmups={warmups} repetitions={repetitions}"
            )

        self.action = action
        self.warmups = warmups
        self.repetitions = repetitions
        self._measure = as_measure(operation)
        return self

    def run(self) -> bool:
        """Execute setup, warmups and measured repetitions, then report.

        Returns:
            True if the samples were reported, False if reporting failed.

        Raises:
            ValueError: If no measure operation is configured.
            SetupError: If the setup operation raised.
            WarmupError: If a warmup invocation raised.
        """
        if self._measure is None:
            raise ValueError("No measure operation configured; call measure() first")

        self._stats = []
        self.phase = Phase.INIT

        self._run_setup()
        self._run_warmups(self._measure)
        self._run_repetitions(self._measure)
        return self._report()

    def _run_setup(self) -> None:
        if self._setup is None:
            return

        self.phase = Phase.SETUP
        self.logger.debug(f"[{self.action}] Running setup...")
        try:
            self._setup(0, self)
        except Exception as e:
            raise SetupError(repr(e)) from e

    def _run_warmups(self, operation: Operation) -> None:
        if self.warmups == 0:
            return

        self.phase = Phase.WARMUP
        self.logger.debug(f"[{self.action}] Running {self.warmups} warmups...")
        try:
            for n in range(self.warmups):
                operation(n, self)
        except Exception as e:
            raise WarmupError(repr(e)) from e

    def _run_repetitions(self, operation: Operation) -> None:
        self.phase = Phase.MEASURE
        self.logger.debug(f"[{self.action}] Running {self.repetitions} repetitions...")

        timer = self._timer_factory()
        for n in range(self.repetitions):
            start = timer.now()
            outcome = Outcome.FAILURE
            timer.start()
            try:
                result = operation(n, self)
                if result is not False:
                    outcome = Outcome.SUCCESS
            except Exception as e:
                self.logger.debug(f"[{self.action}] Repetition {n} failed: {e!r}")
            finally:
                self._stats.append(
                    Sample(start=start, duration=timer.elapsed_ns(), outcome=outcome)
                )

    def _report(self) -> bool:
        self.phase = Phase.REPORT
        try:
            self.reporter.report(
                self._stats,
                action=self.action,
                repetitions=self.repetitions,
                identity=self.identity,
            )
        except Exception as e:
            self.logger.error(f"[{self.action}] {e!r}")
            return False
        finally:
            self.phase = Phase.DONE

        return True
