"""Run command - executes the stock scenarios and reports the results.

CLI Examples:
    clientbench run                          # Run all scenarios
    clientbench run -f ping -f get           # Run selected scenarios
    clientbench run --repetitions 100        # Fewer repetitions per scenario
    clientbench run --debug                  # Log transport traces
"""

import sys
import time
from collections.abc import Sequence

import click

from clientbench import __version__
from clientbench.config import HarnessConfig, MissingConfigError
from clientbench.report import Reporter
from clientbench.runner import BenchmarkError, Runner, Sample
from clientbench.scenarios import Scenario, default_scenarios, select_scenarios
from clientbench.transport import SearchClient
from clientbench.utils.logger import Logger


def format_mean(samples: Sequence[Sample]) -> str:
    """Return the mean sample duration in whole milliseconds, or 'n/a'."""
    if not samples:
        return "n/a"
    mean_ns = sum(s.duration for s in samples) / len(samples)
    return f"{round(mean_ns / 1e6)}ms"


def format_status(ok: bool) -> str:
    """Return a coloured success/failure word."""
    return click.style("success" if ok else "failure", fg="green" if ok else "red")


def format_summary(scenario: Scenario, samples: Sequence[Sample], reported: bool) -> str:
    """Build the one-line summary printed after each scenario."""
    runner_ok = not any(s.failed for s in samples)
    return (
        "  "
        + f"[{scenario.action}] ".ljust(16)
        + f"{scenario.repetitions}x ".ljust(10)
        + click.style("mean=", dim=True)
        + f"{format_mean(samples)} "
        + click.style("runner=", dim=True)
        + f"{format_status(runner_ok)} "
        + click.style("report=", dim=True)
        + format_status(reported)
    )


def format_elapsed(seconds: float) -> str:
    """Format elapsed seconds as HH:MM:SS."""
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def run_scenarios(runner: Runner, scenarios: Sequence[Scenario]) -> bool:
    """Run each scenario on ``runner`` and print its summary.

    A scenario that cannot start (setup or warmup failure) is reported and
    skipped; the remaining scenarios still run.

    Returns:
        True if every scenario ran and was reported.
    """
    all_ok = True
    for scenario in scenarios:
        runner.setup(scenario.setup)
        runner.measure(
            action=scenario.action,
            warmups=scenario.warmups,
            repetitions=scenario.repetitions,
            operation=scenario.measure,
        )

        try:
            reported = runner.run()
        except BenchmarkError as e:
            all_ok = False
            click.echo(
                "  "
                + f"[{scenario.action}] ".ljust(16)
                + click.style(f"ERROR: {type(e).__name__}: {e}", fg="red", bold=True)
            )
            continue

        all_ok = all_ok and reported
        click.echo(format_summary(scenario, runner.stats, reported))

    return all_ok


def run_benchmarks(
    filters: Sequence[str] = (),
    repetitions: int | None = None,
    debug: bool = False,
) -> None:
    """Load configuration, run the selected scenarios and exit non-zero on failure.

    Args:
        filters: Actions to run; falls back to the FILTER variable, then all.
        repetitions: Override for the per-scenario repetition count.
        debug: Log transport traces at DEBUG level.
    """
    click.echo(
        click.style(
            f"Running benchmarks for clientbench@{__version__}",
            bold=True,
            underline=True,
        )
    )

    try:
        config = HarnessConfig.from_env()
    except MissingConfigError as e:
        click.echo(click.style(f"ERROR: {e}", fg="red", bold=True))
        sys.exit(1)

    if debug or config.debug:
        Logger.set_level("DEBUG")

    scenarios = default_scenarios(config.data_source)
    if repetitions is not None:
        scenarios = [s.with_repetitions(repetitions) for s in scenarios]
    scenarios = select_scenarios(scenarios, filters or config.filter)

    started = time.monotonic()
    with (
        SearchClient(config.target_url) as target_client,
        SearchClient(
            config.report_url,
            timeout=config.report_timeout,
            retries=config.report_retries,
        ) as report_client,
    ):
        runner = Runner(
            identity=config.identity,
            reporter=Reporter(report_client),
            client=target_client,
        )
        all_ok = run_scenarios(runner, scenarios)

    click.echo(
        click.style(
            f"Finished in {format_elapsed(time.monotonic() - started)}",
            underline=True,
        )
    )

    if not all_ok:
        sys.exit(1)
