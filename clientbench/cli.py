#!/usr/bin/env python3
"""clientbench CLI - Command-line interface for clientbench."""

import click

from clientbench.utils.env import get_env
from clientbench.utils.logger import Logger


@click.group()
def clientbench():
    """Micro-benchmark harness reporting to a telemetry cluster."""
    if not Logger.is_configured():
        # Subcommands can raise the level via set_level()
        Logger.configure(
            level=get_env("CLIENTBENCH_LOG_LEVEL", default="INFO"),
            timestamps=True,
            dim_debug=True,
        )


@clientbench.command()
@click.option(
    "--filter",
    "-f",
    "filters",
    multiple=True,
    help="Run only the given action(s) (e.g. ping, get). Repeatable.",
)
@click.option(
    "--repetitions",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Measured repetitions per scenario (default: 1000)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Log transport requests",
)
def run(filters, repetitions, debug):
    r"""Run the benchmark scenarios and report the results.

    Configuration is read from environment variables
    (ELASTICSEARCH_TARGET_URL, ELASTICSEARCH_REPORT_URL, BUILD_ID, ...).

    \b
    Examples:
      clientbench run                  # Run all scenarios
      clientbench run -f ping -f info  # Run selected scenarios
      clientbench run -n 100 --debug   # Short run with transport logs
    """
    from clientbench.commands.run_cmd import run_benchmarks

    run_benchmarks(filters=filters, repetitions=repetitions, debug=debug)


@clientbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display clientbench version information."""
    from clientbench.commands.version_cmd import run_version

    if verbose:
        Logger.set_level("DEBUG")

    run_version(verbose=verbose)


if __name__ == "__main__":
    clientbench()
