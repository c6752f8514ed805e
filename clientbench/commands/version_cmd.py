"""
Version command - displays clientbench version information
"""

import click

from clientbench.version import CLIENTBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display clientbench version information.

    Args:
        verbose: If True, show release date and runtime details
    """
    if verbose:
        click.echo(f"clientbench version {CLIENTBENCH_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {CLIENTBENCH_VERSION}")
        click.echo(f"  Release Date:     {CLIENTBENCH_VERSION.date_string()}")
        click.echo(f"  User-Agent:       {CLIENTBENCH_VERSION.user_agent()}")
    else:
        click.echo(f"clientbench {CLIENTBENCH_VERSION}")
