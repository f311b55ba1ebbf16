"""
Click-based CLI for devcenter.

This module provides the main Click command group and serves as the
entry point for the devcenter CLI.

Usage:
    from devcenter.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from .context import DevCenterContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("devcenter-register")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="devcenter")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """devcenter - register branches and commits with the Dev Center

    Meant to run as a GitHub Actions step. Inputs are read from the step's
    'with:' block (url, api-key, github-token) or from DEVCENTER_* variables.

    \b
    Commands:
        devcenter register     Register the current branch and commit
        devcenter auth         Check the URL and API key
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "DevCenterContext",
    "__version__",
    "cli",
    "register_commands",
]
