"""
Native Click implementation of the register command.

Usage: devcenter register [options]

Registers the current branch and commit with the Dev Center.
"""

import click

from ...services.registration.flow import RegistrationFlow
from ..context import DevCenterContext
from ..decorators import connection_options, pass_devcenter_context, require_run_context


@click.command("register")
@connection_options
@click.option(
    "--github-token",
    default=None,
    help="Token for reading commit metadata (default: 'github-token' input)",
)
@pass_devcenter_context
@require_run_context
def register(ctx: DevCenterContext) -> None:
    """Register the current branch and commit with the Dev Center.

    Authenticates with the API key, registers the branch from GITHUB_REF,
    then registers GITHUB_SHA against it. On success the completion time
    is published as the step output 'time'.

    \b
    Examples:

        devcenter register                                  # inside a workflow step

        devcenter register --url https://dev-center.example.com --api-key KEY
    """
    result = RegistrationFlow(ctx.settings, ctx.run_context, reporter=ctx.reporter).run()

    if not result.success:
        raise SystemExit(1)
