"""
Native Click implementation of the auth command.

Usage: devcenter auth [options]
"""

import click

from ...core.di import resolve_or_default
from ...core.interfaces.logger import ILogger
from ...http_client import DevCenterClient
from ...services.authentication import Authenticator
from ...services.logging import NullLogger
from ...services.registration.flow import error_message
from ..context import DevCenterContext
from ..decorators import connection_options, pass_devcenter_context


@click.command("auth")
@connection_options
@pass_devcenter_context
def auth(ctx: DevCenterContext) -> None:
    """Check the Dev Center URL and API key.

    Authenticates once and reports the result without registering
    anything. Useful before wiring the register step into a workflow.

    \b
    Examples:
        devcenter auth --url https://dev-center.example.com --api-key KEY
    """
    logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
    client = DevCenterClient(timeout=ctx.settings.timeout, logger=logger)
    authenticator = Authenticator(ctx.settings, reporter=ctx.reporter, logger=logger)

    try:
        authenticator.authenticate(client)
    except Exception as e:
        ctx.reporter.set_failed(error_message(e))
        raise SystemExit(1) from e
