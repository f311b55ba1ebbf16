"""
Click decorators for devcenter CLI commands.

- connection_options: Adds the Dev Center connection options
- pass_devcenter_context: Builds a DevCenterContext from those options
- require_run_context: Ensures the GitHub run variables are present
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import ConfigValidationError
from .context import DevCenterContext

F = TypeVar("F", bound=Callable[..., Any])

LOG_LEVELS = ["debug", "info", "warning", "error"]


def connection_options(f: F) -> F:
    """Add --url, --api-key and --log-level to a command.

    Values left unset fall back to the workflow inputs and environment.
    """
    f = click.option(
        "--log-level",
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        default=None,
        help="Diagnostic log level (default: info)",
    )(f)
    f = click.option(
        "--api-key",
        default=None,
        help="Dev Center API key (default: 'api-key' input)",
    )(f)
    f = click.option(
        "--url",
        default=None,
        help="Dev Center base URL (default: 'url' input)",
    )(f)
    return f


def pass_devcenter_context(f: F) -> F:
    """Replace the connection options with a ready DevCenterContext.

    Usage:
        @click.command()
        @connection_options
        @pass_devcenter_context
        def auth(ctx: DevCenterContext):
            ...

    Note:
        Apply this AFTER @connection_options so the option values are passed
        as keyword arguments.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        overrides = {
            "url": kwargs.pop("url", None),
            "api_key": kwargs.pop("api_key", None),
            "github_token": kwargs.pop("github_token", None),
        }
        log_level = kwargs.pop("log_level", None)
        try:
            ctx = DevCenterContext.create(log_level=log_level, **overrides)
        except ConfigValidationError as e:
            # Settings failed to load, so no reporter is bootstrapped yet
            from ..presenters.actions import ActionsReporter

            ActionsReporter().set_failed(e.message)
            raise SystemExit(1) from e
        return f(ctx, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


def require_run_context(f: F) -> F:
    """Decorator to require GITHUB_REPOSITORY and GITHUB_SHA.

    Note:
        Apply AFTER @pass_devcenter_context so the context is available.
    """

    @functools.wraps(f)
    def wrapper(ctx: DevCenterContext, *args: Any, **kwargs: Any) -> Any:
        if not ctx.has_run_context:
            ctx.reporter.set_failed(
                "GITHUB_REPOSITORY and GITHUB_SHA must be set; "
                "run inside GitHub Actions or export them."
            )
            raise SystemExit(1)
        return f(ctx, *args, **kwargs)

    return wrapper  # type: ignore[return-value]
