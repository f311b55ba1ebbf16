"""
Application bootstrap for devcenter.

Initializes the DI container with the logger and run reporter.
This module should be called once at application startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.reporter import IRunReporter

if TYPE_CHECKING:
    from .settings import DevCenterSettings

_initialized = False


def bootstrap(
    settings: DevCenterSettings,
    reporter: IRunReporter | None = None,
) -> ServiceContainer:
    """
    Bootstrap the devcenter application.

    Args:
        settings: Loaded settings (logging section is applied here)
        reporter: Reporter override; defaults to ActionsReporter

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    from ..presenters.actions import ActionsReporter
    from ..services.logging import DevCenterLogger

    container.register_singleton(IRunReporter, implementation=reporter or ActionsReporter())  # type: ignore[type-abstract]

    log_config = settings.logging

    def create_logger() -> ILogger:
        return DevCenterLogger(
            level=log_config.level,
            console_enabled=log_config.console,
            file_enabled=log_config.file,
            file_path=log_config.file_path,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    _initialized = True
    return container


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
