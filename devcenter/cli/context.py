"""
Click context extension for devcenter CLI.

Provides DevCenterContext dataclass that holds the loaded settings, the CI
run context and the run reporter for a command invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..core.bootstrap import bootstrap
from ..core.container import resolve
from ..core.interfaces.logger import ILogger
from ..core.interfaces.reporter import IRunReporter
from ..core.models.config import RunContext
from ..core.settings import load_settings

if TYPE_CHECKING:
    from ..core.settings import DevCenterSettings


@dataclass
class DevCenterContext:
    """Everything a command needs, gathered once at startup.

    Attributes:
        settings: Merged settings (CLI options > workflow inputs > env)
        run_context: Repository, ref and commit of the current CI run
        reporter: The run's output channel
    """

    settings: DevCenterSettings
    run_context: RunContext
    reporter: IRunReporter

    @classmethod
    def create(cls, log_level: str | None = None, **overrides: Any) -> DevCenterContext:
        """Load settings, bootstrap the container and read the run context.

        Args:
            log_level: Overrides logging.level on the bootstrapped logger
            **overrides: Explicit setting values; None means "not given"

        Raises:
            ConfigValidationError: If the configuration is invalid
        """
        settings = load_settings(**overrides)
        bootstrap(settings)
        if log_level:
            resolve(ILogger).set_level(log_level)  # type: ignore[type-abstract]

        return cls(
            settings=settings,
            run_context=RunContext.from_env(),
            reporter=resolve(IRunReporter),  # type: ignore[type-abstract]
        )

    @property
    def has_run_context(self) -> bool:
        """Whether the GitHub run variables identify a repository and commit."""
        run = self.run_context
        return bool(run.owner and run.repo and run.sha)
