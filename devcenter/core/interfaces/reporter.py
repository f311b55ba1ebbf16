"""
Run reporter interface for CI-facing output.

The reporter is the only channel the user sees: informational lines,
notices, named output values and the run's single failure message.
Diagnostic detail belongs in ILogger instead.
"""

from abc import ABC, abstractmethod


class IRunReporter(ABC):
    """
    Interface for reporting the outcome of a CI run.

    Implementations translate calls into whatever the hosting CI system
    understands (GitHub Actions workflow commands, plain console text, ...).
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Write an informational line to the run log."""
        pass

    @abstractmethod
    def notice(self, message: str) -> None:
        """Emit a notice-level annotation."""
        pass

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """
        Publish a named output value for later workflow steps.

        Args:
            name: Output name
            value: Output value
        """
        pass

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """
        Mark the run as failed with a human-readable message.

        Args:
            message: Failure message (may be empty)
        """
        pass

    @property
    @abstractmethod
    def failed(self) -> bool:
        """Whether set_failed has been called during this run."""
        pass
