"""
GitHub Actions run reporter.

Translates reporter calls into workflow commands on stdout and output
values in the ``$GITHUB_OUTPUT`` file.
"""

import os
import sys
import uuid
from collections.abc import Mapping

from ..core.interfaces.reporter import IRunReporter


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionsReporter(IRunReporter):
    """
    Workflow-command reporter.

    Outside of Actions the same text is still readable on a terminal, so this
    is also the default for local runs.
    """

    def __init__(self, file=None, environ: Mapping[str, str] | None = None) -> None:
        """
        Args:
            file: Output stream (defaults to sys.stdout)
            environ: Environment to read GITHUB_OUTPUT from (defaults to os.environ)
        """
        self._file = file
        self._environ = environ
        self._failed = False
        self.failure_message: str | None = None

    @property
    def _out(self):
        return self._file or sys.stdout

    def _env(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _command(self, command: str, message: str, properties: str = "") -> None:
        print(f"::{command}{properties}::{escape_data(message)}", file=self._out)

    def info(self, message: str) -> None:
        print(message, file=self._out)

    def notice(self, message: str) -> None:
        self._command("notice", message)

    def set_output(self, name: str, value: str) -> None:
        output_path = self._env().get("GITHUB_OUTPUT")
        if output_path:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            if delimiter in name or delimiter in value:
                raise ValueError("Unexpected input: output contains the heredoc delimiter")
            with open(output_path, "a", encoding="utf-8") as f:
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            return
        # Legacy runners without the output file
        print("", file=self._out)
        self._command("set-output", value, f" name={escape_property(name)}")

    def set_failed(self, message: str) -> None:
        self._failed = True
        self.failure_message = message
        self._command("error", message)

    @property
    def failed(self) -> bool:
        return self._failed
