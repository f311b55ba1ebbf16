"""
Run reporters for devcenter.

Implements the CI-facing output channel (workflow commands, outputs).
"""

from .actions import ActionsReporter

__all__ = ["ActionsReporter"]
