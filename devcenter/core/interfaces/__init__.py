"""
Interface definitions for devcenter's collaborators.

These define the contracts implementations must follow, so the registration
flow never depends on GitHub or on a particular CI system directly.
"""

from .logger import ILogger
from .reporter import IRunReporter
from .vcs import CommitInfo, ICommitProvider

__all__ = [
    "CommitInfo",
    "ICommitProvider",
    "ILogger",
    "IRunReporter",
]
