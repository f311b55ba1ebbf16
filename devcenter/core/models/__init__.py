"""
Pydantic models for devcenter.

This package provides typed, validated models for the Dev Center wire
format, the CI run context and configuration sections.
"""

from .auth import AuthResponse, AuthSession
from .base import DevCenterBaseModel, ImmutableModel
from .branch import BranchCreate, BranchRead
from .commit import CommitCreate, CommitInfo
from .config import HEADS_PREFIX, LoggingConfig, LogLevel, RunContext
from .http import HttpResult

__all__ = [
    "HEADS_PREFIX",
    "AuthResponse",
    "AuthSession",
    "BranchCreate",
    "BranchRead",
    "CommitCreate",
    "CommitInfo",
    "DevCenterBaseModel",
    "HttpResult",
    "ImmutableModel",
    "LogLevel",
    "LoggingConfig",
    "RunContext",
]
