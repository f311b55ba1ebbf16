"""
Core infrastructure for devcenter.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for collaborators
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .exceptions import (
    ApiError,
    AuthenticationError,
    CommitLookupError,
    ConfigValidationError,
    DevCenterConfigError,
    DevCenterConnectionError,
    DevCenterException,
    DevCenterNetworkError,
)

__all__ = [
    "ApiError",
    "AuthenticationError",
    "CommitLookupError",
    "ConfigValidationError",
    "DevCenterConfigError",
    "DevCenterConnectionError",
    "DevCenterException",
    "DevCenterNetworkError",
    "ServiceContainer",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "resolve",
    "try_resolve",
]
