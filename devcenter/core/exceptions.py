"""
Custom exception hierarchy for devcenter.

Registration failures are surfaced to the CI run as a single message, so every
exception carries a human-readable ``message`` that is reported verbatim and
an optional ``context`` dict that only shows up in diagnostic logs.
"""

from __future__ import annotations


class DevCenterException(Exception):
    """
    Base exception for all devcenter errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (URLs, status codes, etc.)
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class DevCenterConfigError(DevCenterException):
    """Base class for configuration-related errors."""

    pass


class ConfigValidationError(DevCenterConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Network Errors (Dev Center)
# =============================================================================


class DevCenterNetworkError(DevCenterException):
    """Base class for network-related errors."""

    pass


class ApiError(DevCenterNetworkError):
    """
    A Dev Center response failed validation.

    Raised when the status code is outside 200-399 or when a body was
    expected but none came back. This is the "expected" failure kind and is
    passed through authentication untouched.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        operation: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        if operation:
            ctx["operation"] = operation
        super().__init__(message, context=ctx, cause=cause)
        self.status_code = status_code
        self.operation = operation


class DevCenterConnectionError(DevCenterNetworkError):
    """
    Error reaching the server at all.

    Raised for connection refusals, DNS failures, timeouts and malformed URLs.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if url:
            ctx["url"] = url
        super().__init__(message, context=ctx, cause=cause)


class AuthenticationError(DevCenterNetworkError):
    """
    Authentication failed for a reason other than an ApiError.

    The message is intentionally empty: the underlying detail is written to
    the diagnostic log only.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


# =============================================================================
# Source Control Errors
# =============================================================================


class CommitLookupError(DevCenterException):
    """
    Commit metadata could not be fetched from the source-control host.

    The message is reported to the run unchanged.
    """

    def __init__(
        self,
        message: str,
        *,
        owner: str | None = None,
        repo: str | None = None,
        ref: str | None = None,
        status_code: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if owner:
            ctx["owner"] = owner
        if repo:
            ctx["repo"] = repo
        if ref:
            ctx["ref"] = ref
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message, context=ctx, cause=cause)
        self.status_code = status_code
