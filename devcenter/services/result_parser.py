"""
Response normalization for Dev Center calls.

Every call site shares one success predicate: a status in 200-399 AND a
body. A 2xx with an empty body is still a failure for this protocol.
"""

from __future__ import annotations

from typing import TypeVar

from ..core.exceptions import ApiError
from ..core.models.http import HttpResult

T = TypeVar("T")


def parse_http_result(operation: str, result: HttpResult[T]) -> T:
    """Return the body of a successful result.

    Args:
        operation: Label used in error messages (e.g. "register branch")
        result: Raw HTTP result

    Returns:
        The response body

    Raises:
        ApiError: If the status is out of range or the body is missing
    """
    if result.is_success:
        return result.body  # type: ignore[return-value]
    if result.status_code < 200 or result.status_code >= 400:
        raise ApiError(
            f"Failed to {operation}: Error {result.status_code}",
            status_code=result.status_code,
            operation=operation,
        )
    raise ApiError(
        f"Expected result body but got while attempting to {operation}",
        status_code=result.status_code,
        operation=operation,
    )
