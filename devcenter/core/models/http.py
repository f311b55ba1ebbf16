"""
HTTP result model.

Every response the client receives, including 4xx/5xx, is returned as an
HttpResult so that a single parser decides what counts as success.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field

T = TypeVar("T")


class HttpResult(BaseModel, Generic[T]):
    """Status code plus decoded JSON body (None when empty or not JSON)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status_code: int
    body: T | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_success(self) -> bool:
        """A 2xx/3xx status with a body present."""
        return 200 <= self.status_code < 400 and self.body is not None
