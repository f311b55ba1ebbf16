"""Authentication models."""

from __future__ import annotations

from pydantic import Field

from .base import ImmutableModel


class AuthResponse(ImmutableModel):
    """Body of a successful ``/api/authentication/api/json`` call."""

    access: str = Field(min_length=1)


class AuthSession(ImmutableModel):
    """Bearer token for the remainder of one run. Never persisted."""

    access_token: str = Field(repr=False)

    def headers(self, base: dict[str, str] | None = None) -> dict[str, str]:
        """Merge the authentication headers on top of ``base``.

        Existing headers are preserved; only ``Authorization`` and
        ``content-type`` are set.
        """
        merged = dict(base or {})
        merged["Authorization"] = f"Bearer {self.access_token}"
        merged["content-type"] = "application/json"
        return merged
