"""
Commit models.

CommitCreate is the Dev Center request body; CommitInfo is
what the source-control host tells us about the commit being registered.
"""

from __future__ import annotations

from pydantic import Field

from .base import ImmutableModel


class CommitCreate(ImmutableModel):
    """Request body for ``POST /api/commit``.

    ``author`` is left out of the payload entirely when the committer is
    unknown.
    """

    id: str = Field(description="Commit hash")
    name: str = Field(description="First line of the commit message")
    description: str = Field(description="Full commit message")
    branch_id: str = Field(alias="branchId")
    author: str | None = None


class CommitInfo(ImmutableModel):
    """Commit metadata fetched from the source-control host."""

    message: str
    committer_email: str | None = None
