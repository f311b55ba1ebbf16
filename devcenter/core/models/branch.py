"""
Branch models.

A branch is registered once per run and read back to obtain the id the
commit is attached to.
"""

from __future__ import annotations

from pydantic import Field

from .base import ImmutableModel


class BranchCreate(ImmutableModel):
    """Request body for ``POST /api/branch``."""

    id: str = Field(description="Branch id derived from the VCS ref")
    name: str | None = None
    repo: str = Field(description="Repository as owner/repo")


class BranchRead(ImmutableModel):
    """Branch as returned by the Dev Center."""

    id: str
    name: str | None = None
    repo: str
