"""Builders for the branch and commit registration payloads."""

from __future__ import annotations

from datetime import datetime

from ...core.models.branch import BranchCreate
from ...core.models.commit import CommitCreate, CommitInfo
from ...core.models.config import HEADS_PREFIX, RunContext


def derive_branch_id(ref: str) -> str:
    """Branch id for a VCS ref: ``refs/heads/feature/x`` -> ``feature/x``.

    Only the leading heads prefix is removed; nothing else is rewritten.
    """
    if ref.startswith(HEADS_PREFIX):
        return ref[len(HEADS_PREFIX) :]
    return ref


def split_commit_message(message: str) -> tuple[str, str]:
    """Return (name, description) for a commit message.

    The name is everything before the first newline; the description is the
    full message, so it always starts with the name.
    """
    return message.split("\n", 1)[0], message


def build_branch_create(run: RunContext) -> BranchCreate:
    return BranchCreate(id=derive_branch_id(run.ref), repo=run.repository)


def build_commit_create(sha: str, branch_id: str, info: CommitInfo) -> CommitCreate:
    """Commit payload; an empty committer email counts as unknown and omits ``author``."""
    name, description = split_commit_message(info.message)
    return CommitCreate(
        id=sha,
        branch_id=branch_id,
        name=name,
        description=description,
        author=info.committer_email or None,
    )


def format_time_of_day(moment: datetime) -> str:
    """``14:03:07 GMT+0000 (UTC)``: wall-clock time with offset and zone name."""
    local = moment if moment.tzinfo is not None else moment.astimezone()
    return f"{local.strftime('%H:%M:%S')} GMT{local.strftime('%z')} ({local.tzname()})"
