"""
Configuration models.

Provides Pydantic models for the config sections and for the CI run context.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import ConfigDict, computed_field, field_validator

from .base import DevCenterBaseModel, ImmutableModel

# Type aliases
LogLevel = Literal["debug", "info", "warning", "error"]

HEADS_PREFIX = "refs/heads/"


class ConfigBaseModel(DevCenterBaseModel):
    """Base model for config sections with coercion from env strings."""

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "info"
    console: bool = True
    file: bool = False
    file_path: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept any case for the level name."""
        return v.lower() if isinstance(v, str) else v


class RunContext(ImmutableModel):
    """The repository, ref and commit a CI run was triggered for."""

    owner: str
    repo: str
    ref: str
    sha: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def repository(self) -> str:
        """Repository as ``owner/repo``."""
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunContext:
        """Build from the GitHub Actions default environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            RunContext for GITHUB_REPOSITORY / GITHUB_REF / GITHUB_SHA
        """
        env = os.environ if environ is None else environ
        owner, _, repo = env.get("GITHUB_REPOSITORY", "").partition("/")
        return cls(
            owner=owner,
            repo=repo,
            ref=env.get("GITHUB_REF", ""),
            sha=env.get("GITHUB_SHA", ""),
        )
