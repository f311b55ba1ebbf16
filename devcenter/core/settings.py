"""
Pydantic Settings for devcenter configuration.

Provides settings loading from GitHub Actions inputs, environment variables,
and defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigValidationError
from .models.config import LoggingConfig

DEFAULT_GITHUB_API_URL = "https://api.github.com"


def input_env_name(name: str) -> str:
    """Environment variable the Actions runner uses for an input.

    ``api-key`` becomes ``INPUT_API-KEY``: spaces turn into underscores and
    the name is upper-cased; hyphens are kept.
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Read a workflow input, returning an empty string when unset."""
    env = os.environ if environ is None else environ
    return env.get(input_env_name(name), "").strip()


class ActionInputsSource(PydanticBaseSettingsSource):
    """Settings source that reads the ``with:`` inputs of a workflow step."""

    # settings field -> action input name (see action.yml)
    INPUTS: dict[str, str] = {
        "url": "url",
        "api_key": "api-key",
        "github_token": "github-token",
    }

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        environ: Mapping[str, str] | None = None,
    ):
        super().__init__(settings_cls)
        self._environ = environ

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from the workflow inputs."""
        input_name = self.INPUTS.get(field_name)
        if input_name is None:
            return None, field_name, False
        value = get_input(input_name, self._environ)
        return (value or None), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the inputs that are actually set."""
        data: dict[str, Any] = {}
        for field_name in self.INPUTS:
            value, _, _ = self.get_field_value(None, field_name)
            if value is not None:
                data[field_name] = value
        return data


class DevCenterSettings(BaseSettings):
    """Dev Center client settings.

    Priority (highest to lowest):
    1. Explicit init values (CLI options)
    2. GitHub Actions inputs (INPUT_URL, INPUT_API-KEY, INPUT_GITHUB-TOKEN)
    3. Environment variables (DEVCENTER_<field>, DEVCENTER_LOGGING__<field>)
    4. Model defaults
    """

    model_config = {
        "env_prefix": "DEVCENTER_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    url: str = ""
    api_key: str = Field(default="", repr=False)
    github_token: str = Field(default="", repr=False)
    github_api_url: str = DEFAULT_GITHUB_API_URL
    timeout: float = Field(default=30.0, gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="before")
    @classmethod
    def handle_runner_env_vars(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Pick up the API URL the runner exports (GitHub Enterprise)."""
        if isinstance(data, dict) and not data.get("github_api_url"):
            runner_api_url = os.environ.get("GITHUB_API_URL")
            if runner_api_url:
                data["github_api_url"] = runner_api_url
        return data

    @field_validator("url", "github_api_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str:
        """Normalize base URLs so paths can be appended with a single '/'."""
        if v is None:
            return ""
        return str(v).strip().rstrip("/")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert workflow inputs between init values and DEVCENTER_* variables."""
        return (
            init_settings,
            ActionInputsSource(settings_cls),
            env_settings,
        )


def load_settings(**overrides: Any) -> DevCenterSettings:
    """Load settings from workflow inputs and environment.

    Args:
        **overrides: Explicit values (e.g. from CLI options); None is ignored

    Returns:
        DevCenterSettings instance with all sources merged

    Raises:
        ConfigValidationError: If a value fails validation
    """
    explicit = {k: v for k, v in overrides.items() if v is not None}
    try:
        return DevCenterSettings(**explicit)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigValidationError(
            f"Invalid configuration: {first.get('msg', e)}",
            key=key or None,
            cause=e,
        ) from e
