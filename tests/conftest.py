"""
Shared pytest fixtures for devcenter tests.

- isolated_environment: strips runner/input variables and resets the container
- settings / run_context: a configured Dev Center setup for one run
- http_result: shorthand for building HttpResult values
"""

import os

import pytest

from devcenter.core.bootstrap import reset
from devcenter.core.models.config import RunContext
from devcenter.core.models.http import HttpResult
from devcenter.core.settings import DevCenterSettings

_ENV_PREFIXES = ("INPUT_", "DEVCENTER_", "GITHUB_")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Run every test without the host's CI variables or a bootstrapped container."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIXES):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEVCENTER_LOGGING__CONSOLE", "false")
    reset()
    yield
    reset()


@pytest.fixture
def settings() -> DevCenterSettings:
    return DevCenterSettings(
        url="https://dev-center.flake.gg",
        api_key="test-api-key",
        github_token="ghp_test_token",
    )


@pytest.fixture
def run_context() -> RunContext:
    return RunContext(
        owner="test-owner",
        repo="test-repo",
        ref="refs/heads/main",
        sha="abc123def456",
    )


@pytest.fixture
def http_result():
    """Build an HttpResult: http_result(200, {"id": "main"})."""

    def _make(status_code: int, body=None) -> HttpResult:
        return HttpResult(status_code=status_code, body=body)

    return _make
