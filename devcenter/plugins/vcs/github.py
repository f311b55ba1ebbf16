"""
GitHub commit provider.

Fetches commit metadata from the GitHub REST API
(``GET /repos/{owner}/{repo}/commits/{ref}``).
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ...core.di import resolve_or_default
from ...core.exceptions import CommitLookupError, DevCenterConnectionError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.vcs import CommitInfo, ICommitProvider
from ...core.settings import DEFAULT_GITHUB_API_URL
from ...http_client import DevCenterClient

GITHUB_API_VERSION = "2022-11-28"


class GitHubCommitProvider(ICommitProvider):
    """Commit lookups against api.github.com or a GitHub Enterprise host."""

    def __init__(
        self,
        token: str = "",
        api_url: str = DEFAULT_GITHUB_API_URL,
        client: DevCenterClient | None = None,
        logger: ILogger | None = None,
    ):
        """
        Args:
            token: GitHub token; anonymous requests are made when empty
            api_url: REST API base URL
            client: HTTP client. If None, one is created.
            logger: Logger instance. If None, resolves from DI container.
        """
        from ...services.logging import NullLogger

        self._token = token
        self._api_url = (api_url or DEFAULT_GITHUB_API_URL).rstrip("/")
        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        self._client = client or DevCenterClient(logger=self._logger)

    @property
    def name(self) -> str:
        return "github"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def get_commit(self, owner: str, repo: str, ref: str) -> CommitInfo:
        url = f"{self._api_url}/repos/{quote(owner)}/{quote(repo)}/commits/{quote(ref, safe='')}"
        self._logger.debug("Fetching commit %s from %s/%s", ref, owner, repo)

        try:
            result = self._client.get_json(url, headers=self._headers())
        except DevCenterConnectionError as e:
            raise CommitLookupError(
                e.message, owner=owner, repo=repo, ref=ref, cause=e
            ) from e

        if result.status_code >= 400 or not isinstance(result.body, dict):
            raise CommitLookupError(
                _github_error_message(result.body, result.status_code),
                owner=owner,
                repo=repo,
                ref=ref,
                status_code=result.status_code,
            )

        return _commit_info(result.body)


def _github_error_message(body: Any, status_code: int) -> str:
    """GitHub puts a human-readable reason in the ``message`` field."""
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return f"GitHub API request failed with HTTP {status_code}"


def _commit_info(body: dict[str, Any]) -> CommitInfo:
    # An empty committer email is treated as unknown
    commit = body.get("commit") or {}
    committer = commit.get("committer") or {}
    message = commit.get("message")
    if not isinstance(message, str):
        raise CommitLookupError("GitHub response did not include a commit message")
    return CommitInfo(message=message, committer_email=committer.get("email") or None)
