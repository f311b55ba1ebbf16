"""Unit tests for GitHubCommitProvider with a mocked HTTP client."""

from unittest.mock import MagicMock

import pytest

from devcenter.core.exceptions import CommitLookupError, DevCenterConnectionError
from devcenter.core.models.http import HttpResult
from devcenter.plugins.vcs.github import GitHubCommitProvider


@pytest.fixture
def client():
    client = MagicMock()
    client.get_json.return_value = HttpResult(
        status_code=200,
        body={
            "sha": "abc123def456",
            "commit": {
                "message": "feat: add new feature\n\nDetails",
                "committer": {"name": "Test", "email": "test@example.com"},
            },
        },
    )
    return client


@pytest.fixture
def provider(client):
    return GitHubCommitProvider(token="ghp_test_token", client=client, logger=MagicMock())


class TestGetCommit:
    """Successful lookups."""

    def test_requests_commit_endpoint(self, provider, client):
        provider.get_commit("test-owner", "test-repo", "abc123def456")

        client.get_json.assert_called_once_with(
            "https://api.github.com/repos/test-owner/test-repo/commits/abc123def456",
            headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "Authorization": "Bearer ghp_test_token",
            },
        )

    def test_maps_message_and_email(self, provider):
        info = provider.get_commit("test-owner", "test-repo", "abc123def456")

        assert info.message == "feat: add new feature\n\nDetails"
        assert info.committer_email == "test@example.com"

    def test_null_committer(self, provider, client):
        client.get_json.return_value = HttpResult(
            status_code=200, body={"commit": {"message": "test commit", "committer": None}}
        )

        info = provider.get_commit("o", "r", "abc")

        assert info.committer_email is None

    def test_empty_committer_email_is_unknown(self, provider, client):
        client.get_json.return_value = HttpResult(
            status_code=200,
            body={"commit": {"message": "test commit", "committer": {"email": ""}}},
        )

        info = provider.get_commit("o", "r", "abc")

        assert info.committer_email is None

    def test_anonymous_without_token(self, client):
        provider = GitHubCommitProvider(token="", client=client, logger=MagicMock())

        provider.get_commit("o", "r", "abc")

        assert "Authorization" not in client.get_json.call_args.kwargs["headers"]

    def test_enterprise_api_url(self, client):
        provider = GitHubCommitProvider(
            api_url="https://ghe.example.com/api/v3/", client=client, logger=MagicMock()
        )

        provider.get_commit("o", "r", "abc")

        assert client.get_json.call_args.args[0] == (
            "https://ghe.example.com/api/v3/repos/o/r/commits/abc"
        )

    def test_name(self, provider):
        assert provider.name == "github"


class TestGetCommitErrors:
    """Failures become CommitLookupError with GitHub's message."""

    def test_not_found_uses_github_message(self, provider, client):
        client.get_json.return_value = HttpResult(
            status_code=404, body={"message": "Not Found", "documentation_url": "..."}
        )

        with pytest.raises(CommitLookupError) as exc_info:
            provider.get_commit("o", "r", "missing")

        assert exc_info.value.message == "Not Found"
        assert exc_info.value.status_code == 404

    def test_error_without_body(self, provider, client):
        client.get_json.return_value = HttpResult(status_code=502, body=None)

        with pytest.raises(CommitLookupError) as exc_info:
            provider.get_commit("o", "r", "abc")

        assert exc_info.value.message == "GitHub API request failed with HTTP 502"

    def test_connection_error_keeps_message(self, provider, client):
        client.get_json.side_effect = DevCenterConnectionError("Connection error: timed out")

        with pytest.raises(CommitLookupError) as exc_info:
            provider.get_commit("o", "r", "abc")

        assert exc_info.value.message == "Connection error: timed out"

    def test_missing_message_field(self, provider, client):
        client.get_json.return_value = HttpResult(status_code=200, body={"commit": {}})

        with pytest.raises(CommitLookupError):
            provider.get_commit("o", "r", "abc")
