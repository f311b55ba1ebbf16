"""
Unit tests for Authenticator.

Covers the request shape, the returned session and the error taxonomy:
ApiError passes through untouched, anything else becomes an
AuthenticationError with an empty message.
"""

from unittest.mock import MagicMock

import pytest

from devcenter.core.exceptions import ApiError, AuthenticationError, DevCenterConnectionError
from devcenter.core.models.auth import AuthSession
from devcenter.core.models.http import HttpResult
from devcenter.services.authentication import Authenticator


@pytest.fixture
def reporter():
    return MagicMock()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def client():
    client = MagicMock()
    client.post_json.return_value = HttpResult(status_code=200, body={"access": "tok-123"})
    return client


@pytest.fixture
def authenticator(settings, reporter, logger):
    return Authenticator(settings, reporter=reporter, logger=logger)


class TestAuthenticateRequest:
    """The request sent to the authentication endpoint."""

    def test_posts_empty_object_with_api_key(self, authenticator, client):
        authenticator.authenticate(client)

        client.post_json.assert_called_once_with(
            "https://dev-center.flake.gg/api/authentication/api/json",
            {},
            headers={"API-KEY": "test-api-key", "content-type": "application/json"},
        )

    def test_body_is_empty_dict_not_none(self, authenticator, client):
        authenticator.authenticate(client)

        body = client.post_json.call_args.args[1]
        assert body == {}
        assert body is not None

    def test_reports_progress(self, authenticator, client, reporter):
        authenticator.authenticate(client)

        reporter.info.assert_any_call("Authenticating @ https://dev-center.flake.gg")
        reporter.info.assert_any_call("Authenticated!")


class TestAuthenticateSuccess:
    """What a successful authentication yields."""

    def test_returns_session_with_token(self, authenticator, client):
        session = authenticator.authenticate(client)

        assert isinstance(session, AuthSession)
        assert session.access_token == "tok-123"

    def test_session_headers_carry_bearer_token(self, authenticator, client):
        session = authenticator.authenticate(client)

        assert session.headers() == {
            "Authorization": "Bearer tok-123",
            "content-type": "application/json",
        }

    def test_session_headers_merge_preserves_existing(self, authenticator, client):
        session = authenticator.authenticate(client)

        merged = session.headers({"X-Trace": "1", "Authorization": "old"})

        assert merged["X-Trace"] == "1"
        assert merged["Authorization"] == "Bearer tok-123"

    def test_client_is_not_mutated(self, authenticator, client):
        """The token is returned, never stored on the client."""
        authenticator.authenticate(client)

        assert [name for name, _, _ in client.method_calls] == ["post_json"]


class TestAuthenticateFailures:
    """Error taxonomy during authentication."""

    def test_api_error_status_passes_through(self, authenticator, client):
        client.post_json.return_value = HttpResult(status_code=401, body={"detail": "nope"})

        with pytest.raises(ApiError) as exc_info:
            authenticator.authenticate(client)

        assert exc_info.value.message == "Failed to authenticate: Error 401"

    def test_api_error_missing_body_passes_through(self, authenticator, client):
        client.post_json.return_value = HttpResult(status_code=200, body=None)

        with pytest.raises(ApiError) as exc_info:
            authenticator.authenticate(client)

        assert exc_info.value.message == (
            "Expected result body but got while attempting to authenticate"
        )

    def test_connection_error_is_stripped_to_empty_message(self, authenticator, client, logger):
        """Intentional: unexpected failures surface without detail.

        The underlying error is only written to the diagnostic log. This
        mirrors the established behaviour and is pending product confirmation.
        """
        client.post_json.side_effect = DevCenterConnectionError(
            "Connection error: [Errno 111] Connection refused"
        )

        with pytest.raises(AuthenticationError) as exc_info:
            authenticator.authenticate(client)

        assert exc_info.value.message == ""
        assert str(exc_info.value) == ""
        assert exc_info.value.__cause__ is None
        logger.error.assert_called_once()
        assert "Connection refused" in repr(logger.error.call_args)

    def test_arbitrary_exception_is_stripped(self, authenticator, client):
        client.post_json.side_effect = RuntimeError("boom")

        with pytest.raises(AuthenticationError) as exc_info:
            authenticator.authenticate(client)

        assert exc_info.value.message == ""

    def test_body_without_access_is_stripped(self, authenticator, client):
        client.post_json.return_value = HttpResult(status_code=200, body={"token": "x"})

        with pytest.raises(AuthenticationError) as exc_info:
            authenticator.authenticate(client)

        assert exc_info.value.message == ""

    def test_failure_does_not_report_authenticated(self, authenticator, client, reporter):
        client.post_json.return_value = HttpResult(status_code=403, body={})

        with pytest.raises(ApiError):
            authenticator.authenticate(client)

        assert "Authenticated!" not in [c.args[0] for c in reporter.info.call_args_list]
