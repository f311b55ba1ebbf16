"""
Unit tests for DevCenterClient.

urllib.request.urlopen is patched; tests check what is sent and how
responses (including HTTP errors) become HttpResult values.
"""

import io
import json
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from devcenter.core.exceptions import DevCenterConnectionError
from devcenter.http_client import DevCenterClient, parse_json_body


def _response(status: int, body: bytes) -> MagicMock:
    resp = MagicMock()
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    resp.status = status
    resp.read.return_value = body
    return resp


@pytest.fixture
def urlopen():
    with patch("devcenter.http_client.urllib.request.urlopen") as mock_urlopen:
        yield mock_urlopen


@pytest.fixture
def client():
    return DevCenterClient(timeout=5, logger=MagicMock())


class TestRequestShape:
    """What goes over the wire."""

    def test_post_json_sends_body_and_headers(self, client, urlopen):
        urlopen.return_value = _response(200, b'{"id": "main"}')

        client.post_json(
            "https://dc.example.com/api/branch",
            {"id": "main", "repo": "o/r"},
            headers={"Authorization": "Bearer t", "content-type": "application/json"},
        )

        req = urlopen.call_args.args[0]
        assert req.full_url == "https://dc.example.com/api/branch"
        assert req.get_method() == "POST"
        assert json.loads(req.data) == {"id": "main", "repo": "o/r"}
        assert req.get_header("Authorization") == "Bearer t"
        assert req.get_header("Content-type") == "application/json"
        assert urlopen.call_args.kwargs["timeout"] == 5

    def test_empty_object_body_is_sent(self, client, urlopen):
        urlopen.return_value = _response(200, b'{"access": "x"}')

        client.post_json("https://dc.example.com/api/authentication/api/json", {})

        req = urlopen.call_args.args[0]
        assert req.data == b"{}"

    def test_get_has_no_body(self, client, urlopen):
        urlopen.return_value = _response(200, b"{}")

        client.get_json("https://api.github.com/repos/o/r/commits/abc")

        req = urlopen.call_args.args[0]
        assert req.get_method() == "GET"
        assert req.data is None

    def test_caller_headers_are_not_retained(self, client, urlopen):
        """Headers from one call never leak into the next."""
        urlopen.return_value = _response(200, b"{}")

        client.post_json("https://dc.example.com/a", {}, headers={"Authorization": "Bearer t"})
        client.post_json("https://dc.example.com/b", {})

        second = urlopen.call_args_list[1].args[0]
        assert second.get_header("Authorization") is None


class TestResponses:
    """Responses become HttpResult values."""

    def test_success_json(self, client, urlopen):
        urlopen.return_value = _response(201, b'{"id": "main"}')

        result = client.post_json("https://dc.example.com/api/branch", {})

        assert result.status_code == 201
        assert result.body == {"id": "main"}

    def test_empty_body_is_none(self, client, urlopen):
        urlopen.return_value = _response(204, b"")

        result = client.post_json("https://dc.example.com/api/commit", {})

        assert result.status_code == 204
        assert result.body is None

    def test_http_error_is_returned_not_raised(self, client, urlopen):
        urlopen.side_effect = urllib.error.HTTPError(
            "https://dc.example.com/api/branch",
            401,
            "Unauthorized",
            {},
            io.BytesIO(b'{"detail": "bad key"}'),
        )

        result = client.post_json("https://dc.example.com/api/branch", {})

        assert result.status_code == 401
        assert result.body == {"detail": "bad key"}

    def test_undecodable_body_is_none(self, client, urlopen):
        """The server answered, so a bad body is not a transport failure."""
        urlopen.return_value = _response(200, b"\xff\xfe")

        result = client.post_json("https://dc.example.com/api/branch", {})

        assert result.status_code == 200
        assert result.body is None

    def test_undecodable_error_body_is_none(self, client, urlopen):
        urlopen.side_effect = urllib.error.HTTPError(
            "https://dc.example.com/api/branch",
            500,
            "Server Error",
            {},
            io.BytesIO(b"\xff\xfe\x00"),
        )

        result = client.post_json("https://dc.example.com/api/branch", {})

        assert result.status_code == 500
        assert result.body is None

    def test_html_error_body_is_none(self, client, urlopen):
        urlopen.side_effect = urllib.error.HTTPError(
            "https://dc.example.com/api/branch",
            502,
            "Bad Gateway",
            {},
            io.BytesIO(b"<html><body>Bad gateway</body></html>"),
        )

        result = client.post_json("https://dc.example.com/api/branch", {})

        assert result.status_code == 502
        assert result.body is None


class TestTransportErrors:
    """No HTTP response at all raises DevCenterConnectionError."""

    def test_url_error(self, client, urlopen):
        urlopen.side_effect = urllib.error.URLError("Connection refused")

        with pytest.raises(DevCenterConnectionError) as exc_info:
            client.post_json("https://dc.example.com/api/branch", {})

        assert "Connection refused" in exc_info.value.message

    def test_timeout(self, client, urlopen):
        urlopen.side_effect = TimeoutError("timed out")

        with pytest.raises(DevCenterConnectionError):
            client.post_json("https://dc.example.com/api/branch", {})

    def test_malformed_url_from_empty_base(self, client):
        """An empty base URL yields a relative path urllib rejects."""
        with pytest.raises(DevCenterConnectionError) as exc_info:
            client.post_json("/api/authentication/api/json", {})

        assert exc_info.value.message.startswith("Invalid URL")


class TestParseJsonBody:
    """Body decoding diagnostics."""

    def test_valid(self):
        assert parse_json_body('{"a": 1}', 200) == ({"a": 1}, None)

    def test_whitespace(self):
        body, problem = parse_json_body("   \n", 200)
        assert body is None
        assert "empty" in problem

    def test_invalid_json(self):
        body, problem = parse_json_body("{not json", 500)
        assert body is None
        assert "Invalid JSON" in problem
