"""JSON-over-HTTPS client used for Dev Center and GitHub API calls."""

import json
import urllib.error
import urllib.request
from typing import Any

from .core.exceptions import DevCenterConnectionError
from .core.interfaces.logger import ILogger
from .core.models.http import HttpResult

USER_AGENT = "devcenter-register"


def _get_logger() -> ILogger:
    from .core.di import resolve_or_default
    from .services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def parse_json_body(response_body: str, http_status: int) -> tuple[Any | None, str | None]:
    """Decode a response body, describing why it could not be decoded.

    Returns (parsed, problem). ``parsed`` is None for empty, HTML and
    malformed bodies; ``problem`` then says which.
    """
    if not response_body or not response_body.strip():
        return None, f"Server returned empty response (HTTP {http_status})"

    # Misconfigured proxies answer with HTML error pages
    stripped = response_body.strip()
    if stripped.startswith("<!") or stripped.lower().startswith("<html"):
        preview = response_body[:100].replace("\n", " ")
        return None, f"Server returned HTML instead of JSON: '{preview}...'"

    try:
        return json.loads(response_body), None
    except json.JSONDecodeError as e:
        preview = response_body[:100].replace("\n", " ")
        return None, (
            f"Invalid JSON in response (HTTP {http_status}) at position {e.pos}: '{preview}...'"
        )


class DevCenterClient:
    """Stateless HTTP client.

    Holds no default headers: every call receives the full header set it
    needs, so authentication is passed explicitly by the caller.
    """

    def __init__(self, timeout: float = 30.0, logger: ILogger | None = None):
        self.timeout = timeout
        self._logger = logger or _get_logger()

    def post_json(
        self,
        url: str,
        body: Any,
        headers: dict[str, str] | None = None,
    ) -> HttpResult:
        """POST ``body`` as JSON and decode the JSON response."""
        return self.request("POST", url, body=body, headers=headers)

    def get_json(self, url: str, headers: dict[str, str] | None = None) -> HttpResult:
        """GET ``url`` and decode the JSON response."""
        return self.request("GET", url, headers=headers)

    def request(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResult:
        """Make a request and return its status and decoded body.

        HTTP error statuses are returned, not raised; deciding what counts
        as success is left to the caller.

        Raises:
            DevCenterConnectionError: If no HTTP response was received
        """
        # An empty dict is a real payload and must still be sent
        body_bytes = json.dumps(body).encode() if body is not None else None

        self._logger.debug(
            "API request: %s %s (body: %d bytes)",
            method,
            url,
            len(body_bytes) if body_bytes is not None else 0,
        )

        try:
            req = urllib.request.Request(url, data=body_bytes, method=method)
        except ValueError as e:
            # e.g. "unknown url type" when the base URL is empty
            self._logger.debug("Invalid request URL %r: %s", url, e)
            raise DevCenterConnectionError(f"Invalid URL: {e}", url=url, cause=e) from e
        req.add_header("User-Agent", USER_AGENT)
        req.add_header("Accept", "application/json")
        if body_bytes is not None:
            req.add_header("Content-Type", "application/json")
        for name, value in (headers or {}).items():
            # Request.add_header capitalizes names, so content-type replaces Content-Type
            req.add_header(name, value)

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                http_status = resp.status
                raw_body = resp.read()
        except urllib.error.HTTPError as e:
            http_status = e.code
            raw_body = e.read() if e.fp else b""
        except urllib.error.URLError as e:
            self._logger.debug("Connection error to %s: %s", url, e)
            raise DevCenterConnectionError(f"Connection error: {e.reason}", url=url, cause=e) from e
        except ValueError as e:
            self._logger.debug("Invalid request URL %r: %s", url, e)
            raise DevCenterConnectionError(f"Invalid URL: {e}", url=url, cause=e) from e
        except OSError as e:
            self._logger.debug("Request to %s failed: %s", url, e)
            raise DevCenterConnectionError(f"Request failed: {e}", url=url, cause=e) from e

        # Undecodable bytes end up as invalid JSON, i.e. body=None
        response_body = raw_body.decode("utf-8", errors="replace")

        self._logger.debug(
            "API response: %s %s -> HTTP %d (%d bytes)",
            method,
            url,
            http_status,
            len(response_body),
        )

        result, problem = parse_json_body(response_body, http_status)
        if problem:
            self._logger.debug("%s %s: %s", method, url, problem)

        return HttpResult(status_code=http_status, body=result)
