"""
Dev Center authentication.

Exchanges the configured API key for a bearer token. The token is returned
as an AuthSession and threaded into later requests by the caller; the HTTP
client itself is never modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.di import resolve_or_default
from ..core.exceptions import ApiError, AuthenticationError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.reporter import IRunReporter
from ..core.models.auth import AuthResponse, AuthSession
from .result_parser import parse_http_result

if TYPE_CHECKING:
    from ..core.settings import DevCenterSettings
    from ..http_client import DevCenterClient

AUTH_PATH = "/api/authentication/api/json"


class Authenticator:
    """Obtains an AuthSession for one run."""

    def __init__(
        self,
        settings: DevCenterSettings,
        reporter: IRunReporter | None = None,
        logger: ILogger | None = None,
    ):
        """
        Initialize the authenticator.

        Args:
            settings: Provides the base URL and API key
            reporter: Run reporter for progress lines. If None, resolves from DI container.
            logger: Logger instance. If None, resolves from DI container.
        """
        from ..presenters.actions import ActionsReporter
        from .logging import NullLogger

        self._settings = settings
        self._reporter = reporter or resolve_or_default(IRunReporter, ActionsReporter)  # type: ignore[type-abstract]
        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    def authenticate(self, client: DevCenterClient) -> AuthSession:
        """
        Authenticate with the API key.

        Args:
            client: HTTP client to issue the request with

        Returns:
            AuthSession carrying the bearer token

        Raises:
            ApiError: Unchanged, when the response fails validation
            AuthenticationError: With an empty message, for any other failure
        """
        url = self._settings.url
        self._reporter.info(f"Authenticating @ {url}")

        try:
            result = client.post_json(
                f"{url}{AUTH_PATH}",
                {},
                headers={
                    "API-KEY": self._settings.api_key,
                    "content-type": "application/json",
                },
            )
            body = parse_http_result("authenticate", result)
            response = AuthResponse.model_validate(body)
        except ApiError:
            raise
        except Exception as e:
            # Detail goes to the log only; the run sees an empty failure message.
            self._logger.error("Authentication against %s failed: %r", url or "<no url>", e)
            raise AuthenticationError() from None

        self._logger.debug("Received access token (%d chars)", len(response.access))
        self._reporter.info("Authenticated!")
        return AuthSession(access_token=response.access)
