"""
Registration flow.

Runs the three registration calls in order:
1. Authenticate - exchange the API key for a bearer token
2. Branch - register the branch the run was triggered on
3. Commit - register the commit against that branch

The first failure is reported once through the run reporter and stops the
flow; nothing is retried and nothing escapes run().
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ...core.di import resolve_or_default
from ...core.interfaces.logger import ILogger
from ...core.interfaces.reporter import IRunReporter
from ...core.interfaces.vcs import ICommitProvider
from ...core.models.auth import AuthSession
from ...core.models.branch import BranchRead
from ...core.models.commit import CommitCreate
from ...core.models.config import RunContext
from ...core.settings import DevCenterSettings
from ...http_client import DevCenterClient
from ..authentication import Authenticator
from ..result_parser import parse_http_result
from .payloads import build_branch_create, build_commit_create, format_time_of_day

BRANCH_PATH = "/api/branch"
COMMIT_PATH = "/api/commit"


class RegistrationState(str, enum.Enum):
    """Where a registration run is, or where it stopped."""

    AUTHENTICATING = "authenticating"
    REGISTERING_BRANCH = "registering_branch"
    REGISTERING_COMMIT = "registering_commit"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RegistrationResult:
    """Outcome of one registration run."""

    state: RegistrationState = RegistrationState.AUTHENTICATING
    failed_at: RegistrationState | None = None
    branch: BranchRead | None = None
    commit: CommitCreate | None = None
    completed_at: str | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.state is RegistrationState.DONE


def error_message(error: BaseException) -> str:
    """The text reported for a failure: ``.message`` if it is a string, else str()."""
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message
    return str(error)


class RegistrationFlow:
    """
    Registers the current branch and commit with the Dev Center.

    Collaborators are injected for testing; anything left as None is built
    from the settings on first use.
    """

    def __init__(
        self,
        settings: DevCenterSettings,
        run_context: RunContext,
        client: DevCenterClient | None = None,
        authenticator: Authenticator | None = None,
        commit_provider: ICommitProvider | None = None,
        reporter: IRunReporter | None = None,
        logger: ILogger | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        from ...presenters.actions import ActionsReporter
        from ..logging import NullLogger

        self._settings = settings
        self._run = run_context
        self._client = client
        self._authenticator = authenticator
        self._commit_provider = commit_provider
        self._reporter = reporter or resolve_or_default(IRunReporter, ActionsReporter)  # type: ignore[type-abstract]
        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        self._clock = clock or (lambda: datetime.now().astimezone())

    @property
    def client(self) -> DevCenterClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = DevCenterClient(timeout=self._settings.timeout, logger=self._logger)
        return self._client

    @property
    def authenticator(self) -> Authenticator:
        """Get or create the authenticator."""
        if self._authenticator is None:
            self._authenticator = Authenticator(
                self._settings, reporter=self._reporter, logger=self._logger
            )
        return self._authenticator

    @property
    def commit_provider(self) -> ICommitProvider:
        """Get or create the GitHub commit provider."""
        if self._commit_provider is None:
            from ...plugins.vcs.github import GitHubCommitProvider

            self._commit_provider = GitHubCommitProvider(
                token=self._settings.github_token,
                api_url=self._settings.github_api_url,
                client=self.client,
                logger=self._logger,
            )
        return self._commit_provider

    def run(self) -> RegistrationResult:
        """
        Execute the flow.

        Returns:
            RegistrationResult in state DONE, or FAILED with the reported message
        """
        result = RegistrationResult()
        self._logger.debug(
            "Starting registration: repo=%s, ref=%s, sha=%s",
            self._run.repository,
            self._run.ref,
            self._run.sha[:12],
        )

        try:
            session = self.authenticator.authenticate(self.client)

            result.state = RegistrationState.REGISTERING_BRANCH
            result.branch = self._register_branch(session)
            self._reporter.notice("Branch Registered")

            result.state = RegistrationState.REGISTERING_COMMIT
            result.commit = self._register_commit(session, result.branch)
            self._reporter.notice("Commit Registered")

            completed_at = format_time_of_day(self._clock())
            self._reporter.set_output("time", completed_at)
        except Exception as e:
            return self._fail(result, e)

        result.completed_at = completed_at
        result.state = RegistrationState.DONE
        self._logger.info("Registration complete at %s", result.completed_at)
        return result

    def _register_branch(self, session: AuthSession) -> BranchRead:
        payload = build_branch_create(self._run)
        self._logger.debug("Registering branch %s for %s", payload.id, payload.repo)
        response = self.client.post_json(
            f"{self._settings.url}{BRANCH_PATH}",
            payload.to_payload(),
            headers=session.headers(),
        )
        body = parse_http_result("register branch", response)
        return BranchRead.model_validate(body)

    def _register_commit(self, session: AuthSession, branch: BranchRead) -> CommitCreate:
        info = self.commit_provider.get_commit(self._run.owner, self._run.repo, self._run.sha)
        payload = build_commit_create(self._run.sha, branch.id, info)
        self._logger.debug("Registering commit %s on branch %s", payload.id[:12], branch.id)
        response = self.client.post_json(
            f"{self._settings.url}{COMMIT_PATH}",
            payload.to_payload(),
            headers=session.headers(),
        )
        parse_http_result("register commit", response)
        return payload

    def _fail(self, result: RegistrationResult, error: Exception) -> RegistrationResult:
        message = error_message(error)
        self._logger.error(
            "Registration failed while %s: %r",
            result.state.value.replace("_", " "),
            error,
            exc_info=error,
        )
        result.failed_at = result.state
        result.state = RegistrationState.FAILED
        result.error = message
        self._reporter.set_failed(message)
        return result
