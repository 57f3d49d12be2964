"""Use case for reporting the soonest-expiring service principal credentials."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ...domain.entities import CredentialRecord, ExpiryRanking
from ...domain.services import ExpiryRanker
from ..exceptions import ApiError, ApplicationError, AuthError, DependencyInstallError
from ..ports import (
    Authenticator,
    BootstrapResult,
    CredentialRepository,
    DependencyBootstrapper,
    ReportWriter,
    Session,
)

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_PACKAGES: tuple[str, ...] = ("msal", "httpx")


@dataclass(frozen=True, slots=True)
class RunResult:
    """Result of one report run."""

    ranking: ExpiryRanking
    errors: tuple[ApplicationError, ...] = ()
    bootstrap: tuple[BootstrapResult, ...] = ()

    @property
    def success(self) -> bool:
        """Check if every step completed without error."""
        return not self.errors


class ReportExpiringCredentials:
    """
    Use case for listing service principals whose certificates expire soonest.

    Runs bootstrap, authentication, fetch, ranking and reporting in order.
    The authenticator and repository are built through factories after
    bootstrap, so a library installed during this run can be imported.

    With ``continue_on_error`` each failing step is logged and the run
    proceeds; otherwise the first failure is raised to the caller.
    """

    def __init__(
        self,
        *,
        bootstrapper: DependencyBootstrapper,
        authenticator_factory: Callable[[], Authenticator],
        repository_factory: Callable[[], CredentialRepository],
        report_writer: ReportWriter,
        ranker: ExpiryRanker,
        required_packages: Sequence[str] = DEFAULT_REQUIRED_PACKAGES,
        continue_on_error: bool = True,
    ) -> None:
        """
        Initialize the use case.

        Args:
            bootstrapper: Adapter that installs missing client libraries.
            authenticator_factory: Builds the authenticator adapter.
            repository_factory: Builds the credential repository adapter.
            report_writer: Adapter presenting the ranking.
            ranker: Domain service ranking records by expiry.
            required_packages: Distributions the directory adapters need.
            continue_on_error: Keep going after a failed step.
        """
        self._bootstrapper = bootstrapper
        self._authenticator_factory = authenticator_factory
        self._repository_factory = repository_factory
        self._writer = report_writer
        self._ranker = ranker
        self._required_packages = tuple(required_packages)
        self._continue_on_error = continue_on_error

    async def execute(self) -> RunResult:
        """
        Execute the report.

        Returns:
            RunResult with the ranking and any errors that were tolerated.

        Raises:
            ApplicationError: A step failed and ``continue_on_error`` is off.
        """
        logger.info("Starting service principal credential expiry report...")
        errors: list[ApplicationError] = []

        bootstrap = self._bootstrap(errors)
        session = await self._authenticate(errors)
        records = await self._fetch(session, errors)

        ranking = self._ranker.rank(records)
        logger.info("Ranking complete: %s", ranking.get_summary())

        if ranking.is_empty and errors:
            logger.warning(
                "No expiring credentials found, but %d step(s) failed; the report may be incomplete",
                len(errors),
            )

        self._writer.write(ranking)

        return RunResult(
            ranking=ranking,
            errors=tuple(errors),
            bootstrap=bootstrap,
        )

    def _bootstrap(self, errors: list[ApplicationError]) -> tuple[BootstrapResult, ...]:
        """Make sure each required package is installed."""
        results: list[BootstrapResult] = []

        for package in self._required_packages:
            result = self._bootstrapper.ensure_available(package)
            results.append(result)

            if result.status.is_available:
                logger.debug("Package %s: %s", package, result.status)
            else:
                self._handle(
                    DependencyInstallError(f"Failed to install {package}: {result.reason}"),
                    errors,
                )

        return tuple(results)

    async def _authenticate(self, errors: list[ApplicationError]) -> Session | None:
        """Sign in, returning None when the failure is tolerated."""
        try:
            authenticator = self._authenticator_factory()
            session = await authenticator.authenticate()
        except ImportError as e:
            self._handle(AuthError(f"Authentication library unavailable: {e}"), errors)
            return None
        except AuthError as e:
            self._handle(e, errors)
            return None

        logger.info("Authenticated with scopes: %s", ", ".join(session.scopes) or "default")
        return session

    async def _fetch(
        self, session: Session | None, errors: list[ApplicationError]
    ) -> list[CredentialRecord]:
        """Read credential records, returning an empty list when the failure is tolerated."""
        try:
            repository = self._repository_factory()
            records = await repository.list_credential_records(session)
        except ImportError as e:
            self._handle(ApiError(f"Directory client library unavailable: {e}"), errors)
            return []
        except ApiError as e:
            self._handle(e, errors)
            return []

        logger.info("Retrieved %d credential records", len(records))
        return records

    def _handle(self, error: ApplicationError, errors: list[ApplicationError]) -> None:
        """Apply the error policy to a failed step."""
        if not self._continue_on_error:
            raise error

        logger.error("%s: %s", error.__class__.__name__, error)
        errors.append(error)
