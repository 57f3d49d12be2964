"""Tests for the ReportExpiringCredentials use case."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from sp_cert_expiry.application.exceptions import ApiError, AuthError, DependencyInstallError
from sp_cert_expiry.application.ports import BootstrapResult, Session
from sp_cert_expiry.application.use_cases import ReportExpiringCredentials
from sp_cert_expiry.domain.entities import CredentialRecord, ExpiryRanking
from sp_cert_expiry.domain.services import ExpiryRanker
from sp_cert_expiry.domain.value_objects import DependencyStatus


class FakeBootstrapper:
    """Bootstrapper reporting preset statuses."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.checked: list[str] = []

    def ensure_available(self, package: str) -> BootstrapResult:
        self.checked.append(package)
        if package in self.failing:
            return BootstrapResult(package, DependencyStatus.FAILED, reason="no network")
        return BootstrapResult(package, DependencyStatus.ALREADY_PRESENT)


class FakeAuthenticator:
    """Authenticator returning a session or raising."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error

    async def authenticate(self) -> Session:
        if self.error:
            raise self.error
        return Session(
            access_token="token",
            expires_at=datetime.now(UTC) + timedelta(hours=1),
            scopes=("Application.Read.All",),
        )


class FakeRepository:
    """Repository behaving like the Graph adapter without a session."""

    def __init__(self, records: list[CredentialRecord] | None = None) -> None:
        self.records = records or []
        self.sessions: list[Session | None] = []

    async def list_credential_records(self, session: Session | None) -> list[CredentialRecord]:
        self.sessions.append(session)
        if session is None:
            msg = "Cannot query service principals without an authenticated session"
            raise ApiError(msg)
        return self.records


class RecordingWriter:
    """Writer keeping every ranking it receives."""

    def __init__(self) -> None:
        self.rankings: list[ExpiryRanking] = []

    def write(self, ranking: ExpiryRanking) -> None:
        self.rankings.append(ranking)


def _records() -> list[CredentialRecord]:
    now = datetime.now(UTC)
    return [
        CredentialRecord("Later", now + timedelta(days=40)),
        CredentialRecord("Missing", None),
        CredentialRecord("Expired", now - timedelta(days=3)),
    ]


def _use_case(
    *,
    bootstrapper: FakeBootstrapper | None = None,
    authenticator_factory=None,
    repository: FakeRepository | None = None,
    repository_factory=None,
    writer: RecordingWriter | None = None,
    continue_on_error: bool = True,
) -> ReportExpiringCredentials:
    repository = repository or FakeRepository(_records())
    return ReportExpiringCredentials(
        bootstrapper=bootstrapper or FakeBootstrapper(),
        authenticator_factory=authenticator_factory or FakeAuthenticator,
        repository_factory=repository_factory or (lambda: repository),
        report_writer=writer or RecordingWriter(),
        ranker=ExpiryRanker(tz=UTC),
        continue_on_error=continue_on_error,
    )


class TestReportExpiringCredentials:
    """Tests for the report use case."""

    def test_successful_run(self) -> None:
        """A clean run ranks the fetched records and writes them."""
        writer = RecordingWriter()
        repository = FakeRepository(_records())

        result = asyncio.run(_use_case(repository=repository, writer=writer).execute())

        assert result.success is True
        assert [entry.app_name for entry in result.ranking] == ["Expired", "Later"]
        assert writer.rankings == [result.ranking]
        assert repository.sessions[0] is not None
        assert repository.sessions[0].access_token == "token"

    def test_bootstrap_checks_required_packages(self) -> None:
        """Each required package is checked before signing in."""
        bootstrapper = FakeBootstrapper()

        result = asyncio.run(_use_case(bootstrapper=bootstrapper).execute())

        assert bootstrapper.checked == ["msal", "httpx"]
        assert [r.status for r in result.bootstrap] == [DependencyStatus.ALREADY_PRESENT] * 2

    def test_bootstrap_failure_is_tolerated(self) -> None:
        """A failed install is recorded and the run continues."""
        result = asyncio.run(_use_case(bootstrapper=FakeBootstrapper({"msal"})).execute())

        assert len(result.errors) == 1
        assert isinstance(result.errors[0], DependencyInstallError)
        assert "no network" in str(result.errors[0])
        assert len(result.ranking) == 2

    def test_auth_failure_continues_into_fetch(self) -> None:
        """Failed sign-in still reaches the fetch step and reports none found."""
        writer = RecordingWriter()
        repository = FakeRepository(_records())

        result = asyncio.run(
            _use_case(
                authenticator_factory=lambda: FakeAuthenticator(AuthError("consent required")),
                repository=repository,
                writer=writer,
            ).execute()
        )

        assert repository.sessions == [None]
        assert [type(e) for e in result.errors] == [AuthError, ApiError]
        assert result.success is False
        assert writer.rankings[0].is_empty is True

    def test_strict_mode_raises_first_error(self) -> None:
        """With continue_on_error off the first failure aborts the run."""
        writer = RecordingWriter()
        repository = FakeRepository(_records())
        use_case = _use_case(
            authenticator_factory=lambda: FakeAuthenticator(AuthError("consent required")),
            repository=repository,
            writer=writer,
            continue_on_error=False,
        )

        with pytest.raises(AuthError, match="consent required"):
            asyncio.run(use_case.execute())

        assert repository.sessions == []
        assert writer.rankings == []

    def test_strict_mode_raises_bootstrap_failure(self) -> None:
        """A failed install aborts a strict run."""
        use_case = _use_case(bootstrapper=FakeBootstrapper({"httpx"}), continue_on_error=False)

        with pytest.raises(DependencyInstallError, match="httpx"):
            asyncio.run(use_case.execute())

    def test_missing_auth_library_is_auth_error(self) -> None:
        """An authenticator that cannot be imported counts as a failed sign-in."""

        def factory() -> FakeAuthenticator:
            raise ModuleNotFoundError("No module named 'msal'")

        result = asyncio.run(_use_case(authenticator_factory=factory).execute())

        assert isinstance(result.errors[0], AuthError)
        assert "msal" in str(result.errors[0])

    def test_missing_directory_library_is_api_error(self) -> None:
        """A repository that cannot be imported counts as a failed fetch."""

        def factory() -> FakeRepository:
            raise ModuleNotFoundError("No module named 'httpx'")

        result = asyncio.run(_use_case(repository_factory=factory).execute())

        assert [type(e) for e in result.errors] == [ApiError]
        assert result.ranking.is_empty is True

    def test_empty_directory(self) -> None:
        """No service principals is a successful, empty report."""
        writer = RecordingWriter()

        result = asyncio.run(_use_case(repository=FakeRepository([]), writer=writer).execute())

        assert result.success is True
        assert writer.rankings[0].is_empty is True
