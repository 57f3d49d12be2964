#!/usr/bin/env python3
"""
Service Principal Certificate Expiry Report

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from . import __version__
from .application.exceptions import ApplicationError
from .application.use_cases import ReportExpiringCredentials
from .domain.services import ExpiryRanker
from .infrastructure.adapters import ConsoleReportWriter, PipDependencyBootstrapper
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import Authenticator, CredentialRepository
    from .application.use_cases import RunResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components. The
    Entra ID adapters are imported when first built, after bootstrap.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_bootstrapper(self) -> PipDependencyBootstrapper:
        """Create the dependency bootstrap adapter."""
        return PipDependencyBootstrapper(auto_install=self._settings.auto_install)

    def create_authenticator(self) -> Authenticator:
        """Create the MSAL authenticator adapter."""
        from .infrastructure.adapters.entra_id import MsalAuthenticator

        return MsalAuthenticator(self._settings.auth_config)

    def create_credential_repository(self) -> CredentialRepository:
        """Create the credential repository adapter."""
        from .infrastructure.adapters.entra_id import EntraIdCredentialRepository

        return EntraIdCredentialRepository(
            self._settings.graph_config,
            include_password_credentials=self._settings.include_password_credentials,
            all_credentials=self._settings.all_credentials,
        )

    def create_report_use_case(self) -> ReportExpiringCredentials:
        """Create the main use case with all dependencies."""
        return ReportExpiringCredentials(
            bootstrapper=self.create_bootstrapper(),
            authenticator_factory=self.create_authenticator,
            repository_factory=self.create_credential_repository,
            report_writer=ConsoleReportWriter(),
            ranker=ExpiryRanker(self._settings.top_n),
            required_packages=self._settings.required_packages,
            continue_on_error=self._settings.continue_on_error,
        )


class Application:
    """Main application orchestrator."""

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def run_once(self) -> RunResult:
        """Execute a single report."""
        use_case = self._container.create_report_use_case()
        return await use_case.execute()

    async def run(self) -> int:
        """
        Run the report.

        Returns:
            Exit code. Best-effort runs always return 0; strict runs
            return 1 when a step failed.
        """
        try:
            result = await self.run_once()
        except ApplicationError as e:
            logger.error("Report aborted: %s", e)
            return 1

        if not result.success:
            logger.warning(
                "Report completed with %d error(s): %s",
                len(result.errors),
                "; ".join(str(e) for e in result.errors),
            )

        return 0


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("Service principal certificate expiry report %s starting...", __version__)

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
