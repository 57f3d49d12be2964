"""Application ports - Interfaces for external adapters."""

from .authenticator import Authenticator, Session
from .credential_repository import CredentialRepository
from .dependency_bootstrapper import BootstrapResult, DependencyBootstrapper
from .report_writer import ReportWriter

__all__ = [
    "Authenticator",
    "BootstrapResult",
    "CredentialRepository",
    "DependencyBootstrapper",
    "ReportWriter",
    "Session",
]
