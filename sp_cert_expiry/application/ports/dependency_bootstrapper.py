"""Port for dependency bootstrap - driven/secondary port."""

from dataclasses import dataclass
from typing import Protocol

from ...domain.value_objects import DependencyStatus


@dataclass(frozen=True, slots=True)
class BootstrapResult:
    """Outcome of checking one package."""

    package: str
    status: DependencyStatus
    reason: str | None = None


class DependencyBootstrapper(Protocol):
    """Port for making sure a client library is installed."""

    def ensure_available(self, package: str) -> BootstrapResult:
        """
        Check for a package and install it when missing.

        Failures are reported in the result, never raised.
        """
        ...
