"""Dependency bootstrap status value object."""

from enum import StrEnum, auto


class DependencyStatus(StrEnum):
    """Outcome of making sure a client library is installed."""

    ALREADY_PRESENT = auto()
    INSTALLED = auto()
    FAILED = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def is_available(self) -> bool:
        """Check if the package can be imported after bootstrap."""
        return self is not DependencyStatus.FAILED
