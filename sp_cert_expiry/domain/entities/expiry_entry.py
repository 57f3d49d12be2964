"""Expiry entry entity produced by the ranker."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExpiryEntry:
    """An application name and the whole days left before its credential expires."""

    app_name: str
    days_remaining: int

    @property
    def is_expired(self) -> bool:
        """Check if the credential expired before today."""
        return self.days_remaining < 0
