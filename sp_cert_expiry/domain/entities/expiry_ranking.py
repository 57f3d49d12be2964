"""Expiry ranking aggregate."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

from .expiry_entry import ExpiryEntry


@dataclass(frozen=True, slots=True)
class ExpiryRanking:
    """Soonest-expiring entries, ascending by days remaining."""

    entries: tuple[ExpiryEntry, ...]
    limit: int
    generated_on: date

    def __iter__(self) -> Iterator[ExpiryEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        """True when no record carried an expiration date."""
        return not self.entries

    @property
    def expired_count(self) -> int:
        """Count of entries already past their expiry."""
        return sum(1 for entry in self.entries if entry.is_expired)

    def get_summary(self) -> str:
        """Generate a human-readable summary of the ranking."""
        if self.is_empty:
            return "No credentials with an expiration date"
        soonest = self.entries[0]
        return (
            f"{len(self.entries)} ranked (limit {self.limit}), "
            f"{self.expired_count} expired, soonest: {soonest.app_name} "
            f"in {soonest.days_remaining} days"
        )
