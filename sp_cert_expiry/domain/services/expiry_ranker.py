"""Domain service for ranking credentials by expiry."""

from collections.abc import Iterable
from datetime import UTC, date, datetime, time, timedelta, tzinfo

from ..entities import CredentialRecord, ExpiryEntry, ExpiryRanking

DEFAULT_LIMIT = 10

_ONE_DAY = timedelta(days=1)


def days_until(expires_at: datetime, today: date, tz: tzinfo | None = None) -> int:
    """
    Whole days from local midnight of ``today`` until ``expires_at``.

    Both ends are compared as local wall-clock times, so a day that
    crosses a DST change still counts as one day.

    Args:
        expires_at: Expiration instant. Naive values are taken as UTC.
        today: The reference date; its time of day is midnight.
        tz: Zone used as "local". ``None`` means the system local zone.

    Returns:
        Days remaining, truncated toward zero. Negative once expired.
    """
    expiry = expires_at if expires_at.tzinfo else expires_at.replace(tzinfo=UTC)
    local_expiry = expiry.astimezone(tz).replace(tzinfo=None)
    delta = local_expiry - datetime.combine(today, time.min)
    return int(delta / _ONE_DAY)


class ExpiryRanker:
    """Domain service turning credential records into a ranked expiry list."""

    def __init__(self, limit: int = DEFAULT_LIMIT, *, tz: tzinfo | None = None) -> None:
        """Initialize ranker with the number of entries to keep."""
        if limit < 1:
            msg = f"Ranking limit must be at least 1, got {limit}"
            raise ValueError(msg)
        self._limit = limit
        self._tz = tz

    def rank(
        self,
        records: Iterable[CredentialRecord],
        *,
        today: date | None = None,
    ) -> ExpiryRanking:
        """
        Rank records by days remaining, soonest first.

        Records without an expiration date are skipped. Ties keep their
        input order.

        Args:
            records: Credential records read from the directory.
            today: Reference date, defaults to the current local date.

        Returns:
            ExpiryRanking holding at most ``limit`` entries.
        """
        if today is None:
            today = datetime.now(self._tz).date()

        entries = [
            ExpiryEntry(
                app_name=record.owner_name,
                days_remaining=days_until(record.expires_at, today, self._tz),
            )
            for record in records
            if record.expires_at is not None
        ]
        ranked = sorted(entries, key=lambda e: e.days_remaining)

        return ExpiryRanking(
            entries=tuple(ranked[: self._limit]),
            limit=self._limit,
            generated_on=today,
        )
