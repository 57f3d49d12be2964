"""Port for report output - driven/secondary port."""

from typing import Protocol

from ...domain.entities import ExpiryRanking


class ReportWriter(Protocol):
    """Port for presenting a ranking to the operator."""

    def write(self, ranking: ExpiryRanking) -> None:
        """Write the ranking, or the "none found" line when it is empty."""
        ...
