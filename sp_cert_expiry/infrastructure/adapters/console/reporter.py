"""Console report writer."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from ....domain.entities import ExpiryRanking

HEADER = "Service principals with the soonest expiring certificates:"
NONE_FOUND = "No expiring service principal certificates found."


class ConsoleReportWriter:
    """Write a ranking as plain lines, one per entry."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the writer; defaults to standard output."""
        self._stream = stream

    def write(self, ranking: ExpiryRanking) -> None:
        """Write the header and entries, or the "none found" line."""
        stream = self._stream or sys.stdout

        if ranking.is_empty:
            print(NONE_FOUND, file=stream)
            return

        print(HEADER, file=stream)
        for entry in ranking:
            print(f"{entry.app_name} will expire in {entry.days_remaining} days", file=stream)
