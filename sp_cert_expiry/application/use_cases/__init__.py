"""Application use cases."""

from .report_expiring_credentials import ReportExpiringCredentials, RunResult

__all__ = ["ReportExpiringCredentials", "RunResult"]
