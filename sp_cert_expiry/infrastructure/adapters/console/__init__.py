"""Console output adapter."""

from .reporter import ConsoleReportWriter

__all__ = ["ConsoleReportWriter"]
