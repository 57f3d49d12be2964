"""
Infrastructure adapters - Implementations of application ports.

The Entra ID adapters are imported on demand from ``adapters.entra_id``
because their client libraries may only be installed by the bootstrap step.
"""

from .bootstrap import PipDependencyBootstrapper
from .console import ConsoleReportWriter

__all__ = [
    "ConsoleReportWriter",
    "PipDependencyBootstrapper",
]
