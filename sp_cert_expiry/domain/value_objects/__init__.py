"""Domain value objects - Immutable objects defined by their attributes."""

from .credential_type import CredentialType
from .dependency_status import DependencyStatus

__all__ = [
    "CredentialType",
    "DependencyStatus",
]
