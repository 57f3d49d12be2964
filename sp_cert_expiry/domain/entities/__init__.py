"""Domain entities - Records read from the directory and ranked results."""

from .credential_record import CredentialRecord
from .expiry_entry import ExpiryEntry
from .expiry_ranking import ExpiryRanking

__all__ = [
    "CredentialRecord",
    "ExpiryEntry",
    "ExpiryRanking",
]
