"""Credential record entity read from the directory."""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import CredentialType


@dataclass(frozen=True, slots=True)
class CredentialRecord:
    """A service principal and the expiry of the credential read for it."""

    owner_name: str
    expires_at: datetime | None
    credential_type: CredentialType | None = None
    key_id: str | None = None

    @property
    def has_expiry(self) -> bool:
        """Check if an expiration instant is known for this record."""
        return self.expires_at is not None
