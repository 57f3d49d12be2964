"""Credential type value object."""

from enum import StrEnum, auto


class CredentialType(StrEnum):
    """Type of credential attached to a service principal."""

    PASSWORD = auto()
    CERTIFICATE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def graph_property(self) -> str:
        """Name of the Graph API property holding this credential type."""
        match self:
            case CredentialType.PASSWORD:
                return "passwordCredentials"
            case CredentialType.CERTIFICATE:
                return "keyCredentials"
