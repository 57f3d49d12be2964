"""Entra ID adapter configuration.

Kept free of third-party imports so settings load before bootstrap.
"""

from dataclasses import dataclass

# Microsoft Graph Command Line Tools, a public client available in every tenant
DEFAULT_PUBLIC_CLIENT_ID = "14d82eec-204b-4c2f-b7e8-296a70dab67e"
DEFAULT_TENANT_ID = "organizations"


@dataclass(frozen=True, slots=True)
class AuthConfig:
    """Configuration for signing in to Microsoft Graph."""

    tenant_id: str = DEFAULT_TENANT_ID
    client_id: str = DEFAULT_PUBLIC_CLIENT_ID
    client_secret: str = ""

    @property
    def uses_client_secret(self) -> bool:
        """Check if the app-only client credentials flow applies."""
        return bool(self.client_secret)


@dataclass(frozen=True, slots=True)
class GraphClientConfig:
    """Configuration for Microsoft Graph API client."""

    base_url: str = "https://graph.microsoft.com/v1.0"
    timeout: float = 30.0
