"""Entra ID adapters backed by MSAL and the Microsoft Graph API."""

from .auth import MsalAuthenticator
from .graph_client import GraphClient
from .repository import EntraIdCredentialRepository

__all__ = [
    "EntraIdCredentialRepository",
    "GraphClient",
    "MsalAuthenticator",
]
