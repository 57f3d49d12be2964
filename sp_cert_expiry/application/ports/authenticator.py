"""Port for authentication - driven/secondary port."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Session:
    """An access token scoped to read application metadata."""

    access_token: str
    expires_at: datetime
    scopes: tuple[str, ...] = ()


class Authenticator(Protocol):
    """
    Port for obtaining a session from the identity provider.

    This is a driven (secondary) port that defines how the application
    signs in before reading the directory.
    """

    async def authenticate(self) -> Session:
        """
        Acquire a session with read access to application metadata.

        Returns:
            Session carrying a bearer token.

        Raises:
            AuthError: If the identity provider refuses or cannot be reached.
        """
        ...
