"""Port for credential repository - driven/secondary port."""

from typing import Protocol

from ...domain.entities import CredentialRecord
from .authenticator import Session


class CredentialRepository(Protocol):
    """
    Port for retrieving credential records from the directory.

    This is a driven (secondary) port that defines how the application
    reads service principals and their credentials.
    """

    async def list_credential_records(self, session: Session | None) -> list[CredentialRecord]:
        """
        Retrieve credential records for all service principals.

        Args:
            session: Session from the authenticator, None if sign-in failed.

        Returns:
            Records in directory order.

        Raises:
            ApiError: If retrieval fails.
        """
        ...
