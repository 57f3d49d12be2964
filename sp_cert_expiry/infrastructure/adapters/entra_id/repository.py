"""Entra ID credential repository implementation."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import httpx

from ....application.exceptions import ApiError
from ....application.ports import Session
from ....domain.entities import CredentialRecord
from ....domain.value_objects import CredentialType
from ...config.entra_id import GraphClientConfig
from .graph_client import GraphClient

logger = logging.getLogger(__name__)


class EntraIdCredentialRepository:
    """
    Credential repository implementation using Microsoft Graph API.

    Implements the CredentialRepository port for service principals. By
    default each principal yields one record built from its first key
    credential (certificate).
    """

    def __init__(
        self,
        config: GraphClientConfig,
        *,
        include_password_credentials: bool = False,
        all_credentials: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the repository.

        Args:
            config: Configuration for the Graph API client.
            include_password_credentials: Also read client secrets.
            all_credentials: Emit one record per credential instead of only
                the first one of each principal.
            transport: Optional httpx transport passed to the Graph client.
        """
        self._client = GraphClient(config, transport=transport)
        self._credential_types = (
            (CredentialType.CERTIFICATE, CredentialType.PASSWORD)
            if include_password_credentials
            else (CredentialType.CERTIFICATE,)
        )
        self._all_credentials = all_credentials

    async def list_credential_records(self, session: Session | None) -> list[CredentialRecord]:
        """
        Retrieve credential records for all service principals.

        Args:
            session: Authenticated session, None if sign-in failed.

        Returns:
            Credential records in directory order.

        Raises:
            ApiError: If there is no session or retrieval fails.
        """
        if session is None:
            msg = "Cannot query service principals without an authenticated session"
            raise ApiError(msg)

        try:
            service_principals = await self._client.get_service_principals(session.access_token)
        except (httpx.HTTPError, ValueError) as e:
            msg = f"Failed to retrieve service principals from Entra ID: {e}"
            raise ApiError(msg) from e

        records: list[CredentialRecord] = []
        try:
            for sp in service_principals:
                records.extend(self._map_service_principal(sp))
        except (TypeError, AttributeError, KeyError) as e:
            msg = f"Malformed service principal data from Entra ID: {e}"
            raise ApiError(msg) from e

        with_expiry = sum(1 for r in records if r.has_expiry)
        logger.info(
            "Mapped %d service principals to %d records (%d with an expiry date)",
            len(service_principals),
            len(records),
            with_expiry,
        )
        return records

    def _map_service_principal(self, sp: dict[str, Any]) -> list[CredentialRecord]:
        """
        Map a raw service principal to credential records.

        A principal without any credential of the read types still yields
        one record, with no expiry.
        """
        name = sp.get("displayName") or "Unknown"
        credentials = [
            (credential_type, raw)
            for credential_type in self._credential_types
            for raw in (sp.get(credential_type.graph_property) or [])
        ]

        if not credentials:
            return [CredentialRecord(owner_name=name, expires_at=None)]

        if not self._all_credentials:
            credentials = credentials[:1]

        return [
            self._map_credential(raw, credential_type, name)
            for credential_type, raw in credentials
        ]

    def _map_credential(
        self,
        raw: dict[str, Any],
        credential_type: CredentialType,
        owner_name: str,
    ) -> CredentialRecord:
        """Map raw Graph API credential data to a record."""
        expiry_str = raw.get("endDateTime")
        expires_at = self._parse_datetime(expiry_str) if expiry_str else None

        if expires_at is None:
            logger.warning(
                "Credential %s of service principal %s has no usable expiry date",
                raw.get("keyId", "unknown"),
                owner_name,
            )

        return CredentialRecord(
            owner_name=owner_name,
            expires_at=expires_at,
            credential_type=credential_type,
            key_id=raw.get("keyId"),
        )

    @staticmethod
    def _parse_datetime(dt_string: str) -> datetime | None:
        """Parse ISO datetime string to datetime object."""
        try:
            # Graph returns a trailing Z for UTC
            dt = datetime.fromisoformat(dt_string.replace("Z", "+00:00"))
        except ValueError:
            logger.warning("Failed to parse datetime: %s", dt_string)
            return None
        return dt if dt.tzinfo else dt.replace(tzinfo=UTC)
