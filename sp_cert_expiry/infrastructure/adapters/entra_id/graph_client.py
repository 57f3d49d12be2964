"""Microsoft Graph API client for service principals."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

import httpx

from ...config.entra_id import GraphClientConfig

logger = logging.getLogger(__name__)


class GraphClient:
    """
    Async client for Microsoft Graph API.

    Sends bearer-authenticated requests and follows ``@odata.nextLink``
    pagination.
    """

    SERVICE_PRINCIPAL_FIELDS: ClassVar[tuple[str, ...]] = (
        "id",
        "appId",
        "displayName",
        "keyCredentials",
        "passwordCredentials",
    )

    def __init__(
        self,
        config: GraphClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the Graph client.

        Args:
            config: Endpoint and timeout settings.
            transport: Optional httpx transport, used to stub the API.
        """
        self._config = config
        self._transport = transport

    async def get_service_principals(self, access_token: str) -> list[dict[str, Any]]:
        """
        Retrieve all service principals with their credential sets.

        Args:
            access_token: Bearer token for Microsoft Graph.

        Returns:
            List of service principal dictionaries from Graph API.

        Raises:
            httpx.HTTPError: If a request fails.
            ValueError: If a page is not a Graph collection.
        """
        logger.info("Fetching service principals from Entra ID...")
        select = ",".join(self.SERVICE_PRINCIPAL_FIELDS)
        service_principals = await self._get_all_pages(
            f"/servicePrincipals?$select={select}", access_token
        )
        logger.info("Found %d service principals", len(service_principals))
        return service_principals

    async def _get_all_pages(self, endpoint: str, access_token: str) -> list[dict[str, Any]]:
        """
        Retrieve all pages from a paginated Graph API endpoint.

        Args:
            endpoint: The API endpoint path, with query string.
            access_token: Bearer token for Microsoft Graph.

        Returns:
            Combined list of all results across pages.
        """
        results: list[dict[str, Any]] = []
        url: str | None = endpoint
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        }

        async with httpx.AsyncClient(
            timeout=self._config.timeout,
            transport=self._transport,
        ) as client:
            while url:
                # Handle both relative and absolute URLs
                full_url = url if url.startswith("http") else f"{self._config.base_url}{url}"

                response = await client.get(full_url, headers=headers)
                response.raise_for_status()
                data = response.json()

                page = data.get("value") if isinstance(data, dict) else None
                if not isinstance(page, list):
                    msg = f"Unexpected response from {full_url}: missing 'value' collection"
                    raise ValueError(msg)

                results.extend(page)
                url = data.get("@odata.nextLink")
                if url is not None and not isinstance(url, str):
                    msg = f"Unexpected response from {full_url}: '@odata.nextLink' is not a URL"
                    raise ValueError(msg)

        return results
