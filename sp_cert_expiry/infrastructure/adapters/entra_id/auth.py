"""MSAL authenticator for Microsoft Graph."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, ClassVar

import msal

from ....application.exceptions import AuthError
from ....application.ports import Session
from ...config.entra_id import AuthConfig

logger = logging.getLogger(__name__)


class MsalAuthenticator:
    """
    Authenticator implementation using MSAL.

    With a client secret the client credentials flow is used. Without one
    the operator signs in through the device code flow, reusing a cached
    account when there is one.
    """

    AUTHORITY_BASE: ClassVar[str] = "https://login.microsoftonline.com"
    APP_SCOPES: ClassVar[list[str]] = ["https://graph.microsoft.com/.default"]
    DELEGATED_SCOPES: ClassVar[list[str]] = [
        "https://graph.microsoft.com/Application.Read.All",
    ]

    def __init__(
        self,
        config: AuthConfig,
        *,
        app_factory: Callable[[AuthConfig], Any] | None = None,
    ) -> None:
        """
        Initialize the authenticator.

        Args:
            config: Tenant and client settings.
            app_factory: Builds the MSAL application. Defaults to a
                confidential or public client depending on ``config``.
        """
        self._config = config
        self._app_factory = app_factory or self._create_msal_app
        self._msal_app: Any | None = None

    @property
    def scopes(self) -> list[str]:
        """Scopes requested for the configured flow."""
        return self.APP_SCOPES if self._config.uses_client_secret else self.DELEGATED_SCOPES

    def _create_msal_app(self, config: AuthConfig) -> msal.ClientApplication:
        """Create the MSAL application for the configured flow."""
        authority = f"{self.AUTHORITY_BASE}/{config.tenant_id}"
        if config.uses_client_secret:
            return msal.ConfidentialClientApplication(
                client_id=config.client_id,
                client_credential=config.client_secret,
                authority=authority,
            )
        return msal.PublicClientApplication(
            client_id=config.client_id,
            authority=authority,
        )

    def _get_msal_app(self) -> Any:
        """Get or create MSAL application instance."""
        if self._msal_app is None:
            self._msal_app = self._app_factory(self._config)
        return self._msal_app

    async def authenticate(self) -> Session:
        """
        Acquire an access token for Microsoft Graph.

        MSAL is synchronous, so this blocks the event loop while it runs.
        In the device code flow it blocks until the operator finishes
        signing in or the code expires. The run does nothing else
        concurrently, so the calls are not moved to a worker thread.

        Returns:
            Session with the bearer token and granted scopes.

        Raises:
            AuthError: If no token could be acquired.
        """
        flow = "client credentials" if self._config.uses_client_secret else "device code"
        logger.info("Authenticating to tenant %s (%s flow)...", self._config.tenant_id, flow)

        try:
            app = self._get_msal_app()
            if self._config.uses_client_secret:
                result = app.acquire_token_for_client(scopes=self.scopes)
            else:
                result = self._acquire_delegated_token(app)
        except AuthError:
            raise
        except Exception as e:
            msg = f"Failed to acquire access token: {e}"
            raise AuthError(msg) from e

        if not result or "access_token" not in result:
            result = result or {}
            error = result.get("error_description", result.get("error", "Unknown error"))
            msg = f"Failed to acquire access token: {error}"
            raise AuthError(msg)

        expires_in = int(result.get("expires_in", 3600))
        granted = result.get("scope")
        scopes = tuple(granted.split()) if granted else tuple(self.scopes)

        return Session(
            access_token=result["access_token"],
            expires_at=datetime.now(UTC) + timedelta(seconds=expires_in),
            scopes=scopes,
        )

    def _acquire_delegated_token(self, app: Any) -> dict[str, Any]:
        """
        Acquire a delegated token, silently when an account is cached.

        ``acquire_token_by_device_flow`` polls until sign-in completes.
        """
        accounts = app.get_accounts()
        if accounts:
            result = app.acquire_token_silent(self.scopes, account=accounts[0])
            if result and "access_token" in result:
                logger.info("Using cached sign-in for %s", accounts[0].get("username", "account"))
                return result

        device_flow = app.initiate_device_flow(scopes=self.scopes)
        if "user_code" not in device_flow:
            error = device_flow.get("error_description", "unknown error")
            msg = f"Failed to start device code sign-in: {error}"
            raise AuthError(msg)

        logger.warning("%s", device_flow["message"])
        return app.acquire_token_by_device_flow(device_flow)
