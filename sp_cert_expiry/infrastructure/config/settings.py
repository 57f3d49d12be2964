"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from .entra_id import DEFAULT_PUBLIC_CLIENT_ID, DEFAULT_TENANT_ID, AuthConfig, GraphClientConfig

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default) or default


def _env_list(key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Get comma-separated list from environment variable."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass
class Settings:
    """Application settings container."""

    # Azure/Entra ID
    azure_tenant_id: str = field(default_factory=lambda: _env_str("AZURE_TENANT_ID", DEFAULT_TENANT_ID))
    azure_client_id: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_ID", DEFAULT_PUBLIC_CLIENT_ID))
    azure_client_secret: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_SECRET"))

    # Report
    top_n: int = field(default_factory=lambda: _env_int("TOP_N", 10))
    include_password_credentials: bool = field(
        default_factory=lambda: _env_bool("INCLUDE_PASSWORD_CREDENTIALS")
    )
    all_credentials: bool = field(default_factory=lambda: _env_bool("ALL_CREDENTIALS"))

    # Run configuration
    continue_on_error: bool = field(default_factory=lambda: _env_bool("CONTINUE_ON_ERROR", default=True))
    auto_install: bool = field(default_factory=lambda: _env_bool("AUTO_INSTALL", default=True))
    required_packages: tuple[str, ...] = field(
        default_factory=lambda: _env_list("REQUIRED_PACKAGES", ("msal", "httpx"))
    )
    graph_timeout: float = field(default_factory=lambda: _env_float("GRAPH_TIMEOUT", 30.0))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate settings."""
        errors: list[str] = []

        if self.top_n < 1:
            errors.append(f"TOP_N must be at least 1 (got {self.top_n})")
        if self.graph_timeout <= 0:
            errors.append(f"GRAPH_TIMEOUT must be positive (got {self.graph_timeout})")
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)} (got {self.log_level})")

        if errors:
            msg = f"Invalid settings: {'; '.join(errors)}"
            raise ValueError(msg)

    @cached_property
    def auth_config(self) -> AuthConfig:
        """Get authentication configuration."""
        return AuthConfig(
            tenant_id=self.azure_tenant_id,
            client_id=self.azure_client_id,
            client_secret=self.azure_client_secret,
        )

    @cached_property
    def graph_config(self) -> GraphClientConfig:
        """Get Graph API client configuration."""
        return GraphClientConfig(timeout=self.graph_timeout)


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
