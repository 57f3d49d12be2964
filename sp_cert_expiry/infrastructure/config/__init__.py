"""Configuration loaded from the environment."""

from .entra_id import AuthConfig, GraphClientConfig
from .settings import Settings, load_settings

__all__ = [
    "AuthConfig",
    "GraphClientConfig",
    "Settings",
    "load_settings",
]
