"""
Adapter settings.

Defaults match the production partner integration. A YAML file named by
PXYZ_ADAPTER_CONFIG can override them, and individual environment
variables override the file.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..exceptions import AdapterConfigError
from ..logging import config_logger
from ..utils.constants import (
    ADAPTER_VERSION,
    DEFAULT_CURRENCY,
    DEFAULT_TTL,
    ENDPOINT_URL,
    NET_REVENUE,
    USER_SYNC_URL,
)

CONFIG_PATH_ENV = "PXYZ_ADAPTER_CONFIG"

# Environment variable -> settings field
ENV_OVERRIDES: dict[str, str] = {
    "PXYZ_ENDPOINT_URL": "endpoint_url",
    "PXYZ_DEFAULT_CURRENCY": "default_currency",
}

logger = config_logger()


@dataclass
class AdapterSettings:
    """
    Runtime settings for the adapter.

    Attributes:
        endpoint_url: Partner bid endpoint
        user_sync_url: Cookie-sync pixel URL template
        default_currency: Currency used when the response omits cur
        ttl: Bid time-to-live in seconds
        net_revenue: Whether partner prices are net
        adapter_version: Version reported in imp.ext.pxyz.adapter
    """
    endpoint_url: str = ENDPOINT_URL
    user_sync_url: str = USER_SYNC_URL
    default_currency: str = DEFAULT_CURRENCY
    ttl: int = DEFAULT_TTL
    net_revenue: bool = NET_REVENUE
    adapter_version: str = ADAPTER_VERSION

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AdapterSettings":
        """
        Create from dictionary.

        Raises:
            AdapterConfigError: On unknown keys, a ttl that is not a positive
                integer, or a net_revenue that is not a boolean
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise AdapterConfigError(
                f"Unknown adapter settings: {', '.join(sorted(unknown))}"
            )

        defaults = cls()
        ttl = data.get("ttl", defaults.ttl)
        if not isinstance(ttl, int) or isinstance(ttl, bool):
            raise AdapterConfigError(f"Invalid ttl: {ttl!r}")
        if ttl <= 0:
            raise AdapterConfigError(f"ttl must be positive, got {ttl}")

        net_revenue = data.get("net_revenue", defaults.net_revenue)
        if not isinstance(net_revenue, bool):
            raise AdapterConfigError(f"Invalid net_revenue: {net_revenue!r}")

        return cls(
            endpoint_url=data.get("endpoint_url", defaults.endpoint_url),
            user_sync_url=data.get("user_sync_url", defaults.user_sync_url),
            default_currency=data.get("default_currency", defaults.default_currency),
            ttl=ttl,
            net_revenue=net_revenue,
            adapter_version=str(data.get("adapter_version", defaults.adapter_version)),
        )


def load_settings(path: Optional[str] = None) -> AdapterSettings:
    """
    Load settings from YAML and environment overrides.

    Args:
        path: YAML file path. Defaults to $PXYZ_ADAPTER_CONFIG; when neither
              is set the built-in defaults are used.

    Returns:
        AdapterSettings

    Raises:
        AdapterConfigError: If the file is missing, unreadable or invalid
    """
    path = path or os.environ.get(CONFIG_PATH_ENV)
    data: dict[str, Any] = {}

    if path:
        config_file = Path(path)
        try:
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise AdapterConfigError(f"Cannot read {config_file}: {e}") from e
        except yaml.YAMLError as e:
            raise AdapterConfigError(f"YAML error in {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise AdapterConfigError(f"{config_file} must contain a mapping")
        logger.debug("Loaded adapter settings file", path=str(config_file))

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data[field_name] = value

    return AdapterSettings.from_dict(data)


# Global instance for easy access
_settings: AdapterSettings | None = None


def get_settings() -> AdapterSettings:
    """Get the global adapter settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads."""
    global _settings
    _settings = None
