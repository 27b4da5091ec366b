"""Adapter configuration."""

from .settings import (
    AdapterSettings,
    get_settings,
    load_settings,
    reset_settings,
)

__all__ = [
    'AdapterSettings',
    'get_settings',
    'load_settings',
    'reset_settings',
]
