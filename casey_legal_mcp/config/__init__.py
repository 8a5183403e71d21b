"""Environment-driven configuration."""

from .settings import get_all_settings, get_setting

__all__ = [
    'get_setting',
    'get_all_settings',
]
