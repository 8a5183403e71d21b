"""
Server configuration for the Casey legal MCP server.

Values are read from environment variables once at import time so the server
identity and the fixed case constants can be changed without code changes.

Usage:
    from casey_legal_mcp.config.settings import get_setting

    case_id = get_setting('case_id')

Environment Variables:
    CASEY_CASE_ID=...         - Case identifier stamped on every record
    CASEY_CHILD_NAME=...      - Child named in welfare assessments
    CASEY_SERVER_NAME=...     - MCP server name (also used in chain of custody)
    CASEY_SERVER_VERSION=...  - MCP server version
    CASEY_LOG_LEVEL=...       - Logging level (DEBUG, INFO, WARNING, ...)
    CASEY_SHUTDOWN_GRACE_SECONDS=... - Seconds to wait after a termination
                                      signal before the process exits
"""

import os
from typing import Any, Dict


DEFAULT_CASE_ID = '1FDV-23-0001009'
DEFAULT_CHILD_NAME = 'Kekoa'
DEFAULT_SERVER_NAME = 'casey-legal-mcp-server'
DEFAULT_SERVER_VERSION = '1.0.0'


# Settings with environment variable overrides
SETTINGS: Dict[str, Any] = {
    'case_id': os.getenv('CASEY_CASE_ID', DEFAULT_CASE_ID),
    'child_name': os.getenv('CASEY_CHILD_NAME', DEFAULT_CHILD_NAME),
    'server_name': os.getenv('CASEY_SERVER_NAME', DEFAULT_SERVER_NAME),
    'server_version': os.getenv('CASEY_SERVER_VERSION', DEFAULT_SERVER_VERSION),
    'log_level': os.getenv('CASEY_LOG_LEVEL', 'INFO').upper(),
    'shutdown_grace_seconds': float(os.getenv('CASEY_SHUTDOWN_GRACE_SECONDS', '1.0')),
}


def get_setting(name: str) -> Any:
    """
    Look up a setting by name.

    Args:
        name: Setting name (e.g., 'case_id')

    Returns:
        The configured value

    Raises:
        KeyError: If setting name is not recognized

    Example:
        >>> get_setting('child_name')
        'Kekoa'  # Default
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    return SETTINGS[name]


def get_all_settings() -> Dict[str, Any]:
    """Get a copy of all settings and their current values."""
    return SETTINGS.copy()

