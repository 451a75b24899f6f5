"""Utilities module.

This module contains:
- Logging setup (structlog)
"""

from gitsandbox.utils.log import configure_logging, resolve_log_level

__all__ = ['configure_logging', 'resolve_log_level']
