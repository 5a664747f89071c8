"""Utility functions for glyphpath.

This module provides utility functions including:

- Logging setup and configuration
"""

from glyphpath.utils.logging import configure_from_settings, configure_logging

__all__ = [
    "configure_from_settings",
    "configure_logging",
]
