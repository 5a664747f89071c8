"""Configuration management for glyphpath.

This module provides configuration management using Pydantic models.

Key classes:
- RenderConfig: Drawing defaults
- DiagnosticColors: Colors of the metric and point diagnostics
- LoggingConfig: Logging settings
- GlyphPathSettings: Main library settings
"""

from glyphpath.config.settings import (
    DiagnosticColors,
    GlyphPathSettings,
    LoggingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "DiagnosticColors",
    "GlyphPathSettings",
    "LoggingConfig",
    "RenderConfig",
    "get_default_settings",
]
