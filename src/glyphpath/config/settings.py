"""Configuration settings for glyphpath."""

from pathlib import Path

from pydantic import BaseModel, Field


class DiagnosticColors(BaseModel):
    """Colors used by the metric and point diagnostics."""

    origin: str = Field(default="black", description="Origin cross-hair")
    bbox: str = Field(default="blue", description="Bounding box edges")
    advance: str = Field(default="green", description="Advance width line")
    on_curve: str = Field(default="blue", description="On-curve point markers")
    off_curve: str = Field(default="red", description="Off-curve point markers")


class RenderConfig(BaseModel):
    """Defaults for drawing glyph outlines."""

    font_size: float = Field(
        default=72.0,
        gt=0,
        description="Font size in pixels",
    )
    guide_extent: float = Field(
        default=10000.0,
        gt=0,
        description="Half-length of the unbounded diagnostic lines",
    )
    marker_radius: float = Field(
        default=2.0,
        gt=0,
        description="Radius of point marker circles",
    )
    colors: DiagnosticColors = Field(default_factory=DiagnosticColors)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if None)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphPathSettings(BaseModel):
    """Main library settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPathSettings:
    """Get default library settings."""
    return GlyphPathSettings()
