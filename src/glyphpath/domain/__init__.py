"""Domain models for glyphpath.

This module contains the core domain models representing drawing
commands, paths and glyph outlines.

Key classes:
- Move, Line, QuadCurve, CubicCurve, Close: Drawing commands
- PathStyle: Fill and stroke settings of a path
- PathCommandSequence: Ordered commands plus style
- ContourPoint: A raw TrueType outline point
- GlyphOutline: A glyph's outline path with its metadata
"""

from glyphpath.domain.command import (
    Close,
    Command,
    CubicCurve,
    Line,
    Move,
    QuadCurve,
    is_command,
)
from glyphpath.domain.glyph import ContourPoint, FontContext, FontInfo, GlyphOutline
from glyphpath.domain.path import PathCommandSequence, replay_command
from glyphpath.domain.style import DEFAULT_FILL, PathStyle

__all__: list[str] = [
    "DEFAULT_FILL",
    # Commands
    "Close",
    "Command",
    "ContourPoint",
    "CubicCurve",
    "FontContext",
    "FontInfo",
    "GlyphOutline",
    "Line",
    "Move",
    "PathCommandSequence",
    "PathStyle",
    "QuadCurve",
    "is_command",
    "replay_command",
]
