"""glyphpath - Glyph outlines as drawing command sequences.

glyphpath models glyph outlines as ordered move/line/curve/close
commands. It renders them at any position and size through a pluggable
drawing sink, serializes them to SVG path data, and derives bounding
boxes and side bearings.

Example:
    >>> from glyphpath.domain import FontInfo, GlyphOutline
    >>> glyph = GlyphOutline(font=FontInfo(units_per_em=1000), advance_width=600)
    >>> glyph.path.move_to(0, 0)
    >>> glyph.path.line_to(500, 700)
    >>> glyph.get_render_path(font_size=100).to_path_data()
    'M0 0L50-70'
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
