"""Core algorithms for glyphpath.

All functions are stateless and pure: they read a command sequence and
return a new value.

Key functions:
- to_path_data: Serialize commands to SVG path data
- to_svg_fragment: Serialize commands and style to an SVG <path> element
- format_number: Format a single coordinate
- compute_metrics: Bounding box and side bearings of an outline
- transform_path: Map a font-unit path into render coordinates
"""

from glyphpath.core.metrics import GlyphMetrics, collect_coordinates, compute_metrics
from glyphpath.core.serializer import (
    format_number,
    format_width,
    pack_values,
    to_path_data,
    to_svg_fragment,
)
from glyphpath.core.transform import font_scale, render_mapper, transform_path

__all__ = [
    # Metrics
    "GlyphMetrics",
    "collect_coordinates",
    "compute_metrics",
    # Transform
    "font_scale",
    # Serialization
    "format_number",
    "format_width",
    "pack_values",
    "render_mapper",
    "to_path_data",
    "to_svg_fragment",
    "transform_path",
]
