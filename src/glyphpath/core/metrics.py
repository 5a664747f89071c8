"""Glyph metrics derived from an outline.

The bounding box is computed from every coordinate in the path,
including Bezier control points. Control points usually lie outside the
rendered curve, so the box is a conservative approximation of the true
extent rather than an exact curve-extrema solve.

The left side bearing is always 0 because no font origin data is
modelled at this level.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from glyphpath.domain.command import Command


@dataclass(frozen=True)
class GlyphMetrics:
    """Bounding box and side bearings of an outline.

    All values are NaN for an outline without coordinates; check
    is_empty before using them.

    Attributes:
        x_min: Smallest X coordinate
        y_min: Smallest Y coordinate
        x_max: Largest X coordinate
        y_max: Largest Y coordinate
        left_side_bearing: Space left of the bounding box (always 0)
        right_side_bearing: Space between bounding box and advance width
    """

    x_min: float
    y_min: float
    x_max: float
    y_max: float
    left_side_bearing: float
    right_side_bearing: float

    @property
    def is_empty(self) -> bool:
        """True if the outline had no coordinates to measure."""
        return math.isnan(self.x_min)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the bounding box and side bearings
        """
        return {
            "x_min": self.x_min,
            "y_min": self.y_min,
            "x_max": self.x_max,
            "y_max": self.y_max,
            "lsb": self.left_side_bearing,
            "rsb": self.right_side_bearing,
        }


def collect_coordinates(commands: Iterable[Command]) -> tuple[list[float], list[float]]:
    """Collect every X and Y coordinate from commands.

    End points come first for each command, followed by its control
    points. Close commands contribute nothing.

    Args:
        commands: Drawing commands

    Returns:
        Tuple of (x coordinates, y coordinates)
    """
    xs: list[float] = []
    ys: list[float] = []
    for command in commands:
        end = command.end_point()
        if end is not None:
            xs.append(end[0])
            ys.append(end[1])
        for cx, cy in command.control_points():
            xs.append(cx)
            ys.append(cy)
    return xs, ys


def compute_metrics(commands: Iterable[Command], advance_width: float) -> GlyphMetrics:
    """Calculate bounding box and side bearings.

    Args:
        commands: Drawing commands of the outline (a PathCommandSequence works)
        advance_width: Advance width of the glyph

    Returns:
        GlyphMetrics; all NaN when there are no coordinates
    """
    xs, ys = collect_coordinates(commands)

    if not xs:
        return GlyphMetrics(
            x_min=math.nan,
            y_min=math.nan,
            x_max=math.nan,
            y_max=math.nan,
            left_side_bearing=0,
            right_side_bearing=math.nan,
        )

    x_min, x_max = min(xs), max(xs)
    left_side_bearing = 0
    return GlyphMetrics(
        x_min=x_min,
        y_min=min(ys),
        x_max=x_max,
        y_max=max(ys),
        left_side_bearing=left_side_bearing,
        right_side_bearing=advance_width - left_side_bearing - (x_max - x_min),
    )
