"""Glyph outline representation and metadata.

This module defines GlyphOutline, which ties one outline path to its
font context (units per em) and glyph metadata, and turns the stored
font-unit coordinates into render coordinates for drawing.

Outlines are filled by an external loader once per glyph. Render paths
are created per draw call and are independent of the stored outline.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import structlog

from glyphpath.config import RenderConfig
from glyphpath.domain.path import PathCommandSequence
from glyphpath.exceptions import ContourError, GlyphError

if TYPE_CHECKING:
    from glyphpath.core.metrics import GlyphMetrics
    from glyphpath.render.adapter import RenderAdapter

logger = structlog.get_logger(__name__)


@runtime_checkable
class FontContext(Protocol):
    """Font-level data a glyph needs for scaling."""

    units_per_em: float


@dataclass(frozen=True)
class FontInfo:
    """Minimal font context for glyphs without a font object.

    Attributes:
        units_per_em: Font units per em (commonly 1000 or 2048)
    """

    units_per_em: float = 1000


@dataclass(frozen=True, slots=True)
class ContourPoint:
    """A raw outline point as stored in TrueType glyph data.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        on_curve: False for quadratic control points
        last_point_of_contour: True for the final point of each contour
    """

    x: float
    y: float
    on_curve: bool = True
    last_point_of_contour: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, on_curve and last fields
        """
        return {
            "x": self.x,
            "y": self.y,
            "on_curve": self.on_curve,
            "last": self.last_point_of_contour,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContourPoint":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, on_curve and last fields

        Returns:
            ContourPoint instance
        """
        return cls(
            x=data["x"],
            y=data["y"],
            on_curve=data.get("on_curve", True),
            last_point_of_contour=data.get("last", False),
        )


@dataclass
class GlyphOutline:
    """A single glyph: outline path plus metadata.

    Attributes:
        font: Font context supplying units_per_em (not owned)
        index: Glyph index in the font
        name: Glyph name (e.g., "A", "exclam"), None if unnamed
        unicode: Primary Unicode code point, None for unencoded glyphs
        unicodes: All code points mapped to this glyph, primary first
        x_min: Bounding box left in font units
        y_min: Bounding box bottom in font units
        x_max: Bounding box right in font units
        y_max: Bounding box top in font units
        advance_width: Horizontal advance in font units
        path: Outline in font units (owned by the glyph)
        points: Flat TrueType point list, None if not available
    """

    font: FontContext
    index: int = 0
    name: str | None = None
    unicode: int | None = None
    unicodes: list[int] = field(default_factory=list)
    x_min: float = 0
    y_min: float = 0
    x_max: float = 0
    y_max: float = 0
    advance_width: float = 0
    path: PathCommandSequence = field(default_factory=PathCommandSequence)
    points: list[ContourPoint] | None = None

    def __post_init__(self) -> None:
        self.unicodes = list(self.unicodes)
        if not self.unicodes:
            if self.unicode is not None:
                self.unicodes = [self.unicode]
        elif self.unicode is None:
            self.unicode = self.unicodes[0]
        elif self.unicodes[0] != self.unicode:
            raise GlyphError(
                f"Glyph '{self.name}': unicode U+{self.unicode:04X} does not match "
                f"first of unicodes U+{self.unicodes[0]:04X}"
            )

    def add_unicode(self, code_point: int) -> None:
        """Map another Unicode code point to this glyph.

        The first code point added becomes the primary one. Code points
        already mapped are ignored.

        Args:
            code_point: Unicode code point
        """
        if not self.unicodes:
            self.unicode = code_point
        if code_point not in self.unicodes:
            self.unicodes.append(code_point)

    def scale(self, font_size: float) -> float:
        """Pixels per font unit at font_size.

        units_per_em is read from the font on every call.
        """
        from glyphpath.core.transform import font_scale

        return font_scale(font_size, self.font.units_per_em)

    def get_render_path(
        self,
        x: float = 0,
        y: float = 0,
        font_size: float | None = None,
        config: RenderConfig | None = None,
    ) -> PathCommandSequence:
        """Convert the outline to a path ready for drawing.

        Args:
            x: Horizontal position of the glyph
            y: Vertical position of the baseline
            font_size: Font size in pixels (default from config, 72)
            config: Render defaults

        Returns:
            New path in render coordinates, independent of the outline
        """
        from glyphpath.core.transform import transform_path

        config = config or RenderConfig()
        font_size = config.font_size if font_size is None else font_size
        return transform_path(self.path, x, y, self.scale(font_size))

    def draw(
        self,
        sink: "RenderAdapter",
        x: float = 0,
        y: float = 0,
        font_size: float | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Draw the glyph into a drawing sink.

        Args:
            sink: Drawing sink
            x: Horizontal position of the glyph
            y: Vertical position of the baseline
            font_size: Font size in pixels (default from config, 72)
            config: Render defaults
        """
        self.get_render_path(x, y, font_size, config).render(sink)

    def get_metrics(self) -> "GlyphMetrics":
        """Calculate bounding box and side bearings from the outline."""
        from glyphpath.core.metrics import compute_metrics

        return compute_metrics(self.path, self.advance_width)

    def get_contours(self) -> list[list[ContourPoint]]:
        """Split the flat point list into contours.

        Returns:
            One list of points per contour; empty if the glyph has no
            point list

        Raises:
            ContourError: If points remain after the last contour end
        """
        if self.points is None:
            return []

        contours: list[list[ContourPoint]] = []
        current: list[ContourPoint] = []
        for point in self.points:
            current.append(point)
            if point.last_point_of_contour:
                contours.append(current)
                current = []

        if current:
            logger.error(
                "Unterminated contour",
                glyph=self.name,
                remaining=len(current),
                contours=len(contours),
            )
            raise ContourError(self.name, len(current))

        return contours

    def draw_metrics(
        self,
        sink: "RenderAdapter",
        x: float = 0,
        y: float = 0,
        font_size: float | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Draw lines marking the glyph measurements.

        - Origin cross-hair through (x, y)
        - Bounding box edges
        - Advance width

        Args:
            sink: Drawing sink
            x: Horizontal position of the glyph
            y: Vertical position of the baseline
            font_size: Font size in pixels (default from config, 72)
            config: Render defaults
        """
        config = config or RenderConfig()
        font_size = config.font_size if font_size is None else font_size
        scale = self.scale(font_size)
        extent = config.guide_extent
        colors = config.colors

        # Origin
        sink.draw_line(x, -extent, x, extent, colors.origin)
        sink.draw_line(-extent, y, extent, y, colors.origin)

        # Glyph box
        for box_x in (self.x_min, self.x_max):
            sx = x + box_x * scale
            sink.draw_line(sx, -extent, sx, extent, colors.bbox)
        for box_y in (self.y_min, self.y_max):
            sy = y - box_y * scale
            sink.draw_line(-extent, sy, extent, sy, colors.bbox)

        # Advance width
        ax = x + self.advance_width * scale
        sink.draw_line(ax, -extent, ax, extent, colors.advance)

    def draw_points(
        self,
        sink: "RenderAdapter",
        x: float = 0,
        y: float = 0,
        font_size: float | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Draw markers on the outline points.

        On-curve points (command end points) are drawn first, then
        off-curve points (control points), each in command order.

        Args:
            sink: Drawing sink
            x: Horizontal position of the glyph
            y: Vertical position of the baseline
            font_size: Font size in pixels (default from config, 72)
            config: Render defaults
        """
        from glyphpath.core.transform import render_mapper

        config = config or RenderConfig()
        font_size = config.font_size if font_size is None else font_size
        to_render = render_mapper(x, y, self.scale(font_size))

        on_curve: list[tuple[float, float]] = []
        off_curve: list[tuple[float, float]] = []
        for command in self.path.commands:
            end = command.end_point()
            if end is not None:
                on_curve.append(end)
            off_curve.extend(command.control_points())

        radius = config.marker_radius
        for px, py in on_curve:
            sink.draw_circle(*to_render(px, py), radius, config.colors.on_curve)
        for px, py in off_curve:
            sink.draw_circle(*to_render(px, py), radius, config.colors.off_curve)
