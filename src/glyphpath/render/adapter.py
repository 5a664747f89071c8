"""Drawing sink interface.

Paths and glyphs never talk to a concrete drawing surface. Everything
they draw goes through an object implementing RenderAdapter, which the
caller passes in. A raster canvas, a vector document builder or a font
pen can all sit behind this interface.

Implementations must draw primitives in the order they are called;
the same path replayed into two adapters yields the same call order.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RenderAdapter(Protocol):
    """Capabilities a drawing sink must provide."""

    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path at (x, y)."""
        ...

    def line_to(self, x: float, y: float) -> None:
        """Add a straight segment to (x, y)."""
        ...

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Add a quadratic Bezier segment."""
        ...

    def curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        """Add a cubic Bezier segment."""
        ...

    def close_path(self) -> None:
        """Close the current sub-path."""
        ...

    def fill(self, color: str) -> None:
        """Fill the current path with color."""
        ...

    def stroke(self, color: str, width: float) -> None:
        """Stroke the current path with color and line width."""
        ...

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str
    ) -> None:
        """Draw a standalone straight line."""
        ...

    def draw_circle(self, cx: float, cy: float, radius: float, color: str) -> None:
        """Draw a filled marker circle."""
        ...
