"""A drawing sink that forwards geometry into a fontTools pen.

fontTools pens only know outlines, so:

- Path primitives map 1:1 onto moveTo/lineTo/qCurveTo/curveTo/closePath.
- An open sub-path is ended with endPath before the next one starts.
- Diagnostic lines become open two-point contours.
- Marker circles become closed four-segment cubic approximations.
- Fill and stroke have no pen equivalent and are collected in `paints`.
"""

from typing import Any

from fontTools.pens.basePen import AbstractPen

# Control point distance for a quarter circle drawn as a cubic Bezier
KAPPA = 0.5522847498


class PenAdapter:
    """RenderAdapter that draws into a fontTools segment pen.

    Example:
        from fontTools.pens.recordingPen import RecordingPen

        pen = RecordingPen()
        adapter = PenAdapter(pen)
        glyph.draw(adapter)
        adapter.finish()
        print(pen.value)
    """

    def __init__(self, pen: AbstractPen) -> None:
        """Initialize the adapter.

        Args:
            pen: Target fontTools pen
        """
        self.pen = pen
        self.paints: list[tuple[str, tuple[Any, ...]]] = []
        self._open = False

    def finish(self) -> None:
        """End the current sub-path if it was left open."""
        if self._open:
            self.pen.endPath()
            self._open = False

    def move_to(self, x: float, y: float) -> None:
        self.finish()
        self.pen.moveTo((x, y))
        self._open = True

    def line_to(self, x: float, y: float) -> None:
        self.pen.lineTo((x, y))

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self.pen.qCurveTo((cx, cy), (x, y))

    def curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self.pen.curveTo((c1x, c1y), (c2x, c2y), (x, y))

    def close_path(self) -> None:
        self.pen.closePath()
        self._open = False

    def fill(self, color: str) -> None:
        self.finish()
        self.paints.append(("fill", (color,)))

    def stroke(self, color: str, width: float) -> None:
        self.finish()
        self.paints.append(("stroke", (color, width)))

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str  # noqa: ARG002
    ) -> None:
        self.finish()
        self.pen.moveTo((x1, y1))
        self.pen.lineTo((x2, y2))
        self.pen.endPath()

    def draw_circle(
        self, cx: float, cy: float, radius: float, color: str  # noqa: ARG002
    ) -> None:
        self.finish()
        k = radius * KAPPA
        self.pen.moveTo((cx + radius, cy))
        self.pen.curveTo((cx + radius, cy + k), (cx + k, cy + radius), (cx, cy + radius))
        self.pen.curveTo((cx - k, cy + radius), (cx - radius, cy + k), (cx - radius, cy))
        self.pen.curveTo((cx - radius, cy - k), (cx - k, cy - radius), (cx, cy - radius))
        self.pen.curveTo((cx + k, cy - radius), (cx + radius, cy - k), (cx + radius, cy))
        self.pen.closePath()
