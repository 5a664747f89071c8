"""A drawing sink that records calls instead of drawing."""

from typing import Any


class RecordingAdapter:
    """Records every drawing call in order.

    Each call is stored as a (name, args) tuple, e.g.
    ("line_to", (10.0, 0.0)). Useful for tests, diffing the output of two
    draws, and replaying into another sink later.

    Example:
        sink = RecordingAdapter()
        glyph.draw(sink)
        print(sink.calls)
    """

    GEOMETRY_CALLS = frozenset({"move_to", "line_to", "quad_to", "curve_to", "close_path"})

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._record("quad_to", cx, cy, x, y)

    def curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self._record("curve_to", c1x, c1y, c2x, c2y, x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def fill(self, color: str) -> None:
        self._record("fill", color)

    def stroke(self, color: str, width: float) -> None:
        self._record("stroke", color, width)

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str
    ) -> None:
        self._record("draw_line", x1, y1, x2, y2, color)

    def draw_circle(self, cx: float, cy: float, radius: float, color: str) -> None:
        self._record("draw_circle", cx, cy, radius, color)

    @property
    def names(self) -> list[str]:
        """Names of the recorded calls, in order."""
        return [name for name, _ in self.calls]

    def geometry(self) -> list[tuple[str, tuple[Any, ...]]]:
        """Recorded path-building calls, without paint or diagnostics."""
        return [call for call in self.calls if call[0] in self.GEOMETRY_CALLS]

    def replay(self, sink: Any) -> None:
        """Send every recorded call to another sink.

        Args:
            sink: Any object implementing RenderAdapter
        """
        for name, args in self.calls:
            getattr(sink, name)(*args)

    def clear(self) -> None:
        self.calls.clear()
