"""Bridge between fontTools pens and command sequences.

fontTools decodes glyph outlines by drawing them into a pen. CommandPen
is such a pen: drawing a fontTools glyph into it produces a
PathCommandSequence. draw_to_pen goes the other way and replays a
sequence into any fontTools pen (TTGlyphPen, RecordingPen, SVGPathPen,
...).
"""

from typing import Any

import structlog
from fontTools.pens.basePen import AbstractPen, BasePen

from glyphpath.domain.path import PathCommandSequence, replay_command
from glyphpath.render.pen import PenAdapter

logger = structlog.get_logger(__name__)


class CommandPen(BasePen):
    """fontTools pen that records into a PathCommandSequence.

    BasePen splits TrueType quadratic runs with implied on-curve points
    into single quadratic segments and decomposes components through
    the glyph set, so the result only holds M/L/Q/C/Z commands.

    Example:
        pen = CommandPen(font.getGlyphSet())
        font.getGlyphSet()["A"].draw(pen)
        outline = pen.path
    """

    def __init__(self, glyphSet: Any = None, path: PathCommandSequence | None = None) -> None:  # noqa: N803
        """Initialize the pen.

        Args:
            glyphSet: Glyph set used to resolve components
            path: Sequence to append to (a new one if None)
        """
        BasePen.__init__(self, glyphSet)
        self.path = path if path is not None else PathCommandSequence()

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.path.move_to(*pt)

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.path.line_to(*pt)

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.path.quad_to(pt1[0], pt1[1], pt2[0], pt2[1])

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.path.curve_to(pt1[0], pt1[1], pt2[0], pt2[1], pt3[0], pt3[1])

    def _closePath(self) -> None:
        self.path.close()

    def _endPath(self) -> None:
        # Open contours have no command of their own
        pass


def draw_to_pen(path: PathCommandSequence, pen: AbstractPen) -> None:
    """Replay a command sequence into a fontTools pen.

    Sub-paths that are not closed are ended with endPath. Paint style is
    not transferred.

    Args:
        path: Sequence to replay
        pen: Target fontTools pen
    """
    adapter = PenAdapter(pen)
    for command in path.commands:
        replay_command(command, adapter)
    adapter.finish()
    logger.debug("Path replayed into pen", pen=type(pen).__name__, commands=len(path))
