"""fontTools integration for glyphpath.

This module converts between fontTools pens and command sequences.

Key components:
- CommandPen: fontTools pen producing a PathCommandSequence
- draw_to_pen: Replay a PathCommandSequence into a fontTools pen
"""

from glyphpath.io.pen import CommandPen, draw_to_pen

__all__ = [
    "CommandPen",
    "draw_to_pen",
]
