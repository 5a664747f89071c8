"""Drawing sinks for glyphpath.

Key classes:
- RenderAdapter: Protocol every drawing sink implements
- RecordingAdapter: Records drawing calls in order
- PenAdapter: Forwards geometry into a fontTools pen
"""

from glyphpath.render.adapter import RenderAdapter
from glyphpath.render.pen import PenAdapter
from glyphpath.render.recording import RecordingAdapter

__all__ = [
    "PenAdapter",
    "RecordingAdapter",
    "RenderAdapter",
]
