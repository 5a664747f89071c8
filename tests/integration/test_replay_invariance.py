"""Integration tests for sink-independent replay.

The same path replayed into different drawing sinks must produce the
same primitive calls in the same order.
"""

from typing import Any

import pytest
from fontTools.pens.recordingPen import RecordingPen

from glyphpath.domain import FontInfo, GlyphOutline, PathCommandSequence
from glyphpath.render import PenAdapter, RecordingAdapter

# RenderAdapter primitive -> fontTools pen operation
PEN_OPERATIONS = {
    "move_to": "moveTo",
    "line_to": "lineTo",
    "quad_to": "qCurveTo",
    "curve_to": "curveTo",
    "close_path": "closePath",
}


def _as_pen_calls(calls: list[tuple[str, tuple[Any, ...]]]) -> list[tuple[str, tuple[Any, ...]]]:
    """Express recorded adapter calls the way a RecordingPen stores them."""
    result = []
    for name, args in calls:
        points = tuple(zip(args[::2], args[1::2], strict=True))
        result.append((PEN_OPERATIONS[name], points))
    return result


def _glyph_o() -> GlyphOutline:
    """An 'o' with cubic outer and quadratic inner contour."""
    glyph = GlyphOutline(font=FontInfo(units_per_em=1000), name="o", unicode=0x6F)
    path = glyph.path
    path.move_to(250, 0)
    path.curve_to(388, 0, 500, 112, 500, 250)
    path.curve_to(500, 388, 388, 500, 250, 500)
    path.curve_to(112, 500, 0, 388, 0, 250)
    path.curve_to(0, 112, 112, 0, 250, 0)
    path.close()
    path.move_to(250, 100)
    path.quad_to(100, 100, 100, 250)
    path.quad_to(100, 400, 250, 400)
    path.quad_to(400, 400, 400, 250)
    path.quad_to(400, 100, 250, 100)
    path.close()
    path.stroke = "black"
    return glyph


class TestReplayInvariance:
    """Same path, two sinks, same call sequence."""

    @pytest.mark.parametrize(
        ("x", "y", "font_size"),
        [(0, 0, 72), (12.5, 80, 24), (-40, 300, 1000)],
    )
    def test_recording_and_pen_agree(self, x, y, font_size):
        """RecordingAdapter and PenAdapter see identical geometry."""
        glyph = _glyph_o()
        recording = RecordingAdapter()
        pen = RecordingPen()
        pen_adapter = PenAdapter(pen)

        glyph.draw(recording, x, y, font_size)
        glyph.draw(pen_adapter, x, y, font_size)
        pen_adapter.finish()

        assert _as_pen_calls(recording.geometry()) == pen.value
        paints = [call for call in recording.calls if call[0] in ("fill", "stroke")]
        assert paints == pen_adapter.paints

    def test_replay_is_repeatable(self):
        """Rendering twice into fresh sinks gives identical calls."""
        path = _glyph_o().get_render_path(10, 10, 48)
        first, second = RecordingAdapter(), RecordingAdapter()
        path.render(first)
        path.render(second)
        assert first.calls == second.calls

    def test_merged_outline_replays_in_order(self):
        """extend keeps the merged commands in append order."""
        base = _glyph_o().path
        accent = PathCommandSequence()
        accent.move_to(200, 600)
        accent.line_to(300, 700)
        accent.line_to(250, 600)
        accent.close()

        merged = base.copy()
        merged.extend(accent)
        sink = RecordingAdapter()
        merged.render(sink)

        geometry = sink.geometry()
        assert len(geometry) == len(base) + len(accent)
        assert geometry[-4:] == [
            ("move_to", (200, 600)),
            ("line_to", (300, 700)),
            ("line_to", (250, 600)),
            ("close_path", ()),
        ]
