"""Coordinate transforms from font units to render coordinates.

Outline coordinates grow upwards from the baseline while drawing
surfaces grow downwards, so Y is flipped:

    (px, py) -> (x + px * scale, y - py * scale)

with scale = font_size / units_per_em.
"""

import structlog

from glyphpath.domain.command import PointMapper
from glyphpath.domain.path import PathCommandSequence

logger = structlog.get_logger(__name__)


def font_scale(font_size: float, units_per_em: float) -> float:
    """Pixels per font unit.

    Args:
        font_size: Font size in pixels
        units_per_em: Font units per em

    Returns:
        Scale factor
    """
    return font_size / units_per_em


def render_mapper(x: float, y: float, scale: float) -> PointMapper:
    """Build the point mapping for an origin and scale.

    Args:
        x: Horizontal position of the glyph origin
        y: Vertical position of the baseline
        scale: Pixels per font unit

    Returns:
        Function mapping font-unit points to render points
    """

    def to_render(px: float, py: float) -> tuple[float, float]:
        return (x + px * scale, y - py * scale)

    return to_render


def transform_path(
    path: PathCommandSequence,
    x: float,
    y: float,
    scale: float,
) -> PathCommandSequence:
    """Map every point of a path into render coordinates.

    The result is a new path with the same command types in the same
    order and a copy of the source style. Nothing is shared with the
    source path.

    Args:
        path: Path in font units
        x: Horizontal position of the glyph origin
        y: Vertical position of the baseline
        scale: Pixels per font unit

    Returns:
        New path in render coordinates
    """
    mapper = render_mapper(x, y, scale)
    result = PathCommandSequence(
        commands=[command.mapped(mapper) for command in path.commands],
        style=path.style.copy(),
    )
    logger.debug(
        "Render path created",
        commands=len(result.commands),
        origin=(x, y),
        scale=scale,
    )
    return result
