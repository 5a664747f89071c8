"""Serialization of command sequences to SVG path data.

The output is a compact encoding of the absolute M/L/Q/C/Z commands:

- Whole numbers are printed without a decimal point, everything else is
  fixed to a number of decimal places.
- Within one command, values are separated by a single space, except
  before a negative value where the minus sign already separates them.

For example a square with a fractional corner serializes as
``M0 0L10.50 0L10.50-10Z``.

Downstream tooling may diff or re-parse this text, so the formatting is
kept stable.
"""

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext
from xml.sax.saxutils import escape

from glyphpath.domain.command import Command
from glyphpath.domain.style import DEFAULT_FILL, PathStyle

_ATTR_ENTITIES = {'"': "&quot;"}


def format_number(value: float, decimal_places: int = 2) -> str:
    """Format a coordinate for path data.

    Fractional values are rounded half away from zero on their exact
    binary value, so 0.125 becomes "0.13" and -0.001 becomes "-0.00".

    Args:
        value: Number to format
        decimal_places: Digits after the decimal point for fractional values

    Returns:
        Formatted number

    Raises:
        ValueError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite coordinate: {value}")

    if float(value).is_integer():
        return str(int(value))

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        # Room for every integer digit plus the requested fraction digits.
        ctx.prec = max(exact.adjusted() + 1, 1) + decimal_places + 2
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return format(rounded, "f")


def format_width(value: float) -> str:
    """Format a stroke width as its shortest plain form, e.g. "2" or "0.5"."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite stroke width: {value}")
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def pack_values(values: Iterable[float], decimal_places: int = 2) -> str:
    """Join the coordinates of one command.

    Args:
        values: Coordinates in path-data order
        decimal_places: Digits after the decimal point for fractional values

    Returns:
        Packed coordinate string
    """
    parts: list[str] = []
    for i, value in enumerate(values):
        if value >= 0 and i > 0:
            parts.append(" ")
        parts.append(format_number(value, decimal_places))
    return "".join(parts)


def to_path_data(commands: Iterable[Command], decimal_places: int = 2) -> str:
    """Convert commands to a path-data string.

    Args:
        commands: Drawing commands in order
        decimal_places: Digits after the decimal point for fractional values

    Returns:
        Path data, e.g. "M0 0L10 0L10-10Z"
    """
    return "".join(
        command.letter + pack_values(command.values(), decimal_places)
        for command in commands
    )


def to_svg_fragment(
    commands: Iterable[Command],
    style: PathStyle,
    decimal_places: int = 2,
) -> str:
    """Convert commands and style to an SVG <path> element.

    The fill attribute is left out for the default black fill and written
    as "none" when there is no fill. Stroke attributes are only written
    when a stroke color is set. The stroke width is written as given,
    not fixed to decimal_places.

    Args:
        commands: Drawing commands in order
        style: Paint style of the path
        decimal_places: Digits after the decimal point for fractional values

    Returns:
        Self-closing <path> element string
    """
    parts = [f'<path d="{to_path_data(commands, decimal_places)}"']

    if style.fill is None:
        parts.append(' fill="none"')
    elif style.fill != DEFAULT_FILL:
        parts.append(f' fill="{escape(style.fill, _ATTR_ENTITIES)}"')

    if style.stroke:
        width = format_width(style.stroke_width)
        parts.append(
            f' stroke="{escape(style.stroke, _ATTR_ENTITIES)}" stroke-width="{width}"'
        )

    parts.append("/>")
    return "".join(parts)
