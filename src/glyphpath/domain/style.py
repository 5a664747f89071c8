"""Paint style for a path."""

from dataclasses import dataclass, replace
from typing import Any

DEFAULT_FILL = "black"


@dataclass
class PathStyle:
    """Fill and stroke settings applied when a path is painted.

    Attributes:
        fill: Fill color, or None for no fill
        stroke: Stroke color, or None for no stroke
        stroke_width: Stroke width, only used when stroke is set
    """

    fill: str | None = DEFAULT_FILL
    stroke: str | None = None
    stroke_width: float = 1

    def copy(self) -> "PathStyle":
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with fill, stroke and stroke_width fields
        """
        return {
            "fill": self.fill,
            "stroke": self.stroke,
            "stroke_width": self.stroke_width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathStyle":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with fill, stroke and stroke_width fields

        Returns:
            PathStyle instance
        """
        return cls(
            fill=data.get("fill", DEFAULT_FILL),
            stroke=data.get("stroke"),
            stroke_width=data.get("stroke_width", 1),
        )
