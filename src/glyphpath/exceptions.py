"""Exception hierarchy for glyphpath."""


class GlyphPathError(Exception):
    """Base exception for all glyphpath errors."""

    pass


class PathError(GlyphPathError):
    """Errors related to path command sequences."""

    pass


class PathOrderError(PathError):
    """Command sequence is not well-formed."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Malformed path at command {index}: {reason}")


class UnsupportedCommandError(PathError):
    """Object is not one of the known drawing commands."""

    def __init__(self, command: object) -> None:
        self.command = command
        super().__init__(f"Unsupported path command: {command!r}")


class GlyphError(GlyphPathError):
    """Errors related to glyph data."""

    pass


class ContourError(GlyphError):
    """Contour point data is inconsistent.

    Raised when a flat point list cannot be partitioned into contours,
    which means the data it came from is malformed.
    """

    def __init__(self, glyph_name: str | None, remaining: int) -> None:
        self.glyph_name = glyph_name
        self.remaining = remaining
        super().__init__(
            f"Glyph '{glyph_name}': there are still {remaining} points left "
            "in the current contour"
        )
