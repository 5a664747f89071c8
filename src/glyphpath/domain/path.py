"""Path command sequences.

PathCommandSequence is the mutable builder and holder of drawing
commands for one outline, together with its paint style. It can replay
itself into any RenderAdapter, merge other sequences and serialize to
SVG path data.

Appending is permissive: no ordering checks are made while building.
Call validate() to check that a sequence is well-formed.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from glyphpath.domain.command import (
    Close,
    Command,
    CubicCurve,
    Line,
    Move,
    QuadCurve,
    is_command,
)
from glyphpath.domain.style import PathStyle
from glyphpath.exceptions import PathOrderError, UnsupportedCommandError

if TYPE_CHECKING:
    from glyphpath.render.adapter import RenderAdapter


def replay_command(command: Command, sink: "RenderAdapter") -> None:
    """Send a single command to a drawing sink.

    Args:
        command: Command to replay
        sink: Drawing sink receiving the primitive

    Raises:
        UnsupportedCommandError: If command is not a known command type
    """
    if isinstance(command, Move):
        sink.move_to(command.x, command.y)
    elif isinstance(command, Line):
        sink.line_to(command.x, command.y)
    elif isinstance(command, QuadCurve):
        sink.quad_to(command.x1, command.y1, command.x, command.y)
    elif isinstance(command, CubicCurve):
        sink.curve_to(
            command.x1, command.y1, command.x2, command.y2, command.x, command.y
        )
    elif isinstance(command, Close):
        sink.close_path()
    else:
        raise UnsupportedCommandError(command)


@dataclass
class PathCommandSequence:
    """Ordered drawing commands plus paint style.

    Attributes:
        commands: Drawing commands in drawing order
        style: Fill and stroke settings
    """

    commands: list[Command] = field(default_factory=list)
    style: PathStyle = field(default_factory=PathStyle)

    @property
    def fill(self) -> str | None:
        return self.style.fill

    @fill.setter
    def fill(self, value: str | None) -> None:
        self.style.fill = value

    @property
    def stroke(self) -> str | None:
        return self.style.stroke

    @stroke.setter
    def stroke(self, value: str | None) -> None:
        self.style.stroke = value

    @property
    def stroke_width(self) -> float:
        return self.style.stroke_width

    @stroke_width.setter
    def stroke_width(self, value: float) -> None:
        self.style.stroke_width = value

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(Move(x, y))

    def line_to(self, x: float, y: float) -> None:
        self.commands.append(Line(x, y))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self.commands.append(QuadCurve(x1, y1, x, y))

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self.commands.append(CubicCurve(x1, y1, x2, y2, x, y))

    def close(self) -> None:
        self.commands.append(Close())

    # Canvas-style names
    quadratic_curve_to = quad_to
    bezier_curve_to = curve_to
    close_path = close

    def extend(self, other: "PathCommandSequence | Iterable[Command]") -> None:
        """Append another path's commands, or a list of commands.

        Commands are immutable, so they are shared rather than copied.

        Args:
            other: Path or iterable of commands to append

        Raises:
            UnsupportedCommandError: If other contains a non-command object
        """
        commands = other.commands if isinstance(other, PathCommandSequence) else list(other)
        for command in commands:
            if not is_command(command):
                raise UnsupportedCommandError(command)
        self.commands.extend(commands)

    def copy(self) -> "PathCommandSequence":
        """Return an independent copy with its own command list and style."""
        return PathCommandSequence(commands=list(self.commands), style=self.style.copy())

    def render(self, sink: "RenderAdapter") -> None:
        """Replay the path into a drawing sink, then paint it.

        Commands are replayed in order. The path is then filled when a
        fill color is set, and stroked when a stroke color is set.

        Args:
            sink: Drawing sink
        """
        for command in self.commands:
            replay_command(command, sink)

        if self.style.fill:
            sink.fill(self.style.fill)
        if self.style.stroke:
            sink.stroke(self.style.stroke, self.style.stroke_width)

    def validate(self) -> None:
        """Check that the command order is well-formed.

        A well-formed path starts with a Move, and only a Move (or another
        Close) may follow a Close. An empty path is well-formed.

        Raises:
            PathOrderError: On the first command breaking these rules
        """
        previous: Command | None = None
        for index, command in enumerate(self.commands):
            if previous is None and not isinstance(command, Move):
                raise PathOrderError(index, "path must start with a move command")
            if isinstance(previous, Close) and not isinstance(command, (Move, Close)):
                raise PathOrderError(
                    index, f"'{command.letter}' follows a close without a move"
                )
            previous = command

    def to_path_data(self, decimal_places: int = 2) -> str:
        """Serialize commands to SVG path data.

        Args:
            decimal_places: Digits after the decimal point for fractional values

        Returns:
            Path-data string
        """
        from glyphpath.core.serializer import to_path_data

        return to_path_data(self.commands, decimal_places)

    def to_svg(self, decimal_places: int = 2) -> str:
        """Serialize to an SVG <path> element including style attributes.

        Args:
            decimal_places: Digits after the decimal point for fractional values

        Returns:
            <path> element string
        """
        from glyphpath.core.serializer import to_svg_fragment

        return to_svg_fragment(self.commands, self.style, decimal_places)
