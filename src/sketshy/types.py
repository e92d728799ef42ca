"""Shared type definitions for sketshy.

Enums used across the geometry, drawing, editor and command modules.
"""

from __future__ import annotations

from enum import Enum, auto


class LineDirection(Enum):
    """The eight compass directions a line is snapped to, in angle order."""

    Right = auto()
    DownRight = auto()
    Down = auto()
    DownLeft = auto()
    Left = auto()
    UpLeft = auto()
    Up = auto()
    UpRight = auto()

    def step(self) -> tuple[int, int]:
        """Cell offset of one stepping iteration along this direction."""
        return _STEPS[self]

    def is_diagonal(self) -> bool:
        dx, dy = _STEPS[self]
        return dx != 0 and dy != 0

    def opposite(self) -> LineDirection:
        members = list(LineDirection)
        return members[(members.index(self) + 4) % 8]


# Diagonals advance two columns per row to compensate for tall character cells.
_STEPS: dict[LineDirection, tuple[int, int]] = {
    LineDirection.Right: (1, 0),
    LineDirection.DownRight: (2, 1),
    LineDirection.Down: (0, 1),
    LineDirection.DownLeft: (-2, 1),
    LineDirection.Left: (-1, 0),
    LineDirection.UpLeft: (-2, -1),
    LineDirection.Up: (0, -1),
    LineDirection.UpRight: (2, -1),
}


class Corner(Enum):
    TopLeft = auto()
    TopRight = auto()
    BottomLeft = auto()
    BottomRight = auto()


class LineHandle(Enum):
    First = auto()  # beyond `from_`
    Second = auto()  # beyond `to`


class Tool(Enum):
    Cursor = "cursor"
    Box = "box"
    Text = "text"
    Line = "line"

    @classmethod
    def default(cls) -> Tool:
        return cls.Cursor


class GestureKind(Enum):
    Down = auto()
    Drag = auto()
    Up = auto()
    ScrollUp = auto()
    ScrollDown = auto()
    ScrollLeft = auto()
    ScrollRight = auto()
