"""Line router — snaps a free two-point drag onto one of eight directions.

Classification uses a "diamond angle": a monotonic stand-in for atan2 that
maps every (dx, dy) onto [0, 4) with plain division. The circle is cut into
eight sectors of width 0.5 centred on the compass directions, Right wrapping
across the 0/4 seam. The router then *redefines* the end point so the line
is either axis-aligned or follows the fixed 2:1 column:row diagonal.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from sketshy.geometry import Position, Rect
from sketshy.types import LineDirection

# Sector order starting at angle 0 (pointing right), increasing clockwise on screen.
_SECTORS: list[LineDirection] = list(LineDirection)


def diamond_angle(dx: int, dy: int) -> float:
    """Monotonic angle proxy in [0, 4) for a non-zero vector (screen y grows down)."""
    if dx == 0 and dy == 0:
        raise ValueError("diamond_angle is undefined for a zero vector")
    if dy >= 0:
        return dy / (dx + dy) if dx >= 0 else 1 - dx / (-dx + dy)
    return 2 - dy / (-dx - dy) if dx < 0 else 3 + dx / (dx - dy)


def classify_direction(dx: int, dy: int) -> LineDirection:
    """Bucket a non-zero vector into its octant."""
    angle = diamond_angle(dx, dy)
    return _SECTORS[int((angle + 0.25) / 0.5) % 8]


@dataclass(frozen=True)
class StraightLine:
    """A routed line. Only `StraightLine.new` builds consistent instances."""

    from_: Position
    to: Position
    direction: LineDirection

    @classmethod
    def new(cls, origin: Position, second: Position) -> StraightLine | None:
        """Route a drag from `origin` to `second`.

        Returns None for a degenerate drag (both points equal) and for a
        leftward diagonal that has no room to take a single step.
        """
        if origin == second:
            return None

        dx, dy = origin.delta_to(second)
        direction = classify_direction(dx, dy)

        match direction:
            case LineDirection.Right | LineDirection.Left:
                to = Position(second.x, origin.y)
            case LineDirection.Up | LineDirection.Down:
                to = Position(origin.x, second.y)
            case _:
                step_x, step_y = direction.step()
                rise = abs(dy)
                if step_x < 0:
                    rise = min(rise, origin.x // 2)
                if rise == 0:
                    return None
                to = Position(origin.x + step_x * rise, origin.y + step_y * rise)

        return cls(from_=origin, to=to, direction=direction)

    def length(self) -> int:
        """Number of stepping iterations from one end point to the other."""
        dx, dy = self.from_.delta_to(self.to)
        return abs(dy) if dy != 0 else abs(dx)

    def cells(self) -> Iterator[Position]:
        """Yield every cell the fixed stepping rule visits, end points included."""
        step_x, step_y = self.direction.step()
        for i in range(self.length() + 1):
            yield Position(self.from_.x + step_x * i, self.from_.y + step_y * i)

    def area(self) -> Rect:
        rect = Rect.spanning(self.from_, self.to)
        if self.direction.is_diagonal():
            # Diagonal glyphs are double-width; the last one spills one column right.
            return Rect(rect.x, rect.y, rect.width + 1, rect.height)
        return rect

    def reversed(self) -> StraightLine:
        return StraightLine(from_=self.to, to=self.from_, direction=self.direction.opposite())

    def translate(self, dx: int, dy: int) -> StraightLine:
        """Shift both end points; the caller keeps the result on the grid."""
        return StraightLine(
            from_=Position(self.from_.x + dx, self.from_.y + dy),
            to=Position(self.to.x + dx, self.to.y + dy),
            direction=self.direction,
        )
