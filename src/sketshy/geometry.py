"""Geometry primitives on the integer character grid.

Coordinates are non-negative column/row cell indices. Arithmetic that would
leave the grid saturates at zero instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A grid cell (column, row)."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position must be non-negative, got ({self.x}, {self.y})")

    @classmethod
    def saturating(cls, x: int, y: int) -> Position:
        """Build a position, clamping negative coordinates to zero."""
        return cls(max(0, x), max(0, y))

    def offset(self, dx: int, dy: int) -> Position:
        return Position.saturating(self.x + dx, self.y + dy)

    def delta_to(self, other: Position) -> tuple[int, int]:
        """Signed (dx, dy) from this position to `other`."""
        return other.x - self.x, other.y - self.y


@dataclass(frozen=True)
class Rect:
    """A well-formed grid rectangle; width and height are always at least 1."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Rect origin must be non-negative, got ({self.x}, {self.y})")
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Rect size must be at least 1x1, got {self.width}x{self.height}")

    @classmethod
    def spanning(cls, a: Position, b: Position) -> Rect:
        """The inclusive rectangle with `a` and `b` as opposite corners."""
        return cls(
            x=min(a.x, b.x),
            y=min(a.y, b.y),
            width=abs(a.x - b.x) + 1,
            height=abs(a.y - b.y) + 1,
        )

    def right(self) -> int:
        return self.x + self.width

    def bottom(self) -> int:
        return self.y + self.height

    def area(self) -> int:
        return self.width * self.height

    def translate(self, dx: int, dy: int) -> Rect:
        """Move by (dx, dy), saturating the origin at zero."""
        return Rect(max(0, self.x + dx), max(0, self.y + dy), self.width, self.height)

    def contains(self, p: Position) -> bool:
        return self.x <= p.x < self.right() and self.y <= p.y < self.bottom()

    def intersects(self, other: Rect) -> bool:
        return (
            self.x < other.right()
            and other.x < self.right()
            and self.y < other.bottom()
            and other.y < self.bottom()
        )

    def intersection(self, other: Rect) -> Rect | None:
        """The overlapping rectangle, or None when the two do not overlap."""
        if not self.intersects(other):
            return None
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        return Rect(x, y, min(self.right(), other.right()) - x, min(self.bottom(), other.bottom()) - y)

    def union(self, other: Rect) -> Rect:
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        return Rect(x, y, max(self.right(), other.right()) - x, max(self.bottom(), other.bottom()) - y)
