"""Hit-testing and handle geometry.

Handles are the grab points drawn next to a single selected element: one
cell outside each corner of a rectangle, or one stepping offset beyond each
end of a line. Positions that would fall off the grid are reported as None.
"""

from __future__ import annotations

from collections.abc import Sequence

from sketshy.drawing.elements import Element, element_area
from sketshy.drawing.line import StraightLine
from sketshy.geometry import Position, Rect
from sketshy.types import Corner, LineHandle


def _checked(x: int, y: int) -> Position | None:
    if x < 0 or y < 0:
        return None
    return Position(x, y)


def resize_handles(area: Rect) -> dict[Corner, Position | None]:
    return {
        Corner.TopLeft: _checked(area.x - 1, area.y - 1),
        Corner.TopRight: _checked(area.right(), area.y - 1),
        Corner.BottomLeft: _checked(area.x - 1, area.bottom()),
        Corner.BottomRight: _checked(area.right(), area.bottom()),
    }


def line_handles(line: StraightLine) -> dict[LineHandle, Position | None]:
    step_x, step_y = line.direction.step()
    return {
        LineHandle.First: _checked(line.from_.x - step_x, line.from_.y - step_y),
        LineHandle.Second: _checked(line.to.x + step_x, line.to.y + step_y),
    }


def corner_at(area: Rect, p: Position) -> Corner | None:
    """The resize corner whose handle sits exactly on `p`."""
    for corner, pos in resize_handles(area).items():
        if pos == p:
            return corner
    return None


def line_handle_at(line: StraightLine, p: Position) -> LineHandle | None:
    for handle, pos in line_handles(line).items():
        if pos == p:
            return handle
    return None


def topmost_at(elements: Sequence[Element], p: Position, kind: type | None = None) -> int | None:
    """Index of the last-painted element whose area contains `p`, optionally only of type `kind`."""
    for i in range(len(elements) - 1, -1, -1):
        if kind is not None and not isinstance(elements[i], kind):
            continue
        if element_area(elements[i]).contains(p):
            return i
    return None


def intersecting(elements: Sequence[Element], band: Rect) -> set[int]:
    """Indices of every element whose area overlaps `band` (overlap, not containment)."""
    return {i for i, el in enumerate(elements) if element_area(el).intersects(band)}
