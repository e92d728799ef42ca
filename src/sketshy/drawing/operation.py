"""Operation engine — transient gesture state and the preview transform.

An operation lives for a single gesture. While it is active the canvas
renders every selected element through `apply_transform`; on gesture end the
same function produces the committed element, exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from sketshy.drawing.elements import Box, Element, Line, Text, translate_element
from sketshy.drawing.line import StraightLine
from sketshy.drawing.textedit import TextEdit
from sketshy.geometry import Position, Rect
from sketshy.types import Corner, LineHandle

MIN_SIZE = 2


@dataclass(frozen=True)
class Selection:
    origin: Position
    second: Position

    def rect(self) -> Rect:
        return Rect.spanning(self.origin, self.second)


@dataclass(frozen=True)
class Move:
    origin: Position
    second: Position


@dataclass(frozen=True)
class Resize:
    direction: Corner
    origin: Position
    second: Position
    min_size: int = MIN_SIZE


@dataclass(frozen=True)
class MoveLineHandle:
    handle: LineHandle
    pos: Position


@dataclass(frozen=True)
class EditText:
    buffer: TextEdit = field(default_factory=TextEdit, compare=False)


Operation = Selection | Move | Resize | MoveLineHandle | EditText


def with_pointer(op: Operation, pos: Position) -> Operation:
    """The same operation with its tracking pointer moved to `pos`."""
    match op:
        case Selection() | Move() | Resize():
            return replace(op, second=pos)
        case MoveLineHandle():
            return replace(op, pos=pos)
    return op


def resize_rect(area: Rect, corner: Corner, dx: int, dy: int, min_size: int = MIN_SIZE) -> Rect:
    """Resize `area` by dragging `corner` by (dx, dy); the opposite corner stays put.

    Shrinking stops at `min(min_size, current size)` per axis and growing
    stops at coordinate 0. The delta is clamped, never rejected.
    """
    floor_w = min(min_size, area.width)
    floor_h = min(min_size, area.height)

    if corner in (Corner.TopLeft, Corner.BottomLeft):
        dx = max(min(dx, area.width - floor_w), -area.x)
        x, width = area.x + dx, area.width - dx
    else:
        x, width = area.x, area.width + max(dx, floor_w - area.width)

    if corner in (Corner.TopLeft, Corner.TopRight):
        dy = max(min(dy, area.height - floor_h), -area.y)
        y, height = area.y + dy, area.height - dy
    else:
        y, height = area.y, area.height + max(dy, floor_h - area.height)

    return Rect(x, y, width, height)


def _drag_line_handle(line: StraightLine, handle: LineHandle, pos: Position) -> StraightLine | None:
    # The pointer sits on the handle, one step outside the end point it controls.
    step_x, step_y = line.direction.step()
    if handle is LineHandle.Second:
        return StraightLine.new(line.from_, pos.offset(-step_x, -step_y))
    routed = StraightLine.new(line.to, pos.offset(step_x, step_y))
    return routed.reversed() if routed is not None else None


def apply_transform(op: Operation, el: Element) -> Element | None:
    """Preview `el` under `op` without touching it.

    Returns None when the result would be degenerate (a line handle dragged
    onto its fixed end point); the caller then keeps the element as it was.
    """
    match op:
        case Move(origin=origin, second=second):
            dx, dy = origin.delta_to(second)
            return translate_element(el, dx, dy)
        case Resize(direction=corner, origin=origin, second=second, min_size=min_size):
            dx, dy = origin.delta_to(second)
            match el:
                case Box(area=area) | Text(area=area):
                    return replace(el, area=resize_rect(area, corner, dx, dy, min_size))
            return el
        case MoveLineHandle(handle=handle, pos=pos):
            if isinstance(el, Line):
                routed = _drag_line_handle(el.line, handle, pos)
                return Line(routed) if routed is not None else None
            return el
        case Selection() | EditText():
            return el
    raise TypeError(f"not an operation: {op!r}")


def preview(op: Operation | None, el: Element) -> Element:
    """What `el` looks like right now: transformed if possible, else unchanged."""
    if op is None:
        return el
    transformed = apply_transform(op, el)
    return transformed if transformed is not None else el
