"""Element model — the persisted drawable entities.

Elements are identified only by their index in the canvas sequence; the
sequence order is also the paint order (later elements on top).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from sketshy.drawing.line import StraightLine
from sketshy.geometry import Rect


@dataclass(frozen=True)
class Box:
    area: Rect


@dataclass(frozen=True)
class Text:
    area: Rect
    content: str = ""


@dataclass(frozen=True)
class Line:
    line: StraightLine


Element = Box | Text | Line


def element_area(el: Element) -> Rect:
    """Bounding rectangle used for extent, hit-testing and rubber-band selection."""
    match el:
        case Box(area=area) | Text(area=area):
            return area
        case Line(line=line):
            return line.area()
    raise TypeError(f"not an element: {el!r}")


def element_name(el: Element) -> str:
    """Label shown in the layer list."""
    match el:
        case Box():
            return "Box"
        case Text(content=content):
            return f'Text "{content}"'
        case Line():
            return "Line"
    raise TypeError(f"not an element: {el!r}")


def translate_element(el: Element, dx: int, dy: int) -> Element:
    """Translate by (dx, dy), clamping the delta so nothing leaves the grid."""
    area = element_area(el)
    dx = max(dx, -area.x)
    dy = max(dy, -area.y)
    match el:
        case Box(area=rect) | Text(area=rect):
            return replace(el, area=rect.translate(dx, dy))
        case Line(line=line):
            return Line(line.translate(dx, dy))
    raise TypeError(f"not an element: {el!r}")
