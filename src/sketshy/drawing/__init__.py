"""Drawing core: line routing, elements, operations, hit-testing and the canvas."""

from sketshy.drawing.canvas import DrawingCanvas
from sketshy.drawing.elements import Box, Element, Line, Text, element_area, element_name
from sketshy.drawing.line import StraightLine, classify_direction, diamond_angle
from sketshy.drawing.operation import (
    EditText,
    Move,
    MoveLineHandle,
    Operation,
    Resize,
    Selection,
    apply_transform,
)

__all__ = [
    "Box",
    "DrawingCanvas",
    "EditText",
    "Element",
    "Line",
    "Move",
    "MoveLineHandle",
    "Operation",
    "Resize",
    "Selection",
    "StraightLine",
    "Text",
    "apply_transform",
    "classify_direction",
    "diamond_angle",
    "element_area",
    "element_name",
]
