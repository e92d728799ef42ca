"""Drawing canvas — the element sequence and its derived render buffer.

The buffer is a cache: `render` rebuilds it from (elements, selection,
operation) every time, it is never patched incrementally.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Set

from sketshy.drawing.elements import Box, Element, Line, Text, element_area
from sketshy.drawing.operation import Operation, preview
from sketshy.renderers.buffer import Buffer
from sketshy.renderers.charset import BoxChars, CharSet, LineGlyphs
from sketshy.renderers.style import Style

logger = logging.getLogger(__name__)


class DrawingCanvas:
    """Owns the ordered elements (sequence order is z-order) and the buffer."""

    def __init__(self, charset: CharSet = CharSet.Unicode) -> None:
        self.elements: list[Element] = []
        self.buffer = Buffer()
        self.box_chars = BoxChars.for_charset(charset)
        self.line_glyphs = LineGlyphs.for_charset(charset)

    def __len__(self) -> int:
        return len(self.elements)

    def append(self, el: Element) -> int:
        """Add `el` on top of everything else and return its index."""
        self.elements.append(el)
        logger.debug("append #%d %r", len(self.elements) - 1, el)
        return len(self.elements) - 1

    def replace(self, index: int, el: Element) -> None:
        self.elements[index] = el

    def remove_where(self, predicate: Callable[[int, Element], bool]) -> int:
        """Drop every element for which `predicate(index, element)` holds.

        Indices shift afterwards; callers must rebuild any selection set.
        Returns the number of removed elements.
        """
        before = len(self.elements)
        self.elements = [el for i, el in enumerate(self.elements) if not predicate(i, el)]
        removed = before - len(self.elements)
        logger.debug("removed %d element(s)", removed)
        return removed

    def _live_selection(self, selected: Set[int]) -> Set[int]:
        stale = {i for i in selected if not 0 <= i < len(self.elements)}
        assert not stale, f"stale selection indices: {sorted(stale)}"
        if stale:
            logger.warning("ignoring stale selection indices %s", sorted(stale))
            return selected - stale
        return selected

    def previews(self, selected: Set[int], operation: Operation | None) -> list[Element]:
        """Every element as it should look now: selected ones through `operation`."""
        return [preview(operation, el) if i in selected else el for i, el in enumerate(self.elements)]

    def extent(self, selected: Set[int], operation: Operation | None) -> tuple[int, int]:
        """Buffer size needed for the current previews; the origin is always (0, 0)."""
        return _bounds(self.previews(self._live_selection(selected), operation))

    def render(self, selected: Set[int], operation: Operation | None) -> None:
        selected = self._live_selection(selected)
        shown = self.previews(selected, operation)

        width, height = _bounds(shown)
        if (width, height) != (self.buffer.width, self.buffer.height):
            self.buffer.resize(width, height)
        else:
            self.buffer.clear()

        for i, el in enumerate(shown):
            self._paint(el, i in selected)

    def _paint(self, el: Element, selected: bool) -> None:
        style = Style.selected() if selected else Style.base()
        match el:
            case Box(area=area):
                self.buffer.draw_box(area, self.box_chars, style)
            case Text(area=area, content=content):
                self.buffer.write_text(area, content, style)
            case Line(line=line):
                self.buffer.draw_line(line, self.line_glyphs, style)

    def export(self) -> bytes:
        return self.buffer.export()


def _bounds(elements: list[Element]) -> tuple[int, int]:
    width = height = 0
    for el in elements:
        area = element_area(el)
        width = max(width, area.right())
        height = max(height, area.bottom())
    return width, height

