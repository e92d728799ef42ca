"""Buffer — a 2D grid of styled character cells."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from sketshy.geometry import Rect
from sketshy.renderers.charset import BoxChars, LineGlyphs
from sketshy.renderers.style import Style

if TYPE_CHECKING:
    from sketshy.drawing.line import StraightLine


@dataclass(frozen=True)
class Cell:
    symbol: str = " "
    style: Style = Style()


BLANK = Cell()


class Buffer:
    """A grid of cells anchored at (0, 0) onto which elements are painted.

    Writes outside the grid are silently dropped so callers can paint
    partially visible shapes without bounds checks.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.cells: list[list[Cell]] = [[BLANK] * width for _ in range(height)]

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells = [[BLANK] * width for _ in range(height)]

    def clear(self) -> None:
        for row in self.cells:
            row[:] = [BLANK] * self.width

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, col: int, row: int) -> Cell:
        if self.in_bounds(col, row):
            return self.cells[row][col]
        return BLANK

    def set(self, col: int, row: int, symbol: str, style: Style | None = None) -> None:
        if not self.in_bounds(col, row):
            return
        cell = self.cells[row][col]
        self.cells[row][col] = Cell(symbol, cell.style if style is None else style)

    def set_style(self, col: int, row: int, style: Style) -> None:
        if self.in_bounds(col, row):
            self.cells[row][col] = replace(self.cells[row][col], style=style)

    def fill(self, rect: Rect, symbol: str = " ", style: Style | None = None) -> None:
        for row in range(rect.y, rect.bottom()):
            for col in range(rect.x, rect.right()):
                self.set(col, row, symbol, Style() if style is None else style)

    def hline(self, y: int, x1: int, x2: int, c: str, style: Style | None = None) -> None:
        lo, hi = (x1, x2) if x1 <= x2 else (x2, x1)
        for col in range(lo, hi + 1):
            self.set(col, y, c, style)

    def vline(self, x: int, y1: int, y2: int, c: str, style: Style | None = None) -> None:
        lo, hi = (y1, y2) if y1 <= y2 else (y2, y1)
        for row in range(lo, hi + 1):
            self.set(x, row, c, style)

    def draw_box(self, rect: Rect, bc: BoxChars, style: Style) -> None:
        """Clear `rect` and draw its border. Rects thinner than 2 cells get no border."""
        self.fill(rect)
        if rect.width < 2 or rect.height < 2:
            return
        x0 = rect.x
        y0 = rect.y
        x1 = rect.right() - 1
        y1 = rect.bottom() - 1
        self.hline(y0, x0 + 1, x1 - 1, bc.horizontal, style)
        self.hline(y1, x0 + 1, x1 - 1, bc.horizontal, style)
        self.vline(x0, y0 + 1, y1 - 1, bc.vertical, style)
        self.vline(x1, y0 + 1, y1 - 1, bc.vertical, style)
        self.set(x0, y0, bc.top_left, style)
        self.set(x1, y0, bc.top_right, style)
        self.set(x0, y1, bc.bottom_left, style)
        self.set(x1, y1, bc.bottom_right, style)

    def write_text(self, rect: Rect, content: str, style: Style) -> None:
        """Paint `content` line by line into `rect`, truncating whatever does not fit."""
        for row in range(rect.y, rect.bottom()):
            for col in range(rect.x, rect.right()):
                self.set_style(col, row, style)
        for i, line in enumerate(content.split("\n")[: rect.height]):
            for j, ch in enumerate(line[: rect.width]):
                self.set(rect.x + j, rect.y + i, ch)

    def draw_line(self, line: StraightLine, glyphs: LineGlyphs, style: Style) -> None:
        glyph = glyphs.for_direction(line.direction)
        for p in line.cells():
            self.set(p.x, p.y, glyph, style)

    def window(self, x: int, y: int, width: int, height: int) -> list[list[Cell]]:
        """The `width` x `height` view whose top-left is (x, y); cells past the edge are blank."""
        return [[self.get(col, row) for col in range(x, x + width)] for row in range(y, y + height)]

    def to_string(self) -> str:
        """Row-major text, one character per cell, every row newline-terminated."""
        lines = []
        for row in self.cells:
            lines.append("".join(_printable(cell.symbol) for cell in row) + "\n")
        return "".join(lines)

    def export(self) -> bytes:
        return self.to_string().encode("utf-8")


def _printable(symbol: str) -> str:
    ch = symbol[:1]
    return ch if ch and ch.isprintable() else " "
