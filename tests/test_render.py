"""Tests for the styled cell buffer and glyph sets."""

from sketshy.drawing.line import StraightLine
from sketshy.geometry import Position, Rect
from sketshy.renderers.buffer import BLANK, Buffer
from sketshy.renderers.charset import BoxChars, CharSet, HandleGlyphs, LineGlyphs
from sketshy.renderers.style import Style
from sketshy.types import LineDirection


class TestGlyphs:
    def test_line_glyph_per_direction(self):
        g = LineGlyphs.unicode()
        assert g.for_direction(LineDirection.Right) == "─"
        assert g.for_direction(LineDirection.Up) == "│"
        assert g.for_direction(LineDirection.DownRight) == "＼"
        assert g.for_direction(LineDirection.UpLeft) == "＼"
        assert g.for_direction(LineDirection.UpRight) == "／"
        assert g.for_direction(LineDirection.DownLeft) == "／"

    def test_ascii_fallbacks(self):
        assert LineGlyphs.for_charset(CharSet.Ascii).for_direction(LineDirection.DownLeft) == "/"
        assert BoxChars.for_charset(CharSet.Ascii).top_left == "+"
        assert HandleGlyphs.for_charset(CharSet.Unicode).endpoint == "■"


class TestBufferBasics:
    def test_set_get(self):
        buf = Buffer(10, 5)
        buf.set(3, 2, "X")
        assert buf.get(3, 2).symbol == "X"
        assert buf.get(0, 0) == BLANK

    def test_set_out_of_bounds_no_error(self):
        buf = Buffer(5, 5)
        buf.set(10, 10, "X")
        assert buf.get(10, 10) == BLANK

    def test_set_keeps_style_when_none_given(self):
        buf = Buffer(3, 1)
        buf.set_style(1, 0, Style.selected())
        buf.set(1, 0, "a")
        assert buf.get(1, 0).style == Style.selected()

    def test_hline(self):
        buf = Buffer(20, 5)
        buf.hline(2, 7, 3, "─")
        for col in range(3, 8):
            assert buf.get(col, 2).symbol == "─", f"col={col}"
        assert buf.get(2, 2).symbol == " "
        assert buf.get(8, 2).symbol == " "

    def test_vline(self):
        buf = Buffer(10, 20)
        buf.vline(4, 2, 8, "│")
        for row in range(2, 9):
            assert buf.get(4, row).symbol == "│", f"row={row}"

    def test_draw_box_clears_interior(self):
        buf = Buffer(20, 10)
        buf.write_text(Rect(0, 0, 20, 10), "\n" + "x" * 20 + "\n" + "x" * 20, Style())
        buf.draw_box(Rect(2, 1, 6, 3), BoxChars.unicode(), Style.base())

        assert buf.get(2, 1).symbol == "┌"
        assert buf.get(7, 1).symbol == "┐"
        assert buf.get(2, 3).symbol == "└"
        assert buf.get(7, 3).symbol == "┘"
        for col in range(3, 7):
            assert buf.get(col, 1).symbol == "─", f"top col={col}"
            assert buf.get(col, 2).symbol == " ", f"inside col={col}"
        assert buf.get(2, 2).symbol == "│"
        assert buf.get(7, 2).symbol == "│"
        assert buf.get(8, 2).symbol == "x"

    def test_draw_line(self):
        buf = Buffer(10, 10)
        line = StraightLine.new(Position(1, 8), Position(1, 2))
        assert line is not None
        buf.draw_line(line, LineGlyphs.unicode(), Style.base())
        assert [buf.get(1, row).symbol for row in range(2, 9)] == ["│"] * 7
        assert buf.get(1, 1).symbol == " "

    def test_clear(self):
        buf = Buffer(3, 2)
        buf.set(1, 1, "z", Style.selected())
        buf.clear()
        assert buf.get(1, 1) == BLANK


class TestWindow:
    def test_clips_and_pads(self):
        buf = Buffer(4, 3)
        buf.set(3, 2, "Q")
        view = buf.window(2, 1, 3, 3)
        assert len(view) == 3 and all(len(row) == 3 for row in view)
        assert view[1][1].symbol == "Q"
        assert view[2] == [BLANK, BLANK, BLANK]


class TestExport:
    def test_one_char_per_cell_newline_terminated(self):
        buf = Buffer(3, 2)
        buf.set(0, 0, "a")
        assert buf.to_string() == "a  \n   \n"
        assert buf.export() == "a  \n   \n".encode("utf-8")

    def test_unprintable_and_empty_symbols_become_spaces(self):
        buf = Buffer(3, 1)
        buf.set(0, 0, "\x00")
        buf.set(1, 0, "")
        buf.set(2, 0, "ok")
        assert buf.to_string() == "  o\n"
