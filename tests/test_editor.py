"""Tests for the editor session: tools, gestures, commits and actions."""

from pathlib import Path

from sketshy.actions import Action, Export, Gesture, SwitchTool
from sketshy.config import EditorConfig
from sketshy.drawing.elements import Box, Line, Text
from sketshy.drawing.operation import EditText, Move, MoveLineHandle, Resize, Selection
from sketshy.editor import Editor
from sketshy.geometry import Position, Rect
from sketshy.renderers.style import Style
from sketshy.types import Corner, GestureKind, LineDirection, LineHandle, Tool


def _gesture(editor: Editor, kind: GestureKind, x: int, y: int, additive: bool = False) -> None:
    editor.dispatch(editor.handle_gesture(Gesture(kind, Position(x, y), additive)))


def _drag(editor: Editor, start: tuple[int, int], end: tuple[int, int], additive: bool = False) -> None:
    _gesture(editor, GestureKind.Down, *start, additive=additive)
    _gesture(editor, GestureKind.Drag, *end)
    _gesture(editor, GestureKind.Up, *end)


def _click(editor: Editor, x: int, y: int, additive: bool = False) -> None:
    _gesture(editor, GestureKind.Down, x, y, additive)
    _gesture(editor, GestureKind.Up, x, y)


def _draw(editor: Editor, tool: Tool, start: tuple[int, int], end: tuple[int, int]) -> None:
    editor.dispatch(SwitchTool(tool))
    _drag(editor, start, end)


class TestCreate:
    def test_box_tool_creates_and_selects(self):
        editor = Editor()
        _draw(editor, Tool.Box, (2, 2), (6, 6))
        assert editor.canvas.elements == [Box(Rect(2, 2, 5, 5))]
        assert editor.selected == {0}
        assert editor.tool == Tool.Cursor
        assert editor.operation is None

    def test_box_too_thin_is_not_created(self):
        editor = Editor()
        _draw(editor, Tool.Box, (2, 2), (8, 2))
        assert editor.canvas.elements == []
        assert editor.tool == Tool.Box

    def test_line_tool_routes_drag(self):
        editor = Editor()
        _draw(editor, Tool.Line, (5, 5), (10, 5))
        (el,) = editor.canvas.elements
        assert isinstance(el, Line)
        assert el.line.direction == LineDirection.Right
        rows = editor.canvas.export().decode("utf-8").split("\n")
        assert rows[5] == "     ──────"

    def test_line_tool_overrides_diagonal_endpoint(self):
        editor = Editor()
        _draw(editor, Tool.Line, (5, 5), (7, 9))
        (el,) = editor.canvas.elements
        assert isinstance(el, Line)
        assert el.line.direction == LineDirection.DownRight
        assert el.line.to == Position(13, 9)

    def test_line_click_without_drag_creates_nothing(self):
        editor = Editor()
        editor.dispatch(SwitchTool(Tool.Line))
        _click(editor, 4, 4)
        assert editor.canvas.elements == []

    def test_switching_tool_discards_operation(self):
        editor = Editor()
        editor.dispatch(SwitchTool(Tool.Box))
        _gesture(editor, GestureKind.Down, 1, 1)
        assert isinstance(editor.operation, Selection)
        editor.dispatch(SwitchTool(Tool.Line))
        assert editor.operation is None


class TestText:
    def test_create_type_and_commit(self):
        editor = Editor()
        _draw(editor, Tool.Text, (1, 1), (8, 1))
        assert isinstance(editor.operation, EditText)
        assert editor.selected == {0}
        for key in "hi":
            editor.dispatch(editor.handle_key(key))
        editor.dispatch(editor.handle_key("escape"))
        assert editor.canvas.elements == [Text(Rect(1, 1, 8, 1), "hi")]
        assert editor.operation is None
        assert editor.canvas.export() == b"         \n hi      \n"

    def test_click_elsewhere_commits(self):
        editor = Editor()
        _draw(editor, Tool.Text, (0, 0), (5, 0))
        editor.dispatch(editor.handle_key("x"))
        _gesture(editor, GestureKind.Down, 20, 20)
        assert editor.canvas.elements == [Text(Rect(0, 0, 6, 1), "x")]
        assert editor.operation is None

    def test_single_click_on_text_reopens_it_at_cursor(self):
        editor = Editor()
        editor.canvas.append(Text(Rect(2, 2, 6, 2), "abc\ndef"))
        editor.dispatch(SwitchTool(Tool.Text))
        _click(editor, 4, 3)
        op = editor.operation
        assert isinstance(op, EditText)
        assert (op.buffer.row, op.buffer.col) == (1, 2)
        editor.dispatch(editor.handle_key("X"))
        editor.dispatch(editor.handle_key("escape"))
        assert editor.canvas.elements[0] == Text(Rect(2, 2, 6, 2), "abc\ndeXf")

    def test_single_click_reopens_topmost_text(self):
        editor = Editor()
        editor.canvas.append(Text(Rect(2, 2, 6, 2), "first"))
        editor.canvas.append(Text(Rect(4, 2, 6, 2), "second"))
        editor.dispatch(SwitchTool(Tool.Text))
        _click(editor, 5, 3)
        assert editor.selected == {1}
        editor.dispatch(editor.handle_key("X"))
        editor.dispatch(editor.handle_key("escape"))
        assert editor.canvas.elements == [Text(Rect(2, 2, 6, 2), "first"), Text(Rect(4, 2, 6, 2), "sXecond")]

    def test_single_click_on_empty_space_resets_tool(self):
        editor = Editor()
        editor.dispatch(SwitchTool(Tool.Text))
        _click(editor, 4, 3)
        assert editor.tool == Tool.Cursor
        assert editor.canvas.elements == []

    def test_keys_ignored_without_edit(self):
        editor = Editor()
        assert editor.handle_key("a") is None


class TestSelection:
    def test_click_selects_topmost(self):
        editor = Editor()
        editor.canvas.append(Box(Rect(0, 0, 6, 6)))
        editor.canvas.append(Box(Rect(2, 2, 6, 6)))
        _click(editor, 3, 3)
        assert editor.selected == {1}

    def test_click_on_empty_space_clears(self):
        editor = Editor()
        editor.canvas.append(Box(Rect(0, 0, 3, 3)))
        _click(editor, 1, 1)
        _click(editor, 10, 10)
        assert editor.selected == set()

    def test_additive_click(self):
        editor = Editor()
        editor.canvas.append(Box(Rect(0, 0, 3, 3)))
        editor.canvas.append(Box(Rect(5, 0, 3, 3)))
        _click(editor, 1, 1)
        _click(editor, 6, 1, additive=True)
        assert editor.selected == {0, 1}

    def test_rubber_band_selects_partial_overlaps(self):
        editor = Editor()
        editor.canvas.append(Box(Rect(2, 2, 4, 4)))
        editor.canvas.append(Box(Rect(8, 2, 4, 4)))
        editor.canvas.append(Box(Rect(20, 20, 3, 3)))
        _drag(editor, (0, 0), (9, 3))
        assert editor.selected == {0, 1}

    def test_select_all_and_none(self):
        editor = Editor()
        for i in range(3):
            editor.canvas.append(Box(Rect(i * 4, 0, 3, 3)))
        editor.dispatch(SwitchTool(Tool.Box))
        editor.dispatch(Action.SelectAll)
        assert editor.tool == Tool.Cursor
        assert editor.selected == {0, 1, 2}
        editor.dispatch(Action.SelectNone)
        assert editor.selected == set()


class TestTransformGestures:
    def test_move_selected(self):
        editor = Editor()
        _draw(editor, Tool.Box, (2, 2), (6, 6))
        _gesture(editor, GestureKind.Down, 3, 3)
        assert isinstance(editor.operation, Move)
        _gesture(editor, GestureKind.Drag, 5, 4)
        # Preview only; the stored element is untouched until button-up.
        assert editor.canvas.elements[0] == Box(Rect(2, 2, 5, 5))
        assert editor.canvas.buffer.get(4, 3).symbol == "┌"
        _gesture(editor, GestureKind.Up, 5, 4)
        assert editor.canvas.elements[0] == Box(Rect(4, 3, 5, 5))

    def test_resize_from_top_left_handle(self):
        editor = Editor()
        _draw(editor, Tool.Box, (2, 2), (6, 6))
        _gesture(editor, GestureKind.Down, 1, 1)
        assert isinstance(editor.operation, Resize)
        assert editor.operation.direction == Corner.TopLeft
        _gesture(editor, GestureKind.Drag, 3, 3)
        _gesture(editor, GestureKind.Up, 3, 3)
        assert editor.canvas.elements[0] == Box(Rect(4, 4, 3, 3))

    def test_resize_overshoot_clamps(self):
        editor = Editor()
        _draw(editor, Tool.Box, (2, 2), (6, 6))
        _drag(editor, (1, 1), (11, 11))
        assert editor.canvas.elements[0] == Box(Rect(5, 5, 2, 2))

    def test_resize_respects_configured_min_size(self):
        editor = Editor(EditorConfig(min_size=3))
        _draw(editor, Tool.Box, (2, 2), (8, 8))
        _drag(editor, (9, 9), (0, 0))
        assert editor.canvas.elements[0] == Box(Rect(2, 2, 3, 3))

    def test_line_handle_drag_changes_direction(self):
        editor = Editor()
        _draw(editor, Tool.Line, (5, 5), (10, 5))
        _gesture(editor, GestureKind.Down, 11, 5)
        assert editor.operation == MoveLineHandle(LineHandle.Second, Position(11, 5))
        _gesture(editor, GestureKind.Drag, 5, 11)
        _gesture(editor, GestureKind.Up, 5, 11)
        (el,) = editor.canvas.elements
        assert isinstance(el, Line)
        assert el.line.direction == LineDirection.Down
        assert (el.line.from_, el.line.to) == (Position(5, 5), Position(5, 11))

    def test_degenerate_line_handle_commit_is_skipped(self):
        editor = Editor()
        _draw(editor, Tool.Line, (5, 5), (10, 5))
        before = editor.canvas.elements[0]
        _drag(editor, (11, 5), (6, 5))
        assert editor.canvas.elements[0] == before

    def test_handles_track_live_preview(self):
        editor = Editor()
        _draw(editor, Tool.Box, (2, 2), (6, 6))
        assert sorted(editor.handles(), key=lambda h: (h[0].y, h[0].x)) == [
            (Position(1, 1), "▄", Style.handle()),
            (Position(7, 1), "▄", Style.handle()),
            (Position(1, 7), "▀", Style.handle()),
            (Position(7, 7), "▀", Style.handle()),
        ]
        _gesture(editor, GestureKind.Down, 7, 7)
        _gesture(editor, GestureKind.Drag, 9, 8)
        assert (Position(9, 8), "▀", Style.handle()) in editor.handles()

    def test_line_handles_overlay(self):
        editor = Editor()
        _draw(editor, Tool.Line, (5, 5), (10, 5))
        handles = sorted(editor.handles(), key=lambda h: h[0].x)
        assert [(pos, glyph) for pos, glyph, _style in handles] == [(Position(4, 5), "■"), (Position(11, 5), "■")]
        assert all(style == Style.handle() for _pos, _glyph, style in handles)


class TestDelete:
    def test_delete_reindexes_and_clears_selection(self):
        editor = Editor()
        boxes = [Box(Rect(i * 4, 0, 3, 3)) for i in range(4)]
        for b in boxes:
            editor.canvas.append(b)
        editor.selected = {1}
        editor.dispatch(Action.Delete)
        assert editor.canvas.elements == [boxes[0], boxes[2], boxes[3]]
        # The element formerly at index 3 now lives at index 2; the selection is always cleared.
        assert editor.canvas.elements[2] == boxes[3]
        assert editor.selected == set()

    def test_delete_many_then_render_has_no_stale_indices(self):
        editor = Editor()
        for i in range(4):
            editor.canvas.append(Box(Rect(i * 4, 0, 3, 3)))
        editor.selected = {1, 3}
        editor.dispatch(Action.Delete)
        assert len(editor.canvas) == 2
        assert editor.selected == set()
        editor.dispatch(Action.RenderBuffer)
        assert editor.canvas.buffer.width == 11

    def test_single_delete_step_leaves_no_stale_indices(self):
        editor = Editor()
        for i in range(4):
            editor.canvas.append(Box(Rect(i * 4, 0, 3, 3)))
        editor.selected = {1, 3}
        follow_up = editor.update(Action.Delete)
        assert editor.selected == set()
        assert len(editor.canvas) == 2
        assert follow_up == Action.RenderBuffer
        editor.update(follow_up)
        _click(editor, 9, 1)
        assert editor.selected == {1}


class TestScroll:
    def test_scroll_steps_and_saturates(self):
        editor = Editor()
        editor.dispatch(editor.handle_gesture(Gesture(GestureKind.ScrollUp)))
        assert editor.scroll == Position(0, 0)
        editor.dispatch(editor.handle_gesture(Gesture(GestureKind.ScrollDown)))
        editor.dispatch(editor.handle_gesture(Gesture(GestureKind.ScrollRight)))
        assert editor.scroll == Position(8, 4)
        editor.dispatch(editor.handle_gesture(Gesture(GestureKind.ScrollLeft)))
        assert editor.scroll == Position(0, 4)


class TestMisc:
    def test_export_writes_canvas(self, tmp_path: Path):
        editor = Editor()
        _draw(editor, Tool.Box, (0, 0), (2, 1))
        out = tmp_path / "drawing.txt"
        editor.dispatch(Export(str(out)))
        assert out.read_text(encoding="utf-8") == "┌─┐\n└─┘\n"

    def test_quit(self):
        editor = Editor()
        editor.dispatch(Action.Quit)
        assert editor.should_quit

    def test_layers_topmost_first(self):
        editor = Editor()
        editor.canvas.append(Box(Rect(0, 0, 2, 2)))
        editor.canvas.append(Text(Rect(0, 0, 2, 1), "hi"))
        editor.selected = {0}
        assert editor.layers() == [('Text "hi"', False), ("Box", True)]
