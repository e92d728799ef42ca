"""Editor session — turns gestures and actions into operations and commits.

The session owns the current tool, the single active operation, the
selection set and the scroll offset. Gesture handlers never paint; they
return a follow-up action (usually `Action.RenderBuffer`) that the caller
feeds back through `update`, or runs to completion with `dispatch`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sketshy.actions import Action, AnyAction, Export, Gesture, SwitchTool
from sketshy.config import EditorConfig
from sketshy.drawing.canvas import DrawingCanvas
from sketshy.drawing.elements import Box, Element, Line, Text, element_area, element_name
from sketshy.drawing.handles import corner_at, intersecting, line_handle_at, line_handles, resize_handles, topmost_at
from sketshy.drawing.line import StraightLine
from sketshy.drawing.operation import (
    EditText,
    Move,
    MoveLineHandle,
    Operation,
    Resize,
    Selection,
    apply_transform,
    preview,
    with_pointer,
)
from sketshy.drawing.textedit import TextEdit
from sketshy.geometry import Position
from sketshy.renderers.charset import HandleGlyphs
from sketshy.renderers.style import Style
from sketshy.types import Corner, GestureKind, Tool

logger = logging.getLogger(__name__)

_SCROLL_GESTURES: dict[GestureKind, Action] = {
    GestureKind.ScrollUp: Action.ScrollUp,
    GestureKind.ScrollDown: Action.ScrollDown,
    GestureKind.ScrollLeft: Action.ScrollLeft,
    GestureKind.ScrollRight: Action.ScrollRight,
}


class Editor:
    """One editing session over a `DrawingCanvas`."""

    def __init__(self, config: EditorConfig | None = None) -> None:
        self.config = config or EditorConfig()
        self.canvas = DrawingCanvas(self.config.charset)
        self.tool = Tool.default()
        self.operation: Operation | None = None
        self.selected: set[int] = set()
        self.scroll = Position(0, 0)
        self.should_quit = False
        # Selection held before an additive rubber band started.
        self._base_selection: set[int] = set()

    # ─── Tools ───────────────────────────────────────────────────────────────

    def update_tool(self, tool: Tool) -> None:
        """Switch tools, discarding any uncommitted operation."""
        if tool == self.tool:
            return
        if self.operation is not None:
            logger.debug("discarding %s on tool switch", type(self.operation).__name__)
            self.operation = None
        self.tool = tool

    def reset_tool(self) -> None:
        self.update_tool(Tool.Cursor)
        self.selected.clear()

    # ─── Gestures ────────────────────────────────────────────────────────────

    def handle_gesture(self, gesture: Gesture) -> AnyAction | None:
        match gesture.kind:
            case GestureKind.Down:
                return self._pointer_down(gesture.position, gesture.additive)
            case GestureKind.Drag:
                return self._pointer_drag(gesture.position)
            case GestureKind.Up:
                return self._pointer_up()
        return _SCROLL_GESTURES.get(gesture.kind)

    def _pointer_down(self, pos: Position, additive: bool) -> AnyAction | None:
        if self.tool == Tool.Cursor:
            return self._cursor_down(pos, additive)

        if self.tool == Tool.Text and isinstance(self.operation, EditText):
            return Action.CommitText

        self.selected.clear()
        self.operation = Selection(pos, pos)
        return None

    def _cursor_down(self, pos: Position, additive: bool) -> AnyAction | None:
        elements = self.canvas.elements

        if any(element_area(elements[i]).contains(pos) for i in self.selected):
            self.operation = Move(pos, pos)
            return Action.RenderBuffer

        if len(self.selected) == 1:
            (index,) = self.selected
            el = elements[index]
            if isinstance(el, Line):
                handle = line_handle_at(el.line, pos)
                if handle is not None:
                    self.operation = MoveLineHandle(handle, pos)
                    return Action.RenderBuffer
            else:
                corner = corner_at(element_area(el), pos)
                if corner is not None:
                    self.operation = Resize(corner, pos, pos, self.config.min_size)
                    return Action.RenderBuffer

        self.operation = Selection(pos, pos)
        if not additive:
            self.selected.clear()
        self._base_selection = set(self.selected)

        hit = topmost_at(elements, pos)
        if hit is not None:
            self.selected.add(hit)
        return Action.RenderBuffer

    def _pointer_drag(self, pos: Position) -> AnyAction | None:
        if self.operation is None or isinstance(self.operation, EditText):
            return None

        self.operation = with_pointer(self.operation, pos)
        if self.tool == Tool.Cursor and isinstance(self.operation, Selection):
            band = self.operation.rect()
            self.selected = self._base_selection | intersecting(self.canvas.elements, band)
        return Action.RenderBuffer

    def _pointer_up(self) -> AnyAction | None:
        match self.tool:
            case Tool.Box:
                return self._finish_box()
            case Tool.Line:
                return self._finish_line()
            case Tool.Text:
                return self._finish_text()
        return self._commit()

    def _finish_box(self) -> AnyAction | None:
        if isinstance(self.operation, Selection):
            area = self.operation.rect()
            if area.width > 1 and area.height > 1:
                self._create(Box(area))
        self.operation = None
        return Action.RenderBuffer

    def _finish_line(self) -> AnyAction | None:
        if isinstance(self.operation, Selection) and self.operation.origin != self.operation.second:
            line = StraightLine.new(self.operation.origin, self.operation.second)
            if line is not None:
                self._create(Line(line))
            else:
                self.reset_tool()
        self.operation = None
        return Action.RenderBuffer

    def _finish_text(self) -> AnyAction | None:
        if not isinstance(self.operation, Selection):
            self.operation = None
            return None

        origin = self.operation.origin
        area = self.operation.rect()

        if area.area() == 1:
            index = topmost_at(self.canvas.elements, origin, kind=Text)
            if index is not None:
                el = self.canvas.elements[index]
                self.selected = {index}
                buffer = TextEdit(el.content, row=origin.y - el.area.y, col=origin.x - el.area.x)
                self.operation = EditText(buffer)
                return Action.EditText

        if area.width > 1:
            self.selected.add(self.canvas.append(Text(area)))
            self.operation = EditText(TextEdit())
            return Action.EditText

        self.reset_tool()
        self.operation = None
        return Action.RenderBuffer

    def _create(self, el: Element) -> None:
        index = self.canvas.append(el)
        self.reset_tool()
        self.selected.add(index)
        logger.debug("created %s at #%d", element_name(el), index)

    def _commit(self) -> AnyAction | None:
        op = self.operation
        self.operation = None
        if op is None:
            return Action.RenderBuffer
        for i in sorted(self.selected):
            committed = apply_transform(op, self.canvas.elements[i])
            if committed is None:
                logger.debug("skipping degenerate %s on #%d", type(op).__name__, i)
                continue
            self.canvas.replace(i, committed)
        return Action.RenderBuffer

    # ─── Keys ────────────────────────────────────────────────────────────────

    def handle_key(self, key: str) -> AnyAction | None:
        """Feed a key to the text being edited; `escape` finishes editing."""
        if not isinstance(self.operation, EditText):
            return None
        if key == "escape":
            return Action.CommitText
        self.operation.buffer.input(key)
        return None

    # ─── Actions ─────────────────────────────────────────────────────────────

    def update(self, action: AnyAction) -> AnyAction | None:
        match action:
            case Action.RenderBuffer:
                self.canvas.render(self.selected, self.operation)
            case SwitchTool(tool=tool):
                self.update_tool(tool)
            case Action.EditText:
                return Action.RenderBuffer
            case Action.CommitText:
                return self._commit_text()
            case Action.SelectAll:
                self.update_tool(Tool.Cursor)
                self.selected = set(range(len(self.canvas)))
                return Action.RenderBuffer
            case Action.SelectNone:
                self.selected.clear()
                return Action.RenderBuffer
            case Action.Delete:
                doomed = set(self.selected)
                self.canvas.remove_where(lambda i, _el: i in doomed)
                # Indices shifted; no old index may survive the removal.
                self.selected.clear()
                self._base_selection.clear()
                self.operation = None
                return Action.RenderBuffer
            case Action.ScrollUp:
                self.scroll = self.scroll.offset(0, -self.config.scroll_step)
                return Action.RenderBuffer
            case Action.ScrollDown:
                self.scroll = self.scroll.offset(0, self.config.scroll_step)
                return Action.RenderBuffer
            case Action.ScrollLeft:
                self.scroll = self.scroll.offset(-self.config.scroll_step * 2, 0)
                return Action.RenderBuffer
            case Action.ScrollRight:
                self.scroll = self.scroll.offset(self.config.scroll_step * 2, 0)
                return Action.RenderBuffer
            case Export(path=path):
                self.export(path)
            case Action.Quit:
                self.should_quit = True
        return None

    def dispatch(self, action: AnyAction | None) -> None:
        """Run `action` and every follow-up it produces."""
        while action is not None:
            action = self.update(action)

    def _commit_text(self) -> AnyAction | None:
        if isinstance(self.operation, EditText) and self.selected:
            index = min(self.selected)
            el = self.canvas.elements[index]
            if isinstance(el, Text):
                self.canvas.replace(index, Text(el.area, self.operation.buffer.text()))
                logger.debug("committed text on #%d", index)
        self.operation = None
        return Action.RenderBuffer

    def export(self, path: str | Path) -> None:
        """Write the rendered canvas as plain text. OSError propagates to the caller."""
        data = self.canvas.export()
        Path(path).write_bytes(data)
        logger.debug("exported %d bytes to %s", len(data), path)

    # ─── Overlays ────────────────────────────────────────────────────────────

    def handles(self) -> list[tuple[Position, str, Style]]:
        """(position, glyph, style) per handle of a single selected element, tracking the live preview."""
        if len(self.selected) != 1:
            return []
        (index,) = self.selected
        if index >= len(self.canvas):
            return []
        el = preview(self.operation, self.canvas.elements[index])
        glyphs = HandleGlyphs.for_charset(self.config.charset)
        style = Style.handle()

        if isinstance(el, Line):
            return [(pos, glyphs.endpoint, style) for pos in line_handles(el.line).values() if pos is not None]

        out = []
        for corner, pos in resize_handles(element_area(el)).items():
            if pos is None:
                continue
            upper = corner in (Corner.TopLeft, Corner.TopRight)
            out.append((pos, glyphs.upper if upper else glyphs.lower, style))
        return out

    def layers(self) -> list[tuple[str, bool]]:
        """(name, selected) per element, topmost first."""
        return [(element_name(el), i in self.selected) for i, el in reversed(list(enumerate(self.canvas.elements)))]
