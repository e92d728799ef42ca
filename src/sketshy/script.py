"""Gesture scripts — replay recorded input into an editor without a terminal.

One event per line::

    # comments and blank lines are ignored
    :tool box          palette command
    down 2 2           button-down at column 2, row 2
    drag 6 5
    up 6 5
    down 3 3 +         trailing "+" holds the additive-selection modifier
    scroll down
    key enter          named key for the text being edited
    type hello world   every character of the rest of the line as a key
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sketshy.actions import Action, AnyAction, Gesture
from sketshy.commands import parse_command
from sketshy.config import EditorConfig
from sketshy.editor import Editor
from sketshy.geometry import Position
from sketshy.types import GestureKind

logger = logging.getLogger(__name__)

_POINTER_KINDS: dict[str, GestureKind] = {
    "down": GestureKind.Down,
    "drag": GestureKind.Drag,
    "up": GestureKind.Up,
}

_SCROLL_KINDS: dict[str, GestureKind] = {
    "up": GestureKind.ScrollUp,
    "down": GestureKind.ScrollDown,
    "left": GestureKind.ScrollLeft,
    "right": GestureKind.ScrollRight,
}


@dataclass(frozen=True)
class KeyPress:
    key: str


Step = Gesture | KeyPress | AnyAction


def _parse_line(lineno: int, line: str) -> list[Step]:
    if line.startswith(":"):
        action = parse_command(line[1:])
        if action is None:
            raise ValueError(f"line {lineno}: unknown command {line[1:].strip()!r}")
        return [action]

    word, _, rest = line.partition(" ")
    args = rest.split()

    if word in _POINTER_KINDS:
        if len(args) not in (2, 3) or (len(args) == 3 and args[2] != "+"):
            raise ValueError(f"line {lineno}: expected '{word} X Y [+]'")
        try:
            x, y = int(args[0]), int(args[1])
            pos = Position(x, y)
        except ValueError:
            raise ValueError(f"line {lineno}: coordinates must be non-negative integers") from None
        return [Gesture(_POINTER_KINDS[word], pos, additive=len(args) == 3)]

    if word == "scroll":
        if len(args) != 1 or args[0] not in _SCROLL_KINDS:
            raise ValueError(f"line {lineno}: expected 'scroll up|down|left|right'")
        return [Gesture(_SCROLL_KINDS[args[0]])]

    if word == "key":
        if len(args) != 1:
            raise ValueError(f"line {lineno}: expected 'key NAME'")
        return [KeyPress(args[0])]

    if word == "type":
        return [KeyPress(ch) for ch in rest]

    raise ValueError(f"line {lineno}: unknown event {word!r}")


def parse_script(src: str) -> list[Step]:
    """Parse a gesture script. Raises ValueError naming the first bad line."""
    steps: list[Step] = []
    for lineno, raw in enumerate(src.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        steps.extend(_parse_line(lineno, line))
    return steps


def run_script(src: str, config: EditorConfig | None = None, editor: Editor | None = None) -> Editor:
    """Replay a script into `editor` (a fresh one by default) and render the result."""
    editor = editor or Editor(config)
    for step in parse_script(src):
        match step:
            case Gesture():
                editor.dispatch(editor.handle_gesture(step))
            case KeyPress(key=key):
                editor.dispatch(editor.handle_key(key))
            case _:
                editor.dispatch(step)
        if editor.should_quit:
            logger.debug("script quit early")
            break
    editor.dispatch(Action.RenderBuffer)
    return editor
