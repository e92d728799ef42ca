"""Actions and gesture events exchanged between the input layer and the editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from sketshy.geometry import Position
from sketshy.types import GestureKind, Tool


class Action(Enum):
    RenderBuffer = auto()
    EditText = auto()
    CommitText = auto()
    SelectAll = auto()
    SelectNone = auto()
    Delete = auto()
    ScrollUp = auto()
    ScrollDown = auto()
    ScrollLeft = auto()
    ScrollRight = auto()
    Quit = auto()


@dataclass(frozen=True)
class SwitchTool:
    tool: Tool


@dataclass(frozen=True)
class Export:
    path: str


AnyAction = Action | SwitchTool | Export


@dataclass(frozen=True)
class Gesture:
    """A pointer event at an absolute canvas cell (scroll already applied by the caller)."""

    kind: GestureKind
    position: Position = Position(0, 0)
    additive: bool = False
