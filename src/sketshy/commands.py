"""Command palette grammar — command table, parsing and completion.

The palette widget itself lives in the UI layer; this module only decides
what a line of palette input means and what it could be completed to.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from sketshy.actions import Action, AnyAction, Export, SwitchTool
from sketshy.types import Tool

Completer = Callable[[str], list[str]]


def complete_path(prefix: str, base: Path | None = None) -> list[str]:
    """Complete `prefix` against the file system, relative to `base` (default: cwd).

    Directories get a trailing slash. An existing directory lists its
    entries; otherwise the parent is filtered by case-insensitive name prefix.
    """
    base = base or Path.cwd()
    # Leading slashes are dropped: input always resolves inside `base`.
    prefix = prefix.lstrip("/")
    target = base / prefix

    if prefix and target.is_file():
        return [prefix]

    head, _, stem = prefix.rpartition("/")
    if head:
        head += "/"
    parent = base / head
    if not parent.is_dir():
        return []
    entries = [p for p in parent.iterdir() if p.name.lower().startswith(stem.lower())]
    return sorted(head + p.name + ("/" if p.is_dir() else "") for p in entries)


def complete_tool(prefix: str) -> list[str]:
    return [t.value for t in Tool if t.value.startswith(prefix)]


def _switch_tool(args: Sequence[str]) -> AnyAction | None:
    try:
        return SwitchTool(Tool(args[0]))
    except ValueError:
        return None


@dataclass(frozen=True)
class Command:
    name: str
    aliases: tuple[str, ...]
    description: str
    args: tuple[Completer, ...]
    action: Callable[[Sequence[str]], AnyAction | None]

    def matches(self, ident: str) -> bool:
        return ident == self.name or ident in self.aliases

    def summary(self) -> str:
        if not self.aliases:
            return self.description
        return f"{self.description}. Aliases: {', '.join(self.aliases)}"


COMMANDS: tuple[Command, ...] = (
    Command("quit", ("q",), "Quit sketshy", (), lambda _args: Action.Quit),
    Command("export", ("e",), "Export to a plaintext file", (complete_path,), lambda args: Export(args[0])),
    Command("delete", ("d",), "Delete the selected elements", (), lambda _args: Action.Delete),
    Command("select-all", ("a",), "Select every element", (), lambda _args: Action.SelectAll),
    Command("select-none", ("n",), "Clear the selection", (), lambda _args: Action.SelectNone),
    Command("tool", ("t",), "Switch the drawing tool", (complete_tool,), _switch_tool),
)


@dataclass(frozen=True)
class Completion:
    val: str
    description: str | None
    full: str


def find_command(ident: str) -> Command | None:
    for command in COMMANDS:
        if command.matches(ident):
            return command
    return None


def parse_command(text: str) -> AnyAction | None:
    """Parse a palette line; None for unknown commands or the wrong argument count."""
    words = text.split()
    if not words:
        return None
    command = find_command(words[0])
    if command is None or len(words) - 1 != len(command.args):
        return None
    return command.action(words[1:])


def get_completions(text: str) -> list[Completion]:
    parts = text.split(" ")
    ident = parts[0]

    if len(parts) == 1:
        return [
            Completion(val=c.name, description=c.summary(), full=c.name)
            for c in COMMANDS
            if not ident or any(name.startswith(ident) for name in (c.name, *c.aliases))
        ]

    command = find_command(ident)
    if command is None:
        return []
    index = len(parts) - 2
    if index >= len(command.args):
        return []
    head = " ".join(text.split()[: index + 1])
    return [Completion(val=c, description=None, full=f"{head} {c}") for c in command.args[index](parts[-1])]
