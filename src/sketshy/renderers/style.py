"""Cell styles and the editor colour scheme."""

from __future__ import annotations

from dataclasses import dataclass

# Colour scheme, as hex RGB strings understood by the terminal layer.
FG_BASE = "#e6e1cf"
FG_SELECTION = "#ffb454"
BG_SELECTION = "#273747"


@dataclass(frozen=True)
class Style:
    """Foreground/background pair; None means "leave the terminal default"."""

    fg: str | None = None
    bg: str | None = None

    @classmethod
    def base(cls) -> Style:
        return cls(fg=FG_BASE)

    @classmethod
    def selected(cls) -> Style:
        return cls(fg=FG_SELECTION, bg=BG_SELECTION)

    @classmethod
    def handle(cls) -> Style:
        return cls(fg=FG_SELECTION)
