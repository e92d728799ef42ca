"""Centralized configuration for sketshy."""

from __future__ import annotations

from dataclasses import dataclass

from sketshy.renderers.charset import CharSet


@dataclass
class EditorConfig:
    """Configuration for an editing session."""

    unicode: bool = True
    scroll_step: int = 4
    min_size: int = 2

    @property
    def charset(self) -> CharSet:
        return CharSet.Unicode if self.unicode else CharSet.Ascii
