"""Character sets for boxes, routed lines and selection handles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sketshy.types import LineDirection


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


@dataclass
class BoxChars:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str

    @classmethod
    def unicode(cls) -> BoxChars:
        return cls(
            top_left="┌",
            top_right="┐",
            bottom_left="└",
            bottom_right="┘",
            horizontal="─",
            vertical="│",
        )

    @classmethod
    def ascii(cls) -> BoxChars:
        return cls(
            top_left="+",
            top_right="+",
            bottom_left="+",
            bottom_right="+",
            horizontal="-",
            vertical="|",
        )

    @classmethod
    def for_charset(cls, cs: CharSet) -> BoxChars:
        if cs == CharSet.Unicode:
            return cls.unicode()
        return cls.ascii()


@dataclass
class LineGlyphs:
    """One glyph per stepping class of a routed line."""

    horizontal: str
    vertical: str
    falling: str  # ＼ : DownRight / UpLeft
    rising: str  # ／ : UpRight / DownLeft

    @classmethod
    def unicode(cls) -> LineGlyphs:
        return cls(horizontal="─", vertical="│", falling="＼", rising="／")

    @classmethod
    def ascii(cls) -> LineGlyphs:
        return cls(horizontal="-", vertical="|", falling="\\", rising="/")

    @classmethod
    def for_charset(cls, cs: CharSet) -> LineGlyphs:
        if cs == CharSet.Unicode:
            return cls.unicode()
        return cls.ascii()

    def for_direction(self, direction: LineDirection) -> str:
        match direction:
            case LineDirection.Left | LineDirection.Right:
                return self.horizontal
            case LineDirection.Up | LineDirection.Down:
                return self.vertical
            case LineDirection.DownRight | LineDirection.UpLeft:
                return self.falling
            case _:
                return self.rising


@dataclass
class HandleGlyphs:
    upper: str  # handle above the element's top edge
    lower: str  # handle below the element's bottom edge
    endpoint: str

    @classmethod
    def unicode(cls) -> HandleGlyphs:
        return cls(upper="▄", lower="▀", endpoint="■")

    @classmethod
    def ascii(cls) -> HandleGlyphs:
        return cls(upper="o", lower="o", endpoint="#")

    @classmethod
    def for_charset(cls, cs: CharSet) -> HandleGlyphs:
        if cs == CharSet.Unicode:
            return cls.unicode()
        return cls.ascii()
