"""Glyph, kerning and page records.

These are the per-record entities of a bitmap font: one Glyph for each
``char`` record, one Kerning for each ``kerning`` record and one Page for
each texture atlas image.
"""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any


class Channel(IntFlag):
    """Texture channels a glyph's pixels occupy."""

    BLUE = 1
    GREEN = 2
    RED = 4
    ALPHA = 8
    ALL = 15


class ChannelContent(IntEnum):
    """What a texture channel holds in a packed font."""

    GLYPH = 0
    OUTLINE = 1
    GLYPH_AND_OUTLINE = 2
    ZERO = 3
    ONE = 4


@dataclass
class Page:
    """One texture atlas image.

    Attributes:
        id: Page index, unique within the font
        filename: Texture file name, relative as read from the descriptor
            until the loader qualifies it against the descriptor's directory
    """

    id: int
    filename: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"id": self.id, "file": self.filename}


@dataclass(frozen=True)
class Glyph:
    """One renderable character.

    Attributes:
        id: Character id (a Unicode code point for unicode fonts)
        x: Left edge of the glyph image in its page
        y: Top edge of the glyph image in its page
        width: Width of the glyph image
        height: Height of the glyph image
        x_offset: Horizontal offset applied when drawing the image
        y_offset: Vertical offset applied when drawing the image
        x_advance: How far the pen moves after drawing the glyph
        page: Index of the page holding the glyph image
        channel: Channels of the page holding the glyph image
    """

    id: int
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    x_offset: int = 0
    y_offset: int = 0
    x_advance: int = 0
    page: int = 0
    channel: Channel = Channel.ALL

    @property
    def char(self) -> str | None:
        """Character for this glyph's id, or None if the id is not a code point."""
        if 0 <= self.id <= 0x10FFFF:
            return chr(self.id)
        return None

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Source rectangle as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary using descriptor field names."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "xoffset": self.x_offset,
            "yoffset": self.y_offset,
            "xadvance": self.x_advance,
            "page": self.page,
            "chnl": int(self.channel),
        }


@dataclass(frozen=True)
class Kerning:
    """Advance adjustment between two adjacent glyphs.

    Attributes:
        first: Id of the left glyph
        second: Id of the right glyph
        amount: Signed adjustment added to the advance of ``first``
    """

    first: int
    second: int
    amount: int

    @property
    def key(self) -> tuple[int, int]:
        """Ordered pair this kerning is stored under."""
        return (self.first, self.second)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"first": self.first, "second": self.second, "amount": self.amount}
