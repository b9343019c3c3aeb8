"""Font assembly shared by all decoders.

Every decoder feeds records into a FontBuilder in whatever order its
encoding presents them; ``build`` then checks the cross-record invariants
and returns the finished Font. No Font is produced when a check fails.
"""

import logging
from dataclasses import dataclass, field

from bmfontloader.domain import (
    Channel,
    ChannelContent,
    Font,
    Glyph,
    Kerning,
    Padding,
    Page,
    Point,
)
from bmfontloader.exceptions import MalformedDataError

logger = logging.getLogger(__name__)


@dataclass
class FontInfo:
    """Values of an ``info`` record."""

    family_name: str = ""
    font_size: int = 0
    bold: bool = False
    italic: bool = False
    charset: str = ""
    unicode: bool = False
    stretched_height: int = 0
    smoothed: bool = False
    super_sampling: int = 0
    padding: Padding = field(default_factory=Padding)
    spacing: Point = field(default_factory=Point)
    outline_size: int = 0


@dataclass
class FontCommon:
    """Values of a ``common`` record."""

    line_height: int = 0
    base_height: int = 0
    texture_width: int = 0
    texture_height: int = 0
    page_count: int = 0
    packed: bool = False
    alpha_channel: int = 0
    red_channel: int = 0
    green_channel: int = 0
    blue_channel: int = 0


def channel_content(value: int, name: str) -> ChannelContent:
    """Convert a channel content code, rejecting unknown codes."""
    try:
        return ChannelContent(value)
    except ValueError:
        raise MalformedDataError(f"invalid {name} value {value}") from None


class FontBuilder:
    """Collects decoded records and assembles a validated Font.

    Example:
        builder = FontBuilder()
        builder.set_info(FontInfo(family_name="Arial", font_size=32))
        builder.set_common(FontCommon(line_height=32, page_count=1))
        builder.add_page(0, "arial_0.png")
        builder.add_glyph(Glyph(id=65, width=20, height=24, x_advance=21))
        font = builder.build()
    """

    def __init__(self) -> None:
        self._info = FontInfo()
        self._common: FontCommon | None = None
        self._pages: dict[int, Page] = {}
        self._glyphs: dict[int, Glyph] = {}
        self._kernings: dict[tuple[int, int], Kerning] = {}

    def set_info(self, info: FontInfo) -> None:
        """Record the font-level metadata."""
        self._info = info

    def set_common(self, common: FontCommon) -> None:
        """Record the layout metadata."""
        self._common = common

    def add_page(self, page_id: int, filename: str) -> None:
        """Add a texture page.

        Raises:
            MalformedDataError: If the page id is already taken
        """
        if page_id in self._pages:
            raise MalformedDataError(f"duplicate page id {page_id}")
        self._pages[page_id] = Page(id=page_id, filename=filename)

    def add_glyph(self, glyph: Glyph) -> None:
        """Add a glyph; a later glyph with the same id replaces an earlier one."""
        if glyph.id in self._glyphs:
            logger.debug("Duplicate glyph %d replaced", glyph.id)
        self._glyphs[glyph.id] = glyph

    def add_kerning(self, kerning: Kerning) -> None:
        """Add a kerning pair; the first pair for a given key is kept."""
        if kerning.key in self._kernings:
            logger.debug("Duplicate kerning pair %s ignored", kerning.key)
            return
        self._kernings[kerning.key] = kerning

    @staticmethod
    def make_glyph(
        glyph_id: int,
        x: int,
        y: int,
        width: int,
        height: int,
        x_offset: int,
        y_offset: int,
        x_advance: int,
        page: int,
        channel: int,
    ) -> Glyph:
        """Create a glyph from raw record values."""
        return Glyph(
            id=glyph_id,
            x=x,
            y=y,
            width=width,
            height=height,
            x_offset=x_offset,
            y_offset=y_offset,
            x_advance=x_advance,
            page=page,
            channel=Channel(channel),
        )

    def build(self) -> Font:
        """Validate the collected records and create the Font.

        Returns:
            The assembled Font

        Raises:
            MalformedDataError: If the declared page count differs from the
                number of pages, or a glyph refers to a missing page
        """
        common = self._common
        if common is None:
            # No layout record at all: take the page count from the pages
            common = FontCommon(page_count=len(self._pages))

        if common.page_count != len(self._pages):
            raise MalformedDataError(
                f"font declares {common.page_count} pages but defines {len(self._pages)}"
            )

        for glyph in self._glyphs.values():
            if glyph.page not in self._pages:
                raise MalformedDataError(
                    f"glyph {glyph.id} refers to missing page {glyph.page}"
                )

        info = self._info
        return Font(
            family_name=info.family_name,
            font_size=info.font_size,
            bold=info.bold,
            italic=info.italic,
            charset=info.charset,
            unicode=info.unicode,
            stretched_height=info.stretched_height,
            smoothed=info.smoothed,
            super_sampling=info.super_sampling,
            padding=info.padding,
            spacing=info.spacing,
            outline_size=info.outline_size,
            line_height=common.line_height,
            base_height=common.base_height,
            texture_width=common.texture_width,
            texture_height=common.texture_height,
            packed=common.packed,
            alpha_channel=channel_content(common.alpha_channel, "alphaChnl"),
            red_channel=channel_content(common.red_channel, "redChnl"),
            green_channel=channel_content(common.green_channel, "greenChnl"),
            blue_channel=channel_content(common.blue_channel, "blueChnl"),
            pages=[self._pages[page_id] for page_id in sorted(self._pages)],
            glyphs=dict(self._glyphs),
            kernings=dict(self._kernings),
        )
