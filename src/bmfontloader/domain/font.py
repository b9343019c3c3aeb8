"""Bitmap font aggregate.

The Font is the single in-memory representation every descriptor encoding
decodes into. It owns its pages, glyphs and kerning pairs.
"""

from dataclasses import dataclass, field
from typing import Any

from bmfontloader.domain.glyph import ChannelContent, Glyph, Kerning, Page
from bmfontloader.domain.primitives import Padding, Point


@dataclass
class Font:
    """A decoded bitmap font.

    Font-level attributes come from the ``info`` record, layout attributes
    from the ``common`` record.

    Attributes:
        family_name: Face name of the source TrueType font
        font_size: Point size (negative when matched to character height)
        bold: Font is bold
        italic: Font is italic
        charset: OEM charset name, empty for unicode fonts
        unicode: Glyph ids are Unicode code points
        stretched_height: Height stretch in percent (100 means none)
        smoothed: Smoothing was turned on
        super_sampling: Supersampling level (1 means none)
        padding: Padding applied to every glyph
        spacing: Horizontal and vertical spacing between glyphs
        outline_size: Outline thickness
        line_height: Distance in pixels between lines of text
        base_height: Pixels from the top of the line to the glyph baseline
        texture_width: Width of each texture page
        texture_height: Height of each texture page
        packed: Monochrome glyphs are packed into separate channels
        alpha_channel: Content of the alpha channel
        red_channel: Content of the red channel
        green_channel: Content of the green channel
        blue_channel: Content of the blue channel
        pages: Texture pages ordered by page id
        glyphs: Glyphs keyed by id
        kernings: Kerning pairs keyed by (first, second)
    """

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
    line_height: int = 0
    base_height: int = 0
    texture_width: int = 0
    texture_height: int = 0
    packed: bool = False
    alpha_channel: ChannelContent = ChannelContent.GLYPH
    red_channel: ChannelContent = ChannelContent.GLYPH
    green_channel: ChannelContent = ChannelContent.GLYPH
    blue_channel: ChannelContent = ChannelContent.GLYPH
    pages: list[Page] = field(default_factory=list)
    glyphs: dict[int, Glyph] = field(default_factory=dict)
    kernings: dict[tuple[int, int], Kerning] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        """Number of texture pages."""
        return len(self.pages)

    @property
    def texture_size(self) -> Point:
        """Texture page dimensions as a point."""
        return Point(self.texture_width, self.texture_height)

    def get_page(self, page_id: int) -> Page | None:
        """Get a page by id.

        Args:
            page_id: Page index

        Returns:
            Page, or None if the font has no such page
        """
        for page in self.pages:
            if page.id == page_id:
                return page
        return None

    def get_glyph(self, glyph_id: int) -> Glyph | None:
        """Get a glyph by id.

        Args:
            glyph_id: Character id

        Returns:
            Glyph, or None if the font does not define it
        """
        return self.glyphs.get(glyph_id)

    def get_kerning(self, first: int, second: int) -> int:
        """Get the kerning amount between two glyphs.

        Args:
            first: Id of the left glyph
            second: Id of the right glyph

        Returns:
            Signed adjustment, 0 if no pair is defined
        """
        kerning = self.kernings.get((first, second))
        return kerning.amount if kerning is not None else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary grouped like the descriptor records."""
        return {
            "info": {
                "face": self.family_name,
                "size": self.font_size,
                "bold": self.bold,
                "italic": self.italic,
                "charset": self.charset,
                "unicode": self.unicode,
                "stretchH": self.stretched_height,
                "smooth": self.smoothed,
                "aa": self.super_sampling,
                "padding": self.padding.to_dict(),
                "spacing": self.spacing.to_dict(),
                "outline": self.outline_size,
            },
            "common": {
                "lineHeight": self.line_height,
                "base": self.base_height,
                "scaleW": self.texture_width,
                "scaleH": self.texture_height,
                "pages": self.page_count,
                "packed": self.packed,
                "alphaChnl": int(self.alpha_channel),
                "redChnl": int(self.red_channel),
                "greenChnl": int(self.green_channel),
                "blueChnl": int(self.blue_channel),
            },
            "pages": [p.to_dict() for p in self.pages],
            "chars": [g.to_dict() for g in self.glyphs.values()],
            "kernings": [k.to_dict() for k in self.kernings.values()],
        }
