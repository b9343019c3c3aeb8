"""Domain models for bmfontloader.

This module contains the canonical font model every descriptor encoding
decodes into. The models are:

- Plain dataclasses, independent of any wire encoding
- Immutable where possible (glyphs, kernings and composite values)
- Mutable where the loader needs it (Page.filename is qualified after decoding)

Key classes:
- Font: The decoded font with its pages, glyphs and kerning pairs
- Page: One texture atlas image
- Glyph: One character's atlas location and metrics
- Kerning: Advance adjustment between two glyphs
- Padding, Point: Composite values from comma separated fields
"""

from bmfontloader.domain.font import Font
from bmfontloader.domain.glyph import Channel, ChannelContent, Glyph, Kerning, Page
from bmfontloader.domain.primitives import Padding, Point

__all__: list[str] = [
    # Enums
    "Channel",
    "ChannelContent",
    # Values
    "Padding",
    "Point",
    # Records
    "Page",
    "Glyph",
    "Kerning",
    "Font",
]
