"""bmfontloader - Load AngelCode BMFont bitmap font descriptors.

bmfontloader reads the font descriptors written by AngelCode's Bitmap Font
Generator in any of their three encodings (binary, text and XML), detects
the encoding from the first bytes of the file and decodes it into a single
Font model with pages, glyphs and kerning pairs.

Example:
    >>> from bmfontloader import load_font_from_file
    >>> font = load_font_from_file("fonts/arial.fnt")
    >>> font.get_kerning(ord("A"), ord("V"))
    -2
"""

from bmfontloader.core.detector import FontFormat, detect_format
from bmfontloader.io.loader import (
    load_binary_from_file,
    load_font,
    load_font_from_file,
    load_text_from_file,
    load_xml_from_file,
)

__version__ = "0.1.0"

__all__ = [
    "FontFormat",
    "__version__",
    "detect_format",
    "load_binary_from_file",
    "load_font",
    "load_font_from_file",
    "load_text_from_file",
    "load_xml_from_file",
]
