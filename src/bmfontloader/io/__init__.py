"""Descriptor I/O layer for bmfontloader.

This module decodes BMFont descriptors in their three encodings and
loads them from files or streams.

Key responsibilities:
- Decode binary, text and XML descriptors into the Font model
- Dispatch on the detected encoding
- Qualify texture page paths against the descriptor's directory

Key functions:
- load_font_from_file: Load a descriptor file of any encoding
- load_binary_from_file / load_text_from_file / load_xml_from_file: Forced encoding
- load_font: Load from an open stream
- qualify_resource_paths: Rewrite page filenames against a directory
"""

from bmfontloader.io.binary import BinaryFontDecoder, decode_binary
from bmfontloader.io.loader import (
    decode_stream,
    load_binary_from_file,
    load_font,
    load_font_from_file,
    load_text_from_file,
    load_xml_from_file,
)
from bmfontloader.io.resources import qualify_resource_paths
from bmfontloader.io.text import TextFontDecoder, decode_text
from bmfontloader.io.xml import XmlFontDecoder, decode_xml

__all__ = [
    "BinaryFontDecoder",
    "TextFontDecoder",
    "XmlFontDecoder",
    "decode_binary",
    "decode_stream",
    "decode_text",
    "decode_xml",
    "load_binary_from_file",
    "load_font",
    "load_font_from_file",
    "load_text_from_file",
    "load_xml_from_file",
    "qualify_resource_paths",
]
