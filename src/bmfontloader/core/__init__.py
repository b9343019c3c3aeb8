"""Encoding-independent parsing machinery for bmfontloader.

This module contains the pieces shared by the three descriptor decoders:

- Format detection from the first five bytes of a descriptor
- Quote-aware tokenizing of text records
- Named-value lookup with an expected-position fast path
- Point and padding parsing
- Font assembly with invariant checks

Key functions:
- detect_format: Classify a stream or file as binary, text or XML
- split_fields: Split a text record into fields
- get_named_string / get_named_int / get_named_bool: Field lookup
- parse_point / parse_padding: Composite value parsing

Key classes:
- FontFormat: Detected encoding
- FontBuilder: Target all decoders populate
"""

from bmfontloader.core.assembler import FontBuilder, FontCommon, FontInfo
from bmfontloader.core.detector import FontFormat, classify, detect_format
from bmfontloader.core.fields import (
    get_named_bool,
    get_named_int,
    get_named_string,
    parse_padding,
    parse_point,
    to_bool,
    to_int,
)
from bmfontloader.core.tokenizer import sanitize_value, split_fields

__all__ = [
    # Assembly
    "FontBuilder",
    "FontCommon",
    "FontInfo",
    # Detection
    "FontFormat",
    "classify",
    "detect_format",
    # Field lookup
    "get_named_bool",
    "get_named_int",
    "get_named_string",
    "parse_padding",
    "parse_point",
    "sanitize_value",
    "split_fields",
    "to_bool",
    "to_int",
]
