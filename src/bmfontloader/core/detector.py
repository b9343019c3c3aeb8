"""Descriptor encoding detection from magic bytes."""

import os
from enum import Enum
from typing import BinaryIO

MAGIC_LENGTH = 5

BINARY_MAGIC = b"BMF\x03"
TEXT_MAGIC = b"info "
XML_MAGIC = b"<?xml"


class FontFormat(str, Enum):
    """Encoding of a BMFont descriptor."""

    NONE = "none"
    BINARY = "binary"
    TEXT = "text"
    XML = "xml"


def classify(header: bytes) -> FontFormat:
    """Classify the leading bytes of a descriptor.

    Args:
        header: Leading bytes; fewer than five are padded with zeros

    Returns:
        The matching format, or FontFormat.NONE
    """
    header = header[:MAGIC_LENGTH].ljust(MAGIC_LENGTH, b"\x00")

    if header.startswith(BINARY_MAGIC):
        return FontFormat.BINARY
    if header == TEXT_MAGIC:
        return FontFormat.TEXT
    if header == XML_MAGIC:
        return FontFormat.XML
    return FontFormat.NONE


def detect_format(source: BinaryIO | str | os.PathLike[str]) -> FontFormat:
    """Detect the encoding of a stream or file.

    A stream is read from its current position and restored to it
    afterwards, so the caller can hand it straight to a decoder.

    Args:
        source: Seekable binary stream, or path of a file to inspect

    Returns:
        The detected format, FontFormat.NONE if unrecognized
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as stream:
            return classify(stream.read(MAGIC_LENGTH))

    position = source.tell()
    try:
        header = source.read(MAGIC_LENGTH)
    finally:
        source.seek(position)

    return classify(header or b"")
