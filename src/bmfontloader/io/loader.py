"""File and stream level loading of bitmap fonts.

The loader validates the path, opens the file, dispatches to the decoder
for the detected (or requested) encoding and finally qualifies the page
filenames against the file's directory. Files opened here are always
closed before returning or raising; streams passed in by the caller are
left open.
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO

from bmfontloader.config import LoaderConfig
from bmfontloader.core.detector import FontFormat, detect_format
from bmfontloader.domain import Font
from bmfontloader.exceptions import (
    FontNotFoundError,
    InvalidArgumentError,
    UnrecognizedFormatError,
)
from bmfontloader.io.binary import decode_binary
from bmfontloader.io.resources import qualify_resource_paths
from bmfontloader.io.text import decode_text
from bmfontloader.io.xml import decode_xml

logger = logging.getLogger(__name__)

PathArg = str | os.PathLike[str] | None


def _check_path(path: PathArg) -> Path:
    """Validate a font path argument.

    Raises:
        InvalidArgumentError: If the path is None or empty
        FontNotFoundError: If the path does not name an existing file
    """
    if path is None or os.fspath(path) == "":
        raise InvalidArgumentError("path", "file name not specified")

    font_path = Path(path)
    if not font_path.is_file():
        raise FontNotFoundError(os.fspath(path))
    return font_path


def decode_stream(
    stream: BinaryIO,
    font_format: FontFormat,
    config: LoaderConfig | None = None,
) -> Font:
    """Decode a stream with the decoder for a given format.

    Args:
        stream: Binary stream positioned at the start of the descriptor
        font_format: Encoding to decode
        config: Loader settings (defaults if None)

    Returns:
        The decoded Font

    Raises:
        UnrecognizedFormatError: If font_format is FontFormat.NONE
        MalformedDataError: If the content is invalid for the format
    """
    config = config or LoaderConfig()

    if font_format == FontFormat.BINARY:
        return decode_binary(stream)
    if font_format == FontFormat.TEXT:
        return decode_text(stream, config.text_encoding)
    if font_format == FontFormat.XML:
        return decode_xml(stream)
    raise UnrecognizedFormatError(str(getattr(stream, "name", "<stream>")))


def load_font(stream: BinaryIO, config: LoaderConfig | None = None) -> Font:
    """Load a font from an open stream, detecting its encoding.

    Page filenames are left as found in the descriptor since a stream has
    no directory to qualify them against. The stream is not closed.

    Args:
        stream: Seekable binary stream positioned at the descriptor
        config: Loader settings (defaults if None)

    Returns:
        The decoded Font

    Raises:
        InvalidArgumentError: If stream is None
        UnrecognizedFormatError: If the encoding cannot be detected
        MalformedDataError: If the content is invalid for its encoding
    """
    if stream is None:
        raise InvalidArgumentError("stream", "stream not specified")

    font_format = detect_format(stream)
    logger.debug("Detected %s descriptor", font_format.value)
    return decode_stream(stream, font_format, config)


def _load_file(path: Path, font_format: FontFormat, config: LoaderConfig | None) -> Font:
    config = config or LoaderConfig()

    with path.open("rb") as stream:
        font = decode_stream(stream, font_format, config)

    if config.qualify_paths:
        qualify_resource_paths(font, os.path.dirname(path))

    logger.debug(
        "Loaded %s font '%s' from %s: %d pages, %d glyphs, %d kernings",
        font_format.value,
        font.family_name,
        path,
        font.page_count,
        len(font.glyphs),
        len(font.kernings),
    )
    return font


def load_font_from_file(path: PathArg, config: LoaderConfig | None = None) -> Font:
    """Load a font file, detecting its encoding from its first bytes.

    Args:
        path: Descriptor file path
        config: Loader settings (defaults if None)

    Returns:
        The decoded Font with page filenames qualified against the
        file's directory

    Raises:
        InvalidArgumentError: If path is None or empty
        FontNotFoundError: If the file does not exist
        UnrecognizedFormatError: If the encoding cannot be detected
        MalformedDataError: If the content is invalid for its encoding
    """
    font_path = _check_path(path)

    font_format = detect_format(font_path)
    if font_format == FontFormat.NONE:
        raise UnrecognizedFormatError(os.fspath(font_path))

    return _load_file(font_path, font_format, config)


def load_binary_from_file(path: PathArg, config: LoaderConfig | None = None) -> Font:
    """Load a binary descriptor file without detection.

    Raises:
        InvalidArgumentError: If path is None or empty
        FontNotFoundError: If the file does not exist
        MalformedDataError: If the file is not a valid binary descriptor
    """
    return _load_file(_check_path(path), FontFormat.BINARY, config)


def load_text_from_file(path: PathArg, config: LoaderConfig | None = None) -> Font:
    """Load a text descriptor file without detection.

    Raises:
        InvalidArgumentError: If path is None or empty
        FontNotFoundError: If the file does not exist
        MalformedDataError: If the file is not valid text
    """
    return _load_file(_check_path(path), FontFormat.TEXT, config)


def load_xml_from_file(path: PathArg, config: LoaderConfig | None = None) -> Font:
    """Load an XML descriptor file without detection.

    Raises:
        InvalidArgumentError: If path is None or empty
        FontNotFoundError: If the file does not exist
        MalformedDataError: If the file is not well-formed XML
    """
    return _load_file(_check_path(path), FontFormat.XML, config)
