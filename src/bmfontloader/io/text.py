"""Decoder for the BMFont text descriptor format.

Each line is one record: a tag word followed by ``name=value`` fields::

    info face="Arial" size=32 bold=0 italic=0 charset="" unicode=1 ...
    common lineHeight=32 base=26 scaleW=256 scaleH=256 pages=1 packed=0 ...
    page id=0 file="arial_0.png"
    chars count=95
    char id=32 x=0 y=0 width=0 height=0 xoffset=0 yoffset=26 xadvance=8 page=0 chnl=15
    kernings count=1
    kerning first=65 second=86 amount=-2

Field lookups expect BMFont's own field order (the tag is field 0) and
fall back to a scan, so reordered or extended records still decode.
Blank lines and unknown tags are ignored.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import BinaryIO

from bmfontloader.core.assembler import FontBuilder, FontCommon, FontInfo
from bmfontloader.core.fields import (
    get_named_bool,
    get_named_int,
    get_named_string,
    parse_padding,
    parse_point,
)
from bmfontloader.core.tokenizer import split_fields
from bmfontloader.domain import Font, Kerning, Padding, Point
from bmfontloader.exceptions import MalformedDataError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"


def _record_padding(parts: Sequence[str], expected_index: int) -> Padding:
    value = get_named_string(parts, "padding", expected_index)
    return parse_padding(value) if value else Padding()


def _record_spacing(parts: Sequence[str], expected_index: int) -> Point:
    value = get_named_string(parts, "spacing", expected_index)
    return parse_point(value) if value else Point()


class TextFontDecoder:
    """Decodes text descriptors into Font models.

    Example:
        with open("font.fnt", "rb") as stream:
            font = TextFontDecoder().decode(stream)
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        """Initialize the decoder.

        Args:
            encoding: Character encoding of the descriptor
        """
        self._encoding = encoding
        self._handlers: dict[str, Callable[[FontBuilder, list[str]], None]] = {
            "info": self._decode_info,
            "common": self._decode_common,
            "page": self._decode_page,
            "chars": self._decode_count,
            "char": self._decode_char,
            "kernings": self._decode_count,
            "kerning": self._decode_kerning,
        }

    def decode(self, stream: BinaryIO) -> Font:
        """Decode a text descriptor.

        Args:
            stream: Binary stream positioned at the first record

        Returns:
            The decoded Font

        Raises:
            MalformedDataError: If the stream is not valid text in the
                configured encoding or a composite value is invalid
        """
        try:
            text = stream.read().decode(self._encoding)
        except UnicodeDecodeError as e:
            raise MalformedDataError(f"not {self._encoding} text: {e.reason}", e.start) from e

        return self.decode_lines(text.splitlines())

    def decode_lines(self, lines: Iterable[str]) -> Font:
        """Decode already split descriptor lines.

        Args:
            lines: Descriptor records without line terminators

        Returns:
            The decoded Font
        """
        builder = FontBuilder()

        for line_number, line in enumerate(lines, start=1):
            parts = split_fields(line.strip())
            if not parts:
                continue

            handler = self._handlers.get(parts[0].lower())
            if handler is None:
                logger.debug("Ignoring unknown tag '%s' on line %d", parts[0], line_number)
                continue

            try:
                handler(builder, parts)
            except MalformedDataError as e:
                raise MalformedDataError(f"line {line_number}: {e.reason}") from e

        return builder.build()

    @staticmethod
    def _decode_info(builder: FontBuilder, parts: list[str]) -> None:
        builder.set_info(
            FontInfo(
                family_name=get_named_string(parts, "face", 1),
                font_size=get_named_int(parts, "size", 2),
                bold=get_named_bool(parts, "bold", 3),
                italic=get_named_bool(parts, "italic", 4),
                charset=get_named_string(parts, "charset", 5),
                unicode=get_named_bool(parts, "unicode", 6),
                stretched_height=get_named_int(parts, "stretchH", 7),
                smoothed=get_named_bool(parts, "smooth", 8),
                super_sampling=get_named_int(parts, "aa", 9),
                padding=_record_padding(parts, 10),
                spacing=_record_spacing(parts, 11),
                outline_size=get_named_int(parts, "outline", 12),
            )
        )

    @staticmethod
    def _decode_common(builder: FontBuilder, parts: list[str]) -> None:
        builder.set_common(
            FontCommon(
                line_height=get_named_int(parts, "lineHeight", 1),
                base_height=get_named_int(parts, "base", 2),
                texture_width=get_named_int(parts, "scaleW", 3),
                texture_height=get_named_int(parts, "scaleH", 4),
                page_count=get_named_int(parts, "pages", 5),
                packed=get_named_bool(parts, "packed", 6),
                alpha_channel=get_named_int(parts, "alphaChnl", 7),
                red_channel=get_named_int(parts, "redChnl", 8),
                green_channel=get_named_int(parts, "greenChnl", 9),
                blue_channel=get_named_int(parts, "blueChnl", 10),
            )
        )

    @staticmethod
    def _decode_page(builder: FontBuilder, parts: list[str]) -> None:
        builder.add_page(
            get_named_int(parts, "id", 1),
            get_named_string(parts, "file", 2),
        )

    @staticmethod
    def _decode_count(_builder: FontBuilder, parts: list[str]) -> None:
        # Only a sizing hint; the records that follow are authoritative
        logger.debug("%s count hint: %d", parts[0], get_named_int(parts, "count", 1))

    @staticmethod
    def _decode_char(builder: FontBuilder, parts: list[str]) -> None:
        builder.add_glyph(
            FontBuilder.make_glyph(
                glyph_id=get_named_int(parts, "id", 1),
                x=get_named_int(parts, "x", 2),
                y=get_named_int(parts, "y", 3),
                width=get_named_int(parts, "width", 4),
                height=get_named_int(parts, "height", 5),
                x_offset=get_named_int(parts, "xoffset", 6),
                y_offset=get_named_int(parts, "yoffset", 7),
                x_advance=get_named_int(parts, "xadvance", 8),
                page=get_named_int(parts, "page", 9),
                channel=get_named_int(parts, "chnl", 10),
            )
        )

    @staticmethod
    def _decode_kerning(builder: FontBuilder, parts: list[str]) -> None:
        builder.add_kerning(
            Kerning(
                first=get_named_int(parts, "first", 1),
                second=get_named_int(parts, "second", 2),
                amount=get_named_int(parts, "amount", 3),
            )
        )


def decode_text(stream: BinaryIO, encoding: str = DEFAULT_ENCODING) -> Font:
    """Decode a text descriptor from a stream."""
    return TextFontDecoder(encoding).decode(stream)
