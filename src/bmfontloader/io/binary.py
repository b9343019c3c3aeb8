"""Decoder for the BMFont binary descriptor format.

The file starts with ``BMF`` and a version byte, followed by blocks of
the form::

    uint8  type
    int32  size     (little-endian)
    bytes  content  (size bytes)

Block types 1-5 carry info, common, pages, chars and kerning pairs.
Blocks of any other type are skipped so files from newer tool versions
still load.

See http://www.angelcode.com/products/bmfont/doc/file_format.html
"""

import logging
import struct
from typing import BinaryIO

from bmfontloader.core.assembler import FontBuilder, FontCommon, FontInfo
from bmfontloader.domain import Font, Kerning, Padding, Point
from bmfontloader.exceptions import MalformedDataError

logger = logging.getLogger(__name__)

SIGNATURE = b"BMF"
SUPPORTED_VERSION = 3

BLOCK_INFO = 1
BLOCK_COMMON = 2
BLOCK_PAGES = 3
BLOCK_CHARS = 4
BLOCK_KERNINGS = 5

_FILE_HEADER = struct.Struct("<3sB")
_BLOCK_HEADER = struct.Struct("<Bi")

# fontSize, bitField, charSet, stretchH, aa, padding (up, right, down, left),
# spacing (horizontal, vertical), outline; followed by the null-terminated face
_INFO = struct.Struct("<hBBHB4B2BB")
# lineHeight, base, scaleW, scaleH, pages, bitField, alpha, red, green, blue
_COMMON = struct.Struct("<5H5B")
# id, x, y, width, height, xoffset, yoffset, xadvance, page, chnl
_CHAR = struct.Struct("<I4H3h2B")
# first, second, amount
_KERNING = struct.Struct("<IIh")

# info bitField
_INFO_SMOOTH = 1 << 0
_INFO_UNICODE = 1 << 1
_INFO_ITALIC = 1 << 2
_INFO_BOLD = 1 << 3

# common bitField
_COMMON_PACKED = 1 << 7

# Windows OEM charset ids as written by BMFont, named as in text descriptors
CHARSET_NAMES = {
    0x00: "ANSI",
    0x01: "DEFAULT",
    0x02: "SYMBOL",
    0x4D: "MAC",
    0x80: "SHIFTJIS",
    0x81: "HANGUL",
    0x82: "JOHAB",
    0x86: "GB2312",
    0x88: "CHINESEBIG5",
    0xA1: "GREEK",
    0xA2: "TURKISH",
    0xA3: "VIETNAMESE",
    0xB1: "HEBREW",
    0xB2: "ARABIC",
    0xBA: "BALTIC",
    0xCC: "RUSSIAN",
    0xDE: "THAI",
    0xEE: "EASTEUROPE",
    0xFF: "OEM",
}


def _decode_name(raw: bytes) -> str:
    # Legacy code page names keep their ASCII part
    return raw.decode("utf-8", errors="replace")


class BinaryFontDecoder:
    """Decodes binary descriptors into Font models.

    The decoder reads the stream block by block and never closes it.

    Example:
        with open("font.fnt", "rb") as stream:
            font = BinaryFontDecoder().decode(stream)
    """

    def __init__(self) -> None:
        self._builder = FontBuilder()
        self._offset = 0

    def decode(self, stream: BinaryIO) -> Font:
        """Decode a binary descriptor.

        Args:
            stream: Binary stream positioned at the ``BMF`` signature

        Returns:
            The decoded Font

        Raises:
            MalformedDataError: If the header is wrong, a block is truncated,
                or a block's content does not fit its layout
        """
        self._builder = FontBuilder()
        self._offset = 0

        header = self._read(stream, _FILE_HEADER.size, "file header")
        signature, version = _FILE_HEADER.unpack(header)
        if signature != SIGNATURE:
            raise MalformedDataError(f"bad signature {signature!r}", 0)
        if version != SUPPORTED_VERSION:
            raise MalformedDataError(f"unsupported binary version {version}", 3)

        while True:
            header = stream.read(_BLOCK_HEADER.size)
            if not header:
                break
            if len(header) < _BLOCK_HEADER.size:
                raise MalformedDataError("truncated block header", self._offset)

            block_offset = self._offset
            self._offset += _BLOCK_HEADER.size
            block_type, size = _BLOCK_HEADER.unpack(header)
            if size < 0:
                raise MalformedDataError(f"negative block size {size}", block_offset)

            content = self._read(stream, size, f"block {block_type}")
            self._decode_block(block_type, content, block_offset + _BLOCK_HEADER.size)

        return self._builder.build()

    def _read(self, stream: BinaryIO, size: int, what: str) -> bytes:
        data = stream.read(size)
        if len(data) < size:
            raise MalformedDataError(
                f"{what} needs {size} bytes but only {len(data)} remain", self._offset
            )
        self._offset += size
        return data

    def _decode_block(self, block_type: int, content: bytes, offset: int) -> None:
        if block_type == BLOCK_INFO:
            self._decode_info(content, offset)
        elif block_type == BLOCK_COMMON:
            self._decode_common(content, offset)
        elif block_type == BLOCK_PAGES:
            self._decode_pages(content, offset)
        elif block_type == BLOCK_CHARS:
            self._decode_chars(content, offset)
        elif block_type == BLOCK_KERNINGS:
            self._decode_kernings(content, offset)
        else:
            logger.debug("Skipping unknown block type %d (%d bytes)", block_type, len(content))

    def _decode_info(self, content: bytes, offset: int) -> None:
        if len(content) < _INFO.size:
            raise MalformedDataError(
                f"info block is {len(content)} bytes, expected at least {_INFO.size}", offset
            )

        (
            font_size,
            bits,
            charset,
            stretch,
            aa,
            pad_up,
            pad_right,
            pad_down,
            pad_left,
            spacing_h,
            spacing_v,
            outline,
        ) = _INFO.unpack_from(content)
        face = content[_INFO.size:].split(b"\x00", 1)[0]
        unicode = bool(bits & _INFO_UNICODE)

        self._builder.set_info(
            FontInfo(
                family_name=_decode_name(face),
                font_size=font_size,
                bold=bool(bits & _INFO_BOLD),
                italic=bool(bits & _INFO_ITALIC),
                charset="" if unicode else CHARSET_NAMES.get(charset, str(charset)),
                unicode=unicode,
                stretched_height=stretch,
                smoothed=bool(bits & _INFO_SMOOTH),
                super_sampling=aa,
                padding=Padding(left=pad_left, top=pad_up, right=pad_right, bottom=pad_down),
                spacing=Point(spacing_h, spacing_v),
                outline_size=outline,
            )
        )

    def _decode_common(self, content: bytes, offset: int) -> None:
        if len(content) < _COMMON.size:
            raise MalformedDataError(
                f"common block is {len(content)} bytes, expected {_COMMON.size}", offset
            )

        (
            line_height,
            base,
            scale_w,
            scale_h,
            pages,
            bits,
            alpha,
            red,
            green,
            blue,
        ) = _COMMON.unpack_from(content)

        self._builder.set_common(
            FontCommon(
                line_height=line_height,
                base_height=base,
                texture_width=scale_w,
                texture_height=scale_h,
                page_count=pages,
                packed=bool(bits & _COMMON_PACKED),
                alpha_channel=alpha,
                red_channel=red,
                green_channel=green,
                blue_channel=blue,
            )
        )

    def _decode_pages(self, content: bytes, offset: int) -> None:
        names = content.split(b"\x00")
        if names and names[-1] == b"":
            names.pop()

        for page_id, name in enumerate(names):
            self._builder.add_page(page_id, _decode_name(name))

    def _decode_chars(self, content: bytes, offset: int) -> None:
        if len(content) % _CHAR.size:
            raise MalformedDataError(
                f"chars block size {len(content)} is not a multiple of {_CHAR.size}", offset
            )

        for values in _CHAR.iter_unpack(content):
            self._builder.add_glyph(FontBuilder.make_glyph(*values))

    def _decode_kernings(self, content: bytes, offset: int) -> None:
        if len(content) % _KERNING.size:
            raise MalformedDataError(
                f"kerning block size {len(content)} is not a multiple of {_KERNING.size}",
                offset,
            )

        for first, second, amount in _KERNING.iter_unpack(content):
            self._builder.add_kerning(Kerning(first=first, second=second, amount=amount))


def decode_binary(stream: BinaryIO) -> Font:
    """Decode a binary descriptor from a stream."""
    return BinaryFontDecoder().decode(stream)
