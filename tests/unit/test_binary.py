"""Unit tests for the binary descriptor decoder.

Tests cover:
- Decoding of every block type
- Bit field and charset mapping
- Skipping of unknown block types
- Rejection of truncated, oversized and malformed blocks
"""

import io
import struct

import pytest

from bmfontloader.domain import Channel, ChannelContent, Glyph, Kerning, Padding, Page, Point
from bmfontloader.exceptions import MalformedDataError
from bmfontloader.io.binary import BinaryFontDecoder, decode_binary


def _decode(data: bytes):
    return decode_binary(io.BytesIO(data))


class TestBinaryDecoding:
    """Tests for well-formed binary descriptors."""

    def test_info_block(self, binary_data):
        """Info fields decode, with padding in left, top, right, bottom order."""
        font = _decode(binary_data)

        assert font.family_name == "Test Font"
        assert font.font_size == 32
        assert font.bold is False
        assert font.italic is True
        assert font.unicode is True
        assert font.smoothed is True
        assert font.charset == ""
        assert font.stretched_height == 100
        assert font.super_sampling == 1
        assert font.padding == Padding(left=4, top=1, right=2, bottom=3)
        assert font.spacing == Point(1, 2)
        assert font.outline_size == 0

    def test_common_block(self, binary_data):
        """Common fields decode."""
        font = _decode(binary_data)

        assert font.line_height == 36
        assert font.base_height == 29
        assert font.texture_width == 256
        assert font.texture_height == 128
        assert font.packed is False
        assert font.alpha_channel == ChannelContent.OUTLINE
        assert font.red_channel == ChannelContent.GLYPH

    def test_pages_block(self, binary_data):
        """Page ids follow the order of names in the block."""
        font = _decode(binary_data)
        assert font.pages == [Page(0, "test_0.png"), Page(1, "test 1.png")]

    def test_chars_block(self, binary_data):
        """Char records decode with signed offsets."""
        font = _decode(binary_data)

        assert len(font.glyphs) == 3
        assert font.glyphs[65] == Glyph(
            id=65,
            x=10,
            y=0,
            width=20,
            height=24,
            x_offset=-1,
            y_offset=5,
            x_advance=19,
            page=0,
            channel=Channel.ALL,
        )
        assert font.glyphs[86].page == 1

    def test_kernings_block(self, binary_data):
        """Kerning records decode with signed amounts."""
        font = _decode(binary_data)
        assert font.kernings == {
            (65, 86): Kerning(65, 86, -2),
            (86, 65): Kerning(86, 65, -1),
        }

    def test_bold_and_packed_bits(self, blocks, binary_builder):
        """Bold and packed flags come from their bit positions."""
        data = binary_builder(
            blocks.info(bits=0b1000),
            blocks.common(pages=1, bits=0b1000_0000),
            blocks.pages(b"a.png"),
        )
        font = _decode(data)
        assert font.bold is True
        assert font.italic is False
        assert font.unicode is False
        assert font.packed is True

    def test_charset_name(self, blocks, binary_builder):
        """Non-unicode fonts name their OEM charset."""
        data = binary_builder(blocks.info(bits=0, charset=0xCC))
        assert _decode(data).charset == "RUSSIAN"

    def test_unknown_charset_number(self, blocks, binary_builder):
        """Unknown charset ids are kept as their number."""
        data = binary_builder(blocks.info(bits=0, charset=7))
        assert _decode(data).charset == "7"

    def test_unknown_block_skipped(self, blocks, binary_builder):
        """Blocks of unknown type are skipped by their declared size."""
        data = binary_builder(
            blocks.info(),
            blocks.frame(9, b"\x01\x02\x03\x04\x05\x06"),
            blocks.common(pages=1),
            blocks.pages(b"a.png"),
        )
        font = _decode(data)
        assert font.line_height == 36
        assert font.pages == [Page(0, "a.png")]

    def test_empty_unknown_block(self, blocks, binary_builder):
        """A zero-length unknown block is skipped."""
        data = binary_builder(blocks.frame(42, b""), blocks.info())
        assert _decode(data).family_name == "Test Font"

    def test_header_only(self, binary_builder):
        """A header without blocks yields an empty font."""
        font = _decode(binary_builder())
        assert font.family_name == ""
        assert font.pages == []
        assert font.glyphs == {}

    def test_stream_left_open(self, binary_data):
        """The decoder does not close the stream."""
        stream = io.BytesIO(binary_data)
        BinaryFontDecoder().decode(stream)
        assert not stream.closed

    def test_decoder_reusable(self, binary_data):
        """One decoder instance can decode several streams."""
        decoder = BinaryFontDecoder()
        first = decoder.decode(io.BytesIO(binary_data))
        second = decoder.decode(io.BytesIO(binary_data))
        assert first == second


class TestBinaryErrors:
    """Tests for malformed binary descriptors."""

    def test_block_length_past_end(self, blocks, binary_builder):
        """A block claiming more bytes than remain is rejected."""
        data = binary_builder(blocks.info()) + struct.pack("<Bi", 4, 40) + b"\x00" * 20
        with pytest.raises(MalformedDataError) as exc_info:
            _decode(data)
        assert exc_info.value.offset is not None

    def test_negative_block_length(self, binary_builder):
        """A negative block size is rejected."""
        data = binary_builder(struct.pack("<Bi", 1, -5))
        with pytest.raises(MalformedDataError, match="negative"):
            _decode(data)

    def test_truncated_block_header(self, blocks, binary_builder):
        """A partial block header at the end is rejected."""
        data = binary_builder(blocks.info()) + b"\x02\x0f"
        with pytest.raises(MalformedDataError, match="truncated"):
            _decode(data)

    def test_truncated_file_header(self):
        """A stream shorter than the file header is rejected."""
        with pytest.raises(MalformedDataError):
            _decode(b"BM")

    def test_wrong_version(self, blocks, binary_builder):
        """Only version 3 is supported."""
        with pytest.raises(MalformedDataError, match="version"):
            _decode(binary_builder(blocks.info(), version=2))

    def test_wrong_signature(self):
        """A stream that does not start with BMF is rejected."""
        with pytest.raises(MalformedDataError, match="signature"):
            _decode(b"XYZ\x03")

    def test_short_info_block(self, blocks, binary_builder):
        """An info block shorter than its fixed fields is rejected."""
        with pytest.raises(MalformedDataError, match="info"):
            _decode(binary_builder(blocks.frame(1, b"\x00" * 10)))

    def test_short_common_block(self, blocks, binary_builder):
        """A common block shorter than its layout is rejected."""
        with pytest.raises(MalformedDataError, match="common"):
            _decode(binary_builder(blocks.frame(2, b"\x00" * 14)))

    def test_partial_char_record(self, blocks, binary_builder):
        """A chars block that is not a whole number of records is rejected."""
        with pytest.raises(MalformedDataError, match="chars"):
            _decode(binary_builder(blocks.frame(4, b"\x00" * 21)))

    def test_partial_kerning_record(self, blocks, binary_builder):
        """A kerning block that is not a whole number of records is rejected."""
        with pytest.raises(MalformedDataError, match="kerning"):
            _decode(binary_builder(blocks.frame(5, b"\x00" * 11)))

    def test_page_count_mismatch(self, blocks, binary_builder):
        """The declared page count must match the page names."""
        data = binary_builder(blocks.common(pages=2), blocks.pages(b"a.png"))
        with pytest.raises(MalformedDataError, match="pages"):
            _decode(data)

    def test_glyph_on_missing_page(self, blocks, binary_builder):
        """Glyphs must refer to an existing page."""
        data = binary_builder(
            blocks.common(pages=1),
            blocks.pages(b"a.png"),
            blocks.chars([(65, 0, 0, 1, 1, 0, 0, 1, 3, 15)]),
        )
        with pytest.raises(MalformedDataError, match="missing page"):
            _decode(data)

    def test_legacy_encoded_names(self, blocks, binary_builder):
        """Names that are not UTF-8 load with replacement characters."""
        data = binary_builder(
            blocks.info(face=b"Caf\xe9"),
            blocks.common(pages=1),
            blocks.pages(b"\xe0tlas.png"),
        )
        font = _decode(data)
        assert font.family_name == "Caf\ufffd"
        assert font.pages[0].filename == "\ufffdtlas.png"
