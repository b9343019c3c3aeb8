"""Shared sample descriptors.

All three encodings describe the same two-page font with three glyphs
and two kerning pairs.
"""

import struct
from collections.abc import Callable

import pytest

SAMPLE_TEXT = """\
info face="Test Font" size=32 bold=0 italic=1 charset="" unicode=1 stretchH=100 smooth=1 aa=1 padding=1,2,3,4 spacing=1,2 outline=0
common lineHeight=36 base=29 scaleW=256 scaleH=128 pages=2 packed=0 alphaChnl=1 redChnl=0 greenChnl=0 blueChnl=0
page id=0 file="test_0.png"
page id=1 file="test 1.png"
chars count=3
char id=32   x=0     y=0     width=0     height=0     xoffset=0     yoffset=29    xadvance=8     page=0  chnl=15
char id=65   x=10    y=0     width=20    height=24    xoffset=-1    yoffset=5     xadvance=19    page=0  chnl=15
char id=86   x=40    y=0     width=21    height=24    xoffset=0     yoffset=5     xadvance=20    page=1  chnl=15
kernings count=2
kerning first=65  second=86  amount=-2
kerning first=86  second=65  amount=-1
"""

SAMPLE_XML = """\
<?xml version="1.0"?>
<font>
  <info face="Test Font" size="32" bold="0" italic="1" charset="" unicode="1" stretchH="100" smooth="1" aa="1" padding="1,2,3,4" spacing="1,2" outline="0"/>
  <common lineHeight="36" base="29" scaleW="256" scaleH="128" pages="2" packed="0" alphaChnl="1" redChnl="0" greenChnl="0" blueChnl="0"/>
  <pages>
    <page id="0" file="test_0.png" />
    <page id="1" file="test 1.png" />
  </pages>
  <chars count="3">
    <char id="32" x="0" y="0" width="0" height="0" xoffset="0" yoffset="29" xadvance="8" page="0" chnl="15" />
    <char id="65" x="10" y="0" width="20" height="24" xoffset="-1" yoffset="5" xadvance="19" page="0" chnl="15" />
    <char id="86" x="40" y="0" width="21" height="24" xoffset="0" yoffset="5" xadvance="20" page="1" chnl="15" />
  </chars>
  <kernings count="2">
    <kerning first="65" second="86" amount="-2" />
    <kerning first="86" second="65" amount="-1" />
  </kernings>
</font>
"""

SAMPLE_CHARS = [
    (32, 0, 0, 0, 0, 0, 29, 8, 0, 15),
    (65, 10, 0, 20, 24, -1, 5, 19, 0, 15),
    (86, 40, 0, 21, 24, 0, 5, 20, 1, 15),
]

SAMPLE_KERNINGS = [(65, 86, -2), (86, 65, -1)]


def binary_block(block_type: int, content: bytes) -> bytes:
    """Frame content as a binary descriptor block."""
    return struct.pack("<Bi", block_type, len(content)) + content


def info_block(face: bytes = b"Test Font", bits: int = 0b0111, charset: int = 0) -> bytes:
    """Build an info block; bits default to smooth, unicode and italic."""
    content = struct.pack("<hBBHB4B2BB", 32, bits, charset, 100, 1, 1, 2, 3, 4, 1, 2, 0)
    return binary_block(1, content + face + b"\x00")


def common_block(pages: int = 2, bits: int = 0) -> bytes:
    """Build a common block."""
    return binary_block(2, struct.pack("<5H5B", 36, 29, 256, 128, pages, bits, 1, 0, 0, 0))


def pages_block(*names: bytes) -> bytes:
    """Build a pages block from null-terminated names."""
    return binary_block(3, b"".join(name + b"\x00" for name in names))


def chars_block(chars: list[tuple[int, ...]]) -> bytes:
    """Build a chars block."""
    return binary_block(4, b"".join(struct.pack("<I4H3h2B", *c) for c in chars))


def kernings_block(kernings: list[tuple[int, int, int]]) -> bytes:
    """Build a kerning pairs block."""
    return binary_block(5, b"".join(struct.pack("<IIh", *k) for k in kernings))


def make_binary(*blocks: bytes, version: int = 3) -> bytes:
    """Prefix blocks with the binary file header."""
    return b"BMF" + bytes([version]) + b"".join(blocks)


SAMPLE_BINARY = make_binary(
    info_block(),
    common_block(),
    pages_block(b"test_0.png", b"test 1.png"),
    chars_block(SAMPLE_CHARS),
    kernings_block(SAMPLE_KERNINGS),
)


@pytest.fixture
def text_data() -> bytes:
    """Sample font in text encoding."""
    return SAMPLE_TEXT.encode("utf-8")


@pytest.fixture
def xml_data() -> bytes:
    """Sample font in XML encoding."""
    return SAMPLE_XML.encode("utf-8")


@pytest.fixture
def binary_data() -> bytes:
    """Sample font in binary encoding."""
    return SAMPLE_BINARY


@pytest.fixture
def binary_builder() -> Callable[..., bytes]:
    """Builder for hand-made binary descriptors."""
    return make_binary


@pytest.fixture
def blocks():
    """Namespace of binary block builders."""

    class Blocks:
        frame = staticmethod(binary_block)
        info = staticmethod(info_block)
        common = staticmethod(common_block)
        pages = staticmethod(pages_block)
        chars = staticmethod(chars_block)
        kernings = staticmethod(kernings_block)
        sample_chars = SAMPLE_CHARS
        sample_kernings = SAMPLE_KERNINGS

    return Blocks


@pytest.fixture
def font_files(tmp_path, text_data, xml_data, binary_data):
    """The sample font written to disk in all three encodings."""
    paths = {
        "text": tmp_path / "sample_text.fnt",
        "xml": tmp_path / "sample_xml.fnt",
        "binary": tmp_path / "sample_binary.fnt",
    }
    paths["text"].write_bytes(text_data)
    paths["xml"].write_bytes(xml_data)
    paths["binary"].write_bytes(binary_data)
    return paths
