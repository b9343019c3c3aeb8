"""Decoder for the BMFont XML descriptor format.

The XML encoding carries the same records as the text encoding, as
elements with attributes::

    <?xml version="1.0"?>
    <font>
      <info face="Arial" size="32" ... />
      <common lineHeight="32" base="26" ... />
      <pages>
        <page id="0" file="arial_0.png" />
      </pages>
      <chars count="95">
        <char id="32" x="0" y="0" ... />
      </chars>
      <kernings count="1">
        <kerning first="65" second="86" amount="-2" />
      </kernings>
    </font>

Elements are found anywhere below the root element and attribute names
match case-insensitively, with the same value conversions as the text
decoder.
"""

import logging
import xml.etree.ElementTree as etree
from typing import BinaryIO

from bmfontloader.core.assembler import FontBuilder, FontCommon, FontInfo
from bmfontloader.core.fields import parse_padding, parse_point, to_bool, to_int
from bmfontloader.domain import Font, Kerning, Padding, Point
from bmfontloader.exceptions import MalformedDataError

logger = logging.getLogger(__name__)


def _attr(element: etree.Element, name: str) -> str:
    """Return an attribute value by case-insensitive name, empty if absent."""
    value = element.attrib.get(name)
    if value is not None:
        return value

    wanted = name.casefold()
    for key, value in element.attrib.items():
        if key.casefold() == wanted:
            return value
    return ""


def _int(element: etree.Element, name: str) -> int:
    return to_int(_attr(element, name))


def _bool(element: etree.Element, name: str) -> bool:
    return to_bool(_attr(element, name))


class XmlFontDecoder:
    """Decodes XML descriptors into Font models.

    Example:
        with open("font.fnt", "rb") as stream:
            font = XmlFontDecoder().decode(stream)
    """

    def decode(self, stream: BinaryIO) -> Font:
        """Decode an XML descriptor.

        Args:
            stream: Binary stream positioned at the XML declaration

        Returns:
            The decoded Font

        Raises:
            MalformedDataError: If the document is not well-formed XML or a
                composite value is invalid
        """
        try:
            root = etree.parse(stream).getroot()
        except etree.ParseError as e:
            raise MalformedDataError(f"invalid XML: {e}") from e

        return self.decode_element(root)

    def decode_element(self, root: etree.Element) -> Font:
        """Decode an already parsed document root.

        Args:
            root: The document's root element

        Returns:
            The decoded Font
        """
        builder = FontBuilder()

        info = next(root.iter("info"), None)
        if info is not None:
            self._decode_info(builder, info)

        common = next(root.iter("common"), None)
        if common is not None:
            self._decode_common(builder, common)

        for element in root.iter("page"):
            builder.add_page(_int(element, "id"), _attr(element, "file"))

        for element in root.iter("char"):
            builder.add_glyph(
                FontBuilder.make_glyph(
                    glyph_id=_int(element, "id"),
                    x=_int(element, "x"),
                    y=_int(element, "y"),
                    width=_int(element, "width"),
                    height=_int(element, "height"),
                    x_offset=_int(element, "xoffset"),
                    y_offset=_int(element, "yoffset"),
                    x_advance=_int(element, "xadvance"),
                    page=_int(element, "page"),
                    channel=_int(element, "chnl"),
                )
            )

        for element in root.iter("kerning"):
            builder.add_kerning(
                Kerning(
                    first=_int(element, "first"),
                    second=_int(element, "second"),
                    amount=_int(element, "amount"),
                )
            )

        for tag in ("chars", "kernings"):
            counted = next(root.iter(tag), None)
            if counted is not None:
                logger.debug("%s count hint: %d", tag, _int(counted, "count"))

        return builder.build()

    @staticmethod
    def _decode_info(builder: FontBuilder, element: etree.Element) -> None:
        padding = _attr(element, "padding")
        spacing = _attr(element, "spacing")
        builder.set_info(
            FontInfo(
                family_name=_attr(element, "face"),
                font_size=_int(element, "size"),
                bold=_bool(element, "bold"),
                italic=_bool(element, "italic"),
                charset=_attr(element, "charset"),
                unicode=_bool(element, "unicode"),
                stretched_height=_int(element, "stretchH"),
                smoothed=_bool(element, "smooth"),
                super_sampling=_int(element, "aa"),
                padding=parse_padding(padding) if padding else Padding(),
                spacing=parse_point(spacing) if spacing else Point(),
                outline_size=_int(element, "outline"),
            )
        )

    @staticmethod
    def _decode_common(builder: FontBuilder, element: etree.Element) -> None:
        builder.set_common(
            FontCommon(
                line_height=_int(element, "lineHeight"),
                base_height=_int(element, "base"),
                texture_width=_int(element, "scaleW"),
                texture_height=_int(element, "scaleH"),
                page_count=_int(element, "pages"),
                packed=_bool(element, "packed"),
                alpha_channel=_int(element, "alphaChnl"),
                red_channel=_int(element, "redChnl"),
                green_channel=_int(element, "greenChnl"),
                blue_channel=_int(element, "blueChnl"),
            )
        )


def decode_xml(stream: BinaryIO) -> Font:
    """Decode an XML descriptor from a stream."""
    return XmlFontDecoder().decode(stream)
