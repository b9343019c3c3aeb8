"""Named-value lookup and primitive value parsing.

Each text record is a list of ``name=value`` fields. Real files almost
always keep BMFont's canonical field order, so lookups first try the
position a field is expected at and only scan the whole record when the
name there does not match. Names match case-insensitively and the first
occurrence wins.

Key functions:
- get_named_string / get_named_int / get_named_bool: Field lookup
- to_int / to_bool: Lenient conversions shared with the XML decoder
- parse_point / parse_padding: Strict comma separated composite values
"""

import re
from collections.abc import Sequence

from bmfontloader.core.tokenizer import get_value_name, sanitize_value
from bmfontloader.domain.primitives import Padding, Point
from bmfontloader.exceptions import MalformedDataError

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


def _names_match(field: str, name: str) -> bool:
    field_name = get_value_name(field)
    return field_name is not None and field_name.casefold() == name.casefold()


def _field_value(field: str) -> str:
    return sanitize_value(field.partition("=")[2])


def get_named_string(parts: Sequence[str], name: str, expected_index: int) -> str:
    """Return the value of a named field.

    Args:
        parts: Tokenized fields of one record
        name: Field name to look up
        expected_index: Position the field usually occupies in the record

    Returns:
        The field's value with surrounding quotes removed, or an empty
        string if the record has no such field
    """
    if 0 <= expected_index < len(parts) and _names_match(parts[expected_index], name):
        return _field_value(parts[expected_index])

    for part in parts:
        if _names_match(part, name):
            return _field_value(part)

    return ""


def to_int(value: str | None, default: int = 0) -> int:
    """Parse a base-10 integer, falling back to a default.

    Args:
        value: Raw value, may be None or empty
        default: Result for absent or non-numeric values

    Returns:
        Parsed integer or default
    """
    if value is None or not _INTEGER.fullmatch(value):
        return default
    try:
        return int(value)
    except ValueError:
        # Past the interpreter's digit limit
        return default


def to_bool(value: str | None) -> bool:
    """Parse a flag value; true iff it is an integer greater than zero."""
    return to_int(value) > 0


def get_named_int(parts: Sequence[str], name: str, expected_index: int) -> int:
    """Return a named field as an integer, 0 if absent or not numeric."""
    return to_int(get_named_string(parts, name, expected_index))


def get_named_bool(parts: Sequence[str], name: str, expected_index: int) -> bool:
    """Return a named field as a flag, False if absent."""
    return to_bool(get_named_string(parts, name, expected_index))


def _parse_component(value: str, what: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise MalformedDataError(f"invalid {what} component '{value}'")
    try:
        return int(value)
    except ValueError:
        raise MalformedDataError(f"{what} component has too many digits") from None


def parse_point(value: str) -> Point:
    """Parse an ``x,y`` pair.

    Args:
        value: Text of the form ``x,y``

    Returns:
        Point(x, y)

    Raises:
        MalformedDataError: If the comma is missing or a part is not an integer
    """
    x, separator, y = value.partition(",")
    if not separator:
        raise MalformedDataError(f"expected 'x,y' but found '{value}'")
    return Point(_parse_component(x, "point"), _parse_component(y, "point"))


def parse_padding(value: str) -> Padding:
    """Parse padding stored as ``top,right,bottom,left``.

    Args:
        value: Text of the form ``top,right,bottom,left``

    Returns:
        Padding with the components rearranged to left, top, right, bottom

    Raises:
        MalformedDataError: If fewer than three commas are present or a
            component is not an integer
    """
    top, sep1, rest = value.partition(",")
    right, sep2, rest = rest.partition(",")
    bottom, sep3, left = rest.partition(",")
    if not (sep1 and sep2 and sep3):
        raise MalformedDataError(f"expected 'top,right,bottom,left' but found '{value}'")

    return Padding(
        left=_parse_component(left, "padding"),
        top=_parse_component(top, "padding"),
        right=_parse_component(right, "padding"),
        bottom=_parse_component(bottom, "padding"),
    )
