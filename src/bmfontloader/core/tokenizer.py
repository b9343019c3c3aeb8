"""Quote-aware splitting of text descriptor lines.

Text descriptor records are space separated ``name=value`` pairs where a
value may be a double-quoted string containing spaces, e.g.::

    page id=0 file="font one.png"

``split_fields`` keeps such quoted spans together and leaves the quotes in
place; ``sanitize_value`` removes them once the value has been extracted.
"""

QUOTE = '"'
DELIMITER = " "


def split_fields(line: str, delimiter: str = DELIMITER) -> list[str]:
    """Split a line into fields, ignoring delimiters inside quoted spans.

    Empty fields produced by consecutive delimiters are dropped. A quote
    without a closing partner is treated as an ordinary character.

    Args:
        line: One line of text, without its line terminator
        delimiter: Single character separating fields

    Returns:
        Non-empty fields in order of appearance

    Example:
        >>> split_fields('page id=0 file="font one.png"')
        ['page', 'id=0', 'file="font one.png"']
    """
    fields: list[str] = []
    length = len(line)
    start = 0

    while start < length:
        end = _find(line, delimiter, start, length)
        quote_start = line.find(QUOTE, start, end)

        # Extend the field while its next delimiter falls inside a quote pair
        while quote_start != -1:
            quote_end = line.find(QUOTE, quote_start + 1)
            if quote_end == -1:
                break
            if end > quote_end:
                quote_start = line.find(QUOTE, quote_end + 1, end)
                continue
            end = _find(line, delimiter, quote_end + 1, length)
            quote_start = line.find(QUOTE, quote_end + 1, end)

        if end > start:
            fields.append(line[start:end])
        start = end + 1

    return fields


def _find(line: str, delimiter: str, start: int, default: int) -> int:
    """Find the next delimiter at or after start, or return default."""
    index = line.find(delimiter, start)
    return default if index == -1 else index


def sanitize_value(value: str) -> str:
    """Strip one pair of surrounding double quotes from a value.

    Args:
        value: Raw field value

    Returns:
        The value without its enclosing quotes, or unchanged if it is not
        quote-wrapped or is a single character
    """
    if len(value) > 1 and value[0] == QUOTE and value[-1] == QUOTE:
        return value[1:-1]
    return value


def get_value_name(field: str) -> str | None:
    """Return the name part of a ``name=value`` field.

    Args:
        field: One tokenized field

    Returns:
        Text before the first ``=``, or None if the field has no ``=``
    """
    if not field:
        return None
    name, separator, _ = field.partition("=")
    return name if separator else None
