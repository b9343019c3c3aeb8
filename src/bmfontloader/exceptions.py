"""Exception hierarchy for bmfontloader."""


class BitmapFontError(Exception):
    """Base exception for all bmfontloader errors."""

    pass


class InvalidArgumentError(BitmapFontError, ValueError):
    """A required argument was missing or empty."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


class FontNotFoundError(BitmapFontError, FileNotFoundError):
    """Font descriptor file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot find file '{path}'")


class UnrecognizedFormatError(BitmapFontError):
    """Leading bytes match none of the supported encodings."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Unknown file format: '{source}'")


class MalformedDataError(BitmapFontError):
    """Content is structurally invalid for the assumed encoding."""

    def __init__(self, reason: str, offset: int | None = None) -> None:
        self.reason = reason
        self.offset = offset
        if offset is None:
            super().__init__(f"Malformed font data: {reason}")
        else:
            super().__init__(f"Malformed font data at offset {offset}: {reason}")
