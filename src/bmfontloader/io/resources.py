"""Qualification of texture page paths.

Descriptors name their texture pages relative to the descriptor file.
After a font is loaded from disk the loader rewrites each page filename
against the descriptor's directory, so callers can open the textures
without knowing where the descriptor lived.
"""

import os

from bmfontloader.domain import Font


def qualify_resource_paths(font: Font, base_directory: str | os.PathLike[str]) -> None:
    """Rewrite page filenames relative to a base directory, in place.

    Uses ``os.path.join`` semantics, so a page filename that is already
    absolute is kept as is. Apply once per loaded font; qualifying twice
    nests the base directory.

    Args:
        font: Decoded font whose pages are updated
        base_directory: Directory the page filenames are relative to
    """
    base = os.fspath(base_directory)
    for page in font.pages:
        page.filename = os.path.join(base, page.filename)
