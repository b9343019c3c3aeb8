"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from bmfontloader.domain import Font

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]bmfontloader[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_format: str, font: Font) -> None:
    """Print font-level and layout metadata.

    Args:
        font_path: Path to the descriptor file
        font_format: Encoding the descriptor was decoded from
        font: Decoded font
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_format})")
    console.print(line1)

    style = [name for name, flag in (("bold", font.bold), ("italic", font.italic)) if flag]
    face = Text("  ")
    face.append(font.family_name or "(unnamed)", style="bold")
    face.append(f" {font.font_size}pt")
    if style:
        face.append(f" {SYM_DOT} {' '.join(style)}")
    console.print(face)

    charset = "unicode" if font.unicode else (font.charset or "default charset")
    console.print(
        f"  {charset} {SYM_DOT} line height {font.line_height} "
        f"{SYM_DOT} base {font.base_height}"
    )
    padding = font.padding
    console.print(
        f"  padding {padding.left},{padding.top},{padding.right},{padding.bottom} (l,t,r,b) "
        f"{SYM_DOT} spacing {font.spacing.x},{font.spacing.y} {SYM_DOT} outline {font.outline_size}"
    )
    console.print(
        f"  {font.page_count} pages of {font.texture_width}x{font.texture_height} "
        f"{SYM_DOT} {len(font.glyphs):,} glyphs {SYM_DOT} {len(font.kernings):,} kerning pairs"
    )


def print_pages(font: Font) -> None:
    """Print the texture page list.

    Args:
        font: Decoded font
    """
    for page in font.pages:
        line = Text(f"  {page.id}: ")
        line.append(page.filename)
        console.print(line)


def print_glyph_table(font: Font, limit: int | None = None) -> None:
    """Print a table of glyph records.

    Args:
        font: Decoded font
        limit: Maximum number of rows (all if None)
    """
    table = Table(show_edge=False, pad_edge=False)
    for column in ("id", "char", "x", "y", "w", "h", "xoff", "yoff", "adv", "page", "chnl"):
        table.add_column(column, justify="right")

    glyphs = sorted(font.glyphs.values(), key=lambda g: g.id)
    for glyph in glyphs[:limit]:
        char = glyph.char
        table.add_row(
            str(glyph.id),
            char if char is not None and char.isprintable() else "",
            str(glyph.x),
            str(glyph.y),
            str(glyph.width),
            str(glyph.height),
            str(glyph.x_offset),
            str(glyph.y_offset),
            str(glyph.x_advance),
            str(glyph.page),
            str(int(glyph.channel)),
        )

    console.print(table)
    if limit is not None and len(glyphs) > limit:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(glyphs) - limit} more)")


def print_kerning_table(font: Font, limit: int | None = None) -> None:
    """Print a table of kerning pairs.

    Args:
        font: Decoded font
        limit: Maximum number of rows (all if None)
    """
    table = Table(show_edge=False, pad_edge=False)
    for column in ("first", "second", "amount"):
        table.add_column(column, justify="right")

    kernings = sorted(font.kernings.values(), key=lambda k: k.key)
    for kerning in kernings[:limit]:
        table.add_row(str(kerning.first), str(kerning.second), str(kerning.amount))

    console.print(table)
    if limit is not None and len(kernings) > limit:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(kernings) - limit} more)")


def print_detected(path: str, font_format: str) -> None:
    """Print the detected encoding of one file.

    Args:
        path: Path to the file
        font_format: Detected encoding name
    """
    line = Text("  ")
    line.append(path)
    style = "red" if font_format == "none" else "green"
    line.append(f" {SYM_DOT} ")
    line.append(font_format, style=style)
    console.print(line)


def print_success(message: str) -> None:
    """Print success message.

    Args:
        message: Summary message
    """
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
