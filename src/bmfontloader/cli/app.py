"""CLI application entry point for bmfontloader.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from bmfontloader import __version__
from bmfontloader.cli.output import (
    console,
    print_detected,
    print_error,
    print_font_info,
    print_glyph_table,
    print_header,
    print_kerning_table,
    print_pages,
    print_step,
    print_success,
)
from bmfontloader.config import get_default_settings
from bmfontloader.core import FontFormat, detect_format
from bmfontloader.exceptions import (
    BitmapFontError,
    FontNotFoundError,
    MalformedDataError,
    UnrecognizedFormatError,
)
from bmfontloader.io import (
    load_binary_from_file,
    load_font_from_file,
    load_text_from_file,
    load_xml_from_file,
)
from bmfontloader.utils import LoadLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="bmfontloader",
    help="Inspect AngelCode BMFont descriptors in binary, text or XML encoding.",
    add_completion=False,
    no_args_is_help=True,
)

_FORCED_LOADERS = {
    FontFormat.BINARY: load_binary_from_file,
    FontFormat.TEXT: load_text_from_file,
    FontFormat.XML: load_xml_from_file,
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bmfontloader[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect AngelCode BMFont descriptors."""


@app.command()
def inspect(
    font_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a .fnt descriptor (binary, text or XML)",
            show_default=False,
        ),
    ],
    font_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Descriptor encoding (auto|binary|text|xml)",
        ),
    ] = "auto",
    glyphs: Annotated[
        bool,
        typer.Option(
            "--glyphs",
            "-g",
            help="List glyph records",
        ),
    ] = False,
    kernings: Annotated[
        bool,
        typer.Option(
            "--kernings",
            "-k",
            help="List kerning pairs",
        ),
    ] = False,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum rows per table (default: all)",
            min=1,
        ),
    ] = None,
    no_qualify: Annotated[
        bool,
        typer.Option(
            "--no-qualify",
            help="Show page filenames as written in the descriptor",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Load a font descriptor and print its contents.

    The encoding is detected from the first bytes of the file unless
    --format forces one.

    Example:
        bmfontloader inspect fonts/arial.fnt --glyphs --limit 20
    """
    # Validate format argument
    requested: FontFormat | None = None
    if font_format.lower() != "auto":
        try:
            requested = FontFormat(font_format.lower())
        except ValueError:
            requested = FontFormat.NONE
        if requested not in _FORCED_LOADERS:
            print_error(
                f"Invalid format: {font_format}",
                details="Valid values: auto, binary, text, xml",
            )
            raise typer.Exit(code=1)

    settings = get_default_settings()
    settings.loader.qualify_paths = not no_qualify
    settings.logging.log_file = log_file
    settings.logging.log_level = log_level if not quiet else "ERROR"
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    load_logger = LoadLogger(logger)
    load_logger.log_run_start()

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    path = str(font_file)
    start = time.perf_counter()
    try:
        if requested is None:
            detected = detect_format(font_file) if font_file.is_file() else FontFormat.NONE
            load_logger.log_load_start(path, detected.value)
            font = load_font_from_file(font_file, settings.loader)
        else:
            detected = requested
            load_logger.log_load_start(path, detected.value)
            font = _FORCED_LOADERS[requested](font_file, settings.loader)
    except FontNotFoundError as e:
        load_logger.log_load_error(path, e)
        print_error(f"Input file not found: {font_file}", details=str(e))
        raise typer.Exit(code=1) from None
    except UnrecognizedFormatError as e:
        load_logger.log_load_error(path, e)
        print_error(
            f"Unrecognized descriptor format: {font_file}",
            details="Use --format to force binary, text or xml.",
        )
        raise typer.Exit(code=1) from None
    except MalformedDataError as e:
        load_logger.log_load_error(path, e)
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1) from None
    except (BitmapFontError, OSError) as e:
        load_logger.log_load_error(path, e)
        print_error(str(e))
        raise typer.Exit(code=1) from None

    load_logger.log_load_complete(path, font, (time.perf_counter() - start) * 1000)

    if quiet:
        load_logger.log_run_end()
        console.print(
            f"{font.family_name} {font.font_size}pt {len(font.glyphs)} glyphs "
            f"{len(font.kernings)} kernings"
        )
        return

    print_font_info(path, detected.value, font)

    print_step("Pages")
    print_pages(font)

    if glyphs:
        print_step("Glyphs")
        print_glyph_table(font, limit)

    if kernings:
        print_step("Kerning pairs")
        print_kerning_table(font, limit)

    load_logger.log_run_end()
    print_success(f"Loaded in {load_logger.stats.duration_seconds * 1000:.1f}ms")


@app.command()
def detect(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="Files to classify",
            show_default=False,
        ),
    ],
) -> None:
    """Print the detected descriptor encoding of each file.

    Exits with code 1 if any file is missing or unrecognized.
    """
    failed = False
    for path in files:
        if not path.is_file():
            print_error(f"Input file not found: {path}")
            failed = True
            continue

        font_format = detect_format(path)
        print_detected(str(path), font_format.value)
        if font_format == FontFormat.NONE:
            failed = True

    if failed:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
