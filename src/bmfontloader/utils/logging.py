"""Logging utilities for bmfontloader."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from bmfontloader.domain import Font

_FILE_HANDLER = "bmfontloader.file"
_CONSOLE_HANDLER = "bmfontloader.console"


@dataclass
class LoadStats:
    """Statistics from a run over one or more descriptor files."""

    loaded_count: int = 0
    error_count: int = 0
    glyph_count: int = 0
    kerning_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers installed by an earlier call
    for handler in list(root_logger.handlers):
        if handler.get_name() in (_FILE_HANDLER, _CONSOLE_HANDLER):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bmfontloader")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class LoadLogger:
    """Logger for tracking descriptor loads and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = LoadStats()

    def log_run_start(self) -> None:
        """Mark the start of a run."""
        self._stats.start_time = time.time()

    def log_run_end(self) -> None:
        """Mark the end of a run."""
        self._stats.end_time = time.time()

    def log_load_start(self, path: str, font_format: str) -> None:
        """Log start of a descriptor load."""
        self._logger.debug("Loading font", path=path, format=font_format)

    def log_load_complete(self, path: str, font: Font, duration_ms: float) -> None:
        """Log successful descriptor load."""
        self._logger.info(
            "Font loaded",
            path=path,
            face=font.family_name,
            pages=font.page_count,
            glyphs=len(font.glyphs),
            kernings=len(font.kernings),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.loaded_count += 1
        self._stats.glyph_count += len(font.glyphs)
        self._stats.kerning_count += len(font.kernings)

    def log_load_error(self, path: str, error: Exception) -> None:
        """Log failed descriptor load."""
        self._logger.error(
            "Font load failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((path, str(error)))

    @property
    def stats(self) -> LoadStats:
        """Get current load statistics."""
        return self._stats
