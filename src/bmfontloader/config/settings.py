"""Configuration settings for bmfontloader."""

from pathlib import Path

from pydantic import BaseModel, Field


class LoaderConfig(BaseModel):
    """Configuration for loading font descriptors."""

    qualify_paths: bool = Field(
        default=True,
        description="Rewrite page filenames against the descriptor's directory",
    )
    text_encoding: str = Field(
        default="utf-8-sig",
        min_length=1,
        description="Character encoding of text descriptors",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if None)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BitmapFontSettings(BaseModel):
    """Main application settings."""

    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BitmapFontSettings:
    """Get default application settings."""
    return BitmapFontSettings()
