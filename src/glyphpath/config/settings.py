"""Configuration settings for Glyphpath."""

from pathlib import Path

from pydantic import BaseModel, Field

# Scaling constant for going from points to pixels
DEFAULT_DPI = 92


class LayoutConfig(BaseModel):
    """Configuration for text layout."""

    point_size: float = Field(
        default=12.0,
        gt=0,
        description="Font size in points",
    )
    dpi: float = Field(
        default=DEFAULT_DPI,
        gt=0,
        description="Device resolution used to convert points to pixels",
    )
    reuse_glyph_buffer: bool = Field(
        default=True,
        description=(
            "Reuse the font's outline buffer across layouts; disable to allocate "
            "a buffer per layout so one font can be laid out from several threads"
        ),
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphPathSettings(BaseModel):
    """Main application settings."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPathSettings:
    """Get default application settings."""
    return GlyphPathSettings()
