"""Configuration settings for glif2svg."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class ContourPolicy(str, Enum):
    """What to do with a contour that cannot be drawn."""

    SKIP = "skip"
    FAIL = "fail"


class ConversionConfig(BaseModel):
    """Configuration for converting one glyph to one SVG document."""

    precision: int = Field(
        default=6,
        ge=0,
        description="Decimal digits kept when writing numbers",
    )
    omit_viewbox: bool = Field(
        default=False,
        description="Leave the viewBox attribute out of the document",
    )
    ignore_metrics: bool = Field(
        default=False,
        description="Size the document from the outline extent even when font metrics exist",
    )
    empty_contours: ContourPolicy = Field(
        default=ContourPolicy.SKIP,
        description="Policy for contours without points",
    )
    malformed_contours: ContourPolicy = Field(
        default=ContourPolicy.FAIL,
        description="Policy for contours whose curves lack control points",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch conversion."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
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


class Glif2SvgSettings(BaseModel):
    """Main application settings."""

    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Glif2SvgSettings:
    """Get default application settings."""
    return Glif2SvgSettings()
