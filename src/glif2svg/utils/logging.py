"""Logging utilities for glif2svg."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_MARK = "_glif2svg_handler"


@dataclass
class ProcessingStats:
    """Statistics from a conversion run."""

    converted_count: int = 0
    error_count: int = 0
    skipped_contour_count: int = 0
    metrics_fallback_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    glyph_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_glyph_time_ms(self) -> float | None:
        if not self.glyph_timings_ms:
            return None
        return sum(self.glyph_timings_ms) / len(self.glyph_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr; stdout carries SVG documents.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers installed by an earlier call.
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARK, True)
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

    logger = structlog.get_logger("glif2svg")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_glyph_start(self, glyph_name: str) -> None:
        """Log start of glyph conversion."""
        self._logger.debug("Converting glyph", glyph=glyph_name)

    def log_glyph_complete(
        self,
        glyph_name: str,
        contours: int,
        frame_source: str,
        duration_ms: float,
    ) -> None:
        """Log successful glyph conversion."""
        self._logger.info(
            "Glyph converted",
            glyph=glyph_name,
            contours=contours,
            frame=frame_source,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.converted_count += 1
        self._stats.glyph_timings_ms.append(duration_ms)

    def log_contour_skipped(self, glyph_name: str, index: int, reason: str) -> None:
        """Log a contour left out of the path."""
        self._logger.warning(
            "Contour skipped", glyph=glyph_name, contour=index, reason=reason
        )
        self._stats.skipped_contour_count += 1

    def log_metrics_fallback(self, glyph_name: str, reason: str) -> None:
        """Log sizing from the outline because metrics are unavailable."""
        self._logger.warning(
            "Font metrics unavailable, sizing from outline bounds",
            glyph=glyph_name,
            reason=reason,
        )
        self._stats.metrics_fallback_count += 1

    def log_components_ignored(self, glyph_name: str, count: int) -> None:
        """Log component references that are not drawn."""
        self._logger.warning("Components ignored", glyph=glyph_name, components=count)

    def log_glyph_error(
        self,
        glyph_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log glyph conversion error."""
        self._logger.error(
            "Glyph conversion failed",
            glyph=glyph_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((glyph_name, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
