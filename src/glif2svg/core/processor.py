"""Conversion orchestration for single glyphs and whole UFOs.

Batch runs convert each glif in a worker process with
ProcessPoolExecutor. A failing glyph produces an error result and never
stops the rest of the batch.

Key components:
- convert_glif: Top-level picklable function converting one glif file
- GlifProcessor: Orchestrator that runs conversions and logs results
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from glif2svg.config import ConversionConfig, Glif2SvgSettings
from glif2svg.core.pipeline import GlyphConverter
from glif2svg.domain import FontMetrics
from glif2svg.exceptions import FontInfoError
from glif2svg.io import FontInfoReader, GlifReader, SvgWriter, find_glif_files
from glif2svg.utils import ProcessingLogger, ProcessingStats, configure_logging


def resolve_metrics(
    glif_path: Path,
    fontinfo_path: Path | None = None,
) -> tuple[FontMetrics | None, str | None]:
    """Find and read the metrics for a glif.

    Args:
        glif_path: Path to the .glif file
        fontinfo_path: Explicit fontinfo.plist, or None to look in the parent UFO

    Returns:
        Tuple of (metrics, None) on success or (None, reason) when unavailable
    """
    if fontinfo_path is None:
        fontinfo_path = FontInfoReader.locate(glif_path)
        if fontinfo_path is None:
            return None, "glif is not inside a UFO with fontinfo.plist"

    try:
        metrics = FontInfoReader().read(fontinfo_path)
    except FontInfoError as e:
        return None, str(e)

    if metrics.vertical_extent() is None:
        return None, "fontinfo.plist has neither ascender nor unitsPerEm"
    return metrics, None


def convert_glif(
    glif_path: str,
    output_path: str | None,
    config_dict: dict[str, Any],
    fontinfo_path: str | None = None,
) -> dict[str, Any]:
    """Convert a single glif file and write its SVG document.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        glif_path: Path to the input .glif
        output_path: Destination .svg, None for stdout
        config_dict: Serialized conversion configuration
        fontinfo_path: Explicit fontinfo.plist path

    Returns:
        Dictionary containing either:
        - Success: {"glyph_name", "output", "contours", "frame", "skipped",
          "metrics_missing", "components", "duration_ms"}
        - Error: {"error": str, "glyph_name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()
    path = Path(glif_path)

    try:
        config = ConversionConfig(**config_dict)
        glyph = GlifReader(path).load()

        metrics: FontMetrics | None = None
        metrics_missing: str | None = None
        if not config.ignore_metrics:
            metrics, metrics_missing = resolve_metrics(
                path, Path(fontinfo_path) if fontinfo_path else None
            )

        result = GlyphConverter(config).convert(glyph, metrics)
        SvgWriter(Path(output_path) if output_path else None).write(result.svg)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "glyph_name": glyph.name,
            "output": output_path,
            "contours": len(glyph.contours) - len(result.path.skipped),
            "frame": result.frame.source.value,
            "skipped": [(s.index, s.reason) for s in result.path.skipped],
            "metrics_missing": metrics_missing,
            "components": glyph.component_count,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "glyph_name": path.stem,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class GlifProcessor:
    """Orchestrates glif to SVG conversion.

    Example:
        processor = GlifProcessor(Glif2SvgSettings())
        stats = processor.process_directory(
            input_dir=Path("Font.ufo"),
            output_dir=Path("Font.ufo-svg"),
        )
    """

    def __init__(self, config: Glif2SvgSettings, quiet: bool = False) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings containing conversion, processing and logging config
            quiet: Only log errors to the console
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def process_file(
        self,
        glif_path: Path,
        output_path: Path | None = None,
        fontinfo_path: Path | None = None,
    ) -> ProcessingStats:
        """Convert one glif in-process.

        Args:
            glif_path: Path to the .glif file
            output_path: Destination .svg, None for stdout
            fontinfo_path: Explicit fontinfo.plist path

        Returns:
            ProcessingStats for the single conversion
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()
        self.processing_logger.log_glyph_start(glif_path.stem)

        result = convert_glif(
            str(glif_path),
            str(output_path) if output_path else None,
            self.config.conversion.model_dump(),
            str(fontinfo_path) if fontinfo_path else None,
        )
        self._record_result(result)

        stats.end_time = time.time()
        return stats

    def process_directory(
        self,
        input_dir: Path,
        output_dir: Path,
        fontinfo_path: Path | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ProcessingStats:
        """Convert every glif of a UFO or glyphs directory in parallel.

        Args:
            input_dir: UFO or glyphs directory
            output_dir: Directory receiving one .svg per glif
            fontinfo_path: Explicit fontinfo.plist path for all glyphs
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, glyph_name, success)
                for progress updates

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        if fontinfo_path is None and not self.config.conversion.ignore_metrics:
            # Glifs found through a UFO root share its fontinfo.plist.
            candidate = input_dir / "fontinfo.plist"
            if candidate.is_file():
                fontinfo_path = candidate

        glif_paths = find_glif_files(input_dir)
        self.logger.info(
            "Starting batch conversion",
            input=str(input_dir),
            output=str(output_dir),
            glyph_count=len(glif_paths),
            max_workers=max_workers,
        )

        if glif_paths:
            output_dir.mkdir(parents=True, exist_ok=True)
            self._process_parallel(
                glif_paths=glif_paths,
                output_dir=output_dir,
                fontinfo_path=fontinfo_path,
                max_workers=max_workers,
                stats=stats,
                progress_callback=progress_callback,
            )
        else:
            self.logger.info("No glif files found")

        stats.end_time = time.time()
        self.logger.info(
            "Batch conversion complete",
            converted=stats.converted_count,
            errors=stats.error_count,
            skipped_contours=stats.skipped_contour_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats

    def _process_parallel(
        self,
        glif_paths: list[Path],
        output_dir: Path,
        fontinfo_path: Path | None,
        max_workers: int | None,
        stats: ProcessingStats,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> None:
        """Submit one conversion per glif and collect results as they complete."""
        config_dict = self.config.conversion.model_dump()
        fontinfo = str(fontinfo_path) if fontinfo_path else None

        total = len(glif_paths)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for glif_path in glif_paths:
                future = executor.submit(
                    convert_glif,
                    str(glif_path),
                    str(SvgWriter.get_svg_path(glif_path, output_dir)),
                    config_dict,
                    fontinfo,
                )
                pending_futures[future] = glif_path.stem

            try:
                for future in as_completed(pending_futures):
                    glyph_name = pending_futures.pop(future)
                    success = False

                    try:
                        success = self._record_result(future.result())
                    except Exception as e:
                        # Executor-level error
                        self.processing_logger.log_glyph_error(
                            glyph_name=glyph_name,
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, glyph_name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def _record_result(self, result: dict[str, Any]) -> bool:
        """Log a conversion result and update statistics.

        Returns:
            True if the glyph was converted
        """
        glyph_name = result["glyph_name"]

        if "error" in result:
            self.processing_logger.log_glyph_error(
                glyph_name=glyph_name,
                error=Exception(result["error"]),
                traceback=result.get("traceback"),
            )
            return False

        if result["metrics_missing"]:
            self.processing_logger.log_metrics_fallback(glyph_name, result["metrics_missing"])
        if result["components"]:
            self.processing_logger.log_components_ignored(glyph_name, result["components"])
        for index, reason in result["skipped"]:
            self.processing_logger.log_contour_skipped(glyph_name, index, reason)

        self.processing_logger.log_glyph_complete(
            glyph_name=glyph_name,
            contours=result["contours"],
            frame_source=result["frame"],
            duration_ms=result["duration_ms"],
        )
        return True
