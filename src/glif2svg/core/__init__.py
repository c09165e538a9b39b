"""Core conversion algorithms for glif2svg.

This module contains the glyph to SVG pipeline:

- Number formatting at a configurable precision
- Outline to path data conversion (Y-flip, quadratic and cubic curves,
  open and closed contours)
- Document sizing from font metrics or outline bounds, and SVG assembly
- Batch orchestration over a UFO's glifs

The converter, assembler and pipeline are:
- Stateless (safe for use in worker processes)
- Pure (no logging, no I/O)

Key functions:
- format_number: Round and trim a number for SVG output
- contour_segments: Split a contour into path segments
- resolve_frame: Choose document dimensions
- convert_glif: Convert one glif file (picklable)

Key classes:
- PathConverter: Outline to SVG path data
- DocumentAssembler: Path data to SVG document
- GlyphConverter: Glyph to SVG document
- GlifProcessor: Single file and batch conversion with logging
"""

from glif2svg.core.document import (
    DocumentAssembler,
    Frame,
    FrameSource,
    frame_from_bounds,
    resolve_frame,
)
from glif2svg.core.numbers import format_number
from glif2svg.core.pen import (
    CoordinateTransform,
    PathConverter,
    PathData,
    Segment,
    SkippedContour,
    contour_segments,
)
from glif2svg.core.pipeline import ConversionResult, GlyphConverter
from glif2svg.core.processor import GlifProcessor, convert_glif, resolve_metrics

__all__ = [
    # Pen
    "CoordinateTransform",
    "PathConverter",
    "PathData",
    "Segment",
    "SkippedContour",
    "contour_segments",
    # Document
    "DocumentAssembler",
    "Frame",
    "FrameSource",
    "frame_from_bounds",
    "resolve_frame",
    # Pipeline
    "ConversionResult",
    "GlyphConverter",
    # Processor
    "GlifProcessor",
    "convert_glif",
    "resolve_metrics",
    # Numbers
    "format_number",
]
