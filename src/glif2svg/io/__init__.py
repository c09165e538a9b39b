"""Glyph I/O layer for glif2svg.

This module handles reading glif files and font info using fontTools, and
writing SVG documents. It provides a clean abstraction layer between
fontTools and the domain models.

Key responsibilities:
- Parse .glif files into domain Glyphs
- Read unitsPerEm/ascender/descender from fontinfo.plist
- Write documents to files or stdout with the batch naming convention

Key classes:
- GlifReader: Load a glif and extract its outline
- FontInfoReader: Locate and read font metrics
- SvgWriter: Save SVG documents
"""

from glif2svg.io.fontinfo import FontInfoReader
from glif2svg.io.reader import GlifReader, find_glif_files
from glif2svg.io.writer import SvgWriter

__all__ = [
    "FontInfoReader",
    "GlifReader",
    "SvgWriter",
    "find_glif_files",
]
