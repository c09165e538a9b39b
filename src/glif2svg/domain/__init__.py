"""Domain models for glif2svg.

This module contains the domain models representing glyph outlines and the
metrics used to size the output document. All models are:

- Immutable (frozen dataclasses)
- Independent of fontTools implementation details

Key classes:
- Point: A 2D point with its UFO point type
- Contour: An open or closed sequence of points
- Glyph: A named outline with advance metrics
- Bounds: Axis-aligned extent of an outline
- FontMetrics: Font-wide units per em, ascender and descender
"""

from glif2svg.domain.contour import Contour, Point, PointKind
from glif2svg.domain.glyph import Glyph
from glif2svg.domain.metrics import Bounds, FontMetrics

__all__: list[str] = [
    # Enums
    "PointKind",
    # Core types
    "Point",
    "Contour",
    "Glyph",
    "Bounds",
    "FontMetrics",
]
