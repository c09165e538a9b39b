"""Glyph representation.

This module defines the glyph domain model: a named outline (an ordered
sequence of contours) plus the per-glyph metrics found in a glif record.
"""

from dataclasses import dataclass, field

from glif2svg.domain.contour import Contour
from glif2svg.domain.metrics import Bounds


@dataclass(frozen=True)
class Glyph:
    """A single glyph with its outline.

    Attributes:
        name: Glyph name (e.g., "A", "exclam")
        contours: Outline contours in paint order
        advance_width: Horizontal advance in font units (None if absent)
        advance_height: Vertical advance in font units (None if absent)
        unicodes: Unicode code points mapped to this glyph
        component_count: Number of component references in the glif
    """

    name: str
    contours: tuple[Contour, ...] = field(default_factory=tuple)
    advance_width: float | None = None
    advance_height: float | None = None
    unicodes: tuple[int, ...] = field(default_factory=tuple)
    component_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "contours", tuple(self.contours))
        object.__setattr__(self, "unicodes", tuple(self.unicodes))

    def bounds(self) -> Bounds:
        """Bounding box over every point of every contour.

        Returns:
            Bounds of the control polygons, empty for an empty outline
        """
        return Bounds.from_points(
            point for contour in self.contours for point in contour.points
        )
