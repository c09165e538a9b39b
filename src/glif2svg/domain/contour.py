"""Core geometric types for outline representation.

This module defines the fundamental geometric types used throughout glif2svg:
- PointKind: Enum for the UFO point type tag
- Point: A 2D point with its point type
- Contour: An open or closed sequence of points
"""

from dataclasses import dataclass, field
from enum import Enum

from glif2svg.exceptions import UnknownPointKindError


class PointKind(Enum):
    """Point type on a contour.

    Values are the UFO `type` attribute of a glif `<point>`:
    - MOVE: Start of an open contour
    - LINE: End of a straight segment
    - CURVE: End of a cubic Bezier segment
    - QCURVE: End of a quadratic segment (TrueType style)
    - OFF_CURVE: Control point, consumed by the next on-curve point
    """

    MOVE = "move"
    LINE = "line"
    CURVE = "curve"
    QCURVE = "qcurve"
    OFF_CURVE = "offcurve"

    @classmethod
    def from_segment_type(cls, segment_type: str | None) -> "PointKind":
        """Map a UFO segment type to a point kind.

        Args:
            segment_type: The glif point type; None means off-curve

        Returns:
            Matching PointKind

        Raises:
            UnknownPointKindError: If the tag is not a UFO point type
        """
        if segment_type is None:
            return cls.OFF_CURVE
        try:
            return cls(segment_type)
        except ValueError:
            raise UnknownPointKindError(segment_type) from None

    @property
    def is_on_curve(self) -> bool:
        return self is not PointKind.OFF_CURVE


@dataclass(frozen=True, slots=True)
class Point:
    """A point in glyph space with its UFO point type.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        kind: UFO point type
        smooth: Smoothness flag from the glif (not used for drawing)
        name: Optional point name from the glif
    """

    x: float
    y: float
    kind: PointKind = PointKind.LINE
    smooth: bool = False
    name: str | None = None

    @property
    def is_on_curve(self) -> bool:
        return self.kind.is_on_curve

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True)
class Contour:
    """A sub-path of a glyph outline.

    Following the UFO convention a contour is open when its first point is a
    `move` point and closed otherwise.

    Attributes:
        points: Points in drawing order
    """

    points: tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence, store an immutable tuple.
        object.__setattr__(self, "points", tuple(self.points))

    @property
    def is_closed(self) -> bool:
        return not self.points or self.points[0].kind is not PointKind.MOVE

    def is_empty(self) -> bool:
        return len(self.points) == 0
