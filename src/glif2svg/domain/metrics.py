"""Font metrics and bounding boxes.

FontMetrics carries the font-wide values read from a UFO's fontinfo.plist.
Bounds is the axis-aligned extent of an outline, used when metrics are absent
or ignored.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from glif2svg.domain.contour import Point


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned box in glyph space.

    Attributes:
        min_x: Left edge
        min_y: Bottom edge
        max_x: Right edge
        max_y: Top edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def empty(cls) -> "Bounds":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Bounds":
        """Tightest box containing every point.

        Args:
            points: Points to enclose, off-curve points included

        Returns:
            Bounds of the points, or an empty box when there are none
        """
        xs: list[float] = []
        ys: list[float] = []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)

        if not xs:
            return cls.empty()

        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True, slots=True)
class FontMetrics:
    """Font-wide vertical metrics.

    Attributes:
        units_per_em: Font units per em
        ascender: Top of the em box above the baseline
        descender: Bottom of the em box, usually negative
    """

    units_per_em: float | None = None
    ascender: float | None = None
    descender: float | None = None

    def vertical_extent(self) -> tuple[float, float] | None:
        """Return the (bottom, top) span the document should cover.

        A missing descender is taken as the baseline and a missing ascender
        as the em height.

        Returns:
            Tuple of (bottom, top), or None when neither ascender nor
            units per em is known
        """
        top = self.ascender if self.ascender is not None else self.units_per_em
        if top is None:
            return None
        bottom = self.descender if self.descender is not None else 0.0
        return (float(bottom), float(top))
