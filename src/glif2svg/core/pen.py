"""Outline to SVG path data conversion.

This module turns UFO contours into SVG path commands:

- contour_segments: splits one contour into drawing segments in glyph space
- CoordinateTransform: glyph space (Y-up) to document space (Y-down)
- PathConverter: formats the segments of a whole outline as a `d` attribute

Segments are computed with a single left-to-right scan per contour. Off-curve
points are buffered until the on-curve point that consumes them arrives.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from fontTools.pens.basePen import decomposeSuperBezierSegment

from glif2svg.config import ContourPolicy
from glif2svg.core.numbers import format_number
from glif2svg.domain import Contour, Point, PointKind
from glif2svg.exceptions import (
    EmptyContourError,
    MalformedContourError,
    MalformedCurveError,
    UnknownPointKindError,
)

Coordinate = tuple[float, float]

MOVE = "M"
LINE = "L"
CUBIC = "C"
QUAD = "Q"
CLOSE = "Z"


class Segment(NamedTuple):
    """One SVG path command with its coordinates in glyph space."""

    command: str
    points: tuple[Coordinate, ...] = ()


@dataclass(frozen=True, slots=True)
class CoordinateTransform:
    """Maps glyph coordinates into the document.

    The origin is moved to (origin_x, origin_y) and the Y axis is flipped
    around `height`, so glyph point (origin_x, origin_y) lands on document
    point (0, height).

    Attributes:
        origin_x: Glyph X mapped to document X = 0
        origin_y: Glyph Y mapped to the bottom edge of the document
        height: Document height
    """

    origin_x: float = 0.0
    origin_y: float = 0.0
    height: float = 0.0

    def apply(self, x: float, y: float) -> Coordinate:
        return (x - self.origin_x, self.height - (y - self.origin_y))


@dataclass(frozen=True, slots=True)
class SkippedContour:
    """A contour left out of the path under a skip policy."""

    index: int
    reason: str


@dataclass(frozen=True, slots=True)
class PathData:
    """Result of converting an outline.

    Attributes:
        d: SVG path data
        skipped: Contours that were left out, in outline order
    """

    d: str
    skipped: tuple[SkippedContour, ...] = ()


def _midpoint(a: Point, b: Point) -> Coordinate:
    return ((a.x + b.x) / 2, (a.y + b.y) / 2)


def _quadratic_segments(off_curves: Sequence[Point], end: Coordinate) -> list[Segment]:
    """Chain quadratic segments through implied on-curve points.

    Between two consecutive off-curve points lies an implied on-curve point at
    their midpoint; it ends one segment and starts the next.

    Args:
        off_curves: One or more control points
        end: The on-curve point terminating the chain

    Returns:
        One QUAD segment per off-curve point
    """
    segments: list[Segment] = []
    for control, following in zip(off_curves, off_curves[1:]):
        segments.append(Segment(QUAD, (control.to_tuple(), _midpoint(control, following))))
    segments.append(Segment(QUAD, (off_curves[-1].to_tuple(), end)))
    return segments


def _cubic_segments(off_curves: Sequence[Point], end: Point) -> list[Segment]:
    if len(off_curves) < 2:
        raise MalformedCurveError(
            f"curve point at ({end.x}, {end.y}) needs 2 off-curve points, "
            f"found {len(off_curves)}"
        )
    if len(off_curves) == 2:
        c1, c2 = off_curves
        return [Segment(CUBIC, (c1.to_tuple(), c2.to_tuple(), end.to_tuple()))]

    # More than two controls: a UFO super-Bezier.
    points = [p.to_tuple() for p in off_curves] + [end.to_tuple()]
    return [Segment(CUBIC, tuple(pts)) for pts in decomposeSuperBezierSegment(points)]


def _off_curve_loop(points: Sequence[Point]) -> list[Segment]:
    # Closed contour without on-curve points: every on-curve point is implied.
    start = _midpoint(points[-1], points[0])
    segments = [Segment(MOVE, (start,))]
    segments.extend(_quadratic_segments(points, start))
    segments.append(Segment(CLOSE))
    return segments


def contour_segments(contour: Contour) -> list[Segment]:
    """Split a contour into path segments in glyph space.

    Open contours start at their `move` point. Closed contours start at their
    first on-curve point; off-curve points before it wrap around to the end of
    the contour and are terminated by the start point.

    Args:
        contour: A non-empty contour

    Returns:
        Segments starting with MOVE and, for closed contours, ending with CLOSE

    Raises:
        MalformedCurveError: If a curve lacks control points or an open
            contour ends on off-curve points
        MalformedContourError: If a line or move point is out of place
        UnknownPointKindError: If a point has an unexpected kind
    """
    points = list(contour.points)
    closed = contour.is_closed

    if closed:
        first_on_curve = next((i for i, p in enumerate(points) if p.is_on_curve), None)
        if first_on_curve is None:
            return _off_curve_loop(points)
        points = points[first_on_curve:] + points[:first_on_curve]
        walk = points[1:] + points[:1]
    else:
        walk = points[1:]

    start = points[0]
    segments = [Segment(MOVE, (start.to_tuple(),))]
    pending: list[Point] = []
    last = len(walk) - 1

    for i, point in enumerate(walk):
        kind = point.kind
        if kind is PointKind.OFF_CURVE:
            pending.append(point)
            continue

        # Straight segments back to the start are drawn by CLOSE.
        closing = closed and i == last

        if kind is PointKind.LINE:
            if pending:
                raise MalformedContourError(
                    f"line point at ({point.x}, {point.y}) follows off-curve points"
                )
            if not closing:
                segments.append(Segment(LINE, (point.to_tuple(),)))
        elif kind is PointKind.CURVE:
            segments.extend(_cubic_segments(pending, point))
        elif kind is PointKind.QCURVE:
            if pending:
                segments.extend(_quadratic_segments(pending, point.to_tuple()))
            elif not closing:
                segments.append(Segment(LINE, (point.to_tuple(),)))
        elif kind is PointKind.MOVE:
            raise MalformedContourError(
                f"move point at ({point.x}, {point.y}) is not the first point"
            )
        else:
            raise UnknownPointKindError(kind)

        pending = []

    if pending:
        raise MalformedCurveError(
            f"open contour ends with {len(pending)} off-curve point(s)"
        )

    if closed:
        segments.append(Segment(CLOSE))
    return segments


class PathConverter:
    """Converts outlines to SVG path data.

    The coordinate transform is fixed at construction so every contour of a
    document shares the same flip height.

    Example:
        converter = PathConverter(CoordinateTransform(height=1000))
        data = converter.convert(glyph.contours)
        print(data.d)
    """

    def __init__(
        self,
        transform: CoordinateTransform,
        precision: int = 6,
        empty_contours: ContourPolicy = ContourPolicy.SKIP,
        malformed_contours: ContourPolicy = ContourPolicy.FAIL,
    ) -> None:
        """Initialize the converter.

        Args:
            transform: Glyph to document coordinate mapping
            precision: Decimal digits kept in coordinates
            empty_contours: Skip or fail on contours without points
            malformed_contours: Skip or fail on contours that cannot be drawn
        """
        self.transform = transform
        self.precision = precision
        self.empty_contours = empty_contours
        self.malformed_contours = malformed_contours

    def convert(self, contours: Sequence[Contour]) -> PathData:
        """Convert an outline to path data.

        Args:
            contours: Outline contours in paint order

        Returns:
            PathData with one space-separated run of commands per contour

        Raises:
            EmptyContourError: For an empty contour under the fail policy
            MalformedContourError: For a malformed contour under the fail policy
        """
        parts: list[str] = []
        skipped: list[SkippedContour] = []

        for index, contour in enumerate(contours):
            if contour.is_empty():
                if self.empty_contours is ContourPolicy.FAIL:
                    raise EmptyContourError(index)
                skipped.append(SkippedContour(index, "empty contour"))
                continue

            try:
                segments = contour_segments(contour)
            except MalformedContourError as e:
                if self.malformed_contours is ContourPolicy.FAIL:
                    raise
                skipped.append(SkippedContour(index, str(e)))
                continue

            parts.append(" ".join(self.format_segment(s) for s in segments))

        return PathData(d=" ".join(parts), skipped=tuple(skipped))

    def format_segment(self, segment: Segment) -> str:
        """Format one segment as an SVG path command.

        Args:
            segment: Segment with glyph-space coordinates

        Returns:
            Command letter followed by transformed, formatted coordinates
        """
        if not segment.points:
            return segment.command

        values: list[str] = []
        for x, y in segment.points:
            tx, ty = self.transform.apply(x, y)
            values.append(format_number(tx, self.precision))
            values.append(format_number(ty, self.precision))
        return f"{segment.command} {' '.join(values)}"
