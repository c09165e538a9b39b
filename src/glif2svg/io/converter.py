"""Converters between fontTools glif parsing and domain models.

The glif XML is parsed by fontTools' glifLib, which draws the outline into a
RecordingPointPen. The recorded point-pen calls are then turned into domain
Contours.
"""

from typing import Any

from fontTools.pens.recordingPen import RecordingPointPen
from fontTools.ufoLib.glifLib import readGlyphFromString

from glif2svg.domain import Contour, Glyph, Point, PointKind


class _GlyphAttributes:
    """Receives the glyph-level attributes glifLib sets while parsing."""

    def __init__(self) -> None:
        self.name: str | None = None
        self.width: float | None = None
        self.height: float | None = None
        self.unicodes: list[int] = []


def glif_to_domain(data: str | bytes, name_hint: str | None = None) -> Glyph:
    """Convert glif data to a domain Glyph.

    Args:
        data: Contents of a .glif file
        name_hint: Name to use if the glif has none

    Returns:
        Domain Glyph model

    Raises:
        fontTools.ufoLib.glifLib.GlifLibError: If the glif is invalid
        UnknownPointKindError: If a point has an unrecognised type
    """
    attributes = _GlyphAttributes()
    pen = RecordingPointPen()
    readGlyphFromString(data, glyphObject=attributes, pointPen=pen)

    contours, component_count = _recording_to_contours(pen.value)

    return Glyph(
        name=attributes.name or name_hint or "",
        contours=tuple(contours),
        advance_width=attributes.width,
        advance_height=attributes.height,
        unicodes=tuple(attributes.unicodes or ()),
        component_count=component_count,
    )


def _recording_to_contours(
    recording: list[tuple[str, tuple[Any, ...], dict[str, Any]]],
) -> tuple[list[Contour], int]:
    """Convert RecordingPointPen calls to Contour objects.

    The RecordingPointPen records calls like:
    - ('beginPath', (), {})
    - ('addPoint', ((x, y), segmentType, smooth, name), {})
    - ('endPath', (), {})
    - ('addComponent', (baseGlyphName, transformation), {})

    Args:
        recording: List of recorded point pen calls

    Returns:
        Tuple of (contours in glif order, number of components)
    """
    contours: list[Contour] = []
    current_points: list[Point] | None = None
    component_count = 0

    for method, args, _kwargs in recording:
        if method == "beginPath":
            current_points = []

        elif method == "addPoint":
            (x, y), segment_type, smooth, name = args
            if current_points is None:
                current_points = []
            current_points.append(
                Point(
                    x=x,
                    y=y,
                    kind=PointKind.from_segment_type(segment_type),
                    smooth=bool(smooth),
                    name=name,
                )
            )

        elif method == "endPath":
            contours.append(Contour(points=tuple(current_points or ())))
            current_points = None

        elif method == "addComponent":
            component_count += 1

    if current_points is not None:
        contours.append(Contour(points=tuple(current_points)))

    return contours, component_count
