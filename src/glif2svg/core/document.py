"""SVG document assembly.

This module sizes the output document and wraps path data in a minimal SVG
tree:

- resolve_frame: picks the document rectangle from font metrics or from the
  outline's bounding box
- DocumentAssembler: builds and serializes the `<svg>` element with its
  single `<path>`
"""

from dataclasses import dataclass
from enum import Enum

from lxml import etree

from glif2svg.core.numbers import format_number
from glif2svg.core.pen import CoordinateTransform
from glif2svg.domain import Bounds, FontMetrics, Glyph

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class FrameSource(str, Enum):
    """Where the document dimensions came from."""

    METRICS = "metrics"
    BOUNDS = "bounds"


@dataclass(frozen=True, slots=True)
class Frame:
    """The glyph-space rectangle shown by the document.

    Attributes:
        min_x: Glyph X at the left edge
        min_y: Glyph Y at the bottom edge
        width: Document width
        height: Document height
        source: Whether metrics or the outline extent defined the frame
    """

    min_x: float
    min_y: float
    width: float
    height: float
    source: FrameSource

    @property
    def transform(self) -> CoordinateTransform:
        return CoordinateTransform(
            origin_x=self.min_x,
            origin_y=self.min_y,
            height=self.height,
        )


def frame_from_bounds(bounds: Bounds) -> Frame:
    """Frame covering exactly the given bounds."""
    return Frame(
        min_x=bounds.min_x,
        min_y=bounds.min_y,
        width=bounds.width,
        height=bounds.height,
        source=FrameSource.BOUNDS,
    )


def resolve_frame(
    glyph: Glyph,
    metrics: FontMetrics | None = None,
    ignore_metrics: bool = False,
) -> Frame:
    """Resolve document dimensions for a glyph.

    With usable metrics the frame spans the advance width horizontally and
    descender to ascender vertically, independent of the ink. Without them
    (or when `ignore_metrics` is set) the frame is the outline's bounding box,
    off-curve points included.

    Args:
        glyph: Glyph being converted
        metrics: Font-wide metrics, None when unavailable
        ignore_metrics: Size from the outline even if metrics exist

    Returns:
        Resolved Frame
    """
    bounds = glyph.bounds()
    extent = None
    if metrics is not None and not ignore_metrics:
        extent = metrics.vertical_extent()

    if extent is None:
        return frame_from_bounds(bounds)

    bottom, top = extent
    if glyph.advance_width is not None:
        min_x, width = 0.0, float(glyph.advance_width)
    else:
        min_x, width = bounds.min_x, bounds.width

    return Frame(
        min_x=min_x,
        min_y=bottom,
        width=width,
        height=top - bottom,
        source=FrameSource.METRICS,
    )


class DocumentAssembler:
    """Wraps path data in an SVG document.

    The document is a root `<svg>` with width, height and (unless omitted)
    viewBox, holding exactly one `<path>`. Attribute order is fixed, so the
    same inputs always serialize to the same bytes.

    Example:
        assembler = DocumentAssembler(precision=2)
        svg = assembler.assemble(path_data.d, frame)
    """

    def __init__(self, precision: int = 6, omit_viewbox: bool = False) -> None:
        """Initialize the assembler.

        Args:
            precision: Decimal digits kept in numeric attributes
            omit_viewbox: Leave out the viewBox attribute
        """
        self.precision = precision
        self.omit_viewbox = omit_viewbox

    def _number(self, value: float) -> str:
        return format_number(value, self.precision)

    def build_tree(self, path_data: str, frame: Frame) -> etree._Element:
        """Build the SVG element tree.

        Args:
            path_data: Content of the path's `d` attribute
            frame: Resolved document frame

        Returns:
            The root `<svg>` element
        """
        width = self._number(frame.width)
        height = self._number(frame.height)

        root = etree.Element(f"{{{SVG_NAMESPACE}}}svg", nsmap={None: SVG_NAMESPACE})
        root.set("width", width)
        root.set("height", height)
        if not self.omit_viewbox:
            root.set("viewBox", f"0 0 {width} {height}")

        path = etree.SubElement(root, f"{{{SVG_NAMESPACE}}}path")
        path.set("d", path_data)
        return root

    def assemble(self, path_data: str, frame: Frame) -> str:
        """Build and serialize the SVG document.

        Args:
            path_data: Content of the path's `d` attribute
            frame: Resolved document frame

        Returns:
            The document as a UTF-8 XML string with declaration
        """
        root = self.build_tree(path_data, frame)
        data = etree.tostring(
            root,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=True,
        )
        return data.decode("utf-8")
