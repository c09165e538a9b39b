"""Tests for document framing and SVG assembly."""

from lxml import etree

from glif2svg.core.document import (
    SVG_NAMESPACE,
    DocumentAssembler,
    Frame,
    FrameSource,
    frame_from_bounds,
    resolve_frame,
)
from glif2svg.domain import Bounds, Contour, FontMetrics, Glyph, Point

SVG = f"{{{SVG_NAMESPACE}}}"


def make_glyph(advance_width: float | None = None) -> Glyph:
    """Glyph with ink from (10, 0) to (110, 50)."""
    contour = Contour(
        points=[Point(10, 0), Point(110, 0), Point(110, 50), Point(10, 50)]
    )
    return Glyph(name="box", contours=[contour], advance_width=advance_width)


class TestResolveFrame:
    """Tests for resolve_frame."""

    def test_metrics_frame(self):
        """Test frame from advance width, ascender and descender."""
        metrics = FontMetrics(units_per_em=1000, ascender=800, descender=-200)

        frame = resolve_frame(make_glyph(advance_width=500), metrics)

        assert frame == Frame(0.0, -200.0, 500.0, 1000.0, FrameSource.METRICS)
        assert frame.transform.apply(0, 0) == (0, 800)

    def test_metrics_frame_ignores_ink(self):
        """Test that a metrics frame does not depend on the outline."""
        metrics = FontMetrics(units_per_em=1000, ascender=800, descender=-200)
        empty = Glyph(name="space", advance_width=250)

        frame = resolve_frame(empty, metrics)

        assert (frame.width, frame.height) == (250.0, 1000.0)

    def test_metrics_without_advance_uses_ink_width(self):
        """Test horizontal extent falls back to the outline."""
        metrics = FontMetrics(units_per_em=1000, ascender=800, descender=-200)

        frame = resolve_frame(make_glyph(), metrics)

        assert frame.source is FrameSource.METRICS
        assert (frame.min_x, frame.width) == (10, 100)
        assert frame.height == 1000

    def test_zero_advance_width(self):
        """Test that an explicit zero advance gives a zero-width frame."""
        metrics = FontMetrics(units_per_em=1000, ascender=800, descender=-200)
        mark = Glyph(
            name="acutecomb",
            contours=[Contour(points=[Point(-150, 500), Point(-50, 500), Point(-100, 600)])],
            advance_width=0,
        )

        frame = resolve_frame(mark, metrics)

        assert frame == Frame(0.0, -200.0, 0.0, 1000.0, FrameSource.METRICS)
        assert frame.transform.apply(-150, 500) == (-150, 300)

    def test_units_per_em_only(self):
        """Test that the em height is used when ascender is missing."""
        frame = resolve_frame(make_glyph(600), FontMetrics(units_per_em=2048))

        assert (frame.min_y, frame.height) == (0.0, 2048.0)

    def test_bounds_fallback(self):
        """Test frame from the outline when no metrics are given."""
        frame = resolve_frame(make_glyph(advance_width=500))

        assert frame == Frame(10, 0, 100, 50, FrameSource.BOUNDS)

    def test_unusable_metrics_fall_back(self):
        """Test that metrics without ascender or em size are ignored."""
        frame = resolve_frame(make_glyph(), FontMetrics(descender=-200))

        assert frame.source is FrameSource.BOUNDS

    def test_ignore_metrics(self):
        """Test that metrics can be ignored on request."""
        metrics = FontMetrics(units_per_em=1000, ascender=800, descender=-200)

        frame = resolve_frame(make_glyph(500), metrics, ignore_metrics=True)

        assert frame.source is FrameSource.BOUNDS
        assert (frame.width, frame.height) == (100, 50)

    def test_empty_glyph_without_metrics(self):
        """Test that an empty outline gives a zero-sized frame."""
        frame = resolve_frame(Glyph(name="space"))

        assert (frame.width, frame.height) == (0, 0)

    def test_frame_from_bounds(self):
        """Test frame covering a bounding box."""
        frame = frame_from_bounds(Bounds(-5, -10, 15, 30))

        assert frame == Frame(-5, -10, 20, 40, FrameSource.BOUNDS)


class TestDocumentAssembler:
    """Tests for DocumentAssembler."""

    def test_build_tree(self):
        """Test root element attributes and single path child."""
        frame = Frame(0, 0, 100, 50, FrameSource.BOUNDS)

        root = DocumentAssembler().build_tree("M 0 50 L 100 50 Z", frame)

        assert root.tag == f"{SVG}svg"
        assert root.get("width") == "100"
        assert root.get("height") == "50"
        assert root.get("viewBox") == "0 0 100 50"
        assert len(root) == 1
        assert root[0].tag == f"{SVG}path"
        assert root[0].get("d") == "M 0 50 L 100 50 Z"

    def test_attribute_order(self):
        """Test that attributes serialize in a fixed order."""
        frame = Frame(0, 0, 100, 50, FrameSource.BOUNDS)

        root = DocumentAssembler().build_tree("", frame)

        assert list(root.attrib.keys()) == ["width", "height", "viewBox"]

    def test_omit_viewbox(self):
        """Test that the viewBox can be left out."""
        frame = Frame(0, 0, 100, 50, FrameSource.BOUNDS)

        root = DocumentAssembler(omit_viewbox=True).build_tree("", frame)

        assert root.get("viewBox") is None
        assert root.get("width") == "100"

    def test_dimensions_use_precision(self):
        """Test that width and height follow the precision setting."""
        frame = Frame(0, 0, 100 / 3, 12.5, FrameSource.BOUNDS)

        root = DocumentAssembler(precision=2).build_tree("", frame)

        assert root.get("width") == "33.33"
        assert root.get("height") == "12.5"
        assert root.get("viewBox") == "0 0 33.33 12.5"

    def test_assemble_is_parseable(self):
        """Test that the serialized document parses back."""
        frame = Frame(0, -200, 500, 1000, FrameSource.METRICS)

        svg = DocumentAssembler().assemble("M 0 800 L 500 800 Z", frame)

        assert svg.startswith("<?xml")
        assert "UTF-8" in svg.splitlines()[0]
        root = etree.fromstring(svg.encode("utf-8"))
        assert root.nsmap[None] == SVG_NAMESPACE
        paths = root.findall(f"{SVG}path")
        assert len(paths) == 1
        assert paths[0].get("d") == "M 0 800 L 500 800 Z"

    def test_empty_path(self):
        """Test that an empty outline still produces a path element."""
        frame = Frame(0, 0, 0, 0, FrameSource.BOUNDS)

        svg = DocumentAssembler().assemble("", frame)

        root = etree.fromstring(svg.encode("utf-8"))
        assert root.find(f"{SVG}path").get("d") == ""

    def test_deterministic(self):
        """Test that equal inputs give identical output."""
        frame = Frame(0, 0, 10, 10, FrameSource.BOUNDS)
        assembler = DocumentAssembler()

        assert assembler.assemble("M 0 0 Z", frame) == assembler.assemble("M 0 0 Z", frame)
