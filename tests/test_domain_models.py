"""Tests for domain models to verify they work correctly."""

import pytest

from glif2svg.domain import Bounds, Contour, FontMetrics, Glyph, Point, PointKind
from glif2svg.exceptions import UnknownPointKindError


class TestPointKind:
    """Tests for PointKind enum."""

    @pytest.mark.parametrize(
        ("segment_type", "expected"),
        [
            ("move", PointKind.MOVE),
            ("line", PointKind.LINE),
            ("curve", PointKind.CURVE),
            ("qcurve", PointKind.QCURVE),
            ("offcurve", PointKind.OFF_CURVE),
            (None, PointKind.OFF_CURVE),
        ],
    )
    def test_from_segment_type(self, segment_type, expected) -> None:
        """Test mapping of UFO point types."""
        assert PointKind.from_segment_type(segment_type) is expected

    def test_unknown_segment_type(self) -> None:
        """Test that an unknown tag is rejected."""
        with pytest.raises(UnknownPointKindError, match="spline"):
            PointKind.from_segment_type("spline")

    def test_on_curve(self) -> None:
        """Test on-curve classification."""
        assert PointKind.LINE.is_on_curve
        assert PointKind.QCURVE.is_on_curve
        assert not PointKind.OFF_CURVE.is_on_curve


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0
        assert p.kind == PointKind.LINE
        assert p.is_on_curve

    def test_point_to_tuple(self) -> None:
        """Test conversion to a coordinate pair."""
        p = Point(100.0, 200.0, PointKind.OFF_CURVE, smooth=True, name="tip")
        assert p.to_tuple() == (100.0, 200.0)
        assert not p.is_on_curve

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestContour:
    """Tests for Contour class."""

    def test_closed_by_default(self) -> None:
        """Test that a contour not starting with move is closed."""
        contour = Contour(points=[Point(0, 0), Point(100, 0), Point(100, 100)])
        assert contour.is_closed

    def test_open_contour(self) -> None:
        """Test that a contour starting with move is open."""
        contour = Contour(points=[Point(0, 0, PointKind.MOVE), Point(100, 0)])
        assert not contour.is_closed

    def test_points_stored_as_tuple(self) -> None:
        """Test that list input is frozen into a tuple."""
        contour = Contour(points=[Point(0, 0)])
        assert isinstance(contour.points, tuple)

    def test_empty(self) -> None:
        """Test empty contour detection."""
        assert Contour().is_empty()
        assert not Contour(points=[Point(0, 0)]).is_empty()


class TestBounds:
    """Tests for Bounds class."""

    def test_from_points(self) -> None:
        """Test tightest box around points."""
        bounds = Bounds.from_points([Point(10, 20), Point(110, -5), Point(50, 70)])
        assert bounds == Bounds(10, -5, 110, 70)
        assert bounds.width == 100
        assert bounds.height == 75

    def test_from_no_points(self) -> None:
        """Test that no points gives an empty box."""
        assert Bounds.from_points([]) == Bounds.empty()


class TestFontMetrics:
    """Tests for FontMetrics class."""

    def test_vertical_extent(self) -> None:
        """Test extent from ascender and descender."""
        metrics = FontMetrics(units_per_em=1000, ascender=800, descender=-200)
        assert metrics.vertical_extent() == (-200.0, 800.0)

    def test_vertical_extent_from_units_per_em(self) -> None:
        """Test that a missing ascender falls back to the em height."""
        metrics = FontMetrics(units_per_em=2048)
        assert metrics.vertical_extent() == (0.0, 2048.0)

    def test_vertical_extent_unusable(self) -> None:
        """Test that metrics without ascender or UPM are unusable."""
        assert FontMetrics(descender=-200).vertical_extent() is None


class TestGlyph:
    """Tests for Glyph class."""

    def test_empty_glyph(self) -> None:
        """Test glyph without contours."""
        glyph = Glyph(name="space", advance_width=250)
        assert glyph.contours == ()
        assert glyph.bounds() == Bounds.empty()

    def test_bounds_across_contours(self) -> None:
        """Test bounds span every contour."""
        glyph = Glyph(
            name="colon",
            contours=[
                Contour(points=[Point(0, 0), Point(10, 10)]),
                Contour(points=[Point(0, 100), Point(10, 110)]),
            ],
        )
        assert glyph.bounds() == Bounds(0, 0, 10, 110)

    def test_bounds_include_off_curve(self) -> None:
        """Test bounds use control points, not the drawn curve."""
        glyph = Glyph(
            name="n",
            contours=[
                Contour(
                    points=[
                        Point(0, 0),
                        Point(50, 150, PointKind.OFF_CURVE),
                        Point(100, 0, PointKind.QCURVE),
                    ]
                )
            ],
        )
        assert glyph.bounds() == Bounds(0, 0, 100, 150)

    def test_sequences_frozen(self) -> None:
        """Test list input is stored as tuples."""
        glyph = Glyph(name="A", contours=[Contour()], unicodes=[0x41])
        assert glyph.contours == (Contour(),)
        assert glyph.unicodes == (0x41,)
