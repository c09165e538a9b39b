"""Unit tests for the glif I/O layer.

Tests for GlifReader, FontInfoReader, SvgWriter, and converter functions.
"""

from pathlib import Path

import pytest

from glif2svg.domain import FontMetrics, PointKind
from glif2svg.exceptions import FontInfoError, GlifLoadError, SvgSaveError
from glif2svg.io import FontInfoReader, GlifReader, SvgWriter, find_glif_files
from glif2svg.io.converter import _recording_to_contours, glif_to_domain

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
TEST_UFO = FIXTURES_DIR / "Test.ufo"
LOOSE_DIR = FIXTURES_DIR / "loose"


class TestGlifToDomain:
    """Tests for glif_to_domain."""

    def test_glyph_attributes(self):
        """Test name, advance and unicodes are read."""
        glyph = glif_to_domain((TEST_UFO / "glyphs" / "square.glif").read_bytes())

        assert glyph.name == "square"
        assert glyph.advance_width == 500
        assert glyph.unicodes == (0x25A0,)
        assert len(glyph.contours) == 1

    def test_point_kinds(self):
        """Test point types map onto PointKind."""
        glyph = glif_to_domain((TEST_UFO / "glyphs" / "o.glif").read_bytes())

        points = glyph.contours[0].points
        assert len(points) == 12
        assert points[0].kind is PointKind.CURVE
        assert points[0].smooth is True
        assert points[1].kind is PointKind.OFF_CURVE
        assert glyph.contours[0].is_closed

    def test_open_contour(self):
        """Test a contour starting with move stays open."""
        glyph = glif_to_domain((LOOSE_DIR / "malformed.glif").read_bytes())

        assert glyph.contours[0].is_closed
        assert not glyph.contours[1].is_closed

    def test_components_counted(self):
        """Test components are counted, not drawn."""
        glyph = glif_to_domain((TEST_UFO / "glyphs" / "aacute.glif").read_bytes())

        assert glyph.contours == ()
        assert glyph.component_count == 2

    def test_no_outline(self):
        """Test a glyph without outline element."""
        glyph = glif_to_domain((TEST_UFO / "glyphs" / "space.glif").read_bytes())

        assert glyph.contours == ()
        assert glyph.advance_width == 250

    def test_recording_to_contours(self):
        """Test conversion of recorded point pen calls."""
        recording = [
            ("beginPath", (), {}),
            ("addPoint", ((0, 0), "line", False, None), {}),
            ("addPoint", ((10, 20), None, False, None), {}),
            ("addPoint", ((20, 0), "qcurve", True, "tip"), {}),
            ("endPath", (), {}),
            ("addComponent", ("a", (1, 0, 0, 1, 0, 0)), {}),
        ]

        contours, components = _recording_to_contours(recording)

        assert components == 1
        assert len(contours) == 1
        kinds = [p.kind for p in contours[0].points]
        assert kinds == [PointKind.LINE, PointKind.OFF_CURVE, PointKind.QCURVE]
        assert contours[0].points[2].name == "tip"


class TestGlifReader:
    """Tests for GlifReader class."""

    def test_load(self):
        """Test loading a glif file."""
        reader = GlifReader(TEST_UFO / "glyphs" / "square.glif")
        glyph = reader.load()
        assert glyph.name == "square"
        assert glyph.contours[0].points[0].to_tuple() == (100, 0)

    def test_load_nonexistent_file(self):
        """Test loading a missing file raises GlifLoadError."""
        reader = GlifReader(Path("nonexistent.glif"))
        with pytest.raises(GlifLoadError, match="file not found"):
            reader.load()

    def test_load_invalid_xml(self):
        """Test that parse errors are wrapped."""
        reader = GlifReader(LOOSE_DIR / "invalid.glif")
        with pytest.raises(GlifLoadError, match="invalid.glif"):
            reader.load()


class TestFindGlifFiles:
    """Tests for find_glif_files."""

    def test_ufo_root(self):
        """Test a UFO is searched in its glyphs directory."""
        names = [p.stem for p in find_glif_files(TEST_UFO)]
        assert names == ["aacute", "o", "space", "square"]

    def test_plain_directory(self):
        """Test a directory of glifs is searched directly."""
        names = [p.stem for p in find_glif_files(LOOSE_DIR)]
        assert names == ["invalid", "lone", "malformed"]

    def test_empty_directory(self, tmp_path: Path):
        """Test a directory without glifs."""
        assert find_glif_files(tmp_path) == []


class TestFontInfoReader:
    """Tests for FontInfoReader class."""

    def test_locate_in_ufo(self):
        """Test fontinfo is found two levels above the glif."""
        path = FontInfoReader.locate(TEST_UFO / "glyphs" / "square.glif")
        assert path == (TEST_UFO / "fontinfo.plist").resolve()

    def test_locate_outside_ufo(self):
        """Test an unparented glif has no fontinfo."""
        assert FontInfoReader.locate(LOOSE_DIR / "lone.glif") is None

    def test_read(self):
        """Test reading vertical metrics."""
        metrics = FontInfoReader().read(TEST_UFO / "fontinfo.plist")
        assert metrics == FontMetrics(units_per_em=1000, ascender=800, descender=-200)

    def test_read_partial(self, tmp_path: Path):
        """Test that absent keys are None."""
        plist = tmp_path / "fontinfo.plist"
        plist.write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<plist version="1.0"><dict>'
            "<key>unitsPerEm</key><integer>2048</integer>"
            "</dict></plist>\n",
            encoding="utf-8",
        )

        metrics = FontInfoReader().read(plist)

        assert metrics.units_per_em == 2048
        assert metrics.ascender is None
        assert metrics.descender is None

    def test_read_missing(self, tmp_path: Path):
        """Test a missing plist raises FontInfoError."""
        with pytest.raises(FontInfoError):
            FontInfoReader().read(tmp_path / "fontinfo.plist")

    def test_read_not_a_dict(self, tmp_path: Path):
        """Test that a plist without a top-level dict is rejected."""
        plist = tmp_path / "fontinfo.plist"
        plist.write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<plist version="1.0"><array/></plist>\n',
            encoding="utf-8",
        )

        with pytest.raises(FontInfoError, match="not a dict"):
            FontInfoReader().read(plist)


class TestSvgWriter:
    """Tests for SvgWriter class."""

    def test_write_file(self, tmp_path: Path):
        """Test writing creates parent directories."""
        output = tmp_path / "out" / "a.svg"

        SvgWriter(output).write("<svg/>")

        assert output.read_text(encoding="utf-8") == "<svg/>"

    def test_write_stdout(self, capsys):
        """Test writing to standard output."""
        writer = SvgWriter(None)
        assert writer.to_stdout

        writer.write("<svg/>")

        assert capsys.readouterr().out == "<svg/>"

    def test_dash_means_stdout(self):
        """Test that '-' selects standard output."""
        assert SvgWriter(Path("-")).to_stdout

    def test_write_failure(self, tmp_path: Path):
        """Test that an unwritable destination raises SvgSaveError."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(SvgSaveError):
            SvgWriter(blocker / "a.svg").write("<svg/>")

    def test_get_svg_path(self):
        """Test batch output naming."""
        path = SvgWriter.get_svg_path(Path("Font.ufo/glyphs/A_.glif"), Path("out"))
        assert path == Path("out/A_.svg")

    def test_get_output_dir(self):
        """Test default batch output directory."""
        assert SvgWriter.get_output_dir(Path("fonts/Font.ufo")) == Path("fonts/Font.ufo-svg")
