"""Font metrics from a UFO's fontinfo.plist."""

from pathlib import Path

from fontTools.misc import plistlib

from glif2svg.domain import FontMetrics
from glif2svg.exceptions import FontInfoError

FONTINFO_FILENAME = "fontinfo.plist"


class FontInfoReader:
    """Reads font-wide metrics used to size glyph documents.

    Example:
        path = FontInfoReader.locate(Path("Font.ufo/glyphs/a.glif"))
        if path is not None:
            metrics = FontInfoReader().read(path)
    """

    @staticmethod
    def locate(glif_path: Path) -> Path | None:
        """Find the fontinfo.plist of the UFO containing a glif.

        Glifs live in a layer directory directly under the UFO root
        (`Font.ufo/glyphs/a.glif`), so the plist is two levels up.

        Args:
            glif_path: Path to a .glif file

        Returns:
            Path to fontinfo.plist, or None for an unparented glif
        """
        candidate = glif_path.resolve().parent.parent / FONTINFO_FILENAME
        if candidate.is_file():
            return candidate
        return None

    def read(self, fontinfo_path: Path) -> FontMetrics:
        """Read unitsPerEm, ascender and descender.

        Args:
            fontinfo_path: Path to fontinfo.plist

        Returns:
            FontMetrics; absent keys are None

        Raises:
            FontInfoError: If the file is missing or is not a valid plist dict
        """
        try:
            with open(fontinfo_path, "rb") as fp:
                info = plistlib.load(fp)
        except Exception as e:
            raise FontInfoError(str(fontinfo_path), str(e)) from e

        if not isinstance(info, dict):
            raise FontInfoError(str(fontinfo_path), "top-level object is not a dict")

        return FontMetrics(
            units_per_em=info.get("unitsPerEm"),
            ascender=info.get("ascender"),
            descender=info.get("descender"),
        )
