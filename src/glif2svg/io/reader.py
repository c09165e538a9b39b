"""Glif reader for loading single glyph files.

This module provides the GlifReader class for loading `.glif` files into
domain models, and helpers for finding glif files in a UFO.
"""

from pathlib import Path

from glif2svg.domain import Glyph
from glif2svg.exceptions import GlifLoadError
from glif2svg.io.converter import glif_to_domain


class GlifReader:
    """Loads a `.glif` file and converts it to a domain Glyph.

    Example:
        reader = GlifReader(Path("Font.ufo/glyphs/a.glif"))
        glyph = reader.load()
        print(glyph.name)
    """

    def __init__(self, glif_path: Path) -> None:
        """Initialize the glif reader.

        Args:
            glif_path: Path to the .glif file
        """
        self._glif_path = glif_path

    def load(self) -> Glyph:
        """Load and parse the glif file.

        Returns:
            The parsed Glyph

        Raises:
            GlifLoadError: If the file is missing or cannot be parsed
        """
        if not self._glif_path.exists():
            raise GlifLoadError(str(self._glif_path), "file not found")

        try:
            data = self._glif_path.read_bytes()
            return glif_to_domain(data, name_hint=self._glif_path.stem)
        except Exception as e:
            raise GlifLoadError(str(self._glif_path), str(e)) from e


def find_glif_files(input_dir: Path) -> list[Path]:
    """List the glif files to convert in a directory.

    A UFO directory is searched in its default `glyphs` layer; any other
    directory is searched directly.

    Args:
        input_dir: UFO or glyphs directory

    Returns:
        Sorted list of .glif paths
    """
    glyphs_dir = input_dir / "glyphs"
    search_dir = glyphs_dir if glyphs_dir.is_dir() else input_dir
    return sorted(search_dir.glob("*.glif"))
