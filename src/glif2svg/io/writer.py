"""SVG writer.

This module provides the SvgWriter class for writing documents to a file or
to standard output, and the output naming convention for batch runs.
"""

import sys
from pathlib import Path

from glif2svg.exceptions import SvgSaveError

STDOUT = "-"


class SvgWriter:
    """Writes SVG documents to a file or standard output.

    Example:
        writer = SvgWriter(Path("a.svg"))
        writer.write(result.svg)
    """

    def __init__(self, output_path: Path | None = None) -> None:
        """Initialize the writer.

        Args:
            output_path: Destination file; None or '-' writes to stdout
        """
        if output_path is not None and str(output_path) == STDOUT:
            output_path = None
        self._output_path = output_path

    @property
    def to_stdout(self) -> bool:
        return self._output_path is None

    def write(self, svg: str) -> None:
        """Write the document.

        Args:
            svg: Serialized SVG document

        Raises:
            SvgSaveError: If the file cannot be written
        """
        if self._output_path is None:
            sys.stdout.write(svg)
            sys.stdout.flush()
            return

        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(svg, encoding="utf-8")
        except OSError as e:
            raise SvgSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_svg_path(glif_path: Path, output_dir: Path) -> Path:
        """Output path for a glif in a batch run.

        Converts: glyphs/A_.glif -> out/A_.svg

        Args:
            glif_path: Input .glif path
            output_dir: Batch output directory

        Returns:
            Path with the glif's stem and an .svg suffix
        """
        return output_dir / f"{glif_path.stem}.svg"

    @staticmethod
    def get_output_dir(input_dir: Path) -> Path:
        """Default batch output directory.

        Converts: Font.ufo -> Font.ufo-svg

        Args:
            input_dir: UFO or glyphs directory

        Returns:
            Sibling directory with an -svg suffix
        """
        return input_dir.parent / f"{input_dir.name}-svg"
