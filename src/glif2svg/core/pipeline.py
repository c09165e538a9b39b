"""Glyph to SVG pipeline.

Resolves the document frame once, converts the outline with the frame's
coordinate transform and wraps the result in a document. Pure: no logging,
no I/O.
"""

from dataclasses import dataclass

from glif2svg.config import ConversionConfig
from glif2svg.core.document import DocumentAssembler, Frame, resolve_frame
from glif2svg.core.pen import PathConverter, PathData
from glif2svg.domain import FontMetrics, Glyph
from glif2svg.exceptions import ConversionError, GeometryError


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """A converted glyph.

    Attributes:
        svg: Serialized SVG document
        frame: Frame the document was sized from
        path: Path data and skipped contours
    """

    svg: str
    frame: Frame
    path: PathData


class GlyphConverter:
    """Converts glyphs to SVG documents.

    Example:
        converter = GlyphConverter(ConversionConfig(precision=2))
        result = converter.convert(glyph, metrics)
        print(result.svg)
    """

    def __init__(self, config: ConversionConfig | None = None) -> None:
        self.config = config or ConversionConfig()
        self.assembler = DocumentAssembler(
            precision=self.config.precision,
            omit_viewbox=self.config.omit_viewbox,
        )

    def convert(self, glyph: Glyph, metrics: FontMetrics | None = None) -> ConversionResult:
        """Convert one glyph.

        Args:
            glyph: Glyph to convert
            metrics: Font metrics, None to size from the outline

        Returns:
            ConversionResult with the document

        Raises:
            ConversionError: If the outline cannot be turned into a path
        """
        frame = resolve_frame(glyph, metrics, ignore_metrics=self.config.ignore_metrics)
        converter = PathConverter(
            frame.transform,
            precision=self.config.precision,
            empty_contours=self.config.empty_contours,
            malformed_contours=self.config.malformed_contours,
        )

        try:
            path = converter.convert(glyph.contours)
        except GeometryError as e:
            raise ConversionError(glyph.name, str(e)) from e

        svg = self.assembler.assemble(path.d, frame)
        return ConversionResult(svg=svg, frame=frame, path=path)
