"""glif2svg - Convert UFO glyph outlines to SVG.

glif2svg reads a single `.glif` glyph record (or every glyph of a UFO) and
writes an SVG document containing one equivalent path. Document dimensions
come from the font's metrics when they are available, otherwise from the
glyph's own extent.

Example:
    $ glif2svg Font.ufo/glyphs/a.glif a.svg

This will write a.svg sized to the glyph's advance width and the font's
ascender/descender.
"""

__version__ = "0.99.0"
__author__ = "glif2svg authors"

__all__ = ["__author__", "__version__"]
