"""Exception hierarchy for glif2svg."""


class Glif2SvgError(Exception):
    """Base exception for all glif2svg errors."""

    pass


class GlifError(Glif2SvgError):
    """Errors related to reading glyphs or writing documents."""

    pass


class GlifLoadError(GlifError):
    """Error loading a glif file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load glif '{path}': {reason}")


class SvgSaveError(GlifError):
    """Error writing an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save SVG '{path}': {reason}")


class FontInfoError(GlifError):
    """Font metrics could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font info '{path}': {reason}")


class GeometryError(Glif2SvgError):
    """Errors in outline to path translation."""

    pass


class EmptyContourError(GeometryError):
    """A contour has no points."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Contour {index} has no points")


class MalformedContourError(GeometryError):
    """Point sequence of a contour cannot be turned into segments."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MalformedCurveError(MalformedContourError):
    """A curve point lacks the off-curve points it needs."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnknownPointKindError(GeometryError):
    """Point carries a type tag outside the UFO point types."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Unknown point type: {kind!r}")


class ConversionError(Glif2SvgError):
    """Error converting a specific glyph."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error converting glyph '{glyph_name}': {reason}")