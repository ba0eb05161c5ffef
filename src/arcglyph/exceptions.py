"""Exception hierarchy for Arcglyph."""


class ArcGlyphError(Exception):
    """Base exception for all Arcglyph errors."""

    pass


class GeometryError(ArcGlyphError):
    """Errors in geometric calculations."""

    pass


class DegenerateVectorError(GeometryError):
    """A zero-length vector was used where a direction is required."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} a zero-length vector")


class InvariantViolationError(GeometryError):
    """Malformed endpoint sequence or other broken input invariant.

    Raised immediately and never recovered from inside the kernel.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"{message} (endpoint {index})"
        super().__init__(message)


class FontError(ArcGlyphError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested character has no glyph in the font."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"No glyph for character {char!r} (U+{ord(char):04X})")


class RenderError(ArcGlyphError):
    """Errors related to rendering glyph debug output."""

    pass


class GlyphRenderError(RenderError):
    """Error rendering a specific glyph."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error rendering glyph '{glyph_name}': {reason}")
