"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files
and extracting glyph outlines into domain models.
"""

from pathlib import Path

from fontTools.pens.recordingPen import DecomposingRecordingPen
from fontTools.ttLib import TTFont, TTLibError

from arcglyph.domain.glyph import GlyphMetadata, GlyphOutline
from arcglyph.exceptions import FontLoadError, GlyphNotFoundError


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph outlines.

    Components are decomposed while recording, so outlines can be replayed
    without access to the font.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            outline = reader.get_outline("a")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file does not exist or is not a valid font
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
        except (TTLibError, OSError) as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self._require_font()["maxp"].numGlyphs

    def glyph_name_for_char(self, char: str) -> str:
        """Map a character to its glyph name through the cmap.

        Raises:
            GlyphNotFoundError: If the font has no glyph for the character
        """
        cmap = self._require_font().getBestCmap() or {}
        name = cmap.get(ord(char))
        if name is None:
            raise GlyphNotFoundError(char)
        return name

    def get_outline(self, char: str) -> GlyphOutline:
        """Record the outline of the glyph mapped from a character.

        Args:
            char: A single character

        Returns:
            GlyphOutline with coordinates in font units

        Raises:
            GlyphNotFoundError: If the font has no glyph for the character
        """
        font = self._require_font()
        name = self.glyph_name_for_char(char)

        glyph_set = font.getGlyphSet()
        pen = DecomposingRecordingPen(glyph_set)
        glyph_set[name].draw(pen)

        advance_width, lsb = font["hmtx"][name]
        metadata = GlyphMetadata(
            name=name,
            unicode=ord(char),
            advance_width=advance_width,
            left_side_bearing=lsb,
        )
        return GlyphOutline(
            metadata=metadata,
            units_per_em=self.units_per_em,
            recording=list(pen.value),
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
