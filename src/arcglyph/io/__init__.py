"""Font and SVG I/O layer for arcglyph.

This module handles reading fonts using fonttools and writing debug SVG
output. It provides a clean abstraction layer between fonttools and the
domain models.

Key responsibilities:
- Load TTF/OTF fonts and record glyph outlines
- Draw outlines into arc endpoint sequences
- Write arc paths as SVG documents

Key classes:
- FontReader: Load fonts and extract glyph outlines
- ArcPen: fontTools pen producing arc endpoint sequences
- SvgWriter: Save arc path debug SVGs
"""

from arcglyph.io.pen import ArcPen
from arcglyph.io.reader import FontReader
from arcglyph.io.writer import SvgWriter

__all__ = [
    "ArcPen",
    "FontReader",
    "SvgWriter",
]
