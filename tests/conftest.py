"""Shared fixtures: a small TrueType font built in memory."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000


def _draw_o(pen: TTGlyphPen) -> None:
    # Outer contour from quadratic quarter curves
    pen.moveTo((400, 100))
    pen.qCurveTo((700, 100), (700, 400))
    pen.qCurveTo((700, 700), (400, 700))
    pen.qCurveTo((100, 700), (100, 400))
    pen.qCurveTo((100, 100), (400, 100))
    pen.closePath()
    # Counter
    pen.moveTo((300, 300))
    pen.lineTo((300, 500))
    pen.lineTo((500, 500))
    pen.lineTo((500, 300))
    pen.closePath()


def _draw_i(pen: TTGlyphPen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((200, 700))
    pen.lineTo((200, 0))
    pen.closePath()


def build_test_font(path: Path) -> Path:
    """Build a TrueType font with glyphs 'O', 'I' and an empty space."""
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "O", "I"])

    glyf = {}
    hmtx = {}

    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((450, 0))
    pen.lineTo((450, 700))
    pen.lineTo((50, 700))
    pen.closePath()
    glyf[".notdef"] = pen.glyph()
    hmtx[".notdef"] = (500, 50)

    glyf["space"] = TTGlyphPen(None).glyph()
    hmtx["space"] = (250, 0)

    pen = TTGlyphPen(None)
    _draw_o(pen)
    glyf["O"] = pen.glyph()
    hmtx["O"] = (800, 100)

    pen = TTGlyphPen(None)
    _draw_i(pen)
    glyf["I"] = pen.glyph()
    hmtx["I"] = (300, 100)

    fb.setupGlyf(glyf)
    fb.setupHorizontalMetrics(hmtx)
    fb.setupCharacterMap({ord(" "): "space", ord("O"): "O", ord("I"): "I"})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
    )
    fb.setupNameTable(
        {
            "familyName": "Arcglyph Test",
            "styleName": "Regular",
        }
    )
    fb.setupPost()

    fb.save(str(path))
    return path


@pytest.fixture
def font_path(tmp_path: Path) -> Path:
    """Path to a freshly built test font."""
    return build_test_font(tmp_path / "ArcglyphTest-Regular.ttf")
