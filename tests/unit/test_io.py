"""Unit tests for the font, pen and SVG I/O layer.

Tests for FontReader, ArcPen, and SvgWriter.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from arcglyph.core.path import to_arc_cmds
from arcglyph.domain import INFINITY, Endpoint, Extent, Point
from arcglyph.exceptions import FontLoadError, GlyphNotFoundError
from arcglyph.io.pen import ArcPen
from arcglyph.io.reader import FontReader
from arcglyph.io.writer import SvgWriter

SVG_NS = "{http://www.w3.org/2000/svg}"


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.ttf")
        reader = FontReader(path)
        assert reader._font_path == path
        assert reader._font is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FontLoadError."""
        reader = FontReader(Path("nonexistent.ttf"))
        with pytest.raises(FontLoadError) as exc_info:
            reader.load()
        assert exc_info.value.reason == "file not found"

    def test_load_invalid_file(self, tmp_path: Path):
        """Test loading a file that is not a font raises FontLoadError."""
        path = tmp_path / "bad.ttf"
        path.write_bytes(b"this is not a font")
        with pytest.raises(FontLoadError):
            FontReader(path).load()

    def test_format_before_load(self):
        """Test accessing format before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.format

    def test_units_per_em_before_load(self):
        """Test accessing units_per_em before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.units_per_em

    def test_get_outline_before_load(self):
        """Test reading an outline before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.get_outline("a")

    @patch("arcglyph.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format_opentype(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test format property for OpenType fonts."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "CFF ")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.otf"))
        reader.load()

        assert reader.format == "OpenType"

    def test_font_properties(self, font_path: Path):
        """Test properties of a real TrueType font."""
        with FontReader(font_path) as reader:
            assert reader.format == "TrueType"
            assert reader.units_per_em == 1000
            assert reader.glyph_count == 4

    def test_glyph_name_for_char(self, font_path: Path):
        """Test cmap lookup."""
        with FontReader(font_path) as reader:
            assert reader.glyph_name_for_char("O") == "O"
            assert reader.glyph_name_for_char(" ") == "space"
            with pytest.raises(GlyphNotFoundError, match="U\\+0078"):
                reader.glyph_name_for_char("x")

    def test_get_outline(self, font_path: Path):
        """Test outline recording and metrics."""
        with FontReader(font_path) as reader:
            outline = reader.get_outline("I")

        assert outline.name == "I"
        assert outline.metadata.unicode == ord("I")
        assert outline.metadata.advance_width == 300
        assert outline.units_per_em == 1000
        assert outline.recording[0][0] == "moveTo"
        assert outline.recording[-1][0] == "closePath"

    def test_empty_glyph(self, font_path: Path):
        """A glyph without contours records nothing."""
        with FontReader(font_path) as reader:
            assert reader.get_outline(" ").is_empty()

    def test_context_manager_closes(self, font_path: Path):
        """Test the font is released on exit."""
        with FontReader(font_path) as reader:
            assert reader._font is not None
        assert reader._font is None


class TestArcPen:
    """Tests for ArcPen."""

    def test_lines(self):
        pen = ArcPen(None, tolerance=1.0)
        pen.moveTo((0, 0))
        pen.lineTo((10, 0))
        pen.lineTo((10, 10))
        pen.closePath()

        assert pen.endpoints == [
            Endpoint(0, 0, INFINITY),
            Endpoint(10, 0, 0.0),
            Endpoint(10, 10, 0.0),
            Endpoint(0, 0, 0.0),
        ]
        assert pen.max_error == 0.0

    def test_open_path_stays_open(self):
        pen = ArcPen(None, tolerance=1.0)
        pen.moveTo((0, 0))
        pen.lineTo((10, 0))
        pen.lineTo((10, 10))
        pen.endPath()

        assert len(pen.endpoints) == 3
        assert pen.endpoints[-1].point == Point(10, 10)

    def test_quadratic_spline_with_implied_point(self):
        pen = ArcPen(None, tolerance=1.0)
        pen.moveTo((0, 0))
        pen.qCurveTo((0, 100), (100, 100), (100, 0))
        pen.closePath()

        points = [e.point for e in pen.endpoints]
        assert Point(50, 100) in points
        assert Point(100, 0) in points
        assert pen.endpoints[-1] == Endpoint(0, 0, 0.0)
        assert pen.max_error <= 1.0

    def test_cubic(self):
        pen = ArcPen(None, tolerance=0.5)
        pen.moveTo((0, 0))
        pen.curveTo((0, 55), (45, 100), (100, 100))
        pen.endPath()

        endpoints = pen.endpoints
        assert endpoints[0].is_move()
        assert endpoints[-1].point == Point(100, 100)
        assert all(0.0 < abs(e.d) <= 0.5 for e in endpoints[1:])

    def test_endpoints_is_a_copy(self):
        pen = ArcPen(None)
        pen.moveTo((0, 0))
        pen.lineTo((1, 0))
        pen.endpoints.clear()
        assert len(pen.endpoints) == 2


class TestSvgWriter:
    """Tests for SvgWriter."""

    @pytest.fixture
    def extent(self) -> Extent:
        extent = Extent()
        extent.add(Point(0, 0))
        extent.add(Point(100, 50))
        return extent

    @pytest.fixture
    def commands(self):
        return to_arc_cmds(
            [
                Endpoint(0, 0, INFINITY),
                Endpoint(100, 0, 0.0),
                Endpoint(100, 50, 0.5),
                Endpoint(10, 10, INFINITY),
                Endpoint(20, 10, 0.0),
            ]
        )

    def test_view_box_adds_padding(self, extent):
        writer = SvgWriter(extent, padding=8)
        assert writer.view_box == (-8, -8, 116, 66)
        assert 'viewBox="-8 -8 116 66"' in writer.to_string()

    def test_empty_extent(self):
        writer = SvgWriter(Extent(), padding=4)
        assert writer.view_box == (0, 0, 8, 8)

    def test_paths_and_markers(self, extent, commands):
        writer = SvgWriter(extent)
        writer.add_commands(commands)
        root = ET.fromstring(writer.to_string().encode("utf-8"))

        paths = [p.get("d") for p in root.iter(f"{SVG_NS}path")]
        assert paths == commands.path_data()
        assert len(list(root.iter(f"{SVG_NS}circle"))) == 5

    def test_markers_disabled(self, extent, commands):
        writer = SvgWriter(extent, marker_radius=0)
        writer.add_commands(commands)
        assert "<circle" not in writer.to_string()

    def test_outline_and_title(self, extent):
        writer = SvgWriter(extent, title="a<b")
        writer.set_outline("M0 0L10 0L10 10Z")
        text = writer.to_string()
        assert "<title>a&lt;b</title>" in text
        assert 'd="M0 0L10 0L10 10Z" fill="#e0e0e0"' in text

    def test_save(self, tmp_path: Path, extent, commands):
        writer = SvgWriter(extent)
        writer.add_commands(commands)
        output = tmp_path / "glyph.svg"
        writer.save(output)
        assert output.read_text(encoding="utf-8").startswith("<?xml")

    def test_get_output_path(self):
        out = Path("out")
        assert SvgWriter.get_output_path(out, "a", 0x61) == out / "U+0061_a.svg"
        assert SvgWriter.get_output_path(out, "f i/x", None) == out / "f_i_x.svg"
