"""SVG writer for arc path debug output.

This module provides the SvgWriter class, which assembles reconstructed arc
path commands into a standalone SVG document.
"""

from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

from arcglyph.core.path import ArcCommands, format_number
from arcglyph.domain import Extent

ARC_STROKE = "#d03030"
OUTLINE_FILL = "#e0e0e0"
MARKER_FILL = "#2060c0"


class SvgWriter:
    """Writes arc path commands as a debug SVG document.

    Each command group becomes one <path>; every endpoint gets a marker
    <circle>. An optional filled outline is drawn underneath for comparison.

    Example:
        writer = SvgWriter(extent, padding=8.0)
        writer.add_commands(to_arc_cmds(endpoints))
        writer.save(Path("a.svg"))
    """

    def __init__(
        self,
        extent: Extent,
        padding: float = 8.0,
        stroke_width: float = 1.0,
        marker_radius: float = 1.5,
        title: str | None = None,
    ) -> None:
        """Initialize the writer.

        Args:
            extent: Area the drawing covers, in output units
            padding: Margin added around the extent
            stroke_width: Stroke width of arc paths
            marker_radius: Radius of endpoint markers (0 disables them)
            title: Optional document title
        """
        if extent.is_empty():
            self._view_box = (0.0, 0.0, 2.0 * padding, 2.0 * padding)
        else:
            self._view_box = (
                extent.min_x - padding,
                extent.min_y - padding,
                extent.width + 2.0 * padding,
                extent.height + 2.0 * padding,
            )
        self._stroke_width = stroke_width
        self._marker_radius = marker_radius
        self._title = title
        self._outline: str | None = None
        self._paths: list[str] = []
        self._points: list[tuple[float, float]] = []

    @property
    def view_box(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, width, height) of the document."""
        return self._view_box

    def set_outline(self, path_data: str) -> None:
        """Set the path data of the outline drawn underneath the arcs."""
        self._outline = path_data or None

    def add_commands(self, commands: ArcCommands) -> None:
        """Add every command group and endpoint marker."""
        self._paths.extend(commands.path_data())
        self._points.extend(commands.points)

    def to_string(self) -> str:
        """Render the SVG document."""
        view_box = " ".join(format_number(v) for v in self._view_box)
        width = format_number(self._view_box[2])
        height = format_number(self._view_box[3])

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
            f'viewBox="{view_box}">',
        ]
        if self._title:
            lines.append(f"  <title>{escape(self._title)}</title>")

        if self._outline:
            lines.append(
                f'  <path d={quoteattr(self._outline)} fill="{OUTLINE_FILL}" '
                'fill-rule="nonzero" stroke="none"/>'
            )

        lines.append(
            f'  <g fill="none" stroke="{ARC_STROKE}" '
            f'stroke-width="{format_number(self._stroke_width)}">'
        )
        for path_data in self._paths:
            lines.append(f"    <path d={quoteattr(path_data)}/>")
        lines.append("  </g>")

        if self._marker_radius > 0.0 and self._points:
            lines.append(f'  <g fill="{MARKER_FILL}" stroke="none">')
            r = format_number(self._marker_radius)
            for x, y in self._points:
                lines.append(
                    f'    <circle cx="{format_number(x)}" cy="{format_number(y)}" r="{r}"/>'
                )
            lines.append("  </g>")

        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self, output_path: Path) -> None:
        """Write the SVG document to a file.

        Raises:
            OSError: If the file cannot be written
        """
        output_path.write_text(self.to_string(), encoding="utf-8")

    @staticmethod
    def get_output_path(output_dir: Path, glyph_name: str, codepoint: int | None) -> Path:
        """Generate the output file path for a glyph.

        Converts: ("a", 0x61) -> output_dir/U+0061_a.svg
                  ("f_i", None) -> output_dir/f_i.svg

        Args:
            output_dir: Directory for SVG files
            glyph_name: Glyph name
            codepoint: Unicode code point, if encoded

        Returns:
            Path of the SVG file
        """
        safe_name = "".join(c if c.isalnum() or c in "._-" else "_" for c in glyph_name)
        if codepoint is None:
            return output_dir / f"{safe_name}.svg"
        return output_dir / f"U+{codepoint:04X}_{safe_name}.svg"
