"""Parallel rendering of glyph outlines to arc path debug SVGs.

This module runs the full pipeline for a string of characters, with each
glyph rendered in a worker process by ProcessPoolExecutor.

Key components:
- outline_to_endpoints: Draw a recorded outline into an arc endpoint sequence
- render_outline: Build the debug SVG for one outline
- process_glyph: Top-level picklable function for parallel execution
- GlyphProcessor: Main orchestrator class
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from fontTools.pens.recordingPen import replayRecording
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen

from arcglyph.config import ApproximationConfig, ArcGlyphSettings, RenderConfig
from arcglyph.core.path import to_arc_cmds
from arcglyph.core.sdf import endpoint_list_extents
from arcglyph.domain import Endpoint, Extent, GlyphOutline
from arcglyph.exceptions import GlyphNotFoundError, GlyphRenderError
from arcglyph.io import ArcPen, FontReader, SvgWriter
from arcglyph.utils import RenderLogger, RenderStats, configure_logging


def outline_to_endpoints(
    outline: GlyphOutline,
    config: ApproximationConfig,
) -> tuple[list[Endpoint], float]:
    """Draw a recorded outline into an arc endpoint sequence.

    Args:
        outline: Glyph outline in font units
        config: Approximation settings (tolerance is scaled by the UPM)

    Returns:
        Tuple of (endpoints in font units, max approximation error)
    """
    pen = ArcPen(
        None,
        tolerance=config.get_tolerance(outline.units_per_em),
        max_d=config.max_d,
        d_bits=config.d_bits,
        max_segments=config.max_segments,
    )
    replayRecording(outline.recording, pen)
    return pen.endpoints, pen.max_error


def transform_endpoints(
    endpoints: Sequence[Endpoint],
    config: RenderConfig,
    upm: int,
) -> list[Endpoint]:
    """Map endpoints from font units to output units."""
    scale = config.get_scale(upm)
    return [
        e.transformed(scale, config.offset_x, config.offset_y, config.flip_y)
        for e in endpoints
    ]


def render_outline(
    outline: GlyphOutline,
    endpoints: Sequence[Endpoint],
    config: RenderConfig,
) -> SvgWriter:
    """Build the debug SVG for an outline.

    Args:
        outline: Glyph outline in font units (drawn as the underlay)
        endpoints: Endpoint sequence already in output units
        config: Render settings

    Returns:
        SvgWriter holding the document
    """
    extent = Extent()
    endpoint_list_extents(endpoints, extent)

    writer = SvgWriter(
        extent,
        padding=config.padding,
        stroke_width=config.stroke_width,
        marker_radius=config.marker_radius,
        title=outline.name,
    )

    if config.show_outline:
        scale = config.get_scale(outline.units_per_em)
        y_scale = -scale if config.flip_y else scale
        svg_pen = SVGPathPen(None)
        transform_pen = TransformPen(
            svg_pen, (scale, 0, 0, y_scale, config.offset_x, config.offset_y)
        )
        replayRecording(outline.recording, transform_pen)
        writer.set_outline(svg_pen.getCommands())

    writer.add_commands(to_arc_cmds(endpoints))
    return writer


def process_glyph(
    outline_dict: dict[str, Any],
    approximation_dict: dict[str, Any],
    render_dict: dict[str, Any],
    output_dir: str,
) -> dict[str, Any]:
    """Render a single glyph to an SVG file.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the outline, converts it to arcs, and writes the SVG.

    Args:
        outline_dict: Serialized outline (from GlyphOutline.to_dict())
        approximation_dict: Serialized approximation configuration
        render_dict: Serialized render configuration
        output_dir: Directory for the SVG file

    Returns:
        Dictionary containing either:
        - Success: {"glyph_name": str, "output": str, "endpoints": int,
          "arcs": int, "max_error": float, "duration_ms": float}
        - Error: {"error": str, "glyph_name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        outline = GlyphOutline.from_dict(outline_dict)
        approximation = ApproximationConfig(**approximation_dict)
        render = RenderConfig(**render_dict)

        endpoints, max_error = outline_to_endpoints(outline, approximation)
        screen_endpoints = transform_endpoints(endpoints, render, outline.units_per_em)

        writer = render_outline(outline, screen_endpoints, render)
        output_path = SvgWriter.get_output_path(
            Path(output_dir), outline.name, outline.metadata.unicode
        )
        try:
            writer.save(output_path)
        except OSError as e:
            raise GlyphRenderError(outline.name, str(e)) from e

        arcs = sum(1 for e in endpoints if not e.is_move() and not e.is_line())

        duration_ms = (time.time() - start_time) * 1000
        return {
            "glyph_name": outline.name,
            "output": str(output_path),
            "endpoints": len(endpoints),
            "arcs": arcs,
            "max_error": max_error,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        tb = traceback.format_exc()
        return {
            "error": str(e),
            "glyph_name": outline_dict.get("metadata", {}).get("name", "unknown"),
            "traceback": tb,
            "duration_ms": duration_ms,
        }


class GlyphProcessor:
    """Orchestrates parallel rendering of a string of characters.

    Manages the complete workflow:
    1. Load font file
    2. Record the outline of each distinct character
    3. Render outlines in parallel using worker processes
    4. Collect results and update statistics

    Example:
        settings = ArcGlyphSettings()
        processor = GlyphProcessor(settings)
        stats = processor.process(
            font_path=Path("font.ttf"),
            text="abc",
            output_dir=Path("out"),
        )
    """

    def __init__(self, config: ArcGlyphSettings) -> None:
        """Initialize glyph processor with configuration.

        Args:
            config: Application settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )
        self.render_logger = RenderLogger(self.logger)

    def process(
        self,
        font_path: Path,
        text: str,
        output_dir: Path,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> RenderStats:
        """Render every distinct character of text to an SVG file.

        Args:
            font_path: Path to input font file (TTF or OTF)
            text: Characters to render (duplicates are rendered once)
            output_dir: Directory for SVG files (created if missing)
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, glyph_name, success)
                for progress updates

        Returns:
            RenderStats with counts, timing, and error details

        Raises:
            FontLoadError: If the font cannot be loaded
            KeyboardInterrupt: If processing is cancelled by user
        """
        self.render_logger = RenderLogger(self.logger)
        stats = self.render_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        self.logger.info(
            "Starting render",
            input=str(font_path),
            output_dir=str(output_dir),
            text=text,
            max_workers=max_workers,
        )

        reader = FontReader(font_path)
        reader.load()

        try:
            self.logger.info(
                "Font loaded",
                format=reader.format,
                upm=reader.units_per_em,
                glyph_count=reader.glyph_count,
            )

            outlines: list[GlyphOutline] = []
            for char in dict.fromkeys(text):
                try:
                    outline = reader.get_outline(char)
                except GlyphNotFoundError as e:
                    self.render_logger.log_glyph_skipped(repr(char), str(e))
                    continue

                if outline.is_empty():
                    self.render_logger.log_glyph_skipped(outline.name, "empty glyph")
                    continue

                outlines.append(outline)
        finally:
            reader.close()

        if outlines:
            output_dir.mkdir(parents=True, exist_ok=True)
            self._process_outlines_parallel(
                outlines=outlines,
                output_dir=output_dir,
                max_workers=max_workers,
                progress_callback=progress_callback,
            )
        else:
            self.logger.info("No glyphs to render")

        stats.end_time = time.time()

        self.logger.info(
            "Render complete",
            rendered=stats.rendered_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            arcs=stats.arc_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _process_outlines_parallel(
        self,
        outlines: list[GlyphOutline],
        output_dir: Path,
        max_workers: int | None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> None:
        """Render outlines in parallel using ProcessPoolExecutor.

        Args:
            outlines: Outlines to render
            output_dir: Directory for SVG files
            max_workers: Maximum worker processes
            progress_callback: Optional callback(completed, total, glyph_name, success)
                for progress updates
        """
        approximation_dict = self.config.approximation.model_dump()
        render_dict = self.config.render.model_dump()

        self.logger.info(
            "Starting parallel rendering",
            glyph_count=len(outlines),
            max_workers=max_workers,
        )

        total = len(outlines)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for outline in outlines:
                self.render_logger.log_glyph_start(outline.name)
                future = executor.submit(
                    process_glyph,
                    outline.to_dict(),
                    approximation_dict,
                    render_dict,
                    str(output_dir),
                )
                pending_futures[future] = outline.name

            try:
                for future in as_completed(pending_futures):
                    glyph_name = pending_futures.pop(future)
                    success = False

                    try:
                        result = future.result()

                        if "error" in result:
                            self.render_logger.log_glyph_error(
                                glyph_name=result["glyph_name"],
                                error=result["error"],
                                traceback=result.get("traceback"),
                            )
                        else:
                            success = True
                            self.render_logger.log_glyph_complete(
                                glyph_name=glyph_name,
                                endpoints=result["endpoints"],
                                arcs=result["arcs"],
                                max_error=result["max_error"],
                                output=Path(result["output"]),
                                duration_ms=result.get("duration_ms", 0.0),
                            )

                    except Exception as e:
                        # Executor-level error
                        self.render_logger.log_glyph_error(
                            glyph_name=glyph_name,
                            error=str(e),
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, glyph_name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()
                executor.shutdown(wait=True, cancel_futures=True)
                raise
