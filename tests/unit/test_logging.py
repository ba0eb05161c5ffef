"""Unit tests for logging utilities."""

import logging
from pathlib import Path
from unittest.mock import Mock

import pytest

from arcglyph.utils import RenderLogger, RenderStats, configure_logging


@pytest.fixture
def restore_root_handlers():
    """Remove handlers added by configure_logging after the test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestRenderStats:
    """Tests for RenderStats."""

    def test_duration(self):
        stats = RenderStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == pytest.approx(2.5)

    def test_duration_unfinished(self):
        assert RenderStats(start_time=10.0).duration_seconds == 0.0


class TestRenderLogger:
    """Tests for RenderLogger statistics."""

    def test_counts(self):
        logger = Mock()
        render_logger = RenderLogger(logger)

        render_logger.log_glyph_start("a")
        render_logger.log_glyph_complete("a", 10, 4, 0.25, Path("a.svg"), 3.0)
        render_logger.log_glyph_complete("b", 6, 2, 0.75, Path("b.svg"), 1.0)
        render_logger.log_glyph_skipped("space", "empty glyph")
        render_logger.log_glyph_error("c", "boom", "Traceback...")

        stats = render_logger.stats
        assert stats.rendered_count == 2
        assert stats.endpoint_count == 16
        assert stats.arc_count == 6
        assert stats.max_error == 0.75
        assert stats.outputs == [Path("a.svg"), Path("b.svg")]
        assert stats.skipped_count == 1
        assert stats.error_count == 1
        assert stats.errors == [("c", "boom")]
        logger.error.assert_called_once()


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.usefixtures("restore_root_handlers")
    def test_file_handler_only_with_log_file(self, tmp_path: Path):
        root = logging.getLogger()
        before = len(root.handlers)

        configure_logging()
        assert not any(
            isinstance(h, logging.FileHandler) for h in root.handlers[before:]
        )

        log_file = tmp_path / "arcglyph.log"
        configure_logging(log_file=log_file, file_level="INFO")
        file_handlers = [
            h for h in root.handlers[before:] if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.INFO
        assert log_file.exists()

    @pytest.mark.usefixtures("restore_root_handlers")
    def test_quiet_console(self):
        root = logging.getLogger()
        before = len(root.handlers)

        configure_logging(console_level="DEBUG", quiet=True)
        console = [
            h
            for h in root.handlers[before:]
            if type(h) is logging.StreamHandler
        ]
        assert console[-1].level == logging.ERROR
