"""Tests for the logging setup"""

import logging
import shutil
import tempfile
from pathlib import Path

from daybook.logger import ColorFormatter, configure_logging


def _record(level: int, message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("Test", level, __file__, 1, message, None, None)


def test_error_records_are_red():
    formatted = ColorFormatter().format(_record(logging.ERROR))
    assert formatted.startswith(ColorFormatter.LEVEL_COLORS[logging.ERROR])
    assert formatted.endswith(ColorFormatter.RESET)
    assert "hello" in formatted


def test_custom_level_is_not_colored():
    """Levels without a color are formatted plainly"""
    formatted = ColorFormatter().format(_record(25))
    assert not formatted.startswith("\x1b")
    assert "hello" in formatted


def test_configure_logging_writes_file():
    """A log file is created in the given folder, which may not exist yet"""
    temp_dir = Path(tempfile.mkdtemp())
    root_logger = logging.getLogger()
    previous_handlers = list(root_logger.handlers)
    try:
        configure_logging(temp_dir / "logging")
        logging.getLogger("Test").info("written to file")

        new_handlers = [h for h in root_logger.handlers if h not in previous_handlers]
        for handler in new_handlers:
            handler.flush()

        log_files = list((temp_dir / "logging").glob("*.log"))
        assert len(log_files) == 1
        assert "written to file" in log_files[0].read_text(encoding="utf-8")
    finally:
        for handler in root_logger.handlers[:]:
            if handler not in previous_handlers:
                root_logger.removeHandler(handler)
                handler.close()
        shutil.rmtree(temp_dir)
