import datetime
import logging
from pathlib import Path
from typing import override


def configure_logging(log_dir: Path):
    now: str = datetime.datetime.now().strftime("%Y-%m-%d-%H-%M")
    log_dir.mkdir(parents=True, exist_ok=True)
    file_name = log_dir / f"{now}.log"

    formatter = logging.Formatter(
        fmt="%(asctime)s - [%(name)s]- %(levelname)s - [%(module)s:%(levelno)s] - %(message)s"
    )

    file_handler = logging.FileHandler(file_name, encoding="UTF-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(ColorFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Qt plugin loading is noisy at debug level
    modules_to_ignore: list[str] = ["PyQt6"]
    for module in modules_to_ignore:
        logging.getLogger(module).setLevel(logging.WARNING)


class ColorFormatter(logging.Formatter):
    """Console formatter coloring each record by its level"""

    RESET: str = "\x1b[0m"
    LEVEL_COLORS: dict[int, str] = {
        logging.DEBUG: "\x1b[38;20m",
        logging.INFO: "\x1b[38;20m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }
    CONSOLE_FORMAT: str = (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"
    )

    def __init__(self):
        super().__init__(self.CONSOLE_FORMAT)
        self._level_formatters: dict[int, logging.Formatter] = {
            level: logging.Formatter(color + self.CONSOLE_FORMAT + self.RESET)
            for level, color in self.LEVEL_COLORS.items()
        }

    @override
    def format(self, record: logging.LogRecord) -> str:
        formatter = self._level_formatters.get(record.levelno)
        if formatter is None:
            return super().format(record)
        return formatter.format(record)
