"""
Colored console logging for the portal media tooling.

Levels are colored, and records emitted by the storage SDK and HTTP stack
are dimmed so that the tool's own progress messages stand out.
"""

import logging
import os
import sys
from typing import Optional, TextIO


class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    BRIGHT_BLACK = '\033[90m'


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors level names and dims third-party loggers.

    Color scheme:
    - DEBUG: Cyan
    - INFO: Green
    - WARNING: Yellow
    - ERROR: Red
    - CRITICAL: Bold Red
    - Loggers of azure, httpx and httpcore: dimmed
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    THIRD_PARTY_PREFIXES = ('azure', 'httpx', 'httpcore')

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)

    @staticmethod
    def _supports_color(stream: TextIO) -> bool:
        if os.environ.get('NO_COLOR'):
            return False
        if os.environ.get('FORCE_COLOR'):
            return True
        if not hasattr(stream, 'isatty') or not stream.isatty():
            return False
        if sys.platform == 'win32':
            return bool(os.environ.get('ANSICON') or os.environ.get('WT_SESSION'))
        return True

    def _is_third_party(self, record: logging.LogRecord) -> bool:
        return record.name.startswith(self.THIRD_PARTY_PREFIXES)

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname_orig = record.levelname
        name_orig = record.name

        level_color = self.LEVEL_COLORS.get(record.levelno, '')
        record.levelname = f"{level_color}{record.levelname}{Colors.RESET}"
        if self._is_third_party(record):
            record.name = f"{Colors.BRIGHT_BLACK}{record.name}{Colors.RESET}"

        try:
            return super().format(record)
        finally:
            record.levelname = levelname_orig
            record.name = name_orig


def setup_colored_logging(
    level: int | str = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    use_colors: bool = True,
) -> None:
    """
    Install a colored stderr handler on the root logger.

    The azure SDK logs every HTTP exchange at INFO, so its loggers are held
    at WARNING unless DEBUG was requested.

    Example:
        >>> from portal_media_sync.logging_config import setup_colored_logging
        >>> setup_colored_logging(level="DEBUG")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    if date_format is None:
        date_format = '%Y-%m-%d %H:%M:%S'

    formatter = ColoredFormatter(
        fmt=format_string,
        datefmt=date_format,
        use_colors=use_colors,
        stream=sys.stderr,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    noisy_level = level if level <= logging.DEBUG else logging.WARNING
    for name in ('azure', 'httpx', 'httpcore'):
        logging.getLogger(name).setLevel(noisy_level)
