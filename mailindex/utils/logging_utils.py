import logging
import copy
import sys
from mailindex.utils.colors import Colors


DEFAULT_LOG_LEVEL = "WARNING"


class ColoredFormatter(logging.Formatter):
    """
    Custom formatter to add colors to log levels and specific messages.
    Keeps wizard diagnostics readable without mixing into the prompts.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.GREY,
        logging.INFO: Colors.BLUE,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED
    }

    def __init__(self, fmt: str = "%(levelname)s: %(name)s: %(message)s"):
        super().__init__(fmt)

    def format(self, record):
        # Work on a copy so other handlers see the record untouched
        record = copy.copy(record)

        color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        record.levelname = Colors.colorize(record.levelname, color)

        if isinstance(record.msg, str):
            if record.levelno >= logging.ERROR:
                record.msg = Colors.colorize(record.msg, color)
            elif "Configuration saved" in record.msg:
                record.msg = Colors.colorize(record.msg, Colors.GREEN)

        return super().format(record)


def setup_logging(level_name: str = DEFAULT_LOG_LEVEL, stream=None) -> logging.Logger:
    """
    Configure the root logger with a colored stderr handler

    Args:
        level_name: Logging level name, e.g. "DEBUG"
        stream: Output stream (default: sys.stderr)

    Returns:
        The package logger
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ColoredFormatter())

    # Resolve log level with safe fallback
    name = str(level_name).upper()
    level = logging._nameToLevel.get(name, logging.WARNING)

    logging.basicConfig(level=level, handlers=[handler], force=True)

    logger = logging.getLogger("mailindex")
    if name not in logging._nameToLevel:
        logger.warning(
            "Invalid log level '%s'; defaulting to %s", level_name, DEFAULT_LOG_LEVEL
        )
    return logger
