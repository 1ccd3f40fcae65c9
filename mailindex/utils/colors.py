"""
ANSI Color codes for console output formatting
"""

import os
import sys


def _colors_enabled() -> bool:
    """Colors only when writing to a terminal and NO_COLOR is unset"""
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


class Colors:
    """ANSI color codes and helper methods"""
    ENABLED = _colors_enabled()

    RESET = "\033[0m" if ENABLED else ""
    BOLD = "\033[1m" if ENABLED else ""

    # Text Colors
    RED = "\033[31m" if ENABLED else ""
    GREEN = "\033[32m" if ENABLED else ""
    YELLOW = "\033[33m" if ENABLED else ""
    BLUE = "\033[34m" if ENABLED else ""
    MAGENTA = "\033[35m" if ENABLED else ""
    CYAN = "\033[36m" if ENABLED else ""
    GREY = "\033[90m" if ENABLED else ""

    @classmethod
    def colorize(cls, text: str, color: str) -> str:
        """Wrap text in color codes"""
        if not cls.ENABLED:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def header(cls, text: str) -> str:
        """Format as a header (Bold Cyan)"""
        return cls.colorize(text, cls.BOLD + cls.CYAN)

    @classmethod
    def warning(cls, text: str) -> str:
        """Format as a warning (Yellow)"""
        return cls.colorize(text, cls.YELLOW)

    @classmethod
    def error(cls, text: str) -> str:
        """Format as an error (Red)"""
        return cls.colorize(text, cls.RED)

    @classmethod
    def success(cls, text: str) -> str:
        """Format as success (Green)"""
        return cls.colorize(text, cls.GREEN)
