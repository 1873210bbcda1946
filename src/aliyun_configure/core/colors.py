"""Console colors and formatting utilities for aliyun-configure.

Provides ANSI color codes for terminal output with auto-detection
of TTY support and Windows compatibility.
"""

import os
import re
import sys


class ConsoleColors:
    """ANSI color codes for terminal output.

    Auto-detects TTY support and handles Windows compatibility.
    Use this class for general CLI output formatting.
    """
    GREEN = '\033[92m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    RESET = '\033[0m'
    # Regex to strip ANSI escape codes for visible length calculation
    ANSI_ESCAPE = re.compile(r'\033\[[0-9;]*m')

    # Disable colors if not a TTY or on Windows without ANSI support
    _enabled = sys.stdout.isatty() and (os.name != 'nt' or bool(os.environ.get('TERM')))

    @classmethod
    def configure(cls, no_color: bool = False) -> None:
        """Apply the global color policy (--no-color or NO_COLOR disable colors)."""
        if no_color or os.environ.get('NO_COLOR'):
            cls._enabled = False

    @classmethod
    def success(cls, text: str) -> str:
        """Format text as success (green)"""
        if cls._enabled:
            return f"{cls.GREEN}{text}{cls.RESET}"
        return text

    @classmethod
    def error(cls, text: str) -> str:
        """Format text as error (red)"""
        if cls._enabled:
            return f"{cls.RED}{text}{cls.RESET}"
        return text

    @classmethod
    def bold(cls, text: str) -> str:
        """Format text as bold"""
        if cls._enabled:
            return f"{cls.BOLD}{text}{cls.RESET}"
        return text

    @classmethod
    def visible_len(cls, text: str) -> int:
        """Return the visible length of a string, ignoring ANSI escape codes."""
        return len(cls.ANSI_ESCAPE.sub('', text))

    @classmethod
    def ljust(cls, text: str, width: int) -> str:
        """Left-justify a string accounting for ANSI escape codes."""
        visible = cls.visible_len(text)
        padding = max(0, width - visible)
        return text + ' ' * padding
