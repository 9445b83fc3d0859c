"""Terminal front-end for hands-free sessions."""

from .console_screen import ConsoleScreen
from .line_input import LineInputHandler

__all__ = [
    "ConsoleScreen",
    "LineInputHandler",
]
