"""User interface exports."""

from .console_view import ConsoleView
from .view import StatusLevel, View

__all__ = ["ConsoleView", "StatusLevel", "View"]
