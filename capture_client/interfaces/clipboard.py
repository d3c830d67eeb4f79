"""Abstract interface for the system clipboard."""

from abc import ABC, abstractmethod


class Clipboard(ABC):
    @abstractmethod
    def copy(self, text: str) -> None:
        """
        Writes text to the clipboard.

        Raises:
            ClipboardError: If the clipboard is not accessible.
        """
