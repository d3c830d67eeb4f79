"""pyperclip implementation of the Clipboard interface."""

import pyperclip

from capture_client.exceptions import ClipboardError
from capture_client.interfaces import Clipboard


class PyperclipClipboard(Clipboard):
    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(e) from e
