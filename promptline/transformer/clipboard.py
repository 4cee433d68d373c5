# transformer/clipboard.py

import pyperclip

from ..errors import ClipboardError


class Clipboard:
    """System clipboard, backed by pyperclip for cross-platform access."""

    def copy(self, text: str) -> None:
        """
        Copy text to the system clipboard.

        Raises:
            ClipboardError: If no clipboard mechanism is available or the write fails.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Failed to copy to clipboard: {e}") from e
