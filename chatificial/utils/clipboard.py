# chatificial/utils/clipboard.py

import pyperclip

from chatificial.core.errors import ClipboardError


class SystemClipboard:
    """Plain-text clipboard backed by pyperclip."""

    def set_contents(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Could not access the system clipboard: {e}") from e
