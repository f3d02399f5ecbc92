"""
Clipboard integration using pyperclip.

Copied passwords are cleared again after a delay, unless the user has put
something else on the clipboard in the meantime.
"""

import logging
import threading
import time
from typing import Optional

from .exceptions import ClipboardError

logger = logging.getLogger(__name__)

CLIPBOARD_CLEAR_SECONDS = 60


def _clear_after(value: str, delay: float) -> None:
    import pyperclip

    time.sleep(delay)
    try:
        if pyperclip.paste() == value:
            pyperclip.copy("")
            logger.debug("Clipboard cleared")
    except Exception as e:
        logger.debug(f"Could not clear clipboard: {e}")


def copy_to_clipboard(value: str,
                      clear_after: Optional[float] = CLIPBOARD_CLEAR_SECONDS) -> Optional[threading.Thread]:
    """
    Copy a value to the system clipboard.

    Args:
        value: Text to copy
        clear_after: Seconds before the clipboard is cleared; None or 0 keeps it

    Returns:
        The background thread that clears the clipboard, if one was started

    Raises:
        ClipboardError: If pyperclip is missing or no clipboard is available
    """
    try:
        import pyperclip
    except ImportError:
        raise ClipboardError("pyperclip not installed. Install with: pip install pyperclip")

    try:
        pyperclip.copy(value)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard not available: {e}")
        raise ClipboardError(f"Could not copy to clipboard: {e}") from e

    logger.debug("Value copied to clipboard")

    if not clear_after or clear_after <= 0:
        return None

    clear_thread = threading.Thread(target=_clear_after, args=(value, clear_after), daemon=True)
    clear_thread.start()
    return clear_thread
