"""
Custom exceptions for simplepass.
"""


class SimplePassException(Exception):
    """Base exception for simplepass."""

    pass


class InvalidLengthError(SimplePassException, ValueError):
    """Requested password length is not usable."""

    pass


class EmptyAlphabetError(SimplePassException, ValueError):
    """No characters are left to generate a password from."""

    pass


class UnknownPresetError(SimplePassException, KeyError):
    """Preset name is not defined."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown preset"


class ClipboardError(SimplePassException):
    """Clipboard is not available."""

    pass
