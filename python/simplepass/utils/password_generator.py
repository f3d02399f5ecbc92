"""
Password generation and entropy estimation.

The alphabet is rebuilt from ``GenerationOptions`` on every call; nothing is
cached or kept between calls.
"""

import math
import secrets
import string
from typing import Any, NamedTuple, Optional

from ..exceptions import EmptyAlphabetError, InvalidLengthError

# Character classes, concatenated in this order
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}\\|;:'\",./<>?"
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase

# Visually similar characters, only ever used as a filter
AMBIGUOUS_CHARACTERS = "i1lI0O"

_AMBIGUOUS_TABLE = str.maketrans("", "", AMBIGUOUS_CHARACTERS)


class GenerationOptions(NamedTuple):
    """Options for a single generation or entropy call."""

    length: int = 16
    use_numbers: bool = True
    use_symbols: bool = True
    use_lowercase: bool = True
    use_uppercase: bool = True
    allow_ambiguous_characters: bool = True

    def replace(self, **changes: Any) -> "GenerationOptions":
        return self._replace(**changes)


def build_alphabet(options: GenerationOptions) -> str:
    """
    Build the ordered alphabet for the given options.

    Classes are appended as numbers, symbols, lowercase, uppercase. Ambiguous
    characters are stripped from the combined string afterwards.

    Args:
        options: Generation options

    Returns:
        Alphabet string, possibly empty
    """
    alphabet = ""

    if options.use_numbers:
        alphabet += NUMBERS

    if options.use_symbols:
        alphabet += SYMBOLS

    if options.use_lowercase:
        alphabet += LOWERCASE

    if options.use_uppercase:
        alphabet += UPPERCASE

    if not options.allow_ambiguous_characters:
        alphabet = alphabet.translate(_AMBIGUOUS_TABLE)

    return alphabet


def generate_password(options: GenerationOptions, rng: Optional[Any] = None) -> str:
    """
    Generate a password by drawing each character independently.

    Args:
        options: Generation options, ``length`` must be at least 1
        rng: Object with a ``choice(seq)`` method; defaults to ``secrets``

    Returns:
        Password of exactly ``options.length`` characters

    Raises:
        InvalidLengthError: If length is not a positive integer
        EmptyAlphabetError: If the options leave no characters to draw from
    """
    length = options.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"Password length must be an integer, got {length!r}")
    if length < 1:
        raise InvalidLengthError(f"Password length must be at least 1, got {length}")

    alphabet = build_alphabet(options)
    if not alphabet:
        raise EmptyAlphabetError("At least one character type must be enabled")

    source = rng if rng is not None else secrets
    return ''.join(source.choice(alphabet) for _ in range(length))


def count_entropy_bits(options: GenerationOptions) -> float:
    """Estimate entropy as ``log2(alphabet size) * length``; 0 when nothing can be generated."""
    length = options.length
    if isinstance(length, bool):
        return 0.0

    alphabet = build_alphabet(options)
    if not alphabet or length <= 0:
        return 0.0

    return math.log2(len(alphabet)) * length


def describe_alphabet(options: GenerationOptions) -> str:
    """
    Get human-readable description of the enabled character classes.

    Returns:
        Comma separated class names, or "nothing" when no class is enabled
    """
    parts = []

    if options.use_numbers:
        parts.append("numbers")
    if options.use_symbols:
        parts.append("symbols")
    if options.use_lowercase:
        parts.append("lowercase")
    if options.use_uppercase:
        parts.append("uppercase")

    info = ", ".join(parts) if parts else "nothing"

    if parts and not options.allow_ambiguous_characters:
        info += " (excluding ambiguous chars)"

    return info
