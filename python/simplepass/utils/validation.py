"""
Input validation utilities for simplepass.
"""

from typing import Optional, Union

from ..exceptions import InvalidLengthError

MIN_LENGTH = 4
MAX_LENGTH = 256


def validate_length(value: Union[str, int, None],
                    minimum: int = MIN_LENGTH,
                    maximum: int = MAX_LENGTH) -> int:
    """
    Parse and validate a password length entered by the user.

    Args:
        value: Raw value, either a string from a prompt or an int
        minimum: Smallest accepted length
        maximum: Largest accepted length

    Returns:
        The length as an int

    Raises:
        InvalidLengthError: With a message suitable for showing to the user
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidLengthError("Password length is required")

    if isinstance(value, bool):
        raise InvalidLengthError("Password length must be a number")

    if isinstance(value, float) and not value.is_integer():
        raise InvalidLengthError("Password length must be a number")

    try:
        length = int(value.strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidLengthError("Password length must be a number") from None

    if length < minimum:
        raise InvalidLengthError(f"Password must be at least {minimum} symbols")

    if length > maximum:
        raise InvalidLengthError(f"Password must be less than {maximum} symbols")

    return length


def get_length_error_message(value: Union[str, int, None],
                             minimum: int = MIN_LENGTH,
                             maximum: int = MAX_LENGTH) -> Optional[str]:
    """
    Get a descriptive error message for a length value.

    Returns:
        Error message, or None if the value is valid
    """
    try:
        validate_length(value, minimum, maximum)
    except InvalidLengthError as e:
        return str(e)

    return None
