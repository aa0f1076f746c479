"""Digit and sign helpers shared by the numeric types."""

from bigmath.exceptions import InvalidFormatError
from bigmath.log import get_logger
from bigmath.validators import MAX_RADIX

logger = get_logger(__name__)

DIGIT_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def char_to_digit(char: str) -> int:
    """
    Convert a character to its numeric (not ASCII) value.

    Args:
        char: A single character in [0-9a-zA-Z]

    Returns:
        0-9 for decimal digits, 10-35 for letters of either case

    Raises:
        InvalidFormatError: If char is not a single ASCII letter or digit
    """
    if len(char) == 1:
        if "0" <= char <= "9":
            return ord(char) - ord("0")
        if "a" <= char <= "z":
            return ord(char) - ord("a") + 10
        if "A" <= char <= "Z":
            return ord(char) - ord("A") + 10

    logger.debug("invalid_format", reason="digit", text=char)
    raise InvalidFormatError(char, "Not a digit character")


def digit_to_char(digit: int) -> str:
    """Convert a digit value in [0, 35] to its uppercase character."""
    if not 0 <= digit < MAX_RADIX:
        logger.debug("invalid_format", reason="digit value", text=digit)
        raise InvalidFormatError(digit, "Digit value out of range")
    return DIGIT_CHARS[digit]


def sign_of(value: int) -> int:
    """Return -1, 0 or 1 for a negative, zero or positive native int."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
