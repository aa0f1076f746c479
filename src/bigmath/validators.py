"""Input validation functions with strict type checking."""

from typing import Final

from bigmath.exceptions import InvalidFormatError, InvalidInputError, OutOfRangeError
from bigmath.log import get_logger

logger = get_logger(__name__)

# Radix limits for string conversion
MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36
DEFAULT_RADIX: Final[int] = 10

# Native integer ranges accepted by the sized constructors
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT32_MAX: Final[int] = 2**32 - 1
UINT64_MAX: Final[int] = 2**64 - 1


def validate_radix(radix: int) -> int:
    """
    Validate that a radix is an integer in [MIN_RADIX, MAX_RADIX].

    Args:
        radix: The radix to validate

    Returns:
        The validated radix

    Raises:
        InvalidFormatError: If radix is not an int or is out of range
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        logger.debug("invalid_format", reason="radix type", radix=radix)
        raise InvalidFormatError(radix, f"Radix must be an int, got {type(radix).__name__}")

    if not MIN_RADIX <= radix <= MAX_RADIX:
        logger.debug("invalid_format", reason="radix range", radix=radix)
        raise InvalidFormatError(radix, f"Radix must be in [{MIN_RADIX}, {MAX_RADIX}]")

    return radix


def validate_text(text: str) -> str:
    """
    Validate that a value is a non-empty string.

    Raises:
        InvalidFormatError: If text is not a string or is empty
    """
    if not isinstance(text, str):
        logger.debug("invalid_format", reason="text type", text=text)
        raise InvalidFormatError(text, f"Expected str, got {type(text).__name__}")

    if not text:
        logger.debug("invalid_format", reason="empty", text=text)
        raise InvalidFormatError(text, "Empty string is not a number")

    return text


def validate_native_int(value: int, allow_negative: bool = True) -> int:
    """
    Validate that a value is a native Python int.

    Args:
        value: The value to validate
        allow_negative: Whether negative values are accepted

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int, or is negative when not allowed
    """
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("invalid_input", value=value)
        raise InvalidInputError(value, f"Expected int, got {type(value).__name__}")

    if not allow_negative and value < 0:
        logger.debug("invalid_input", value=value)
        raise InvalidInputError(value, "Unsigned value must be non-negative")

    return value


def validate_range(
    value: int,
    min_val: int | None = None,
    max_val: int | None = None,
    target: str | None = None,
) -> int:
    """
    Validate that a native int is within an inclusive range.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)
        target: Name of the constructor or field the range belongs to

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int
        OutOfRangeError: If value is outside the range
    """
    validate_native_int(value)

    if (min_val is not None and value < min_val) or (max_val is not None and value > max_val):
        logger.debug(
            "out_of_range", value=value, min_val=min_val, max_val=max_val, target=target
        )
        raise OutOfRangeError(value, min_val, max_val, target)

    return value
