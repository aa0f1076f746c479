"""
Arbitrary-precision arithmetic for a calculator core.

This package provides three layered numeric types:
- BigUnsigned: unsigned magnitudes stored as 32-bit blocks
- BigInteger: a sign plus an owned magnitude
- BigRational: a normalized numerator/denominator pair

Every operation comes in a mutating ``*_assign`` form and a copy-returning
form, and every type converts to and from strings in radix 2 to 36.
"""

from bigmath.digits import char_to_digit, digit_to_char, sign_of
from bigmath.exceptions import (
    DivisionByZeroError,
    InvalidFormatError,
    InvalidInputError,
    MathError,
    NegativeResultError,
    OutOfRangeError,
)
from bigmath.integer import BigInteger
from bigmath.log import configure_logging, get_logger
from bigmath.magnitude import BigUnsigned
from bigmath.operations import (
    add,
    compare,
    decrement,
    divide,
    divide_with_remainder,
    increment,
    modulo,
    multiply,
    negate,
    parse,
    subtract,
    to_string,
)
from bigmath.rational import BigRational
from bigmath.validators import (
    DEFAULT_RADIX,
    MAX_RADIX,
    MIN_RADIX,
    validate_native_int,
    validate_radix,
    validate_range,
)

__all__ = [
    "DEFAULT_RADIX",
    "MAX_RADIX",
    "MIN_RADIX",
    "BigInteger",
    "BigRational",
    "BigUnsigned",
    "DivisionByZeroError",
    "InvalidFormatError",
    "InvalidInputError",
    "MathError",
    "NegativeResultError",
    "OutOfRangeError",
    "add",
    "char_to_digit",
    "compare",
    "configure_logging",
    "decrement",
    "digit_to_char",
    "divide",
    "divide_with_remainder",
    "get_logger",
    "increment",
    "modulo",
    "multiply",
    "negate",
    "parse",
    "sign_of",
    "subtract",
    "to_string",
    "validate_native_int",
    "validate_radix",
    "validate_range",
]

__version__ = "0.1.0"
