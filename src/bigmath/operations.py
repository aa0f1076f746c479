"""
Functional arithmetic over the bigmath numeric types.

Each function accepts two values of the same type (BigUnsigned, BigInteger or
BigRational), never mutates its arguments, and returns a new value. This is
the surface a calculator front end drives.
"""

from typing import TypeVar

from bigmath.exceptions import InvalidInputError
from bigmath.integer import BigInteger
from bigmath.log import get_logger
from bigmath.magnitude import BigUnsigned
from bigmath.rational import BigRational
from bigmath.validators import DEFAULT_RADIX

logger = get_logger(__name__)

Number = TypeVar("Number", BigUnsigned, BigInteger, BigRational)

NUMERIC_TYPES = (BigUnsigned, BigInteger, BigRational)


def _check_operands(a: Number, b: Number) -> None:
    """Ensure both operands are bigmath values of one type."""
    if not isinstance(a, NUMERIC_TYPES):
        logger.debug("invalid_input", value=repr(a))
        raise InvalidInputError(a, f"Expected a bigmath number, got {type(a).__name__}")
    if type(a) is not type(b):
        logger.debug("invalid_input", left=type(a).__name__, right=type(b).__name__)
        raise InvalidInputError(
            (a, b), f"Operand types differ: {type(a).__name__} and {type(b).__name__}"
        )


def add(a: Number, b: Number) -> Number:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Associative: add(add(a, b), c) == add(a, add(b, c))
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If the operands are not of one bigmath type
    """
    _check_operands(a, b)
    return a.add(b)


def subtract(a: Number, b: Number) -> Number:
    """
    Subtract b from a.

    Properties:
        - Self-inverse: subtract(a, a) == 0
        - Identity: subtract(a, 0) == a

    Raises:
        InvalidInputError: If the operands are not of one bigmath type
        NegativeResultError: If a and b are BigUnsigned and b > a
    """
    _check_operands(a, b)
    return a.subtract(b)


def multiply(a: Number, b: Number) -> Number:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If the operands are not of one bigmath type
    """
    _check_operands(a, b)
    return a.multiply(b)


def divide(a: Number, b: Number) -> Number:
    """
    Divide a by b.

    Integers truncate toward zero; rationals divide exactly.

    Properties:
        - Identity: divide(a, 1) == a
        - Self-division: divide(a, a) == 1 (for a != 0)

    Raises:
        InvalidInputError: If the operands are not of one bigmath type
        DivisionByZeroError: If b is zero
    """
    _check_operands(a, b)
    return a.divide(b)


def modulo(a: Number, b: Number) -> Number:
    """
    Return the truncating remainder of a divided by b.

    Properties:
        - Sign: the result is zero or has the sign of a
        - Range: abs(modulo(a, b)) < abs(b)

    Raises:
        InvalidInputError: If the operands are not integers of one type
        DivisionByZeroError: If b is zero
    """
    _check_operands(a, b)
    if isinstance(a, BigRational):
        logger.debug("invalid_input", operation="modulo", type="BigRational")
        raise InvalidInputError(a, "Modulo is defined for integer types only")
    return a.modulo(b)


def divide_with_remainder(a: Number, b: Number) -> tuple[Number, Number]:
    """
    Return the truncating quotient and remainder of a divided by b.

    Properties:
        - Reconstruction: a == quotient * b + remainder

    Raises:
        InvalidInputError: If the operands are not integers of one type
        DivisionByZeroError: If b is zero
    """
    _check_operands(a, b)
    if isinstance(a, BigRational):
        logger.debug("invalid_input", operation="divide_with_remainder", type="BigRational")
        raise InvalidInputError(a, "Division with remainder is defined for integer types only")
    remainder = a.copy()
    quotient = remainder.divide_with_remainder(b)
    return quotient, remainder


def compare(a: Number, b: Number) -> int:
    """
    Three-way comparison.

    Properties:
        - Antisymmetric: compare(a, b) == -compare(b, a)

    Returns:
        -1, 0 or 1 if a is less than, equal to or greater than b
    """
    _check_operands(a, b)
    return a.compare(b)


def negate(a: BigInteger | BigRational) -> BigInteger | BigRational:
    """
    Return -a.

    Raises:
        InvalidInputError: If a is not a signed bigmath type
    """
    if not isinstance(a, (BigInteger, BigRational)):
        logger.debug("invalid_input", operation="negate", value=repr(a))
        raise InvalidInputError(a, "Only signed types can be negated")
    return a.negate()


def increment(a: Number) -> Number:
    """Return a + 1."""
    _check_operands(a, a)
    return a.increment()


def decrement(a: Number) -> Number:
    """
    Return a - 1.

    Raises:
        NegativeResultError: If a is a zero BigUnsigned
    """
    _check_operands(a, a)
    return a.decrement()


def parse(text: str, kind: type[Number], radix: int = DEFAULT_RADIX) -> Number:
    """
    Parse a string into a value of the requested type.

    Args:
        text: The string, e.g. "-17", "FF" or "1/3"
        kind: BigUnsigned, BigInteger or BigRational
        radix: Radix in [2, 36]

    Raises:
        InvalidFormatError: If text cannot be parsed
        InvalidInputError: If kind is not a bigmath type
    """
    if kind not in NUMERIC_TYPES:
        logger.debug("invalid_input", operation="parse", kind=repr(kind))
        raise InvalidInputError(kind, "Unknown numeric type")
    return kind.from_string(text, radix)


def to_string(value: Number, radix: int = DEFAULT_RADIX) -> str:
    """
    Render a value in the given radix.

    Properties:
        - Round-trip: parse(to_string(v, r), type(v), r) == v
    """
    _check_operands(value, value)
    return value.to_string(radix)
