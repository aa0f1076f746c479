"""Arbitrary-precision rational numbers kept in lowest terms."""

from __future__ import annotations

from bigmath.exceptions import DivisionByZeroError, InvalidFormatError
from bigmath.integer import BigInteger
from bigmath.log import get_logger
from bigmath.magnitude import BigUnsigned
from bigmath.validators import (
    DEFAULT_RADIX,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    validate_radix,
    validate_range,
    validate_text,
)

logger = get_logger(__name__)


class BigRational:
    """
    An arbitrary-precision fraction.

    Numerator and denominator are owned BigIntegers. After every public
    operation the fraction is normalized: the denominator is positive, the
    parts share no common factor, and zero is ``0/1``.

    Values hash by their current value but are mutable, so do not mutate one
    while it is a dict key or set member.

    Example:
        >>> BigRational("1/2").add(BigRational("1/3")).to_string()
        '5/6'
        >>> BigRational("-4/-6").to_string()
        '2/3'
    """

    def __init__(
        self,
        value: int | str | BigInteger | BigUnsigned | BigRational = 0,
        radix: int = DEFAULT_RADIX,
    ) -> None:
        """
        Initialize from a native int, an integer value, a string or a copy.

        Raises:
            InvalidInputError: If value has an unsupported type
            InvalidFormatError: If a string value cannot be parsed
            DivisionByZeroError: If a string value has a zero denominator
        """
        self._numerator = BigInteger()
        self._denominator = BigInteger(1)
        if isinstance(value, BigRational):
            self.assign(value)
        elif isinstance(value, str):
            self.assign_from_string(value, radix)
        else:
            self._numerator = BigInteger(value)

    @classmethod
    def from_int(cls, value: int) -> BigRational:
        """Create a BigRational with denominator 1 from a native int."""
        return cls(BigInteger.from_int(value))

    @classmethod
    def from_int32(cls, value: int) -> BigRational:
        """Create a BigRational from a value in the signed 32-bit range."""
        validate_range(value, INT32_MIN, INT32_MAX, f"{cls.__name__}.from_int32")
        return cls.from_int(value)

    @classmethod
    def from_int64(cls, value: int) -> BigRational:
        """Create a BigRational from a value in the signed 64-bit range."""
        validate_range(value, INT64_MIN, INT64_MAX, f"{cls.__name__}.from_int64")
        return cls.from_int(value)

    @classmethod
    def from_fraction(
        cls, numerator: BigInteger | int, denominator: BigInteger | int
    ) -> BigRational:
        """
        Create the normalized fraction ``numerator / denominator`` from copies.

        Raises:
            DivisionByZeroError: If denominator is zero
        """
        numerator = BigInteger(numerator)
        denominator = BigInteger(denominator)
        if denominator.is_zero():
            logger.debug("division_by_zero", operation="from_fraction", type="BigRational")
            raise DivisionByZeroError(numerator)

        result = cls()
        result._numerator = numerator
        result._denominator = denominator
        result.normalize()
        return result

    @classmethod
    def from_string(cls, text: str, radix: int = DEFAULT_RADIX) -> BigRational:
        """Create a BigRational from ``"num/den"`` or a bare integer in radix."""
        return cls().assign_from_string(text, radix)

    def copy(self) -> BigRational:
        """Return an independent copy of this value."""
        return BigRational(self)

    def normalize(self) -> BigRational:
        """
        Reduce to lowest terms with a positive denominator.

        A zero numerator sets the denominator to one. Otherwise both parts
        are divided by their greatest common divisor, and if the denominator
        is negative both parts are negated.
        """
        if self._numerator.is_zero():
            self._denominator = BigInteger(1)
            return self

        gcd = self._numerator.gcd(self._denominator)
        assert not gcd.is_zero(), "gcd of a non-zero numerator cannot be zero"
        self._numerator.divide_assign(gcd)
        self._denominator.divide_assign(gcd)
        if self._denominator.is_negative():
            self._denominator.negate_assign()
            self._numerator.negate_assign()
        return self

    def _division_by_zero(self, operation: str) -> DivisionByZeroError:
        logger.debug("division_by_zero", operation=operation, type="BigRational")
        return DivisionByZeroError(self.copy())

    # -- properties and predicates ------------------------------------------

    @property
    def numerator(self) -> BigInteger:
        """A copy of the numerator; carries the sign of the fraction."""
        return self._numerator.copy()

    @property
    def denominator(self) -> BigInteger:
        """A copy of the denominator; always positive."""
        return self._denominator.copy()

    def is_zero(self) -> bool:
        return self._numerator.is_zero()

    def is_negative(self) -> bool:
        return self._numerator.is_negative()

    def is_positive(self) -> bool:
        return self._numerator.is_positive()

    def is_integer(self) -> bool:
        """Return whether the denominator is one."""
        return self._denominator.equals(BigInteger(1))

    def signum(self) -> int:
        return self._numerator.signum()

    # -- assignment ---------------------------------------------------------

    def assign(self, value: BigRational) -> BigRational:
        """Set self to a copy of value."""
        self._numerator = value._numerator.copy()
        self._denominator = value._denominator.copy()
        return self

    def assign_from_string(self, text: str, radix: int = DEFAULT_RADIX) -> BigRational:
        """
        Set self to the value of ``"num/den"`` or a bare integer in radix.

        Either part may carry a leading ``-``; the result is normalized.
        Self is unchanged if parsing fails.

        Raises:
            InvalidFormatError: If radix is outside [2, 36], text is empty,
                has more than one ``/``, or either part is not an integer
            DivisionByZeroError: If the denominator is zero
        """
        validate_radix(radix)
        validate_text(text)

        parts = text.split("/")
        if len(parts) > 2:
            logger.debug("invalid_format", reason="separator", text=text, radix=radix)
            raise InvalidFormatError(text, "More than one '/' separator")

        try:
            numerator = BigInteger.from_string(parts[0], radix)
            denominator = (
                BigInteger.from_string(parts[1], radix) if len(parts) == 2 else BigInteger(1)
            )
        except InvalidFormatError as e:
            raise InvalidFormatError(text, e.reason) from e

        return self.assign(BigRational.from_fraction(numerator, denominator))

    # -- arithmetic ---------------------------------------------------------

    def add_assign(self, addend: BigRational) -> BigRational:
        """Set self to ``self + addend`` by cross-multiplication."""
        cross = addend._numerator.multiply(self._denominator)
        self._numerator.multiply_assign(addend._denominator)
        self._numerator.add_assign(cross)
        self._denominator.multiply_assign(addend._denominator)
        return self.normalize()

    def add(self, addend: BigRational) -> BigRational:
        """Return ``self + addend``."""
        return self.copy().add_assign(addend)

    def subtract_assign(self, subtrahend: BigRational) -> BigRational:
        """Set self to ``self - subtrahend`` by cross-multiplication."""
        cross = subtrahend._numerator.multiply(self._denominator)
        self._numerator.multiply_assign(subtrahend._denominator)
        self._numerator.subtract_assign(cross)
        self._denominator.multiply_assign(subtrahend._denominator)
        return self.normalize()

    def subtract(self, subtrahend: BigRational) -> BigRational:
        """Return ``self - subtrahend``."""
        return self.copy().subtract_assign(subtrahend)

    def multiply_assign(self, factor: BigRational) -> BigRational:
        """Set self to ``self * factor``."""
        if factor is self:
            factor = factor.copy()
        self._numerator.multiply_assign(factor._numerator)
        self._denominator.multiply_assign(factor._denominator)
        return self.normalize()

    def multiply(self, factor: BigRational) -> BigRational:
        """Return ``self * factor``."""
        return self.copy().multiply_assign(factor)

    def divide_assign(self, divisor: BigRational) -> BigRational:
        """
        Set self to ``self / divisor`` by multiplying with the reciprocal.

        Raises:
            DivisionByZeroError: If divisor is zero
        """
        if divisor.is_zero():
            raise self._division_by_zero("divide")
        if divisor is self:
            divisor = divisor.copy()
        self._numerator.multiply_assign(divisor._denominator)
        self._denominator.multiply_assign(divisor._numerator)
        return self.normalize()

    def divide(self, divisor: BigRational) -> BigRational:
        """Return ``self / divisor``; raises DivisionByZeroError on zero."""
        return self.copy().divide_assign(divisor)

    def reciprocal_assign(self) -> BigRational:
        """
        Set self to ``1 / self``.

        Raises:
            DivisionByZeroError: If self is zero
        """
        if self.is_zero():
            raise self._division_by_zero("reciprocal")
        self._numerator, self._denominator = self._denominator, self._numerator
        return self.normalize()

    def reciprocal(self) -> BigRational:
        return self.copy().reciprocal_assign()

    def increment_assign(self) -> BigRational:
        """Set self to ``self + 1``."""
        self._numerator.add_assign(self._denominator)
        return self.normalize()

    def increment(self) -> BigRational:
        return self.copy().increment_assign()

    def decrement_assign(self) -> BigRational:
        """Set self to ``self - 1``."""
        self._numerator.subtract_assign(self._denominator)
        return self.normalize()

    def decrement(self) -> BigRational:
        return self.copy().decrement_assign()

    def negate_assign(self) -> BigRational:
        """Set self to ``-self``."""
        self._numerator.negate_assign()
        return self

    def negate(self) -> BigRational:
        return self.copy().negate_assign()

    def absolute_assign(self) -> BigRational:
        """Set self to ``|self|``."""
        self._numerator.absolute_assign()
        return self

    def absolute(self) -> BigRational:
        return self.copy().absolute_assign()

    # -- comparison ---------------------------------------------------------

    def compare(self, other: BigRational) -> int:
        """Return -1, 0 or 1 by comparing the cross products."""
        left = self._numerator.multiply(other._denominator)
        right = other._numerator.multiply(self._denominator)
        return left.compare(right)

    def equals(self, other: BigRational) -> bool:
        return self._numerator.equals(other._numerator) and self._denominator.equals(
            other._denominator
        )

    # -- conversion ---------------------------------------------------------

    def to_string(self, radix: int = DEFAULT_RADIX) -> str:
        """
        Return ``"num/den"`` in radix; the denominator is always present.

        Raises:
            InvalidFormatError: If radix is outside [2, 36]
        """
        validate_radix(radix)
        return self._numerator.to_string(radix) + "/" + self._denominator.to_string(radix)

    # -- Python protocol ----------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> BigRational | None:
        if isinstance(other, BigRational):
            return other
        if isinstance(other, (BigInteger, BigUnsigned)):
            return BigRational(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return BigRational.from_int(other)
        return None

    def __add__(self, other: object) -> BigRational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigRational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: object) -> BigRational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: object) -> BigRational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> BigRational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __rtruediv__(self, other: object) -> BigRational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self)

    def __neg__(self) -> BigRational:
        return self.negate()

    def __pos__(self) -> BigRational:
        return self.copy()

    def __abs__(self) -> BigRational:
        return self.absolute()

    def _compare_any(self, other: object) -> int | None:
        operand = self._coerce(other)
        if operand is None:
            return None
        return self.compare(operand)

    def __eq__(self, other: object) -> bool:
        result = self._compare_any(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __lt__(self, other: object) -> bool:
        result = self._compare_any(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare_any(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare_any(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare_any(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def __hash__(self) -> int:
        if self.is_integer():
            return hash(int(self._numerator))
        return hash((int(self._numerator), int(self._denominator)))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigRational('{self.to_string()}')"
