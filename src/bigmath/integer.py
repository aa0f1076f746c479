"""Arbitrary-size signed integers built on BigUnsigned magnitudes."""

from __future__ import annotations

from bigmath.digits import sign_of
from bigmath.exceptions import (
    DivisionByZeroError,
    InvalidFormatError,
    InvalidInputError,
    NegativeResultError,
)
from bigmath.log import get_logger
from bigmath.magnitude import BigUnsigned
from bigmath.validators import (
    DEFAULT_RADIX,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    validate_native_int,
    validate_radix,
    validate_range,
    validate_text,
)

logger = get_logger(__name__)


def _subtract_smaller(minuend: BigUnsigned, subtrahend: BigUnsigned) -> None:
    """Subtract in place where the caller has already ordered the magnitudes."""
    try:
        minuend.subtract_assign(subtrahend)
    except NegativeResultError as e:
        raise AssertionError("magnitudes were compared before subtracting") from e


class BigInteger:
    """
    An arbitrary-size signed integer.

    The value is a sign in {-1, 0, 1} and an owned BigUnsigned magnitude;
    the sign is 0 exactly when the magnitude is zero. As with BigUnsigned,
    ``*_assign`` methods mutate and return self and the plain methods return
    new values.

    Division comes in two flavours. ``divide_with_remainder`` truncates
    toward zero, so the remainder has the dividend's sign.
    ``floor_divide_with_remainder`` rounds toward negative infinity like
    Python's ``divmod``, and backs the ``//``, ``%`` and ``divmod`` operators.

    Values hash by their current value but are mutable, so do not mutate one
    while it is a dict key or set member.

    Example:
        >>> q = BigInteger(-17).divide_with_remainder(BigInteger(5))
        >>> str(q)
        '-3'
        >>> divmod(BigInteger(-17), 5)
        (BigInteger('-4'), BigInteger('3'))
    """

    def __init__(
        self, value: int | str | BigInteger | BigUnsigned = 0, radix: int = DEFAULT_RADIX
    ) -> None:
        """
        Initialize from a native int, a string, a BigUnsigned or a copy.

        Raises:
            InvalidInputError: If value has an unsupported type
            InvalidFormatError: If a string value cannot be parsed
        """
        self._sign = 0
        self._magnitude = BigUnsigned()
        if isinstance(value, BigInteger):
            self.assign(value)
        elif isinstance(value, BigUnsigned):
            self._magnitude = value.copy()
            self._sign = value.signum()
        elif isinstance(value, str):
            self.assign_from_string(value, radix)
        else:
            self.assign_from_int(value)

    @classmethod
    def from_int(cls, value: int) -> BigInteger:
        """Create a BigInteger from any native int."""
        return cls().assign_from_int(value)

    @classmethod
    def from_int32(cls, value: int) -> BigInteger:
        """Create a BigInteger from a value in the signed 32-bit range."""
        validate_range(value, INT32_MIN, INT32_MAX, f"{cls.__name__}.from_int32")
        return cls.from_int(value)

    @classmethod
    def from_int64(cls, value: int) -> BigInteger:
        """Create a BigInteger from a value in the signed 64-bit range."""
        validate_range(value, INT64_MIN, INT64_MAX, f"{cls.__name__}.from_int64")
        return cls.from_int(value)

    @classmethod
    def from_magnitude(cls, sign: int, magnitude: BigUnsigned) -> BigInteger:
        """
        Create a BigInteger from a sign and a copy of magnitude.

        A non-zero sign with a zero magnitude yields zero.

        Raises:
            InvalidInputError: If sign is not -1, 0 or 1, or is 0 for a
                non-zero magnitude
        """
        if isinstance(sign, bool) or not isinstance(sign, int) or sign not in (-1, 0, 1):
            logger.debug("invalid_input", sign=sign)
            raise InvalidInputError(sign, "Sign must be -1, 0 or 1")
        if sign == 0 and not magnitude.is_zero():
            logger.debug("invalid_input", sign=sign)
            raise InvalidInputError(sign, "Zero sign with non-zero magnitude")
        return cls._from_parts(sign, magnitude.copy())

    @classmethod
    def from_string(cls, text: str, radix: int = DEFAULT_RADIX) -> BigInteger:
        """Create a BigInteger from its string representation in radix."""
        return cls().assign_from_string(text, radix)

    @classmethod
    def _from_parts(cls, sign: int, magnitude: BigUnsigned) -> BigInteger:
        """Wrap an already owned magnitude without copying it."""
        result = cls()
        result._magnitude = magnitude
        result._sign = 0 if magnitude.is_zero() else sign
        return result

    def copy(self) -> BigInteger:
        """Return an independent copy of this value."""
        return BigInteger._from_parts(self._sign, self._magnitude.copy())

    def _set_zero(self) -> None:
        self._sign = 0
        self._magnitude = BigUnsigned()

    def _division_by_zero(self, operation: str) -> DivisionByZeroError:
        logger.debug("division_by_zero", operation=operation, type="BigInteger")
        return DivisionByZeroError(self.copy())

    # -- properties and predicates ------------------------------------------

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        return self._sign

    @property
    def magnitude(self) -> BigUnsigned:
        """A copy of the absolute value."""
        return self._magnitude.copy()

    def is_zero(self) -> bool:
        return self._sign == 0

    def is_negative(self) -> bool:
        return self._sign < 0

    def is_positive(self) -> bool:
        return self._sign > 0

    def signum(self) -> int:
        return self._sign

    # -- assignment ---------------------------------------------------------

    def assign(self, value: BigInteger) -> BigInteger:
        """Set self to a copy of value."""
        self._sign = value._sign
        self._magnitude = value._magnitude.copy()
        return self

    def assign_from_int(self, value: int) -> BigInteger:
        """
        Set self to a native int.

        Raises:
            InvalidInputError: If value is not an int
        """
        validate_native_int(value)
        self._sign = sign_of(value)
        self._magnitude = BigUnsigned.from_int(abs(value))
        return self

    def assign_from_string(self, text: str, radix: int = DEFAULT_RADIX) -> BigInteger:
        """
        Set self to the value of ``text`` read in ``radix``.

        An optional leading ``-`` makes the value negative; ``"-0"`` is zero.
        Self is unchanged if parsing fails.

        Raises:
            InvalidFormatError: If radix is outside [2, 36], text is empty or
                a lone sign, or a character is not a digit of the radix
        """
        validate_radix(radix)
        validate_text(text)

        sign, digits = (-1, text[1:]) if text.startswith("-") else (1, text)
        if not digits:
            logger.debug("invalid_format", reason="sign only", text=text, radix=radix)
            raise InvalidFormatError(text, "Sign without digits")

        try:
            magnitude = BigUnsigned.from_string(digits, radix)
        except InvalidFormatError as e:
            raise InvalidFormatError(text, e.reason) from e

        self._magnitude = magnitude
        self._sign = 0 if magnitude.is_zero() else sign
        return self

    # -- addition and subtraction -------------------------------------------

    def add_assign(self, addend: BigInteger) -> BigInteger:
        """Set self to ``self + addend``."""
        if addend._sign == 0:
            return self
        if self._sign == 0:
            return self.assign(addend)
        if self._sign == addend._sign:
            self._magnitude.add_assign(addend._magnitude)
            return self

        order = self._magnitude.compare(addend._magnitude)
        if order == 0:
            self._set_zero()
        elif order > 0:
            _subtract_smaller(self._magnitude, addend._magnitude)
        else:
            saved = self._magnitude
            self.assign(addend)
            _subtract_smaller(self._magnitude, saved)
        return self

    def add(self, addend: BigInteger) -> BigInteger:
        """Return ``self + addend``."""
        return self.copy().add_assign(addend)

    def subtract_assign(self, subtrahend: BigInteger) -> BigInteger:
        """Set self to ``self - subtrahend``."""
        if subtrahend._sign == 0:
            return self
        if self._sign == 0:
            return self.assign(subtrahend).negate_assign()
        if self._sign != subtrahend._sign:
            self._magnitude.add_assign(subtrahend._magnitude)
            return self

        order = self._magnitude.compare(subtrahend._magnitude)
        if order == 0:
            self._set_zero()
        elif order > 0:
            _subtract_smaller(self._magnitude, subtrahend._magnitude)
        else:
            saved = self._magnitude
            self.assign(subtrahend)
            _subtract_smaller(self._magnitude, saved)
            self._sign = -self._sign
        return self

    def subtract(self, subtrahend: BigInteger) -> BigInteger:
        """Return ``self - subtrahend``."""
        return self.copy().subtract_assign(subtrahend)

    def increment_assign(self) -> BigInteger:
        """Set self to ``self + 1``."""
        return self.add_assign(BigInteger(1))

    def increment(self) -> BigInteger:
        return self.copy().increment_assign()

    def decrement_assign(self) -> BigInteger:
        """Set self to ``self - 1``."""
        return self.subtract_assign(BigInteger(1))

    def decrement(self) -> BigInteger:
        return self.copy().decrement_assign()

    def negate_assign(self) -> BigInteger:
        """Set self to ``-self``; zero stays zero."""
        self._sign = -self._sign
        return self

    def negate(self) -> BigInteger:
        return self.copy().negate_assign()

    def absolute_assign(self) -> BigInteger:
        """Set self to ``|self|``."""
        self._sign = abs(self._sign)
        return self

    def absolute(self) -> BigInteger:
        return self.copy().absolute_assign()

    # -- multiplication and division ----------------------------------------

    def multiply_assign(self, factor: BigInteger) -> BigInteger:
        """Set self to ``self * factor``."""
        self._sign *= factor._sign
        if self._sign == 0:
            self._magnitude = BigUnsigned()
        else:
            self._magnitude.multiply_assign(factor._magnitude)
        return self

    def multiply(self, factor: BigInteger) -> BigInteger:
        """Return ``self * factor``."""
        return self.copy().multiply_assign(factor)

    def divide_with_remainder(self, divisor: BigInteger) -> BigInteger:
        """
        Truncating division; self becomes the remainder.

        The quotient is rounded toward zero, so its sign is the product of
        the operand signs and the remainder keeps the dividend's sign:
        ``-17 / 5`` gives quotient ``-3`` and remainder ``-2``.

        Args:
            divisor: The value to divide by

        Returns:
            The quotient

        Raises:
            DivisionByZeroError: If divisor is zero
        """
        if divisor.is_zero():
            raise self._division_by_zero("divide_with_remainder")
        if divisor is self:
            divisor = divisor.copy()

        quotient_sign = self._sign * divisor._sign
        quotient = self._magnitude.divide_with_remainder(divisor._magnitude)
        if self._magnitude.is_zero():
            self._sign = 0
        return BigInteger._from_parts(quotient_sign, quotient)

    def floor_divide_with_remainder(self, divisor: BigInteger) -> BigInteger:
        """
        Floor division; self becomes the remainder.

        The quotient is rounded toward negative infinity and the remainder
        takes the divisor's sign, matching Python's ``divmod``. For operands
        of different signs the dividend's magnitude is decremented before the
        unsigned division; the quotient is then incremented and the remainder
        becomes ``|divisor| - remainder - 1``.

        Raises:
            DivisionByZeroError: If divisor is zero
        """
        if divisor.is_zero():
            raise self._division_by_zero("floor_divide_with_remainder")
        if divisor is self:
            divisor = divisor.copy()
        if self._sign == 0:
            return BigInteger()
        if self._sign == divisor._sign:
            return self.divide_with_remainder(divisor)

        self._magnitude.decrement_assign()
        quotient = self._magnitude.divide_with_remainder(divisor._magnitude)
        quotient.increment_assign()

        remainder = divisor._magnitude.copy()
        _subtract_smaller(remainder, self._magnitude)
        remainder.decrement_assign()

        self._magnitude = remainder
        self._sign = 0 if remainder.is_zero() else divisor._sign
        return BigInteger._from_parts(-1, quotient)

    def divide_assign(self, divisor: BigInteger) -> BigInteger:
        """Set self to the truncated quotient ``self / divisor``."""
        return self.assign(self.divide_with_remainder(divisor))

    def divide(self, divisor: BigInteger) -> BigInteger:
        return self.copy().divide_assign(divisor)

    def modulo_assign(self, divisor: BigInteger) -> BigInteger:
        """Set self to the truncating remainder, which has self's sign."""
        self.divide_with_remainder(divisor)
        return self

    def modulo(self, divisor: BigInteger) -> BigInteger:
        return self.copy().modulo_assign(divisor)

    def gcd(self, other: BigInteger) -> BigInteger:
        """Return the non-negative greatest common divisor of self and other."""
        return BigInteger._from_parts(1, self._magnitude.gcd(other._magnitude))

    # -- comparison ---------------------------------------------------------

    def compare(self, other: BigInteger) -> int:
        """Return -1, 0 or 1 if self is less than, equal to or greater than other."""
        if self._sign != other._sign:
            return 1 if self._sign > other._sign else -1
        if self._sign == 0:
            return 0
        return self._magnitude.compare(other._magnitude) * self._sign

    def equals(self, other: BigInteger) -> bool:
        return self._sign == other._sign and self._magnitude.equals(other._magnitude)

    # -- conversion ---------------------------------------------------------

    def to_string(self, radix: int = DEFAULT_RADIX) -> str:
        """
        Return the representation of self in radix with a leading ``-`` if negative.

        Raises:
            InvalidFormatError: If radix is outside [2, 36]
        """
        digits = self._magnitude.to_string(radix)
        return "-" + digits if self._sign < 0 else digits

    def __int__(self) -> int:
        return self._sign * int(self._magnitude)

    # -- Python protocol ----------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> BigInteger | None:
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, BigUnsigned):
            return BigInteger(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInteger.from_int(other)
        return None

    def __add__(self, other: object) -> BigInteger:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigInteger:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: object) -> BigInteger:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: object) -> BigInteger:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    __rmul__ = __mul__

    def __divmod__(self, other: object) -> tuple[BigInteger, BigInteger]:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        remainder = self.copy()
        quotient = remainder.floor_divide_with_remainder(operand)
        return quotient, remainder

    def __rdivmod__(self, other: object) -> tuple[BigInteger, BigInteger]:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return divmod(operand, self)

    def __floordiv__(self, other: object) -> BigInteger:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: object) -> BigInteger:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __rfloordiv__(self, other: object) -> BigInteger:
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __rmod__(self, other: object) -> BigInteger:
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __neg__(self) -> BigInteger:
        return self.negate()

    def __pos__(self) -> BigInteger:
        return self.copy()

    def __abs__(self) -> BigInteger:
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
        return hash(int(self))

    def __bool__(self) -> bool:
        return self._sign != 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"
