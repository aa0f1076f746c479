"""
Arbitrary-size unsigned integers.

A BigUnsigned keeps its value in a growable list of 32-bit blocks (index 0 is
the least significant block) plus a count of significant blocks. The list may
be longer than the count; blocks past the count are scratch space and never
part of the value. Every operation trims leading zero blocks before it
returns, so the block at ``length - 1`` is never zero.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from bigmath.digits import char_to_digit, digit_to_char
from bigmath.exceptions import DivisionByZeroError, InvalidFormatError, NegativeResultError
from bigmath.log import get_logger
from bigmath.validators import (
    DEFAULT_RADIX,
    UINT32_MAX,
    UINT64_MAX,
    validate_native_int,
    validate_radix,
    validate_range,
    validate_text,
)

logger = get_logger(__name__)

BLOCK_BITS: Final[int] = 32
BLOCK_BASE: Final[int] = 1 << BLOCK_BITS
BLOCK_MASK: Final[int] = BLOCK_BASE - 1


def _shifted_block(blocks: list[int], length: int, index: int, shift: int) -> int:
    """
    Return block ``index`` of ``blocks[:length]`` shifted left by ``shift`` bits.

    The result combines the low bits of the current block with the high bits
    of the previous one. ``index == length`` yields the bits pushed out of the
    top block. ``shift`` must be in [0, BLOCK_BITS).
    """
    current = blocks[index] if index < length else 0
    if shift == 0:
        return current
    previous = blocks[index - 1] if 0 < index <= length else 0
    return ((current << shift) | (previous >> (BLOCK_BITS - shift))) & BLOCK_MASK


def _add_shifted(
    target: list[int], size: int, blocks: list[int], length: int, offset: int, shift: int
) -> None:
    """Add ``blocks[:length]`` shifted by ``offset`` blocks and ``shift`` bits into target."""
    carry = 0
    for j in range(length + 1):
        k = offset + j
        carry += target[k] + _shifted_block(blocks, length, j, shift)
        target[k] = carry & BLOCK_MASK
        carry >>= BLOCK_BITS
    k = offset + length + 1
    while carry and k < size:
        carry += target[k]
        target[k] = carry & BLOCK_MASK
        carry >>= BLOCK_BITS
        k += 1


def _subtract_into(
    target: list[int], minuend: list[int], size: int, subtrahend: list[int], length: int
) -> int:
    """Write ``minuend - subtrahend`` into ``target[:size]`` and return the final borrow."""
    borrow = 0
    for i in range(size):
        borrow = minuend[i] - (subtrahend[i] if i < length else 0) - borrow
        target[i] = borrow & BLOCK_MASK
        borrow = (borrow >> BLOCK_BITS) & 1
    return borrow


def _subtract_shifted(
    target: list[int],
    remainder: list[int],
    size: int,
    divisor: list[int],
    length: int,
    offset: int,
    shift: int,
) -> int:
    """
    Write ``remainder - (divisor << (offset * BLOCK_BITS + shift))`` into target.

    Only ``target[offset:size]`` is written; the blocks below ``offset`` are
    unaffected by the subtraction. Returns the final borrow, which is 1 when
    the shifted divisor is larger than the remainder.
    """
    borrow = 0
    for j in range(length + 1):
        k = offset + j
        borrow = remainder[k] - _shifted_block(divisor, length, j, shift) - borrow
        target[k] = borrow & BLOCK_MASK
        borrow = (borrow >> BLOCK_BITS) & 1
    for k in range(offset + length + 1, size):
        borrow = remainder[k] - borrow
        target[k] = borrow & BLOCK_MASK
        borrow = (borrow >> BLOCK_BITS) & 1
    return borrow


class BigUnsigned:
    """
    An arbitrary-size unsigned integer.

    Every operation comes in two forms: ``x.add_assign(y)`` mutates ``x`` and
    returns it for chaining, ``x.add(y)`` leaves ``x`` alone and returns a new
    value. Subtraction below zero raises NegativeResultError since the type
    cannot represent negative values.

    Values hash by their current value but are mutable, so do not mutate one
    while it is a dict key or set member.

    Example:
        >>> BigUnsigned("4294967295").add(BigUnsigned(1)).to_blocks()
        (0, 1)
        >>> BigUnsigned(255).to_string(16)
        'FF'
    """

    def __init__(self, value: int | str | BigUnsigned = 0, radix: int = DEFAULT_RADIX) -> None:
        """
        Initialize from a native int, a string in the given radix, or a copy.

        Raises:
            InvalidInputError: If value has an unsupported type or is negative
            InvalidFormatError: If a string value cannot be parsed
        """
        self._blocks: list[int] = []
        self._length = 0
        if isinstance(value, BigUnsigned):
            self.assign(value)
        elif isinstance(value, str):
            self.assign_from_string(value, radix)
        else:
            self.assign_from_int(value)

    @classmethod
    def from_int(cls, value: int) -> BigUnsigned:
        """Create a BigUnsigned from any non-negative native int."""
        return cls().assign_from_int(value)

    @classmethod
    def from_uint32(cls, value: int) -> BigUnsigned:
        """Create a BigUnsigned from a value in the unsigned 32-bit range."""
        validate_range(value, 0, UINT32_MAX, "BigUnsigned.from_uint32")
        return cls.from_int(value)

    @classmethod
    def from_uint64(cls, value: int) -> BigUnsigned:
        """Create a BigUnsigned from a value in the unsigned 64-bit range."""
        validate_range(value, 0, UINT64_MAX, "BigUnsigned.from_uint64")
        return cls.from_int(value)

    @classmethod
    def from_blocks(cls, blocks: Iterable[int]) -> BigUnsigned:
        """
        Create a BigUnsigned from 32-bit blocks, least significant first.

        Leading zero blocks are allowed and trimmed.

        Raises:
            OutOfRangeError: If a block is outside [0, 2**32)
        """
        return cls._from_block_list(
            [validate_range(block, 0, BLOCK_MASK, "BigUnsigned.from_blocks") for block in blocks]
        )

    @classmethod
    def from_string(cls, text: str, radix: int = DEFAULT_RADIX) -> BigUnsigned:
        """Create a BigUnsigned from its string representation in radix."""
        return cls().assign_from_string(text, radix)

    @classmethod
    def _from_block_list(cls, blocks: list[int]) -> BigUnsigned:
        result = cls()
        result._blocks = blocks
        result._length = len(blocks)
        result._trim()
        return result

    def copy(self) -> BigUnsigned:
        """Return an independent copy of this value."""
        return BigUnsigned._from_block_list(self._blocks[: self._length])

    # -- internal storage helpers -------------------------------------------

    def _trim(self) -> None:
        """Drop leading zero blocks from the significant length."""
        while self._length > 0 and self._blocks[self._length - 1] == 0:
            self._length -= 1

    def _reserve(self, size: int) -> None:
        """Grow the block list so that it holds at least ``size`` blocks."""
        if len(self._blocks) < size:
            self._blocks.extend([0] * (size - len(self._blocks)))

    def _multiply_add_small(self, factor: int, addend: int) -> None:
        """Set self to ``self * factor + addend`` for single-block factor and addend."""
        carry = addend
        for i in range(self._length):
            carry += self._blocks[i] * factor
            self._blocks[i] = carry & BLOCK_MASK
            carry >>= BLOCK_BITS
        if carry:
            self._reserve(self._length + 1)
            self._blocks[self._length] = carry
            self._length += 1

    def _negative_result(self, operation: str, *operands: BigUnsigned) -> NegativeResultError:
        logger.debug("negative_result", operation=operation)
        return NegativeResultError(operation, self.copy(), *operands)

    def _division_by_zero(self, operation: str) -> DivisionByZeroError:
        logger.debug("division_by_zero", operation=operation, type="BigUnsigned")
        return DivisionByZeroError(self.copy())

    # -- predicates ---------------------------------------------------------

    def is_zero(self) -> bool:
        """Return whether this value is zero."""
        return self._length == 0

    def is_positive(self) -> bool:
        """Return whether this value is greater than zero."""
        return self._length > 0

    def is_negative(self) -> bool:
        """Always False; present so all numeric types share one interface."""
        return False

    def signum(self) -> int:
        """Return 0 for zero and 1 otherwise."""
        return 1 if self._length else 0

    # -- assignment ---------------------------------------------------------

    def assign(self, value: BigUnsigned) -> BigUnsigned:
        """Set self to a copy of value."""
        self._blocks = value._blocks[: value._length]
        self._length = value._length
        return self

    def assign_from_int(self, value: int) -> BigUnsigned:
        """
        Set self to a non-negative native int.

        Raises:
            InvalidInputError: If value is not an int or is negative
        """
        validate_native_int(value, allow_negative=False)
        blocks = []
        while value:
            blocks.append(value & BLOCK_MASK)
            value >>= BLOCK_BITS
        self._blocks = blocks
        self._length = len(blocks)
        return self

    def assign_from_string(self, text: str, radix: int = DEFAULT_RADIX) -> BigUnsigned:
        """
        Set self to the value of ``text`` read in ``radix``.

        Digits are ``0-9`` then ``a-z`` (either case). No sign, whitespace or
        prefix is accepted. Self is unchanged if parsing fails.

        Raises:
            InvalidFormatError: If radix is outside [2, 36], text is empty,
                or a character is not a digit of the radix
        """
        validate_radix(radix)
        validate_text(text)

        value = BigUnsigned()
        for char in text:
            try:
                digit = char_to_digit(char)
            except InvalidFormatError as e:
                raise InvalidFormatError(text, f"Invalid digit {char!r} for radix {radix}") from e
            if digit >= radix:
                logger.debug("invalid_format", reason="digit", text=text, radix=radix)
                raise InvalidFormatError(text, f"Invalid digit {char!r} for radix {radix}")
            value._multiply_add_small(radix, digit)

        self._blocks = value._blocks
        self._length = value._length
        return self

    # -- addition and subtraction -------------------------------------------

    def add_assign(self, addend: BigUnsigned) -> BigUnsigned:
        """Set self to ``self + addend``."""
        if addend.is_zero():
            return self

        # one extra block for a carry out of the top
        size = max(self._length, addend._length) + 1
        self._reserve(size)
        blocks = self._blocks
        for i in range(self._length, size):
            blocks[i] = 0

        other = addend._blocks
        carry = 0
        i = 0
        while i < addend._length:
            carry += blocks[i] + other[i]
            blocks[i] = carry & BLOCK_MASK
            carry >>= BLOCK_BITS
            i += 1
        while carry and i < size - 1:
            carry += blocks[i]
            blocks[i] = carry & BLOCK_MASK
            carry >>= BLOCK_BITS
            i += 1

        if carry:
            blocks[size - 1] = carry
            self._length = size
        else:
            self._length = size - 1
        return self

    def add(self, addend: BigUnsigned) -> BigUnsigned:
        """Return ``self + addend``."""
        return self.copy().add_assign(addend)

    def subtract_assign(self, subtrahend: BigUnsigned) -> BigUnsigned:
        """
        Set self to ``self - subtrahend``.

        Raises:
            NegativeResultError: If subtrahend is greater than self; self is
                left unchanged
        """
        if subtrahend.is_zero():
            return self
        if self._length < subtrahend._length:
            raise self._negative_result("subtraction", subtrahend.copy())

        result = [0] * self._length
        borrow = _subtract_into(
            result, self._blocks, self._length, subtrahend._blocks, subtrahend._length
        )
        if borrow:
            raise self._negative_result("subtraction", subtrahend.copy())

        self._blocks = result
        self._trim()
        return self

    def subtract(self, subtrahend: BigUnsigned) -> BigUnsigned:
        """Return ``self - subtrahend``; raises NegativeResultError if negative."""
        return self.copy().subtract_assign(subtrahend)

    def increment_assign(self) -> BigUnsigned:
        """Set self to ``self + 1``."""
        self._reserve(self._length + 1)
        for i in range(self._length):
            self._blocks[i] = (self._blocks[i] + 1) & BLOCK_MASK
            if self._blocks[i]:
                return self
        self._blocks[self._length] = 1
        self._length += 1
        return self

    def increment(self) -> BigUnsigned:
        """Return ``self + 1``."""
        return self.copy().increment_assign()

    def decrement_assign(self) -> BigUnsigned:
        """
        Set self to ``self - 1``.

        Raises:
            NegativeResultError: If self is zero
        """
        if self.is_zero():
            raise self._negative_result("decrement")

        i = 0
        while self._blocks[i] == 0:
            self._blocks[i] = BLOCK_MASK
            i += 1
        self._blocks[i] -= 1
        self._trim()
        return self

    def decrement(self) -> BigUnsigned:
        """Return ``self - 1``; raises NegativeResultError on zero."""
        return self.copy().decrement_assign()

    # -- multiplication and division ----------------------------------------

    def multiply(self, factor: BigUnsigned) -> BigUnsigned:
        """
        Return ``self * factor``.

        Binary long multiplication: for every set bit of the shorter operand
        the longer operand, shifted to that bit position, is added into an
        accumulator of ``len(self) + len(factor)`` blocks.
        """
        if self.is_zero() or factor.is_zero():
            return BigUnsigned()

        if self._length >= factor._length:
            longer, shorter = self, factor
        else:
            longer, shorter = factor, self

        size = self._length + factor._length
        product = [0] * size
        for i in range(shorter._length):
            block = shorter._blocks[i]
            shift = 0
            while block:
                if block & 1:
                    _add_shifted(product, size, longer._blocks, longer._length, i, shift)
                block >>= 1
                shift += 1

        return BigUnsigned._from_block_list(product)

    def multiply_assign(self, factor: BigUnsigned) -> BigUnsigned:
        """Set self to ``self * factor``."""
        return self.assign(self.multiply(factor))

    def divide_with_remainder(self, divisor: BigUnsigned) -> BigUnsigned:
        """
        Divide self by divisor, leaving the remainder in self.

        Binary restoring division: for each quotient block from the most
        significant down, and each bit of that block from high to low, the
        divisor shifted to that position is subtracted from the remainder
        into a scratch buffer. If the subtraction does not underflow, the
        buffer becomes the new remainder and the quotient bit is set.

        Args:
            divisor: The value to divide by

        Returns:
            The quotient

        Raises:
            DivisionByZeroError: If divisor is zero; self is left unchanged
        """
        if divisor.is_zero():
            raise self._division_by_zero("divide_with_remainder")
        if divisor is self:
            divisor = divisor.copy()
        if self._length < divisor._length:
            return BigUnsigned()

        size = self._length + 1
        remainder = self._blocks[: self._length] + [0]
        scratch = [0] * size
        quotient = [0] * (self._length - divisor._length + 1)

        for offset in range(len(quotient) - 1, -1, -1):
            for shift in range(BLOCK_BITS - 1, -1, -1):
                borrow = _subtract_shifted(
                    scratch, remainder, size, divisor._blocks, divisor._length, offset, shift
                )
                if not borrow:
                    remainder[offset:] = scratch[offset:]
                    quotient[offset] |= 1 << shift

        self._blocks = remainder
        self._length = size
        self._trim()
        return BigUnsigned._from_block_list(quotient)

    def divide_assign(self, divisor: BigUnsigned) -> BigUnsigned:
        """Set self to the quotient ``self // divisor``."""
        return self.assign(self.divide_with_remainder(divisor))

    def divide(self, divisor: BigUnsigned) -> BigUnsigned:
        """Return the quotient ``self // divisor``."""
        return self.copy().divide_assign(divisor)

    def modulo_assign(self, divisor: BigUnsigned) -> BigUnsigned:
        """Set self to the remainder ``self % divisor``."""
        self.divide_with_remainder(divisor)
        return self

    def modulo(self, divisor: BigUnsigned) -> BigUnsigned:
        """Return the remainder ``self % divisor``."""
        return self.copy().modulo_assign(divisor)

    def gcd(self, other: BigUnsigned) -> BigUnsigned:
        """Return the greatest common divisor; ``gcd(0, 0)`` is zero."""
        a = self.copy()
        b = other.copy()
        while not b.is_zero():
            a.modulo_assign(b)
            a, b = b, a
        return a

    # -- comparison ---------------------------------------------------------

    def compare(self, other: BigUnsigned) -> int:
        """Return -1, 0 or 1 if self is less than, equal to or greater than other."""
        if self._length != other._length:
            return 1 if self._length > other._length else -1
        for i in range(self._length - 1, -1, -1):
            a = self._blocks[i]
            b = other._blocks[i]
            if a != b:
                return 1 if a > b else -1
        return 0

    def equals(self, other: BigUnsigned) -> bool:
        """Return whether self and other have the same value."""
        return self.compare(other) == 0

    # -- conversion ---------------------------------------------------------

    def to_string(self, radix: int = DEFAULT_RADIX) -> str:
        """
        Return the representation of self in radix, using uppercase letters.

        Raises:
            InvalidFormatError: If radix is outside [2, 36]
        """
        validate_radix(radix)
        if self.is_zero():
            return "0"

        base = BigUnsigned.from_int(radix)
        value = self.copy()
        digits = []
        while not value.is_zero():
            quotient = value.divide_with_remainder(base)
            digits.append(digit_to_char(value._blocks[0] if value._length else 0))
            value = quotient
        return "".join(reversed(digits))

    def to_blocks(self) -> tuple[int, ...]:
        """Return the significant blocks, least significant first."""
        return tuple(self._blocks[: self._length])

    def to_binary_string(self) -> str:
        """Return the blocks in binary, most significant first, space separated."""
        if self.is_zero():
            return "0"
        return " ".join(format(block, "032b") for block in reversed(self.to_blocks()))

    def to_hex_string(self) -> str:
        """Return the blocks in hex, most significant first, space separated."""
        if self.is_zero():
            return "0"
        return " ".join(format(block, "08X") for block in reversed(self.to_blocks()))

    def bit_length(self) -> int:
        """Return the number of bits needed to represent self."""
        if self.is_zero():
            return 0
        top = self._length - 1
        return top * BLOCK_BITS + self._blocks[top].bit_length()

    def __int__(self) -> int:
        value = 0
        for i in range(self._length - 1, -1, -1):
            value = (value << BLOCK_BITS) | self._blocks[i]
        return value

    # -- Python protocol ----------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> BigUnsigned | None:
        if isinstance(other, BigUnsigned):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigUnsigned.from_int(other)
        return None

    def __add__(self, other: object) -> BigUnsigned:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigUnsigned:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: object) -> BigUnsigned:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: object) -> BigUnsigned:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> BigUnsigned:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __mod__(self, other: object) -> BigUnsigned:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.modulo(operand)

    def __divmod__(self, other: object) -> tuple[BigUnsigned, BigUnsigned]:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        remainder = self.copy()
        quotient = remainder.divide_with_remainder(operand)
        return quotient, remainder

    def _compare_any(self, other: object) -> int | None:
        if isinstance(other, BigUnsigned):
            return self.compare(other)
        if isinstance(other, int) and not isinstance(other, bool):
            value = int(self)
            return (value > other) - (value < other)
        return None

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
        return not self.is_zero()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigUnsigned('{self.to_string()}')"
