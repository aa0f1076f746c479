"""Unit tests for BigInteger."""

import pytest

from bigmath import (
    BigInteger,
    BigUnsigned,
    DivisionByZeroError,
    InvalidFormatError,
    InvalidInputError,
    OutOfRangeError,
)


class TestConstruction:
    """Tests for BigInteger constructors."""

    def test_default_is_zero(self):
        value = BigInteger()
        assert value.is_zero()
        assert value.signum() == 0

    def test_from_negative_int(self):
        value = BigInteger(-(2**40))
        assert value.sign == -1
        assert int(value.magnitude) == 2**40

    def test_from_string_negative(self):
        assert int(BigInteger("-123")) == -123

    def test_negative_zero_has_zero_sign(self):
        value = BigInteger("-0")
        assert value.is_zero()
        assert value.sign == 0
        assert value.to_string() == "0"

    def test_from_string_radix(self):
        assert int(BigInteger("-ff", 16)) == -255

    def test_from_big_unsigned(self):
        assert int(BigInteger(BigUnsigned(9))) == 9
        assert BigInteger(BigUnsigned()).sign == 0

    def test_from_magnitude_copies(self):
        magnitude = BigUnsigned(5)
        value = BigInteger.from_magnitude(-1, magnitude)
        magnitude.add_assign(BigUnsigned(1))
        assert int(value) == -5

    def test_from_magnitude_zero_collapses_sign(self):
        assert BigInteger.from_magnitude(1, BigUnsigned()).sign == 0

    def test_from_magnitude_rejects_bad_sign(self):
        with pytest.raises(InvalidInputError):
            BigInteger.from_magnitude(2, BigUnsigned(1))
        with pytest.raises(InvalidInputError):
            BigInteger.from_magnitude(0, BigUnsigned(1))

    def test_from_int32_range(self):
        assert int(BigInteger.from_int32(-(2**31))) == -(2**31)
        with pytest.raises(OutOfRangeError) as exc_info:
            BigInteger.from_int32(2**31)
        assert exc_info.value.target == "BigInteger.from_int32"
        assert str(exc_info.value) == f"BigInteger.from_int32 accepts [{-(2**31)}, {2**31 - 1}]: {2**31}"

    def test_from_int64_range(self):
        assert int(BigInteger.from_int64(2**63 - 1)) == 2**63 - 1
        with pytest.raises(OutOfRangeError):
            BigInteger.from_int64(-(2**63) - 1)

    def test_magnitude_property_is_a_copy(self):
        value = BigInteger(7)
        value.magnitude.add_assign(BigUnsigned(1))
        assert int(value) == 7


class TestParsingErrors:
    """Malformed strings are rejected."""

    @pytest.mark.parametrize("text", ["", "-", "--5", "+5", "1-2", "12.5"])
    def test_malformed(self, text):
        with pytest.raises(InvalidFormatError):
            BigInteger(text)

    def test_error_reports_full_text(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            BigInteger("-12z", 10)
        assert exc_info.value.text == "-12z"


class TestAddition:
    """Tests for sign handling in addition."""

    def test_mixed_signs_negative_result(self):
        assert BigInteger("-5") + BigInteger("3") == BigInteger("-2")

    def test_mixed_signs_positive_result(self):
        assert int(BigInteger(5).add(BigInteger(-3))) == 2

    def test_smaller_receiver_takes_addend_sign(self):
        assert int(BigInteger(3).add(BigInteger(-5))) == -2

    def test_cancellation(self):
        result = BigInteger(2**50).add(BigInteger(-(2**50)))
        assert result.is_zero()
        assert result.sign == 0

    def test_same_sign_negatives(self):
        assert int(BigInteger(-(2**32)).add(BigInteger(-1))) == -(2**32) - 1

    def test_zero_receiver_takes_addend(self):
        assert int(BigInteger().add(BigInteger(-4))) == -4

    def test_add_to_self(self):
        value = BigInteger(-21)
        value.add_assign(value)
        assert int(value) == -42


class TestSubtraction:
    """Tests for sign handling in subtraction."""

    def test_smaller_minus_bigger(self):
        assert int(BigInteger(3).subtract(BigInteger(5))) == -2

    def test_negative_minus_more_negative(self):
        assert int(BigInteger(-3).subtract(BigInteger(-5))) == 2

    def test_signs_differ(self):
        assert int(BigInteger(-3).subtract(BigInteger(5))) == -8
        assert int(BigInteger(3).subtract(BigInteger(-5))) == 8

    def test_from_zero(self):
        assert int(BigInteger().subtract(BigInteger(9))) == -9

    def test_subtract_self(self):
        value = BigInteger(2**45)
        value.subtract_assign(value)
        assert value.is_zero()


class TestMultiplication:
    """Tests for multiplication sign rules."""

    @pytest.mark.parametrize(
        "a, b",
        [(3, 4), (-3, 4), (3, -4), (-3, -4), (0, -4), (-(2**40), 2**40 + 7)],
    )
    def test_matches_native(self, a, b):
        assert int(BigInteger(a) * BigInteger(b)) == a * b

    def test_product_with_zero_has_zero_sign(self):
        assert (BigInteger(-5) * BigInteger(0)).sign == 0


class TestTruncatingDivision:
    """divide_with_remainder rounds toward zero."""

    @pytest.mark.parametrize(
        "a, b, q, r",
        [
            (17, 5, 3, 2),
            (-17, 5, -3, -2),
            (17, -5, -3, 2),
            (-17, -5, 3, -2),
            (15, -5, -3, 0),
            (3, 7, 0, 3),
            (-3, 7, 0, -3),
            (0, -7, 0, 0),
        ],
    )
    def test_all_sign_combinations(self, a, b, q, r):
        remainder = BigInteger(a)
        quotient = remainder.divide_with_remainder(BigInteger(b))
        assert int(quotient) == q
        assert int(remainder) == r

    def test_zero_remainder_has_zero_sign(self):
        remainder = BigInteger(-10)
        remainder.divide_with_remainder(BigInteger(5))
        assert remainder.sign == 0

    def test_divide_and_modulo_forms(self):
        assert int(BigInteger(-17).divide(BigInteger(5))) == -3
        assert int(BigInteger(-17).modulo(BigInteger(5))) == -2

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            BigInteger(4).divide_with_remainder(BigInteger())
        with pytest.raises(DivisionByZeroError):
            BigInteger(4).modulo(BigInteger())


class TestFloorDivision:
    """floor_divide_with_remainder and the // % divmod operators match int."""

    @pytest.mark.parametrize(
        "a, b",
        [(17, 5), (-17, 5), (17, -5), (-17, -5), (-15, 5), (15, -5), (-1, 5), (1, -5), (0, 3)],
    )
    def test_matches_native_divmod(self, a, b):
        quotient, remainder = divmod(BigInteger(a), BigInteger(b))
        assert (int(quotient), int(remainder)) == divmod(a, b)

    def test_operators(self):
        assert int(BigInteger(-7) // 2) == -4
        assert int(BigInteger(-7) % 2) == 1
        assert int(7 // BigInteger(-2)) == -4

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            divmod(BigInteger(1), BigInteger(0))


class TestUnary:
    """Tests for negate, absolute, increment and decrement."""

    def test_negate(self):
        assert int(BigInteger(5).negate()) == -5
        assert int(-BigInteger(-5)) == 5

    def test_negate_zero_is_noop(self):
        assert BigInteger().negate().sign == 0

    def test_absolute(self):
        assert int(abs(BigInteger(-(2**70)))) == 2**70

    def test_increment_across_zero(self):
        assert int(BigInteger(-1).increment()) == 0
        assert int(BigInteger(0).increment()) == 1

    def test_decrement_across_zero(self):
        assert int(BigInteger(0).decrement()) == -1
        assert int(BigInteger(-(2**32) + 1).decrement()) == -(2**32)

    def test_gcd_is_non_negative(self):
        assert int(BigInteger(-12).gcd(BigInteger(18))) == 6


class TestComparison:
    """Tests for three-way compare."""

    def test_signs_first(self):
        assert BigInteger(-(2**80)).compare(BigInteger(1)) == -1
        assert BigInteger(0).compare(BigInteger(-1)) == 1

    def test_negatives_reverse_magnitude_order(self):
        assert BigInteger(-5).compare(BigInteger(-3)) == -1

    def test_equal(self):
        assert BigInteger(-5).compare(BigInteger("-5")) == 0
        assert BigInteger(-5).equals(BigInteger("-5"))

    def test_cross_type_equality(self):
        assert BigInteger(5) == BigUnsigned(5)
        assert BigUnsigned(5) == BigInteger(5)
        assert BigInteger(-5) < 0

    def test_hash_follows_current_value(self):
        key = BigInteger(-3)
        table = {key: "minus three"}
        key.negate_assign()
        assert hash(key) == hash(3)
        assert BigInteger(3) not in table


class TestRendering:
    """Tests for radix rendering."""

    def test_negative_hex(self):
        assert BigInteger(-255).to_string(16) == "-FF"

    def test_binary(self):
        assert BigInteger(-5).to_string(2) == "-101"

    def test_repr(self):
        assert repr(BigInteger(-3)) == "BigInteger('-3')"
