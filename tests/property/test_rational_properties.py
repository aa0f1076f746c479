"""
Property-based tests for BigRational.

fractions.Fraction is the reference model. The state machine drives one
BigRational accumulator through mutating operations in lockstep with a
Fraction and checks the normalization invariant after every step.
"""

from fractions import Fraction
from math import gcd

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from bigmath import BigRational, DivisionByZeroError

small_ints = st.integers(min_value=-(2**40), max_value=2**40)
denominators = st.integers(min_value=1, max_value=2**40)
radixes = st.integers(min_value=2, max_value=36)
small_operands = st.integers(min_value=-50, max_value=50)


@st.composite
def rationals(draw) -> Fraction:
    return Fraction(draw(small_ints), draw(denominators))


def to_big(value: Fraction) -> BigRational:
    return BigRational.from_fraction(value.numerator, value.denominator)


def to_fraction(value: BigRational) -> Fraction:
    return Fraction(int(value.numerator), int(value.denominator))


def assert_normalized(value: BigRational) -> None:
    numerator = int(value.numerator)
    denominator = int(value.denominator)
    assert denominator > 0
    assert gcd(abs(numerator), denominator) == 1
    if numerator == 0:
        assert denominator == 1


@pytest.mark.property
class TestRationalArithmeticProperties:
    """Field operations agree with Fraction and stay normalized."""

    @given(a=rationals(), b=rationals())
    def test_add_matches_fraction(self, a: Fraction, b: Fraction):
        result = to_big(a).add(to_big(b))
        assert to_fraction(result) == a + b
        assert_normalized(result)

    @given(a=rationals(), b=rationals())
    def test_subtract_matches_fraction(self, a: Fraction, b: Fraction):
        result = to_big(a).subtract(to_big(b))
        assert to_fraction(result) == a - b
        assert_normalized(result)

    @given(a=rationals(), b=rationals())
    def test_multiply_matches_fraction(self, a: Fraction, b: Fraction):
        result = to_big(a).multiply(to_big(b))
        assert to_fraction(result) == a * b
        assert_normalized(result)

    @given(a=rationals(), b=rationals())
    def test_divide_matches_fraction(self, a: Fraction, b: Fraction):
        if b == 0:
            with pytest.raises(DivisionByZeroError):
                to_big(a).divide(to_big(b))
        else:
            result = to_big(a).divide(to_big(b))
            assert to_fraction(result) == a / b
            assert_normalized(result)

    @given(a=rationals(), b=rationals())
    def test_add_and_multiply_commute(self, a: Fraction, b: Fraction):
        assert to_big(a).add(to_big(b)) == to_big(b).add(to_big(a))
        assert to_big(a).multiply(to_big(b)) == to_big(b).multiply(to_big(a))

    @given(a=rationals(), b=rationals(), c=rationals())
    def test_add_associative(self, a: Fraction, b: Fraction, c: Fraction):
        left = to_big(a).add(to_big(b)).add(to_big(c))
        right = to_big(a).add(to_big(b).add(to_big(c)))
        assert left.equals(right)

    @given(a=rationals())
    def test_identities_and_inverses(self, a: Fraction):
        value = to_big(a)
        assert value.add(BigRational()) == value
        assert value.multiply(BigRational(1)) == value
        assert value.subtract(value).is_zero()
        assert value.add(value.negate()).is_zero()

    @given(a=rationals())
    def test_multiplicative_inverse(self, a: Fraction):
        assume(a != 0)
        value = to_big(a)
        assert value.multiply(value.reciprocal()).to_string() == "1/1"

    @given(n=small_ints, d=st.integers(min_value=-(2**40), max_value=2**40).filter(bool))
    def test_from_fraction_normalizes(self, n: int, d: int):
        value = BigRational.from_fraction(n, d)
        assert to_fraction(value) == Fraction(n, d)
        assert_normalized(value)


@pytest.mark.property
class TestRationalOrderingProperties:
    """Ordering agrees with Fraction."""

    @given(a=rationals(), b=rationals())
    def test_compare_matches_fraction(self, a: Fraction, b: Fraction):
        expected = (a > b) - (a < b)
        assert to_big(a).compare(to_big(b)) == expected
        assert to_big(b).compare(to_big(a)) == -expected

    @given(a=rationals(), b=rationals(), c=rationals())
    def test_transitive(self, a: Fraction, b: Fraction, c: Fraction):
        x, y, z = sorted([to_big(a), to_big(b), to_big(c)])
        assert to_fraction(x) <= to_fraction(y) <= to_fraction(z)


@pytest.mark.property
class TestRationalRadixProperties:
    """String conversion round-trips."""

    @given(a=rationals(), radix=radixes)
    def test_round_trip(self, a: Fraction, radix: int):
        value = to_big(a)
        assert BigRational(value.to_string(radix), radix).equals(value)

    @given(a=rationals())
    def test_decimal_rendering(self, a: Fraction):
        assert to_big(a).to_string() == f"{a.numerator}/{a.denominator}"


@pytest.mark.property
@pytest.mark.slow
class RationalAccumulatorMachine(RuleBasedStateMachine):
    """
    Stateful testing of in-place BigRational arithmetic.

    Random sequences of *_assign calls run against one accumulator and a
    Fraction model; the two must agree after every step.
    """

    def __init__(self) -> None:
        super().__init__()
        self.value = BigRational()
        self.model = Fraction(0)

    @invariant()
    def matches_model(self) -> None:
        assert to_fraction(self.value) == self.model

    @invariant()
    def is_normalized(self) -> None:
        assert_normalized(self.value)

    @rule(operand=st.builds(Fraction, small_operands, st.integers(min_value=1, max_value=50)))
    def add(self, operand: Fraction) -> None:
        self.value.add_assign(to_big(operand))
        self.model += operand

    @rule(operand=st.builds(Fraction, small_operands, st.integers(min_value=1, max_value=50)))
    def subtract(self, operand: Fraction) -> None:
        self.value.subtract_assign(to_big(operand))
        self.model -= operand

    @rule(operand=small_operands)
    def multiply(self, operand: int) -> None:
        self.value.multiply_assign(BigRational(operand))
        self.model *= operand

    @rule(operand=small_operands)
    def divide(self, operand: int) -> None:
        if operand == 0:
            with pytest.raises(DivisionByZeroError):
                self.value.divide_assign(BigRational(operand))
        else:
            self.value.divide_assign(BigRational(operand))
            self.model /= operand

    @precondition(lambda self: self.model != 0)
    @rule()
    def reciprocal(self) -> None:
        self.value.reciprocal_assign()
        self.model = 1 / self.model

    @rule()
    def increment(self) -> None:
        self.value.increment_assign()
        self.model += 1

    @rule()
    def negate(self) -> None:
        self.value.negate_assign()
        self.model = -self.model

    @rule(
        case=st.sampled_from(
            [
                ("1/2", Fraction(1, 2)),
                ("-3/4", Fraction(-3, 4)),
                ("0", Fraction(0)),
                ("10/-6", Fraction(-5, 3)),
                ("7", Fraction(7)),
            ]
        )
    )
    def assign_from_string(self, case: tuple[str, Fraction]) -> None:
        text, expected = case
        self.value.assign_from_string(text)
        self.model = expected


# Run the state machine as a pytest test
TestRationalAccumulator = RationalAccumulatorMachine.TestCase
TestRationalAccumulator.settings = settings(stateful_step_count=20, deadline=None)
