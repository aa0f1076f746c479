"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def one_block_max():
    """Largest value that fits in a single 32-bit block."""
    from bigmath import BigUnsigned

    return BigUnsigned("4294967295")


@pytest.fixture
def sample_integers():
    """Provide native ints around block boundaries and sign changes."""
    return [
        0,
        1,
        -1,
        2,
        -2,
        17,
        -17,
        2**32 - 1,
        2**32,
        -(2**32),
        2**64 + 12345,
        -(2**96) + 1,
        10**30,
    ]


@pytest.fixture
def sample_fractions():
    """Provide (numerator, denominator) pairs, some unreduced or with negative denominators."""
    return [
        (0, 5),
        (1, 2),
        (-1, 3),
        (2, -4),
        (-6, -9),
        (2**40, 3),
        (7, 2**33),
    ]
