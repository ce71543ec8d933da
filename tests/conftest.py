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
def arithmetic_operators():
    """Every operator that takes two operands."""
    from shunting_yard import Operator

    return [op for op in Operator if not op.is_paren]


@pytest.fixture
def malformed_expressions():
    """Expressions that tokenize without complaint but cannot be evaluated."""
    return [
        "",
        "5+",
        "+5",
        "5++3",
        "5(3)",
        "()",
        "(1+(2*3",
        "2*x",
        "1.2.3+4",
        "inf+1",
    ]
