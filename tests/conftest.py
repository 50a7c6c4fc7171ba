"""
Shared test fixtures for the validation test suite.
"""
import pytest

from valkit.validation.bundle import Validations, create_validations
from valkit.validation.errors import ConditionError


# ==========================================================================
# Conditions
# ==========================================================================

class CountingCondition:
    """Wraps a condition and counts how many times it was invoked."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = 0

    def __call__(self, value):
        self.calls += 1
        return self.inner(value)


@pytest.fixture
def failing():
    """Factory for a condition that always fails with the given message."""
    def make(message: str):
        def condition(_value):
            return ConditionError(message)
        return condition
    return make


@pytest.fixture
def passing():
    return lambda _value: None


@pytest.fixture
def counting():
    return CountingCondition


# ==========================================================================
# Bundles
# ==========================================================================

@pytest.fixture
def empty_bundle() -> Validations:
    return create_validations(str)


@pytest.fixture
def two_failures_bundle(failing) -> Validations:
    v = create_validations(str)
    v.add_condition(failing("A"))
    v.add_condition(failing("B"))
    return v


# ==========================================================================
# Money inputs
# ==========================================================================

@pytest.fixture
def valid_money_values():
    return ["100.50", "0", "-1.5", "92233720368547758.07", "-92233720368547758.08", 42, 19.99]


@pytest.fixture
def invalid_money_values():
    return {
        "12.345": "value has more than two decimal places",
        "abc": "value is not a valid decimal number",
        "92233720368547758.08": "out of the valid range for money type",
        "1.5e-5": "value has more than two decimal places",
        "1e-3": "value has more than two decimal places",
        1e-05: "value has more than two decimal places",
        " 12.50 ": "value is not a valid decimal number",
        "1_000.50": "value is not a valid decimal number",
    }
