"""
Money validator — conditions for values stored in a PostgreSQL ``money``
column.

A money value is a 64-bit integer count of cents, so a valid amount:
- is a finite decimal number,
- lies in [-92233720368547758.08, 92233720368547758.07],
- has at most two decimal places.

``MONEY_VALIDATION`` is a shared, read-only template. Copy it (or call
``money_validation``) before setting a value or adding conditions.

Reference: https://www.postgresql.org/docs/current/datatype-money.html
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import numpy as np

from valkit.config.constants import (
    MONEY_MAX,
    MONEY_MAX_DECIMAL_PLACES,
    MONEY_MIN,
    MSG_NOT_A_NUMBER,
    MSG_OUT_OF_RANGE,
    MSG_TOO_MANY_DECIMALS,
    MSG_UNSUPPORTED_TYPE,
)
from valkit.validation.bundle import Validations, copy_validations
from valkit.validation.errors import ConditionError, UnsupportedValueError

logger = logging.getLogger(__name__)

_NUMERIC_TYPES = (int, float, Decimal, np.integer, np.floating)


def money_text(value: Any) -> Optional[str]:
    """
    Unify a candidate money value to its textual representation.

    Strings are kept as-is; ints, floats, Decimals and numpy numeric scalars
    use ``str()``. Returns None for anything else, including bools.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, _NUMERIC_TYPES):
        return str(value)
    return None


def _decimal_places(text: str, amount: Decimal) -> int:
    """
    Decimal places of *amount*, counting both the digits written after the
    point and any negative exponent (``"1.5e-5"`` has six).
    """
    mantissa = text.lower().split("e", 1)[0]
    parts = mantissa.split(".")
    written = len(parts[1]) if len(parts) == 2 else 0
    return max(written, -amount.as_tuple().exponent)


def is_money(value: Any) -> Optional[Exception]:
    """
    Condition: *value* can be stored in a PostgreSQL money column.

    Returns:
        None if valid, otherwise a ConditionError describing the first
        check that failed (type, number, range, decimal places).
    """
    text = money_text(value)
    if text is None:
        return UnsupportedValueError(MSG_UNSUPPORTED_TYPE)

    # Decimal also accepts padding and digit separators; money text may not.
    if text != text.strip() or "_" in text:
        return ConditionError(MSG_NOT_A_NUMBER)
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return ConditionError(MSG_NOT_A_NUMBER)
    if not amount.is_finite():
        return ConditionError(MSG_NOT_A_NUMBER)

    if amount < MONEY_MIN or amount > MONEY_MAX:
        return ConditionError(MSG_OUT_OF_RANGE.format(value=text))

    if _decimal_places(text, amount) > MONEY_MAX_DECIMAL_PLACES:
        return ConditionError(MSG_TOO_MANY_DECIMALS)

    return None


# Validations to check if a value is a money amount
MONEY_VALIDATION: Validations[Any] = Validations(
    conditions=[is_money],
    validate_all=False,
).freeze()


def money_validation(value: Any = None) -> Validations[Any]:
    """Return a fresh, mutable copy of ``MONEY_VALIDATION`` holding *value*."""
    v = copy_validations(MONEY_VALIDATION)
    v.set_value(value)
    return v
