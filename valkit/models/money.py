"""
Typed Pydantic model for monetary amounts.

The amount is checked against a copy of ``MONEY_VALIDATION`` on the raw
input, before pydantic coerces it, so the decimal-places check sees the
caller's original text (``"12.345"`` is rejected, not rounded).
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from valkit.validators.money import money_text, money_validation


class MoneyAmount(BaseModel):
    """An amount that fits a PostgreSQL money column, with optional currency."""

    amount: Decimal = Field(..., description="Amount with at most two decimal places.")
    currency: Optional[str] = Field(
        None, pattern=r"^[A-Z]{3}$", description="ISO 4217 code, e.g. 'EUR' (optional)."
    )

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Any:
        error = money_validation(v).validate()
        if error is not None:
            raise ValueError(str(error))
        # Hand pydantic the text form so floats are not widened to binary noise.
        return money_text(v)
