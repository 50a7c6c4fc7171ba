"""
Validations — a value, an ordered list of condition predicates, and the
evaluation strategy to run them with.

The module-level functions are the primary API; the methods on
``Validations`` delegate to them and return ``self`` so calls can be chained:

    v = create_validations(str).add_condition(not_empty).set_value("abc")
    error = v.validate()

Conditions form an append-only log: there is no way to remove or reorder a
condition once added. Shared templates are frozen with ``freeze()`` and must
be copied before callers add their own conditions.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, Sequence, Type, TypeVar

from valkit.models.validation import ValidationResult
from valkit.validation import evaluate
from valkit.validation.errors import ReadOnlyValidationsError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A condition returns None when the value passes, or an exception instance
# (not raised) describing why it failed.
Condition = Callable[[T], Optional[Exception]]


@dataclass
class Validations(Generic[T]):
    """
    Value under test plus its ordered conditions.

    validate_all:
        True  → run every condition and combine all failures.
        False → stop at the first failing condition (default).
    """

    value: Optional[T] = None
    conditions: Sequence[Condition[T]] = field(default_factory=list)
    validate_all: bool = False
    read_only: bool = field(default=False, repr=False)

    def add_condition(self, condition: Condition[T]) -> "Validations[T]":
        add_condition(self, condition)
        return self

    def set_value(self, value: T) -> "Validations[T]":
        set_value(self, value)
        return self

    def set_method(self, validate_all: bool) -> "Validations[T]":
        set_method(self, validate_all)
        return self

    def freeze(self) -> "Validations[T]":
        """
        Mark this bundle read-only. The conditions become a tuple, so the
        sequence itself cannot be appended to; copies made from a frozen
        bundle get a fresh list and stay mutable.
        """
        self.conditions = tuple(self.conditions)
        self.read_only = True
        return self

    def copy(self) -> "Validations[T]":
        return copy_validations(self)

    def __copy__(self) -> "Validations[T]":
        return copy_validations(self)

    def __deepcopy__(self, memo: dict) -> "Validations[T]":
        dup = copy_validations(self)
        dup.value = copy.deepcopy(self.value, memo)
        return dup

    def validate(self) -> Optional[Exception]:
        return evaluate.validate(self)

    def validate_report(self) -> ValidationResult:
        return evaluate.validate_report(self)

    def check(self) -> None:
        evaluate.check(self)


def create_validations(value_type: Optional[Type[T]] = None) -> Validations[T]:
    """
    Create an empty bundle: zero value, no conditions, fail-fast.

    The zero value is ``value_type()`` when a type is given (``""`` for str,
    ``0`` for int, ``Decimal("0")`` for Decimal) and ``None`` otherwise.
    """
    value = value_type() if value_type is not None else None
    return Validations(value=value)


def add_condition(v: Validations[T], condition: Condition[T]) -> None:
    """Append *condition* to the end of the bundle's conditions."""
    _ensure_writable(v, "add a condition")
    v.conditions.append(condition)  # type: ignore[attr-defined]


def set_value(v: Validations[T], value: T) -> None:
    """Replace the value under test. No coercion is performed."""
    _ensure_writable(v, "set the value")
    v.value = value


def set_method(v: Validations[T], validate_all: bool) -> None:
    """
    Select the evaluation strategy: True validates every condition,
    False validates until one of them fails.
    """
    _ensure_writable(v, "set the validation method")
    v.validate_all = validate_all


def copy_validations(v: Validations[T]) -> Validations[T]:
    """
    Return an independent, mutable copy of *v*, even when *v* is frozen.

    The value is shared by reference and the predicates themselves are
    shared; only the condition list is new, so appending to either bundle
    never affects the other.
    """
    return Validations(
        value=v.value,
        conditions=list(v.conditions),
        validate_all=v.validate_all,
    )


def _ensure_writable(v: Validations, operation: str) -> None:
    if v.read_only:
        logger.debug("Rejected attempt to %s on a read-only bundle", operation)
        raise ReadOnlyValidationsError(operation)
