"""
Evaluation — run a bundle's conditions against its value.

Two strategies, chosen by ``Validations.validate_all``:

- fail-fast (False): stop at the first failing condition and return its error.
- all (True): run every condition; a single failure is returned unchanged,
  two or more are merged into one ``CombinedValidationError`` whose message
  joins each failure's text with ``"; "`` in the order encountered.

Failures are returned, not raised. A condition that raises is a programming
error and the exception propagates as-is.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence

from valkit.config import settings
from valkit.models.validation import ValidationResult
from valkit.validation.errors import CombinedValidationError
from valkit.validation.metrics import (
    STRATEGY_ALL,
    STRATEGY_FAIL_FAST,
    record_evaluation,
    record_failures,
    timed_evaluation,
)

if TYPE_CHECKING:
    from valkit.validation.bundle import Validations

logger = logging.getLogger(__name__)

_ConditionFn = Callable[[Any], Optional[Exception]]


def validate(v: "Validations") -> Optional[Exception]:
    """
    Check all the conditions of *v* against its value.

    Returns:
        None if the value passed, otherwise the failure (see module doc).
    """
    if v.validate_all:
        failures = _run_all(v.value, v.conditions)
        return _combine(failures)
    return _run_until_failure(v.value, v.conditions)


def check(v: "Validations") -> None:
    """
    Like :func:`validate`, but raise the failure instead of returning it.

    Raises:
        ConditionError (or whatever exception a condition returned).
    """
    error = validate(v)
    if error is not None:
        raise error


def validate_report(v: "Validations") -> ValidationResult:
    """Evaluate *v* and return one message per failed condition."""
    if v.validate_all:
        failures = _run_all(v.value, v.conditions)
    else:
        error = _run_until_failure(v.value, v.conditions)
        failures = [error] if error is not None else []
    return ValidationResult(
        valid=not failures,
        errors=[str(e) for e in failures],
        validate_all=v.validate_all,
    )


# ======================================================================
# Strategies
# ======================================================================

def _run_all(value: Any, conditions: Sequence[_ConditionFn]) -> List[Exception]:
    """Invoke every condition in order and collect each failure."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Validating all %d condition(s) for value %s",
            len(conditions),
            _preview(value),
        )
    failures: List[Exception] = []
    with timed_evaluation(STRATEGY_ALL):
        for index, condition in enumerate(conditions):
            error = condition(value)
            if error is not None:
                logger.debug("Condition #%d failed: %s", index, error)
                failures.append(error)
    record_evaluation(STRATEGY_ALL)
    record_failures(STRATEGY_ALL, len(failures))
    return failures


def _run_until_failure(
    value: Any, conditions: Sequence[_ConditionFn]
) -> Optional[Exception]:
    """Invoke conditions in order, returning the first failure."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Validating %d condition(s) until failure for value %s",
            len(conditions),
            _preview(value),
        )
    failure: Optional[Exception] = None
    with timed_evaluation(STRATEGY_FAIL_FAST):
        for index, condition in enumerate(conditions):
            error = condition(value)
            if error is not None:
                logger.debug(
                    "Condition #%d failed, skipping %d remaining: %s",
                    index,
                    len(conditions) - index - 1,
                    error,
                )
                failure = error
                break
    record_evaluation(STRATEGY_FAIL_FAST)
    record_failures(STRATEGY_FAIL_FAST, 0 if failure is None else 1)
    return failure


def _combine(failures: List[Exception]) -> Optional[Exception]:
    if not failures:
        return None
    if len(failures) == 1:
        return failures[0]
    return CombinedValidationError(failures)


def _preview(value: Any) -> str:
    text = repr(value)
    limit = settings.MAX_VALUE_LOG_CHARS
    if len(text) > limit:
        return text[:limit] + "..."
    return text
