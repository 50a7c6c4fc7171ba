"""
Error taxonomy for condition predicates and bundles.

Condition failures are *returned* by predicates and by ``validate``; only
``ReadOnlyValidationsError`` is raised, since mutating a shared template is a
programming error rather than a validation outcome.
"""
from typing import List

from valkit.config.constants import ERROR_DELIMITER


class ConditionError(Exception):
    """A single condition predicate rejected the value."""


class UnsupportedValueError(ConditionError):
    """A predicate received a value shape it cannot interpret."""


class CombinedValidationError(ConditionError):
    """Two or more failures collected while validating all conditions."""

    def __init__(self, errors: List[Exception]) -> None:
        self.errors = list(errors)
        super().__init__(ERROR_DELIMITER.join(str(e) for e in self.errors))


class ReadOnlyValidationsError(Exception):
    """Raised when a read-only (template) bundle is mutated in place."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot {operation} on a read-only Validations; copy it first"
        )
