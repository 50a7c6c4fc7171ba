"""
ValidationResult — encapsulates the outcome of evaluating a bundle.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class ValidationResult:
    """Structured evaluation outcome: one message per failed condition."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    validate_all: bool = False

    def __bool__(self) -> bool:
        return self.valid
