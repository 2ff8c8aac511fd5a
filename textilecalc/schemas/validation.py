"""
Validation outcome shared by every collect-all-errors validator.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating an input record.

    Validators never raise; they collect one human-readable message per
    violated rule, in rule order.

    Attributes:
        is_valid: True when no rule was violated.
        errors: Messages for each violated rule, in the order checked.
    """

    is_valid: bool
    errors: tuple[str, ...]

    @classmethod
    def from_errors(cls, errors: list[str]) -> ValidationResult:
        return cls(is_valid=not errors, errors=tuple(errors))
