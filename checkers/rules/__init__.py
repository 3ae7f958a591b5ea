"""Ruleset schema - variant descriptors and their validation."""

from .ruleset import Ruleset, PiecePlacement
from .validation import validate_ruleset, RulesetValidationError, ValidationResult

__all__ = [
    "Ruleset",
    "PiecePlacement",
    "validate_ruleset",
    "RulesetValidationError",
    "ValidationResult",
]
