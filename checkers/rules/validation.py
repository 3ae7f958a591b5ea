"""
Ruleset Validation - Consistency checks for ruleset descriptors.

Validates that:
1. Required fields are present
2. The layout uses valid, distinct squares
3. Every placed piece type has a movement generator
4. Numeric settings are in range
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.notation import NotationError, parse_notation
from ..engine_core.state import Side
from .ruleset import Ruleset


class RulesetValidationError(Exception):
    """Raised when ruleset validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Ruleset validation failed with {len(errors)} error(s)")


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_ruleset(ruleset: Ruleset, raise_on_error: bool = False) -> ValidationResult:
    """
    Validate a ruleset.

    Returns ValidationResult with errors and warnings.
    Raises RulesetValidationError if raise_on_error=True and errors exist.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not ruleset.ruleset_id:
        errors.append("ruleset_id is required")
    if not ruleset.name:
        errors.append("name is required")
    if ruleset.pieces_per_side < 1:
        errors.append("pieces_per_side must be >= 1")
    if ruleset.king_immunity_turns < 0:
        errors.append("king_immunity_turns must be >= 0")

    errors.extend(_validate_layout(ruleset))

    for piece_type in ruleset.piece_types:
        if piece_type not in ruleset.movement:
            errors.append(f"No movement generator for piece type '{piece_type.value}'")

    for side in Side:
        placed = len(ruleset.layout_for(side))
        if placed == 0:
            errors.append(f"{side} has no pieces in the layout")
        elif placed != ruleset.pieces_per_side:
            warnings.append(
                f"{side} has {placed} pieces but pieces_per_side is {ruleset.pieces_per_side}"
            )

    if ruleset.multi_capture and not ruleset.forced_capture:
        warnings.append("multi_capture without forced_capture lets an aggressor stop early")

    result = ValidationResult(valid=not errors, errors=errors, warnings=warnings)
    if raise_on_error and errors:
        raise RulesetValidationError(errors)
    return result


def _validate_layout(ruleset: Ruleset) -> list[str]:
    """Check squares are well-formed and unoccupied by other placements."""
    errors = []
    occupied: set[tuple[int, int]] = set()
    for placement in ruleset.layout:
        try:
            square = parse_notation(placement.notation)
        except NotationError as e:
            errors.append(f"Layout: {e}")
            continue
        if square in occupied:
            errors.append(f"Layout: {placement.notation.strip().upper()} is used more than once")
        occupied.add(square)
    return errors
