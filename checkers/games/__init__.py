"""
Games module - Concrete rulesets.

Each module defines one variant:
- base: classic diagonal checkers
- extended: special piece types with a King-immunity phase
"""

from typing import Callable

from ..rules import Ruleset
from .base import create_base_ruleset
from .extended import create_extended_ruleset

RULESETS: dict[str, Callable[[], Ruleset]] = {
    "base": create_base_ruleset,
    "extended": create_extended_ruleset,
}


def get_ruleset(name: str) -> Ruleset:
    """Build a ruleset by id."""
    factory = RULESETS.get(name.strip().lower())
    if factory is None:
        raise KeyError(f"Unknown ruleset '{name}'. Known: {', '.join(RULESETS)}")
    return factory()


def list_rulesets() -> list[Ruleset]:
    return [factory() for factory in RULESETS.values()]


__all__ = [
    "RULESETS",
    "get_ruleset",
    "list_rulesets",
    "create_base_ruleset",
    "create_extended_ruleset",
]
