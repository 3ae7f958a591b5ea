"""
Checkers - Rule Engine for a Checkers Variant

A deterministic, rules-driven engine for two-player checkers games.
The engine loads a ruleset descriptor and provides:
- Board state and coordinate notation
- Legal move generation per piece type
- Move validation and application
- Turn, capture and win tracking
"""

__version__ = "0.1.0"
