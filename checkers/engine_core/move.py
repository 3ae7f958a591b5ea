"""
Moves - Candidate transitions produced by the move generator.

A move is:
- The piece being moved
- Its destination square
- The piece it captures, if any

Moves are immutable and consumed once by Game.perform_move().
"""

from __future__ import annotations
from dataclasses import dataclass

from .notation import Square, to_notation
from .state import Piece


@dataclass(frozen=True)
class Move:
    """A quiet move or a capture."""
    piece: Piece
    to: Square
    captured: Piece | None = None
    origin: Square | None = None

    def __post_init__(self):
        # Remember where the piece started; the piece itself is moved in place
        if self.origin is None:
            object.__setattr__(self, "origin", self.piece.position)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def from_notation(self) -> str:
        return to_notation(*self.origin)

    @property
    def to_notation(self) -> str:
        return to_notation(*self.to)

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{self.from_notation}{sep}{self.to_notation}"
