"""
Game State - Sides, piece types, pieces and players.

Design principles:
- Pieces are mutable records: the board moves them in place
- Piece identity is object identity (two pieces never compare equal)
- Players are immutable value objects
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .notation import Square, parse_notation, to_notation


class Side(Enum):
    """The two sides. Black sits on ranks 1-3 and moves up the board."""
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> Side:
        return Side.WHITE if self is Side.BLACK else Side.BLACK

    @property
    def forward(self) -> int:
        """Direction of travel along y."""
        return 1 if self is Side.BLACK else -1

    @property
    def far_rank(self) -> int:
        """The opponent's back rank."""
        return 7 if self is Side.BLACK else 0

    def __str__(self) -> str:
        return self.value.capitalize()


class PieceType(Enum):
    """Piece types across all rulesets."""
    # Base ruleset
    MAN = "man"

    # Extended ruleset
    SOLDIER = "soldier"
    CANNON = "cannon"
    HORSE = "horse"
    DRAGON = "dragon"
    KING = "king"


@dataclass(eq=False)
class Piece:
    """
    A live piece on the board.

    Position is changed only through Board so the board's
    coordinate index stays in sync.
    """
    x: int
    y: int
    side: Side
    piece_type: PieceType = PieceType.MAN
    promoted: bool = False
    steps_moved: int = 0

    @classmethod
    def at(cls, notation: str, side: Side, piece_type: PieceType = PieceType.MAN) -> Piece:
        """Factory for a piece placed by square name."""
        x, y = parse_notation(notation)
        return cls(x=x, y=y, side=side, piece_type=piece_type)

    @property
    def position(self) -> Square:
        return self.x, self.y

    @property
    def notation(self) -> str:
        return to_notation(self.x, self.y)

    def __repr__(self) -> str:
        return f"Piece({self.side}, {self.piece_type.value}, {self.notation})"


@dataclass(frozen=True)
class Player:
    """A side plus whether a human controls it."""
    side: Side
    is_human: bool = False
