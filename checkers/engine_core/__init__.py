"""
Engine Core - Board state, move generation and turn management.

The engine is the runtime that:
1. Takes a Ruleset
2. Lays out the Board
3. Generates legal moves per piece type
4. Applies moves via the Game
5. Detects the winner
"""

from .notation import NotationError, is_valid_position, parse_notation, to_notation
from .state import Side, PieceType, Piece, Player
from .move import Move
from .move_generator import MoveGenerator, BASE_MOVEMENT, EXTENDED_MOVEMENT
from .board import Board, AggressorMismatchError
from .game import Game

__all__ = [
    "NotationError",
    "is_valid_position",
    "parse_notation",
    "to_notation",
    "Side",
    "PieceType",
    "Piece",
    "Player",
    "Move",
    "MoveGenerator",
    "BASE_MOVEMENT",
    "EXTENDED_MOVEMENT",
    "Board",
    "AggressorMismatchError",
    "Game",
]
