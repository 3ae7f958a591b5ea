"""
Move Generator - Candidate moves for a single piece, by piece type.

Each generator is a pure function (piece, board) -> list[Move].
Generators only read the board; filtering such as forced capture
is the board's job, driven by the ruleset.

Movement table:
- MAN: one diagonal step forward (any diagonal once promoted);
  captures by jumping an adjacent enemy onto the empty square beyond
- SOLDIER: one step forward; after two steps also left/right, never back
- CANNON: slides orthogonally; captures the first piece beyond exactly one mount
- HORSE: one diagonal step
- DRAGON: slides orthogonally; captures the first enemy on the line
- KING: one step in any of eight directions
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from .move import Move
from .notation import is_valid_position
from .state import Piece, PieceType

if TYPE_CHECKING:
    from .board import Board


MoveGenerator = Callable[[Piece, "Board"], list[Move]]

DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ORTHOGONALS = ((0, 1), (0, -1), (-1, 0), (1, 0))
ALL_DIRECTIONS = DIAGONALS + ORTHOGONALS

SOLDIER_PROMOTION_STEPS = 2


def _step_moves(piece: Piece, board: Board, directions) -> list[Move]:
    """One-square moves: onto an empty square, or onto an enemy to capture it."""
    moves = []
    for dx, dy in directions:
        target = (piece.x + dx, piece.y + dy)
        if not is_valid_position(*target):
            continue
        occupant = board.piece_at(*target)
        if occupant is None:
            moves.append(Move(piece, target))
        elif occupant.side != piece.side:
            moves.append(Move(piece, target, occupant))
    return moves


def man_moves(piece: Piece, board: Board) -> list[Move]:
    """Diagonal checkers moves with jump captures."""
    moves = []
    for dx, dy in DIAGONALS:
        if not piece.promoted and dy != piece.side.forward:
            continue

        target = (piece.x + dx, piece.y + dy)
        if not is_valid_position(*target):
            continue

        occupant = board.piece_at(*target)
        if occupant is None:
            moves.append(Move(piece, target))
        elif occupant.side != piece.side:
            landing = (piece.x + 2 * dx, piece.y + 2 * dy)
            if not is_valid_position(*landing):
                continue
            if board.piece_at(*landing) is not None:
                continue
            moves.append(Move(piece, landing, occupant))
    return moves


def soldier_moves(piece: Piece, board: Board) -> list[Move]:
    """Forward only until the soldier has taken two steps, then forward/left/right."""
    forward = (0, piece.side.forward)
    if piece.steps_moved < SOLDIER_PROMOTION_STEPS:
        return _step_moves(piece, board, (forward,))
    return _step_moves(piece, board, (forward, (-1, 0), (1, 0)))


def horse_moves(piece: Piece, board: Board) -> list[Move]:
    return _step_moves(piece, board, DIAGONALS)


def king_moves(piece: Piece, board: Board) -> list[Move]:
    return _step_moves(piece, board, ALL_DIRECTIONS)


def dragon_moves(piece: Piece, board: Board) -> list[Move]:
    """Orthogonal slide; the first piece met ends the line (captured if enemy)."""
    moves = []
    for dx, dy in ORTHOGONALS:
        x, y = piece.x + dx, piece.y + dy
        while is_valid_position(x, y):
            occupant = board.piece_at(x, y)
            if occupant is None:
                moves.append(Move(piece, (x, y)))
            else:
                if occupant.side != piece.side:
                    moves.append(Move(piece, (x, y), occupant))
                break
            x, y = x + dx, y + dy
    return moves


def cannon_moves(piece: Piece, board: Board) -> list[Move]:
    """
    Orthogonal slide over empty squares.

    Capturing needs a mount: exactly one piece of either side between
    the cannon and its target. Only the first piece beyond the mount
    can be taken, and only if it is an enemy.
    """
    moves = []
    for dx, dy in ORTHOGONALS:
        x, y = piece.x + dx, piece.y + dy
        mounted = False
        while is_valid_position(x, y):
            occupant = board.piece_at(x, y)
            if not mounted:
                if occupant is None:
                    moves.append(Move(piece, (x, y)))
                else:
                    mounted = True
            elif occupant is not None:
                if occupant.side != piece.side:
                    moves.append(Move(piece, (x, y), occupant))
                break
            x, y = x + dx, y + dy
    return moves


BASE_MOVEMENT: dict[PieceType, MoveGenerator] = {
    PieceType.MAN: man_moves,
}

EXTENDED_MOVEMENT: dict[PieceType, MoveGenerator] = {
    PieceType.SOLDIER: soldier_moves,
    PieceType.CANNON: cannon_moves,
    PieceType.HORSE: horse_moves,
    PieceType.DRAGON: dragon_moves,
    PieceType.KING: king_moves,
}
