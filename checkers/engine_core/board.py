"""
Board - Live pieces, occupancy lookup and legal move queries.

The board:
1. Owns every live piece (captured pieces are removed, never restored)
2. Indexes pieces by coordinate for O(1) occupancy lookup
3. Answers "which moves exist" for a side or a single piece
4. Validates a proposed (from, to) pair against the legal moves

Legality questions are answered as data: an empty list or None.
Move generation is read-only; only Game mutates the board.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .move import Move
from .notation import Square, is_valid_position, to_notation
from .state import Piece, Side

if TYPE_CHECKING:
    from ..rules import Ruleset


class AggressorMismatchError(RuntimeError):
    """Moves were requested for a side while the other side must keep capturing."""

    def __init__(self, aggressor: Piece, side: Side):
        self.aggressor = aggressor
        self.side = side
        super().__init__(
            f"aggressor {aggressor!r} belongs to {aggressor.side}, moves requested for {side}"
        )


class Board:
    """
    The 8x8 board.

    Pieces are kept in creation order so that move lists and
    closest-rival tie breaks are deterministic within a run.
    """

    def __init__(self, ruleset: Ruleset, pieces: list[Piece] | None = None):
        self.ruleset = ruleset
        self._pieces: list[Piece] = []
        self._index: dict[Square, Piece] = {}

        # Piece that must continue a multi-capture sequence
        self.aggressor: Piece | None = None

        for piece in pieces or []:
            self.place(piece)

    @classmethod
    def from_layout(cls, ruleset: Ruleset) -> Board:
        """Create a board with the ruleset's initial layout."""
        pieces = [
            Piece.at(placement.notation, placement.side, placement.piece_type)
            for placement in ruleset.layout
        ]
        return cls(ruleset, pieces)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def pieces(self) -> list[Piece]:
        return list(self._pieces)

    def __getitem__(self, square: Square) -> Piece | None:
        return self._index.get(square)

    def __contains__(self, piece: Piece) -> bool:
        return self._index.get(piece.position) is piece

    def piece_at(self, x: int, y: int) -> Piece | None:
        return self._index.get((x, y))

    def pieces_of(self, side: Side) -> list[Piece]:
        return [p for p in self._pieces if p.side == side]

    def count(self, side: Side) -> int:
        return sum(1 for p in self._pieces if p.side == side)

    # =========================================================================
    # Mutation (used by Game and test fixtures)
    # =========================================================================

    def place(self, piece: Piece) -> None:
        """Add a piece to the board."""
        if not is_valid_position(piece.x, piece.y):
            raise ValueError(f"Not a valid position: ({piece.x}, {piece.y})")
        if piece.position in self._index:
            raise ValueError(f"{piece.notation} is already occupied")
        self._pieces.append(piece)
        self._index[piece.position] = piece

    def remove(self, piece: Piece) -> None:
        """Take a piece off the board."""
        if piece not in self:
            raise ValueError(f"{piece!r} is not on the board")
        self._pieces.remove(piece)
        del self._index[piece.position]
        if self.aggressor is piece:
            self.aggressor = None

    def relocate(self, piece: Piece, to: Square) -> None:
        """Move a piece to an empty square."""
        if piece not in self:
            raise ValueError(f"{piece!r} is not on the board")
        if not is_valid_position(*to):
            raise ValueError(f"Not a valid position: {to}")
        if to in self._index:
            raise ValueError(f"{to_notation(*to)} is already occupied")
        del self._index[piece.position]
        piece.x, piece.y = to
        self._index[to] = piece

    # =========================================================================
    # Move generation
    # =========================================================================

    def moves_for_piece(self, piece: Piece) -> list[Move]:
        """
        All legal moves for one piece.

        Under forced capture, a piece that can capture may only capture.
        """
        generator = self.ruleset.movement[piece.piece_type]
        moves = generator(piece, self)
        if self.ruleset.forced_capture:
            moves = _captures_if_any(moves)
        return moves

    def moves_for_side(self, side: Side) -> list[Move]:
        """
        All legal moves for a side.

        While an aggressor is set, only its captures are legal.
        Under forced capture, any available capture excludes quiet moves.
        """
        if self.aggressor is not None:
            if self.aggressor.side != side:
                raise AggressorMismatchError(self.aggressor, side)
            moves = [m for m in self.moves_for_piece(self.aggressor) if m.is_capture]
        else:
            moves = []
            for piece in self.pieces_of(side):
                moves.extend(self.moves_for_piece(piece))

        if self.ruleset.forced_capture:
            moves = _captures_if_any(moves)
        return moves

    def has_capture(self, piece: Piece) -> bool:
        return any(m.is_capture for m in self.moves_for_piece(piece))

    def validate_move(self, side: Side, origin: Square, to: Square) -> Move | None:
        """Return the legal move matching origin -> to, or None."""
        if self.piece_at(*origin) is None:
            return None
        for move in self.moves_for_side(side):
            if move.piece.position == tuple(origin) and move.to == tuple(to):
                return move
        return None

    # =========================================================================
    # Helpers for computer players
    # =========================================================================

    def closest_rival_pieces(self, priority_side: Side) -> tuple[Piece, Piece] | None:
        """
        The (own, rival) pair with the smallest squared distance.

        Ties go to the first pair found. None if either side has no pieces.
        """
        best: tuple[Piece, Piece] | None = None
        best_distance = None
        for a in self.pieces_of(priority_side):
            for b in self.pieces_of(priority_side.opponent):
                distance = _distance_squared(a.position, b.position)
                if best_distance is None or distance < best_distance:
                    best_distance = distance
                    best = (a, b)
        return best

    @staticmethod
    def is_towards(move: Move, piece: Piece) -> bool:
        """Check whether the move ends strictly closer to piece than it starts."""
        return _distance_squared(move.to, piece.position) < _distance_squared(
            move.origin, piece.position
        )


def _captures_if_any(moves: list[Move]) -> list[Move]:
    captures = [m for m in moves if m.is_capture]
    return captures if captures else moves


def _distance_squared(a: Square, b: Square) -> int:
    dx, dy = a[0] - b[0], a[1] - b[1]
    return dx * dx + dy * dy
