"""
Game - Turn order, move application and win detection.

The game is the single point of state mutation.
All moves go through perform_move(), which applies, in order:
1. King-immunity guard (reject without any change)
2. Capture removal
3. Position update
4. Promotion
5. Step counting
6. Aggressor / side-to-move update
7. Win evaluation

Once a winner is set it never changes.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from loguru import logger

from .board import Board
from .move import Move
from .state import PieceType, Player, Side

if TYPE_CHECKING:
    from ..rules import Ruleset


class Game:
    """
    One game between two players under one ruleset.

    Usage:
        game = Game(create_extended_ruleset(), human_player_count=1)
        move = game.board.validate_move(game.turn, (0, 2), (0, 3))
        if move:
            game.perform_move(move)
    """

    def __init__(self, ruleset: Ruleset, human_player_count: int = 0, board: Board | None = None):
        if human_player_count < 0 or human_player_count > 2:
            raise ValueError("human_player_count must be 0, 1 or 2")

        self.ruleset = ruleset
        self.board = board if board is not None else Board.from_layout(ruleset)
        self.players = [
            Player(side=Side.BLACK, is_human=human_player_count >= 1),
            Player(side=Side.WHITE, is_human=human_player_count >= 2),
        ]
        self.turn: Side = ruleset.first_side
        self.winner: Side | None = None
        self.turn_count = 1

    @property
    def current_player(self) -> Player:
        return self.player_for(self.turn)

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def king_immune(self) -> bool:
        """Whether Kings cannot be captured this turn."""
        return self.turn_count <= self.ruleset.king_immunity_turns

    def player_for(self, side: Side) -> Player:
        for player in self.players:
            if player.side == side:
                return player
        raise LookupError(f"No player for {side}")

    def perform_move(self, move: Move) -> None:
        """
        Apply a legal move.

        A capture of an immune King is dropped silently: nothing
        changes and the same side is still to move.
        """
        piece = move.piece
        captured = move.captured

        if captured is not None and captured.piece_type is PieceType.KING and self.king_immune:
            logger.debug(f"Rejected {move}: King is immune until turn {self.ruleset.king_immunity_turns + 1}")
            return

        if captured is not None:
            # Clear the square first: captures that land on the victim need it empty
            self.board.remove(captured)
        self.board.relocate(piece, move.to)

        if self.ruleset.promotion and not piece.promoted and move.to[1] == piece.side.far_rank:
            piece.promoted = True
            logger.debug(f"{piece!r} promoted")

        if piece.piece_type in self.ruleset.step_counted_types:
            piece.steps_moved += 1

        if captured is not None:
            logger.debug(f"{piece.side} {move} captured {captured!r}")
        else:
            logger.debug(f"{piece.side} {move}")

        if self.ruleset.multi_capture and captured is not None and self.board.has_capture(piece):
            self.board.aggressor = piece
        else:
            self.board.aggressor = None
            self.turn = self.turn.opponent
            if self.turn == self.ruleset.first_side:
                self.turn_count += 1

        self.check_for_winner()

    def check_for_winner(self) -> None:
        """
        Evaluate the win conditions.

        A side with no pieces loses. If both sides were wiped out at
        once White is reported, because its condition is checked last.
        A side to move with no legal moves loses.
        """
        if self.winner is not None:
            return

        winner = None
        if self.board.count(Side.WHITE) == 0:
            winner = Side.BLACK
        if self.board.count(Side.BLACK) == 0:
            winner = Side.WHITE

        if winner is None and not self.board.moves_for_side(self.turn):
            winner = self.turn.opponent

        if winner is not None:
            self.winner = winner
            logger.info(f"{winner} wins after turn {self.turn_count}")

    def taken_count(self, side: Side) -> int:
        """Number of pieces the side has lost."""
        return self.ruleset.pieces_per_side - self.board.count(side)

    def remaining_pieces(self, side: Side) -> dict[PieceType, int]:
        """Live pieces of a side, tallied by type."""
        counts = {piece_type: 0 for piece_type in self.ruleset.piece_types}
        for piece in self.board.pieces_of(side):
            counts[piece.piece_type] = counts.get(piece.piece_type, 0) + 1
        return counts
