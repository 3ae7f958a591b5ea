"""
Tests for the board.

Tests:
- Initial layouts
- Side-level move lists and forced capture
- Move validation
- Occupancy bookkeeping
- Closest rival pieces
"""

import pytest

from ..engine_core.board import AggressorMismatchError, Board
from ..engine_core.move import Move
from ..engine_core.state import Piece, PieceType, Side
from .conftest import B, W, MAN, SOLDIER, CANNON, HORSE, DRAGON, KING


class TestInitialLayout:
    """Tests for the starting position."""

    def test_extended_composition(self, extended_game):
        """Each side has one King, two Dragons, Horses and Cannons, four Soldiers."""
        for side in Side:
            counts = extended_game.remaining_pieces(side)
            assert counts == {
                PieceType.CANNON: 2,
                PieceType.DRAGON: 2,
                PieceType.HORSE: 2,
                PieceType.KING: 1,
                PieceType.SOLDIER: 4,
            }

    def test_no_shared_squares(self, extended_game, base_game):
        for game in (extended_game, base_game):
            positions = [p.position for p in game.board.pieces]
            assert len(positions) == len(set(positions))

    def test_base_has_twelve_men_each(self, base_game):
        assert base_game.board.count(Side.BLACK) == 12
        assert base_game.board.count(Side.WHITE) == 12
        assert all(p.piece_type is PieceType.MAN for p in base_game.board.pieces)

    def test_base_opening_moves(self, base_game):
        """Only the front rank can move at the start."""
        moves = base_game.board.moves_for_side(Side.BLACK)

        assert len(moves) == 7
        assert {m.from_notation for m in moves} == {"A3", "C3", "E3", "G3"}


class TestSideMoves:
    """Tests for moves_for_side."""

    def test_only_own_pieces(self, extended_game):
        moves = extended_game.board.moves_for_side(Side.WHITE)

        assert moves
        assert all(m.piece.side is Side.WHITE for m in moves)

    def test_base_forced_capture(self, base_ruleset, make_game):
        """Any available capture excludes every quiet move."""
        game = make_game(base_ruleset, [
            ("C3", B, MAN),
            ("D4", W, MAN),
            ("G3", B, MAN),
        ])

        moves = game.board.moves_for_side(Side.BLACK)

        assert len(moves) == 1
        assert all(m.is_capture for m in moves)
        assert str(moves[0]) == "C3xE5"

    def test_extended_keeps_quiet_moves_alongside_captures(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [
            ("D4", B, KING),
            ("E4", W, SOLDIER),
        ])

        moves = game.board.moves_for_side(Side.BLACK)

        assert len(moves) == 8
        assert sum(1 for m in moves if m.is_capture) == 1

    def test_aggressor_limits_moves(self, base_ruleset, make_game):
        game = make_game(base_ruleset, [
            ("C3", B, MAN),
            ("D4", W, MAN),
            ("A5", B, MAN),
            ("B6", W, MAN),
        ])
        assert len(game.board.moves_for_side(Side.BLACK)) == 2

        game.board.aggressor = game.board.piece_at(2, 2)

        moves = game.board.moves_for_side(Side.BLACK)

        assert [str(m) for m in moves] == ["C3xE5"]

    def test_aggressor_of_other_side_is_fatal(self, base_ruleset, make_game):
        game = make_game(base_ruleset, [("C3", B, MAN), ("F6", W, MAN)])
        game.board.aggressor = game.board.piece_at(5, 5)

        with pytest.raises(AggressorMismatchError):
            game.board.moves_for_side(Side.BLACK)


class TestValidateMove:
    """Tests for validate_move."""

    def test_legal_move_found(self, extended_game):
        move = extended_game.board.validate_move(Side.BLACK, (0, 2), (0, 3))

        assert move is not None
        assert move.piece is extended_game.board.piece_at(0, 2)
        assert move.to == (0, 3)
        assert not move.is_capture

    def test_illegal_destination(self, extended_game):
        assert extended_game.board.validate_move(Side.BLACK, (0, 2), (0, 4)) is None

    def test_empty_origin(self, extended_game):
        assert extended_game.board.validate_move(Side.BLACK, (0, 3), (0, 4)) is None

    def test_wrong_side(self, extended_game):
        """White cannot move a Black piece."""
        assert extended_game.board.validate_move(Side.WHITE, (0, 2), (0, 3)) is None

    def test_validation_has_no_side_effects(self, extended_game):
        before = [(p.position, p.steps_moved) for p in extended_game.board.pieces]

        extended_game.board.validate_move(Side.BLACK, (0, 2), (0, 3))
        extended_game.board.moves_for_side(Side.BLACK)

        assert [(p.position, p.steps_moved) for p in extended_game.board.pieces] == before


class TestOccupancy:
    """Tests for board bookkeeping."""

    def test_lookup(self, extended_game):
        king = extended_game.board.piece_at(3, 1)

        assert king.piece_type is PieceType.KING
        assert extended_game.board[(3, 1)] is king
        assert extended_game.board.piece_at(3, 3) is None

    def test_place_on_occupied_square_fails(self, extended_ruleset):
        board = Board(extended_ruleset, [Piece.at("D4", B, KING)])

        with pytest.raises(ValueError):
            board.place(Piece.at("D4", W, KING))

    def test_relocate_updates_index(self, extended_ruleset):
        piece = Piece.at("D4", B, HORSE)
        board = Board(extended_ruleset, [piece])

        board.relocate(piece, (4, 4))

        assert piece.notation == "E5"
        assert board.piece_at(4, 4) is piece
        assert board.piece_at(3, 3) is None

    def test_remove(self, extended_ruleset):
        piece = Piece.at("D4", B, HORSE)
        board = Board(extended_ruleset, [piece])

        board.remove(piece)

        assert piece not in board
        assert board.count(Side.BLACK) == 0
        with pytest.raises(ValueError):
            board.remove(piece)


class TestClosestRivals:
    """Tests for closest_rival_pieces and is_towards."""

    def test_closest_pair(self, extended_ruleset):
        board = Board(extended_ruleset, [
            Piece.at("A1", B, SOLDIER),
            Piece.at("D4", B, DRAGON),
            Piece.at("D6", W, CANNON),
            Piece.at("H8", W, HORSE),
        ])

        a, b = board.closest_rival_pieces(Side.BLACK)

        assert (a.notation, b.notation) == ("D4", "D6")

    def test_tie_goes_to_first_found(self, extended_ruleset):
        board = Board(extended_ruleset, [
            Piece.at("A1", B, SOLDIER),
            Piece.at("A3", W, SOLDIER),
            Piece.at("C1", W, SOLDIER),
        ])

        a, b = board.closest_rival_pieces(Side.BLACK)

        assert b.notation == "A3"

    def test_none_without_rivals(self, extended_ruleset):
        board = Board(extended_ruleset, [Piece.at("A1", B, SOLDIER)])

        assert board.closest_rival_pieces(Side.BLACK) is None

    def test_is_towards(self, extended_ruleset):
        mover = Piece.at("A1", B, KING)
        target = Piece.at("D4", W, KING)

        assert Board.is_towards(Move(mover, (1, 1)), target)
        assert not Board.is_towards(Move(mover, (0, 0)), target)
