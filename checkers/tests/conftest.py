"""
Pytest fixtures for Checkers tests.
"""

import pytest

from ..engine_core.board import Board
from ..engine_core.game import Game
from ..engine_core.state import Piece, PieceType, Side
from ..games import create_base_ruleset, create_extended_ruleset
from ..rules import Ruleset


@pytest.fixture
def base_ruleset() -> Ruleset:
    """Classic checkers ruleset."""
    return create_base_ruleset()


@pytest.fixture
def extended_ruleset() -> Ruleset:
    """Special-piece ruleset."""
    return create_extended_ruleset()


@pytest.fixture
def base_game(base_ruleset: Ruleset) -> Game:
    """Fresh classic game, Black to move."""
    return Game(base_ruleset)


@pytest.fixture
def extended_game(extended_ruleset: Ruleset) -> Game:
    """Fresh special-piece game, Black to move."""
    return Game(extended_ruleset)


@pytest.fixture
def make_game():
    """
    Build a game from a hand-placed position.

    Usage:
        game = make_game(ruleset, [("D4", Side.BLACK, PieceType.KING), ...])
    """
    def _make(ruleset: Ruleset, placements, turn: Side = Side.BLACK) -> Game:
        pieces = [Piece.at(square, side, piece_type) for square, side, piece_type in placements]
        game = Game(ruleset, board=Board(ruleset, pieces))
        game.turn = turn
        return game

    return _make


B = Side.BLACK
W = Side.WHITE
MAN = PieceType.MAN
SOLDIER = PieceType.SOLDIER
CANNON = PieceType.CANNON
HORSE = PieceType.HORSE
DRAGON = PieceType.DRAGON
KING = PieceType.KING
