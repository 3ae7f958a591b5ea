"""
Tests for per-type move generation.

Tests:
- Soldier step rules
- Cannon mount rule
- Horse, Dragon and King movement
- Checkers man movement and jumps
"""

from .conftest import B, W, MAN, SOLDIER, CANNON, HORSE, DRAGON, KING


def destinations(moves):
    return {m.to_notation for m in moves}


def captures(moves):
    return {m.captured.notation for m in moves if m.is_capture}


class TestSoldier:
    """Soldiers go forward, and sideways once they have taken two steps."""

    def test_fresh_soldier_moves_forward_only(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("D4", B, SOLDIER)])
        soldier = game.board.piece_at(3, 3)

        moves = game.board.moves_for_piece(soldier)

        assert destinations(moves) == {"D5"}

    def test_white_soldier_moves_down(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("D4", W, SOLDIER)])

        moves = game.board.moves_for_piece(game.board.piece_at(3, 3))

        assert destinations(moves) == {"D3"}

    def test_blocked_by_own_piece(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("D4", B, SOLDIER), ("D5", B, HORSE)])

        assert game.board.moves_for_piece(game.board.piece_at(3, 3)) == []

    def test_captures_forward(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("D4", B, SOLDIER), ("D5", W, HORSE)])

        moves = game.board.moves_for_piece(game.board.piece_at(3, 3))

        assert len(moves) == 1
        assert moves[0].is_capture
        assert moves[0].to_notation == "D5"
        assert captures(moves) == {"D5"}

    def test_after_two_steps_moves_sideways_never_back(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("D4", B, SOLDIER)])
        soldier = game.board.piece_at(3, 3)
        soldier.steps_moved = 2

        moves = game.board.moves_for_piece(soldier)

        assert destinations(moves) == {"D5", "C4", "E4"}
        assert "D3" not in destinations(moves)

    def test_on_far_rank_has_no_moves(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("D8", B, SOLDIER)])

        assert game.board.moves_for_piece(game.board.piece_at(3, 7)) == []


class TestCannon:
    """Cannons slide, and capture only over exactly one mount."""

    def test_slides_on_empty_board(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("A1", B, CANNON)])

        moves = game.board.moves_for_piece(game.board.piece_at(0, 0))

        assert len(moves) == 14
        assert not any(m.is_capture for m in moves)

    def test_captures_over_one_mount(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [
            ("A1", B, CANNON),
            ("A3", B, SOLDIER),  # mount
            ("A5", W, HORSE),
        ])

        moves = game.board.moves_for_piece(game.board.piece_at(0, 0))
        file_moves = {m.to_notation for m in moves if m.to[0] == 0}

        assert file_moves == {"A2", "A5"}
        assert captures(moves) == {"A5"}

    def test_enemy_mount_is_jumped_not_taken(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [
            ("A1", B, CANNON),
            ("A3", W, SOLDIER),
            ("A6", W, HORSE),
        ])

        moves = game.board.moves_for_piece(game.board.piece_at(0, 0))

        assert captures(moves) == {"A6"}

    def test_no_mount_no_capture(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("A1", B, CANNON), ("A3", W, HORSE)])

        moves = game.board.moves_for_piece(game.board.piece_at(0, 0))

        assert captures(moves) == set()
        assert "A3" not in destinations(moves)

    def test_two_pieces_before_target_no_capture(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [
            ("A1", B, CANNON),
            ("A3", B, SOLDIER),
            ("A4", B, SOLDIER),
            ("A6", W, HORSE),
        ])

        moves = game.board.moves_for_piece(game.board.piece_at(0, 0))

        assert captures(moves) == set()


class TestHorse:

    def test_diagonal_steps_and_capture(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [
            ("D4", B, HORSE),
            ("E5", W, SOLDIER),
            ("C3", B, SOLDIER),
        ])

        moves = game.board.moves_for_piece(game.board.piece_at(3, 3))

        assert destinations(moves) == {"C5", "E3", "E5"}
        assert captures(moves) == {"E5"}


class TestDragon:
    """Dragons slide until the first piece on each line."""

    def test_stops_at_first_piece(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [
            ("D4", B, DRAGON),
            ("D6", W, SOLDIER),
            ("D7", W, SOLDIER),
            ("D2", B, SOLDIER),
        ])

        moves = game.board.moves_for_piece(game.board.piece_at(3, 3))
        file_moves = {m.to_notation for m in moves if m.to[0] == 3}

        # Up: D5 then capture D6, nothing past it. Down: D3, own piece at D2 blocks.
        assert file_moves == {"D5", "D6", "D3"}
        assert captures(moves) == {"D6"}
        assert len(moves) == 10


class TestKing:

    def test_eight_directions(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("D4", B, KING)])

        assert len(game.board.moves_for_piece(game.board.piece_at(3, 3))) == 8

    def test_own_piece_blocks_enemy_captured(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [
            ("D4", B, KING),
            ("D5", B, SOLDIER),
            ("E4", W, SOLDIER),
        ])

        moves = game.board.moves_for_piece(game.board.piece_at(3, 3))

        assert len(moves) == 7
        assert captures(moves) == {"E4"}

    def test_corner(self, extended_ruleset, make_game):
        game = make_game(extended_ruleset, [("A1", B, KING)])

        assert destinations(game.board.moves_for_piece(game.board.piece_at(0, 0))) == {"A2", "B1", "B2"}


class TestMan:
    """Checkers men move diagonally forward and capture by jumping."""

    def test_forward_only(self, base_ruleset, make_game):
        game = make_game(base_ruleset, [("D4", B, MAN)])

        assert destinations(game.board.moves_for_piece(game.board.piece_at(3, 3))) == {"C5", "E5"}

    def test_white_moves_down(self, base_ruleset, make_game):
        game = make_game(base_ruleset, [("D6", W, MAN)])

        assert destinations(game.board.moves_for_piece(game.board.piece_at(3, 5))) == {"C5", "E5"}

    def test_promoted_moves_backwards(self, base_ruleset, make_game):
        game = make_game(base_ruleset, [("D4", B, MAN)])
        man = game.board.piece_at(3, 3)
        man.promoted = True

        assert destinations(game.board.moves_for_piece(man)) == {"C5", "E5", "C3", "E3"}

    def test_jump_lands_beyond(self, base_ruleset, make_game):
        game = make_game(base_ruleset, [("C3", B, MAN), ("D4", W, MAN)])

        moves = game.board.moves_for_piece(game.board.piece_at(2, 2))

        # The capture excludes the quiet B4 move
        assert len(moves) == 1
        assert moves[0].to_notation == "E5"
        assert captures(moves) == {"D4"}

    def test_jump_blocked_by_occupied_landing(self, base_ruleset, make_game):
        game = make_game(base_ruleset, [("C3", B, MAN), ("D4", W, MAN), ("E5", W, MAN)])

        assert destinations(game.board.moves_for_piece(game.board.piece_at(2, 2))) == {"B4"}

    def test_jump_off_board_not_allowed(self, base_ruleset, make_game):
        game = make_game(base_ruleset, [("G3", B, MAN), ("H4", W, MAN)])

        assert destinations(game.board.moves_for_piece(game.board.piece_at(6, 2))) == {"F4"}
