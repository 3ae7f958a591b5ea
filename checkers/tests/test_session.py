"""
Tests for session management.
"""

from ..engine_core.state import Side
from ..session import SessionManager, SessionState


class TestSessionManager:
    """Tests for SessionManager."""

    def test_create_session(self, extended_ruleset):
        manager = SessionManager()

        session = manager.create_session(extended_ruleset, human_player_count=2)

        assert session.session_id
        assert session.state == SessionState.ACTIVE
        assert session.game.turn is Side.BLACK
        assert session.game.player_for(Side.WHITE).is_human
        assert manager.get_session(session.session_id) is session

    def test_session_lifecycle(self, base_ruleset):
        manager = SessionManager()
        session = manager.create_session(base_ruleset)
        session_id = session.session_id

        assert session_id in manager.list_active_sessions()

        assert manager.end_session(session_id)

        assert session_id not in manager.list_active_sessions()
        assert manager.get_session(session_id) is None
        assert session.state == SessionState.ABANDONED
        assert not manager.end_session(session_id)

    def test_sessions_are_independent(self, extended_ruleset):
        manager = SessionManager()
        first = manager.create_session(extended_ruleset)
        second = manager.create_session(extended_ruleset)

        move = first.game.board.validate_move(Side.BLACK, (0, 2), (0, 3))
        first.game.perform_move(move)

        assert first.session_id != second.session_id
        assert second.game.turn is Side.BLACK
        assert second.game.board.piece_at(0, 2) is not None

    def test_record_closes_finished_game(self, extended_ruleset):
        manager = SessionManager()
        session = manager.create_session(extended_ruleset)
        move = session.game.board.validate_move(Side.BLACK, (0, 2), (0, 3))
        session.game.perform_move(move)

        session.record(move)
        assert session.move_history == ["A3-A4"]
        assert session.is_active()

        for piece in session.game.board.pieces_of(Side.WHITE):
            session.game.board.remove(piece)
        session.game.check_for_winner()
        session.record(move)

        assert session.state == SessionState.GAME_OVER

    def test_ending_finished_game_keeps_game_over(self, base_ruleset):
        manager = SessionManager()
        session = manager.create_session(base_ruleset)
        session.game.winner = Side.BLACK

        assert manager.end_session(session.session_id, reason="completed")

        assert session.state == SessionState.GAME_OVER
        assert manager.list_sessions() == []

    def test_cleanup_stale_sessions(self, base_ruleset):
        manager = SessionManager()
        old = manager.create_session(base_ruleset)
        fresh = manager.create_session(base_ruleset)
        old.created_at -= 7200

        removed = manager.cleanup_stale_sessions(max_age_seconds=3600)

        assert removed == 1
        assert manager.list_sessions() == [fresh.session_id]
