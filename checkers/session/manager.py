"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Client picks a ruleset → session created (in-memory only)
2. During game:
   - Client asks for legal moves
   - Client submits a move (from/to squares)
   - Engine validates, applies and re-evaluates the winner
3. Game ends or client quits → session removed, ALL state deleted

There is no persistence: a game exists only for the life of the process.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import time
import uuid

from loguru import logger

from ..engine_core.game import Game
from ..engine_core.move import Move
from ..rules import Ruleset


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Winner decided
    ABANDONED = "abandoned"  # Ended before a winner


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The ruleset the game is played under
    - The live Game
    - Move history in square notation ("C3-D4", "C3xE5")
    """
    session_id: str
    ruleset: Ruleset
    game: Game
    created_at: float

    state: SessionState = SessionState.ACTIVE
    move_history: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def record(self, move: Move) -> None:
        """Log an applied move and close the session if the game is decided."""
        self.move_history.append(str(move))
        if self.game.is_over:
            self.state = SessionState.GAME_OVER


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions from rulesets
    - Track active sessions
    - Clean up finished or stale sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, ruleset: Ruleset, human_player_count: int = 1) -> Session:
        """
        Create a new game session.

        Args:
            ruleset: Variant to play
            human_player_count: 0, 1 (Black) or 2 (both sides)

        Returns:
            New Session with Black to move
        """
        game = Game(ruleset, human_player_count=human_player_count)
        session = Session(
            session_id=str(uuid.uuid4()),
            ruleset=ruleset,
            game=game,
            created_at=time.time(),
        )
        self._sessions[session.session_id] = session
        logger.info(f"Session {session.session_id} created ({ruleset.ruleset_id})")
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and forget it.

        Returns False if the session did not exist.
        """
        session = self._sessions.get(session_id)
        if not session:
            return False

        # Callers holding the session see its final state
        if session.game.is_over:
            session.state = SessionState.GAME_OVER
        else:
            session.state = SessionState.ABANDONED
        del self._sessions[session_id]
        logger.info(f"Session {session_id} ended: {reason}")
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def list_sessions(self) -> list[str]:
        return list(self._sessions)

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Remove sessions older than max_age_seconds.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        stale = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
