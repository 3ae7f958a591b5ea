"""
API Service - Business logic layer between API and engine.

The service:
1. Translates square names to coordinates
2. Manages sessions
3. Answers move queries and applies moves
4. Formats responses

Expected failures (bad notation, illegal move, unknown session) come
back as ErrorResponse values rather than exceptions.

This layer is framework-agnostic (can be used with FastAPI, a CLI, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from loguru import logger

from .schemas import (
    # Requests
    CreateSessionRequest,
    MoveRequest,
    # Responses
    GameStateResponse,
    SessionResponse,
    MoveListResponse,
    ValidateMoveResponse,
    MoveResponse,
    RulesetInfo,
    RulesetListResponse,
    ErrorResponse,
    # Shared
    PieceInfo,
    MoveInfo,
    PlayerInfo,
    # Enums
    ErrorCode,
    SessionStatus,
    SideName,
    PieceTypeName,
)
from ..config import SESSION_MAX_AGE_SECONDS
from ..engine_core.game import Game
from ..engine_core.move import Move
from ..engine_core.notation import NotationError, parse_notation
from ..engine_core.state import Piece, Side
from ..games import get_ruleset, list_rulesets
from ..rules import Ruleset
from ..session import Session, SessionManager


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest(ruleset="extended"))
        moves = service.list_moves(session.session_id)
        result = service.perform_move(
            session.session_id, MoveRequest(from_square="A3", to_square="A4")
        )
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    session_max_age: int = SESSION_MAX_AGE_SECONDS

    # =========================================================================
    # Rulesets
    # =========================================================================

    def list_rulesets(self) -> RulesetListResponse:
        rulesets = [_ruleset_to_info(r) for r in list_rulesets()]
        return RulesetListResponse(rulesets=rulesets, count=len(rulesets))

    # =========================================================================
    # Sessions
    # =========================================================================

    def create_session(self, request: CreateSessionRequest) -> SessionResponse | ErrorResponse:
        """Create a new game session."""
        try:
            ruleset = get_ruleset(request.ruleset)
        except KeyError:
            return ErrorResponse(
                error=f"Unknown ruleset: {request.ruleset}",
                error_code=ErrorCode.INVALID_RULESET,
            )

        self.session_manager.cleanup_stale_sessions(self.session_max_age)
        session = self.session_manager.create_session(
            ruleset=ruleset,
            human_player_count=request.human_player_count,
        )
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Get session status."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _session_not_found(session_id)
        return self._session_to_response(session)

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_sessions()

    # =========================================================================
    # Game state and moves
    # =========================================================================

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        """Get the full game state."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _session_not_found(session_id)
        return self._game_state(session)

    def list_moves(
        self,
        session_id: str,
        side: str | None = None,
        square: str | None = None,
    ) -> MoveListResponse | ErrorResponse:
        """
        List legal moves.

        With a square, only moves of the piece on that square are listed.
        Otherwise moves for the given side (default: side to move).
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return _session_not_found(session_id)
        game = session.game

        piece: Piece | None = None
        if square is not None:
            try:
                x, y = parse_notation(square)
            except NotationError as e:
                return _invalid_notation(e)
            piece = game.board.piece_at(x, y)
            if piece is None:
                return MoveListResponse(
                    session_id=session_id,
                    side=SideName(game.turn.value),
                    square=square.strip().upper(),
                )
            query_side = piece.side
        elif side is not None:
            try:
                query_side = Side(side.strip().lower())
            except ValueError:
                return ErrorResponse(
                    error=f"Unknown side: {side}",
                    error_code=ErrorCode.VALIDATION_ERROR,
                )
        else:
            query_side = game.turn

        moves = _legal_moves(game, query_side)
        if piece is not None:
            moves = [m for m in moves if m.piece is piece]

        infos = [_move_to_info(m) for m in moves]
        return MoveListResponse(
            session_id=session_id,
            side=SideName(query_side.value),
            square=piece.notation if piece is not None else None,
            moves=infos,
            count=len(infos),
        )

    def validate_move(self, session_id: str, request: MoveRequest) -> ValidateMoveResponse | ErrorResponse:
        """Check a from/to pair without applying it."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _session_not_found(session_id)

        found = self._find_move(session.game, request)
        if isinstance(found, ErrorResponse):
            return found
        return ValidateMoveResponse(
            session_id=session_id,
            valid=found is not None,
            move=_move_to_info(found) if found else None,
        )

    def perform_move(self, session_id: str, request: MoveRequest) -> MoveResponse | ErrorResponse:
        """
        Validate and apply a move for the side to move.

        A legal move the engine drops (immune King) is reported with
        applied=False and the unchanged state.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return _session_not_found(session_id)
        game = session.game

        if game.is_over:
            return ErrorResponse(
                error=f"Game is over - {game.winner} won",
                error_code=ErrorCode.GAME_OVER,
            )

        found = self._find_move(game, request)
        if isinstance(found, ErrorResponse):
            return found
        if found is None:
            return ErrorResponse(
                error=f"{request.from_square}-{request.to_square} is not a legal move for {game.turn}",
                error_code=ErrorCode.ILLEGAL_MOVE,
            )

        info = _move_to_info(found)
        game.perform_move(found)
        applied = found.piece.position == found.to
        if applied:
            session.record(found)
        else:
            logger.info(f"Session {session_id}: {found} had no effect")

        return MoveResponse(
            session_id=session_id,
            applied=applied,
            move=info,
            game_state=self._game_state(session),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _find_move(self, game: Game, request: MoveRequest) -> Move | None | ErrorResponse:
        try:
            origin = parse_notation(request.from_square)
            target = parse_notation(request.to_square)
        except NotationError as e:
            return _invalid_notation(e)
        if game.is_over:
            return None
        return game.board.validate_move(game.turn, origin, target)

    def _session_to_response(self, session: Session) -> SessionResponse:
        game = session.game
        return SessionResponse(
            session_id=session.session_id,
            ruleset=session.ruleset.ruleset_id,
            ruleset_name=session.ruleset.name,
            status=SessionStatus(session.state.value),
            turn=SideName(game.turn.value),
            turn_count=game.turn_count,
            winner=SideName(game.winner.value) if game.winner else None,
            players=_players(game),
            created_at=session.created_at,
        )

    def _game_state(self, session: Session) -> GameStateResponse:
        game = session.game
        aggressor = game.board.aggressor
        return GameStateResponse(
            session_id=session.session_id,
            ruleset=session.ruleset.ruleset_id,
            status=SessionStatus(session.state.value),
            turn=SideName(game.turn.value),
            turn_count=game.turn_count,
            winner=SideName(game.winner.value) if game.winner else None,
            aggressor=aggressor.notation if aggressor else None,
            king_immune=game.king_immune,
            pieces=[_piece_to_info(p) for p in game.board.pieces],
            players=_players(game),
            move_history=list(session.move_history),
        )


def _legal_moves(game: Game, side: Side) -> list[Move]:
    """Moves for a side; none while the other side is mid-capture."""
    aggressor = game.board.aggressor
    if aggressor is not None and aggressor.side != side:
        return []
    return game.board.moves_for_side(side)


def _players(game: Game) -> list[PlayerInfo]:
    return [
        PlayerInfo(
            side=SideName(player.side.value),
            is_human=player.is_human,
            is_current_turn=player.side == game.turn,
            pieces_remaining=game.board.count(player.side),
            pieces_taken=game.taken_count(player.side),
            remaining_by_type={
                t.value: n for t, n in game.remaining_pieces(player.side).items()
            },
        )
        for player in game.players
    ]


def _piece_to_info(piece: Piece) -> PieceInfo:
    return PieceInfo(
        square=piece.notation,
        side=SideName(piece.side.value),
        piece_type=PieceTypeName(piece.piece_type.value),
        promoted=piece.promoted,
        steps_moved=piece.steps_moved,
    )


def _move_to_info(move: Move) -> MoveInfo:
    captured = move.captured
    return MoveInfo(
        from_square=move.from_notation,
        to_square=move.to_notation,
        piece_type=PieceTypeName(move.piece.piece_type.value),
        captured_square=captured.notation if captured else None,
        captured_type=PieceTypeName(captured.piece_type.value) if captured else None,
        is_capture=move.is_capture,
        notation=str(move),
    )


def _ruleset_to_info(ruleset: Ruleset) -> RulesetInfo:
    return RulesetInfo(
        ruleset_id=ruleset.ruleset_id,
        name=ruleset.name,
        description=ruleset.description,
        pieces_per_side=ruleset.pieces_per_side,
        piece_types=[PieceTypeName(t.value) for t in ruleset.piece_types],
        forced_capture=ruleset.forced_capture,
        king_immunity_turns=ruleset.king_immunity_turns,
    )


def _session_not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"Session {session_id} not found",
        error_code=ErrorCode.SESSION_NOT_FOUND,
    )


def _invalid_notation(error: NotationError) -> ErrorResponse:
    return ErrorResponse(
        error=str(error),
        error_code=ErrorCode.INVALID_NOTATION,
        details={"notation": error.notation},
    )
