"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between clients (renderers, input
handlers, bots) and the engine.

Error Codes:
- INVALID_NOTATION: A square name is not of the form [A-H][1-8]
- ILLEGAL_MOVE: The from/to pair matches no legal move
- GAME_OVER: The game already has a winner
- INVALID_RULESET: Ruleset id not found
- SESSION_NOT_FOUND: Session does not exist or has ended
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SideName(str, Enum):
    """Side values."""
    BLACK = "black"
    WHITE = "white"


class PieceTypeName(str, Enum):
    """Piece type values."""
    MAN = "man"
    SOLDIER = "soldier"
    CANNON = "cannon"
    HORSE = "horse"
    DRAGON = "dragon"
    KING = "king"


class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    GAME_OVER = "game_over"
    ABANDONED = "abandoned"


class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_NOTATION = "INVALID_NOTATION"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"
    GAME_OVER = "GAME_OVER"
    INVALID_RULESET = "INVALID_RULESET"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class PieceInfo(BaseModel):
    """A live piece."""
    square: str = Field(description="Square name, e.g. A3")
    side: SideName
    piece_type: PieceTypeName
    promoted: bool = False
    steps_moved: int = 0


class MoveInfo(BaseModel):
    """A legal move."""
    from_square: str
    to_square: str
    piece_type: PieceTypeName
    captured_square: Optional[str] = None
    captured_type: Optional[PieceTypeName] = None
    is_capture: bool = False
    notation: str = Field(description="C3-D4 for quiet moves, C3xE5 for captures")


class PlayerInfo(BaseModel):
    """A player and their material."""
    side: SideName
    is_human: bool
    is_current_turn: bool = False
    pieces_remaining: int = 0
    pieces_taken: int = 0
    remaining_by_type: dict[str, int] = Field(default_factory=dict)


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start a new game."""
    ruleset: str = Field("extended", description="Ruleset id: base or extended")
    human_player_count: int = Field(1, ge=0, le=2, description="0: bots only, 1: Black human, 2: both human")


class MoveRequest(BaseModel):
    """A move given as two square names."""
    from_square: str = Field(..., description="Origin square, e.g. A3")
    to_square: str = Field(..., description="Destination square, e.g. A4")


# =============================================================================
# Response Models
# =============================================================================

class GameStateResponse(BaseModel):
    """Complete game state for display."""
    session_id: str
    ruleset: str
    status: SessionStatus
    turn: SideName
    turn_count: int
    winner: Optional[SideName] = None
    aggressor: Optional[str] = Field(None, description="Square of the piece that must keep capturing")
    king_immune: bool = False
    pieces: list[PieceInfo] = Field(default_factory=list)
    players: list[PlayerInfo] = Field(default_factory=list)
    move_history: list[str] = Field(default_factory=list)
    api_version: str = "v1"


class SessionResponse(BaseModel):
    """Session summary."""
    session_id: str
    ruleset: str
    ruleset_name: str
    status: SessionStatus
    turn: SideName
    turn_count: int
    winner: Optional[SideName] = None
    players: list[PlayerInfo] = Field(default_factory=list)
    created_at: float
    api_version: str = "v1"


class MoveListResponse(BaseModel):
    """Legal moves for a side or a single square."""
    session_id: str
    side: SideName
    square: Optional[str] = None
    moves: list[MoveInfo] = Field(default_factory=list)
    count: int = 0


class ValidateMoveResponse(BaseModel):
    """Whether a from/to pair is legal right now."""
    session_id: str
    valid: bool
    move: Optional[MoveInfo] = None


class MoveResponse(BaseModel):
    """
    Result of submitting a move.

    applied is false when the move was legal but dropped by the
    King-immunity rule; the state is then unchanged.
    """
    session_id: str
    applied: bool
    move: MoveInfo
    game_state: GameStateResponse


class RulesetInfo(BaseModel):
    """A playable ruleset."""
    ruleset_id: str
    name: str
    description: str = ""
    pieces_per_side: int
    piece_types: list[PieceTypeName] = Field(default_factory=list)
    forced_capture: bool = False
    king_immunity_turns: int = 0


class RulesetListResponse(BaseModel):
    """Available rulesets."""
    rulesets: list[RulesetInfo]
    count: int


class SessionListResponse(BaseModel):
    """Response listing every session, active or finished."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None
    api_version: str = "v1"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
    environment: str
