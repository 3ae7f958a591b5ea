"""
API Module - Client interface.

Exposes the engine via REST API for renderers, input handlers and bots.
A client:
1. Creates a game session for a ruleset
2. Asks for legal moves
3. Submits moves as square names
4. Reads back the game state

All state is session-scoped and in-memory.
"""

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
    RulesetListResponse,
    ErrorResponse,
    # Shared
    PieceInfo,
    MoveInfo,
    PlayerInfo,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "MoveRequest",
    # Responses
    "GameStateResponse",
    "SessionResponse",
    "MoveListResponse",
    "ValidateMoveResponse",
    "MoveResponse",
    "RulesetListResponse",
    "ErrorResponse",
    # Shared
    "PieceInfo",
    "MoveInfo",
    "PlayerInfo",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
