"""
FastAPI Application - REST API for board renderers and input handlers.

Endpoints:
    GET    /api/v1/rulesets                       List rulesets
    POST   /api/v1/sessions                       Create game session
    GET    /api/v1/sessions                       List sessions
    GET    /api/v1/sessions/{id}                  Get session status
    DELETE /api/v1/sessions/{id}                  End session
    GET    /api/v1/sessions/{id}/state            Get game state
    GET    /api/v1/sessions/{id}/moves            List legal moves
    POST   /api/v1/sessions/{id}/moves            Perform a move
    POST   /api/v1/sessions/{id}/validate         Validate a move

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union

from ..config import ALLOWED_ORIGINS, CHECKERS_ENV


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Query
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .. import __version__
    from .service import APIService
    from .schemas import (
        # Request models
        CreateSessionRequest,
        MoveRequest,
        # Response models
        GameStateResponse,
        SessionResponse,
        MoveListResponse,
        ValidateMoveResponse,
        MoveResponse,
        RulesetListResponse,
        SessionListResponse,
        EndSessionResponse,
        ErrorResponse,
        HealthResponse,
        # Enums
        ErrorCode,
    )

    app = FastAPI(
        title="Checkers Engine API",
        description="""
Rule engine for checkers and its special-piece variant.

## Move Flow

1. `GET /moves` lists what the side to move may do
2. `POST /moves` with `from_square` / `to_square` applies one
3. `GET /state` shows the board, turn and winner

A capture of a King during its immunity window is accepted but has no
effect: the response carries `applied=false`.

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_NOTATION` | Square is not of the form A1-H8 |
| `ILLEGAL_MOVE` | No legal move matches from/to |
| `GAME_OVER` | The game already has a winner |
| `INVALID_RULESET` | Ruleset id not found |
| `SESSION_NOT_FOUND` | Session does not exist |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    status_codes = {
        ErrorCode.SESSION_NOT_FOUND: 404,
        ErrorCode.GAME_OVER: 409,
    }

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Wrap a service error with its HTTP status."""
        return JSONResponse(
            status_code=status_codes.get(error.error_code, 400),
            content=error.model_dump(mode="json"),
        )

    def respond(result):
        if isinstance(result, ErrorResponse):
            return make_error_response(result)
        return result

    # =========================================================================
    # Ruleset Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/rulesets",
        response_model=RulesetListResponse,
        tags=["Rulesets"],
        summary="List available rulesets",
    )
    async def list_rulesets() -> RulesetListResponse:
        return api_service.list_rulesets()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse, "description": "Unknown ruleset"}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(body: CreateSessionRequest) -> Union[SessionResponse, JSONResponse]:
        """Start a game. Black moves first."""
        return respond(api_service.create_session(body))

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.get_session(session_id))

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get the game state",
    )
    async def get_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.get_game_state(session_id))

    @app.get(
        "/api/v1/sessions/{session_id}/moves",
        response_model=MoveListResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="List legal moves",
    )
    async def list_moves(
        session_id: str,
        side: Annotated[Optional[str], Query(description="black or white")] = None,
        square: Annotated[Optional[str], Query(description="Only moves of the piece on this square")] = None,
    ) -> Union[MoveListResponse, JSONResponse]:
        return respond(api_service.list_moves(session_id, side=side, square=square))

    @app.post(
        "/api/v1/sessions/{session_id}/moves",
        response_model=MoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Bad notation or illegal move"},
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "Game is over"},
        },
        tags=["Game"],
        summary="Perform a move for the side to move",
    )
    async def perform_move(session_id: str, body: MoveRequest) -> Union[MoveResponse, JSONResponse]:
        return respond(api_service.perform_move(session_id, body))

    @app.post(
        "/api/v1/sessions/{session_id}/validate",
        response_model=ValidateMoveResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Check whether a move is legal",
    )
    async def validate_move(session_id: str, body: MoveRequest) -> Union[ValidateMoveResponse, JSONResponse]:
        return respond(api_service.validate_move(session_id, body))

    # =========================================================================
    # System Endpoints
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            service="checkers-engine",
            version=__version__,
            environment=CHECKERS_ENV,
        )

    @app.get("/", tags=["System"])
    async def root():
        return {
            "service": "checkers-engine",
            "docs": "/api/docs",
            "health": "/health",
        }

    return app
