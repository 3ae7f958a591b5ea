"""
Checkers CLI - Command-line interface for the engine.

Usage:
    checkers rulesets                          List rulesets
    checkers validate <ruleset>                Validate a ruleset
    checkers moves [--ruleset R] [--after M]   Replay moves, list legal moves
    checkers serve [--host H] [--port P]       Run the HTTP API
"""

import argparse
import sys

from loguru import logger

from .config import CHECKERS_DEFAULT_RULESET, configure_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Checkers - Rule Engine for a Checkers Variant",
        prog="checkers",
    )
    parser.add_argument("--log-level", help="Override CHECKERS_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("rulesets", help="List available rulesets")

    validate_parser = subparsers.add_parser("validate", help="Validate a ruleset")
    validate_parser.add_argument("ruleset", help="Ruleset id")

    moves_parser = subparsers.add_parser("moves", help="List legal moves")
    moves_parser.add_argument("--ruleset", default=CHECKERS_DEFAULT_RULESET, help="Ruleset id")
    moves_parser.add_argument("--side", help="black or white (default: side to move)")
    moves_parser.add_argument("--square", help="Only moves of the piece on this square")
    moves_parser.add_argument(
        "--after", nargs="*", default=[], metavar="MOVE",
        help="Moves to play first, e.g. A3-A4 B6-B5",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "rulesets":
        cmd_rulesets(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "moves":
        cmd_moves(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_rulesets(args):
    """List rulesets."""
    from .games import list_rulesets

    for ruleset in list_rulesets():
        print(f"{ruleset.ruleset_id:10} {ruleset.name}")
        if ruleset.description:
            print(f"{'':10} {ruleset.description}")


def cmd_validate(args):
    """Validate a ruleset."""
    from .games import get_ruleset
    from .rules import validate_ruleset

    try:
        ruleset = get_ruleset(args.ruleset)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        sys.exit(1)

    result = validate_ruleset(ruleset)
    print(f"Ruleset: {ruleset.name} ({'valid' if result.valid else 'invalid'})")

    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  - {w}")

    if result.errors:
        print("\nErrors:")
        for e in result.errors:
            print(f"  - {e}")
        sys.exit(1)


def cmd_moves(args):
    """Replay moves from the initial position and list what is legal next."""
    from .api import APIService, CreateSessionRequest, MoveRequest, ErrorResponse

    service = APIService()
    session = service.create_session(
        CreateSessionRequest(ruleset=args.ruleset, human_player_count=2)
    )
    if isinstance(session, ErrorResponse):
        print(f"Error: {session.error}")
        sys.exit(1)

    for text in args.after:
        parts = text.replace("x", "-").replace("X", "-").split("-")
        if len(parts) != 2:
            print(f"Error: expected FROM-TO, got '{text}'")
            sys.exit(1)
        result = service.perform_move(
            session.session_id, MoveRequest(from_square=parts[0], to_square=parts[1])
        )
        if isinstance(result, ErrorResponse):
            print(f"Error: {result.error}")
            sys.exit(1)
        if not result.applied:
            logger.warning(f"{text} was not applied")

    state = service.get_game_state(session.session_id)
    print(f"Turn {state.turn_count}: {state.turn.value} to move")
    if state.aggressor:
        print(f"{state.aggressor} must keep capturing")
    if state.winner:
        print(f"*** {state.winner.value} wins ***")

    listing = service.list_moves(session.session_id, side=args.side, square=args.square)
    if isinstance(listing, ErrorResponse):
        print(f"Error: {listing.error}")
        sys.exit(1)

    print(f"{listing.count} legal move(s) for {listing.side.value}:")
    for move in listing.moves:
        suffix = f" ({move.captured_type.value})" if move.captured_type else ""
        print(f"  {move.notation:7} {move.piece_type.value}{suffix}")


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn

    from .api import create_app

    logger.info(f"Serving on http://{args.host}:{args.port}")
    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
