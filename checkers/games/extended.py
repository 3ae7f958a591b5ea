"""
Extended Ruleset - Checkers with five piece types.

Each side fields one King, two Dragons, two Horses, two Cannons and
four Soldiers. Every turn is exactly one move; there is no forced
capture and no promotion. Soldiers count their steps to unlock
sideways movement, and Kings cannot be captured during the first
five turns.
"""

from ..engine_core.move_generator import EXTENDED_MOVEMENT
from ..engine_core.state import PieceType, Side
from ..rules import PiecePlacement, Ruleset

KING_IMMUNITY_TURNS = 5

BLACK_LAYOUT = (
    ("A1", PieceType.CANNON),
    ("C1", PieceType.DRAGON),
    ("E1", PieceType.DRAGON),
    ("G1", PieceType.CANNON),
    ("B2", PieceType.HORSE),
    ("D2", PieceType.KING),
    ("F2", PieceType.HORSE),
    ("A3", PieceType.SOLDIER),
    ("C3", PieceType.SOLDIER),
    ("E3", PieceType.SOLDIER),
    ("G3", PieceType.SOLDIER),
)

# Point-symmetric to Black
WHITE_LAYOUT = (
    ("B6", PieceType.SOLDIER),
    ("D6", PieceType.SOLDIER),
    ("F6", PieceType.SOLDIER),
    ("H6", PieceType.SOLDIER),
    ("C7", PieceType.HORSE),
    ("E7", PieceType.KING),
    ("G7", PieceType.HORSE),
    ("B8", PieceType.CANNON),
    ("D8", PieceType.DRAGON),
    ("F8", PieceType.DRAGON),
    ("H8", PieceType.CANNON),
)


def create_extended_ruleset() -> Ruleset:
    """Create the five-piece-type ruleset."""
    layout = tuple(
        [PiecePlacement(sq, Side.BLACK, t) for sq, t in BLACK_LAYOUT]
        + [PiecePlacement(sq, Side.WHITE, t) for sq, t in WHITE_LAYOUT]
    )
    return Ruleset(
        ruleset_id="extended",
        name="Checkers (Special Pieces)",
        description=(
            "Soldiers, Cannons, Horses, Dragons and a King; "
            f"Kings are immune for the first {KING_IMMUNITY_TURNS} turns."
        ),
        movement=dict(EXTENDED_MOVEMENT),
        layout=layout,
        pieces_per_side=len(BLACK_LAYOUT),
        step_counted_types=frozenset({PieceType.SOLDIER}),
        king_immunity_turns=KING_IMMUNITY_TURNS,
    )
