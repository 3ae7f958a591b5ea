"""
Base Ruleset - Classic diagonal checkers.

Twelve men per side on the dark squares of the first three ranks.
Men move one square diagonally forward and capture by jumping.
Captures are forced and a capturing man keeps jumping while it can.
A man reaching the far rank is promoted and may then move backwards.
"""

from ..engine_core.move_generator import BASE_MOVEMENT
from ..engine_core.state import PieceType, Side
from ..rules import PiecePlacement, Ruleset

BLACK_SQUARES = (
    "A3", "A1", "B2", "C3", "C1", "D2",
    "E3", "E1", "F2", "G3", "G1", "H2",
)

WHITE_SQUARES = (
    "A7", "B8", "B6", "C7", "D8", "D6",
    "E7", "F8", "F6", "G7", "H8", "H6",
)


def create_base_ruleset() -> Ruleset:
    """Create the classic checkers ruleset."""
    layout = tuple(
        [PiecePlacement(sq, Side.BLACK, PieceType.MAN) for sq in BLACK_SQUARES]
        + [PiecePlacement(sq, Side.WHITE, PieceType.MAN) for sq in WHITE_SQUARES]
    )
    return Ruleset(
        ruleset_id="base",
        name="Checkers",
        description="Diagonal checkers with forced, chained captures and promotion.",
        movement=dict(BASE_MOVEMENT),
        layout=layout,
        pieces_per_side=12,
        forced_capture=True,
        multi_capture=True,
        promotion=True,
    )
