"""
Ruleset - Declarative description of one checkers variant.

A ruleset selects:
- The movement generator for each piece type
- Forced capture and multi-capture chaining
- Promotion on the far rank
- Which piece types count their steps
- The King-immunity window
- The initial layout
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from ..engine_core.move_generator import MoveGenerator
from ..engine_core.state import PieceType, Side


@dataclass(frozen=True)
class PiecePlacement:
    """One piece of the initial layout."""
    notation: str
    side: Side
    piece_type: PieceType = PieceType.MAN


@dataclass(frozen=True)
class Ruleset:
    """
    A complete variant definition.

    Stateless - all game state lives in Board and Game.
    """
    ruleset_id: str
    name: str
    movement: dict[PieceType, MoveGenerator]
    layout: tuple[PiecePlacement, ...]
    pieces_per_side: int
    description: str = ""

    forced_capture: bool = False
    multi_capture: bool = False
    promotion: bool = False
    step_counted_types: frozenset[PieceType] = frozenset()

    # Kings cannot be captured while turn_count <= king_immunity_turns
    king_immunity_turns: int = 0

    first_side: Side = Side.BLACK
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def piece_types(self) -> list[PieceType]:
        """Piece types used by the layout, in first-seen order."""
        seen: list[PieceType] = []
        for placement in self.layout:
            if placement.piece_type not in seen:
                seen.append(placement.piece_type)
        return seen

    def layout_for(self, side: Side) -> list[PiecePlacement]:
        return [p for p in self.layout if p.side == side]
