"""
Notation - Conversion between board coordinates and square names.

Squares are addressed either by a zero-based (x, y) pair or by a
two-character name: column letter A-H followed by rank digit 1-8.
"(0, 0)" is "A1", "(7, 7)" is "H8".
"""

from __future__ import annotations

BOARD_SIZE = 8

Square = tuple[int, int]


class NotationError(ValueError):
    """Raised when a square name is malformed."""

    def __init__(self, notation: str):
        self.notation = notation
        super().__init__(f'notation "{notation}" is not valid')


def is_valid_position(x: int, y: int) -> bool:
    """Check that (x, y) lies on the 8x8 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def to_notation(x: int, y: int) -> str:
    """Encode (x, y) as a square name, e.g. (0, 2) -> "A3"."""
    if not is_valid_position(x, y):
        raise ValueError(f"Not a valid position: ({x}, {y})")
    return f"{chr(ord('A') + x)}{y + 1}"


def parse_notation(notation: str) -> Square:
    """
    Decode a square name into (x, y).

    Surrounding whitespace is ignored and letters are case-insensitive.
    Raises NotationError for anything other than [A-H][1-8].
    """
    if notation is None:
        raise TypeError("notation must not be None")

    text = notation.strip().upper()
    if (
        len(text) != 2
        or not "A" <= text[0] <= "H"
        or not "1" <= text[1] <= "8"
    ):
        raise NotationError(text)

    return ord(text[0]) - ord("A"), ord(text[1]) - ord("1")
