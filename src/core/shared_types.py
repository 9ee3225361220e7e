"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Self


# --- An empty square is simply `None` on the board, so neither enum needs an option for it.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    def flip(self) -> Self:
        """The turn alternates strictly after every ply"""
        return Color.BLACK if self == Color.WHITE else Color.WHITE

    @property
    def direction(self) -> int:
        """White moves UP the board (increasing rank), black moves DOWN"""
        return 1 if self == Color.WHITE else -1


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
