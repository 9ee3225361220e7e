"""Defines the chess pieces"""

from dataclasses import dataclass, replace
from typing import Self

from src.core.shared_types import Color, PieceType

BACK_RANK_ORDER: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color
    # NOTE: one-way flag. Set the first time the piece is relocated and never reset (even if it moves back).
    has_moved: bool = False

    def moved(self) -> Self:
        """Copy of the piece as it stands after being relocated"""
        return replace(self, has_moved=True)

    def __str__(self) -> str:
        return f"{self.color.capitalize()} {self.type.capitalize()}"
