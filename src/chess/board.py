"""The Board stores the configuration of pieces: a fixed 64-slot array, indexed by `Square.index`."""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import BACK_RANK_ORDER, Piece
from src.chess.square import BOARD_DIMENSIONS, NUM_SQUARES, Square
from src.core.shared_types import Color, PieceType

# (back rank, pawn rank) for both colors
HOME_RANKS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (0, 1),
    Color.BLACK: (BOARD_DIMENSIONS[0] - 1, BOARD_DIMENSIONS[0] - 2),
}

Slots = tuple[Optional[Piece], ...]


@dataclass(frozen=True)
class Board:
    """
    Immutable: every update returns a new Board (copy-on-write of the 64 slots).
    Previous positions held elsewhere (ex. in a game history) can therefore never be changed by accident.
    """

    squares: Slots

    def __post_init__(self) -> None:
        if len(self.squares) != NUM_SQUARES:
            raise ValueError(
                f"A board needs exactly {NUM_SQUARES} squares, got {len(self.squares)}"
            )

    @classmethod
    def empty(cls) -> Self:
        return cls((None,) * NUM_SQUARES)

    @classmethod
    def from_pieces(cls, pieces: dict[Square, Piece]) -> Self:
        """Convenience method: place an arbitrary set of pieces on an otherwise empty board"""
        slots: list[Optional[Piece]] = [None] * NUM_SQUARES
        for square, piece in pieces.items():
            if not square.is_within_bounds():
                raise ValueError(f"Cannot place {piece} outside of the board: {square}")
            slots[square.index] = piece
        return cls(tuple(slots))

    @classmethod
    def starting_position(cls) -> Self:
        """Standard 32-piece layout. White on ranks 0-1 (1st and 2nd), black on ranks 6-7."""
        pieces: dict[Square, Piece] = {}
        for color, (back_rank, pawn_rank) in HOME_RANKS.items():
            for file, piece_type in enumerate(BACK_RANK_ORDER):
                pieces[Square(back_rank, file)] = Piece(piece_type, color)
                pieces[Square(pawn_rank, file)] = Piece(PieceType.PAWN, color)
        return cls.from_pieces(pieces)

    def piece(self, square: Square) -> Optional[Piece]:
        """Total lookup: None for an empty square AND for a square that is not on the board"""
        if not square.is_within_bounds():
            return None
        return self.squares[square.index]

    def place_piece(self, piece: Piece, square: Square) -> Self:
        return self._with({square: piece})

    def remove_piece(self, square: Square) -> Self:
        return self._with({square: None})

    def move_piece(self, piece: Piece, start: Square, dest: Square) -> Self:
        """Put `piece` on the destination and clear the starting square (in one copy)"""
        return self._with({start: None, dest: piece})

    def occupied_squares(self) -> list[Square]:
        return [
            Square.from_index(index)
            for index, piece in enumerate(self.squares)
            if piece is not None
        ]

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square in self.occupied_squares()
            if self.squares[square.index].color == color  # type: ignore[union-attr]
        ]

    def count_pieces(self) -> int:
        return len(self.occupied_squares())

    def _with(self, updates: dict[Square, Optional[Piece]]) -> Self:
        slots = list(self.squares)
        for square, piece in updates.items():
            # a negative index would silently wrap around to the other end of the board
            if not square.is_within_bounds():
                raise ValueError(f"Cannot update a square outside of the board: {square}")
            slots[square.index] = piece
        return type(self)(tuple(slots))
