"""
Representation of the full state of a game at one point in time: the board, whose turn it is, the moves played so far and
the pieces captured so far.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Self

from src.chess.board import Board
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, PieceType

# captured pieces, counted per color and per piece type. Read-only at both levels.
Graveyard = Mapping[Color, Mapping[PieceType, int]]


def freeze_graveyard(counts: Mapping[Color, Mapping[PieceType, int]]) -> Graveyard:
    """Read-only copy: a Position never shares a mutable tally with anyone"""
    return MappingProxyType(
        {color: MappingProxyType(dict(per_type)) for color, per_type in counts.items()}
    )


def empty_graveyard() -> Graveyard:
    """NOTE: the king gets a counter as well. Nothing stops a king from being captured, as check is not detected."""
    return freeze_graveyard(
        {color: {piece_type: 0 for piece_type in PieceType} for color in Color}
    )


@dataclass(frozen=True)
class Position:
    """
    Snapshot of a game
    ----

    * `board`: the 64 squares and the pieces standing on them
    * `color_to_move`: white starts, then alternates every ply
    * `history`: every move applied so far, most recent last. Only ever grows.
    * `graveyard`: counts of captured pieces. Only ever grows.

    Never mutated: the move applier derives a new Position from the previous one.
    """

    board: Board
    color_to_move: Color = Color.WHITE
    history: tuple[Move, ...] = ()
    graveyard: Graveyard = field(default_factory=empty_graveyard)

    def __post_init__(self) -> None:
        object.__setattr__(self, "graveyard", freeze_graveyard(self.graveyard))

    @classmethod
    def starting_position(cls) -> Self:
        return cls(board=Board.starting_position())

    def piece(self, square: Square) -> Optional[Piece]:
        return self.board.piece(square)

    def previous_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None

    def captured_count(self, color: Color, piece_type: PieceType) -> int:
        return self.graveyard[color][piece_type]

    def total_captured(self) -> int:
        return sum(sum(counts.values()) for counts in self.graveyard.values())


# --- BOUNDARY FUNCTIONS USED BY COLLABORATORS ---
def new_standard_position() -> Position:
    """White to move, empty history, nothing captured"""
    return Position.starting_position()


def occupant_at(position: Position, square: Square) -> Optional[Piece]:
    return position.piece(square)
