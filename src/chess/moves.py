"""
Move definitions + geometry of the basic movement rules

Key idea: the move checker only needs to know the *displacement* of a piece to decide if its shape is allowed.
Legality as a whole is decided in move_checker.py
"""

from dataclasses import dataclass
from enum import Enum, auto

from src.chess.pieces import Piece
from src.chess.square import Square

Vector = tuple[int, int]


class MoveType(Enum):
    """Classification handed from the move checker to the move applier. Decides where the captured piece is standing."""

    NORMAL = auto()
    EN_PASSANT = auto()
    CASTLING = auto()


class MoveError(Enum):
    """Every reason a move can be rejected for. The value is the message shown to the player."""

    WRONG_COLOR_PIECE = "It is not your turn to move."
    RANK_DIFFERENCE_GREATER = "Piece attempted to move too many ranks at once."
    FILE_DIFFERENCE_GREATER = "Piece attempted to move too many files at once."
    MOVE_OUT_OF_BOUNDS = "Piece attempted to move out of bounds."
    MOVE_NOT_STRAIGHT_LINE = "Piece attempted to move to an invalid square."
    NO_POSITION_CHANGE = "A piece cannot be moved to the square it already occupies."
    OCCUPIED_BY_SAME_COLOR = "A piece cannot be moved to a square that is occupied by a piece of the same color."
    PAWN_MUST_MOVE_FORWARD = "Pawns can only move forward."
    PAWN_MUST_CAPTURE_DIAGONAL = (
        "Pawns cannot capture pieces directly in front of them."
    )
    PAWN_EN_PASSANT_NOT_VALID = "Conditions not met to perform en passant."
    KNIGHT_INVALID_MOVE = "Knights may only move two squares in one cardinal direction, and one square in a perpendicular direction."
    ROOK_MUST_MOVE_CARDINAL = "Rooks may only move horizontally or vertically."
    BISHOP_MUST_MOVE_DIAGONAL = "Bishops may only move diagonally."
    NO_ROOK_TO_CASTLE_WITH = "There is no valid rook to castle with on that side."
    CANNOT_CASTLE_WITH_MOVED_ROOK = (
        "You cannot castle with a rook that has previously moved."
    )
    CANNOT_CASTLE_WITH_MOVED_KING = (
        "You cannot castle with a king that has previously moved."
    )

    def __str__(self) -> str:
        return f"Invalid Move: {self.value}"


@dataclass(frozen=True)
class MoveResult:
    """What the move checker found out about an accepted move"""

    move_type: MoveType = MoveType.NORMAL
    capturing: bool = False


@dataclass(frozen=True)
class Move:
    """
    A move that was committed to the history.

    NOTE: `piece` is a snapshot from BEFORE the move (so `has_moved` may still be False)
    """

    piece: Piece
    start: Square
    end: Square
    move_type: MoveType = MoveType.NORMAL
    capturing: bool = False

    @property
    def rank_difference(self) -> int:
        return abs(self.end.rank - self.start.rank)


# --- GEOMETRY ---
def displacement(start: Square, dest: Square) -> Vector:
    """(delta_rank, delta_file)"""
    return dest.rank - start.rank, dest.file - start.file


def is_diagonal_move(start: Square, dest: Square) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    d_rank, d_file = displacement(start, dest)
    return abs(d_rank) == abs(d_file)


def is_cardinal_move(start: Square, dest: Square) -> bool:
    """Rooks move either horizontally or vertically"""
    return start.rank == dest.rank or start.file == dest.file


def is_knight_move(start: Square, dest: Square) -> bool:
    """Knights always move such that (|delta_rank|, |delta_file|) is (2, 1) or (1, 2)"""
    d_rank, d_file = displacement(start, dest)
    return {abs(d_rank), abs(d_file)} == {1, 2}


def is_single_step(start: Square, dest: Square) -> bool:
    """The king's reach: at most one square in any direction"""
    d_rank, d_file = displacement(start, dest)
    return abs(d_rank) <= 1 and abs(d_file) <= 1


def is_castling_shift(start: Square, dest: Square) -> bool:
    """A king shifting two files along its own rank is a castling attempt"""
    d_rank, d_file = displacement(start, dest)
    return d_rank == 0 and abs(d_file) == 2
