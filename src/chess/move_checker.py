"""
Legality of a single proposed move
----

`check_move()` is a pure function of (position, piece, start, destination):
it either classifies the move (`MoveResult`) or raises `IllegalMoveError` with the rule that was broken.

Key idea: Use strategy pattern to define the movement rule of each piece type (see MOVEMENT_RULES below).

NOTE: No check detection, and sliding pieces / castling do not look at the squares in between.
"""

from typing import Callable, Optional

from loguru import logger

from src.chess.moves import (
    Move,
    MoveError,
    MoveResult,
    MoveType,
    displacement,
    is_cardinal_move,
    is_castling_shift,
    is_diagonal_move,
    is_knight_move,
    is_single_step,
)
from src.chess.pieces import Piece
from src.chess.position import Position
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import PieceType

# files the castling rook must be standing on (queen side, king side)
QUEEN_SIDE_ROOK_FILE = 0
KING_SIDE_ROOK_FILE = BOARD_DIMENSIONS[1] - 1


def check_move(
    position: Position, piece: Piece, start: Square, dest: Square
) -> MoveResult:
    """
    Decide if `piece` may move from `start` to `dest`
    ----

    1. it must be the piece's turn
    2. the destination must be on the board
    3. the piece must actually go somewhere
    4. the destination cannot hold one of your own pieces (an opponent's piece makes it a capture)
    5. the displacement must fit the movement rule of the piece type

    Raises IllegalMoveError for the first rule that is broken.
    """
    try:
        return _check_move(position, piece, start, dest)
    except IllegalMoveError as error:
        logger.debug(f"Rejected {piece} {start} -> {dest}: {error.reason.name}")
        raise


def validate_move(
    position: Position, piece: Piece, start: Square, dest: Square
) -> MoveResult | MoveError:
    """Same as `check_move()` but hands back the rejection reason as a value"""
    try:
        return check_move(position, piece, start, dest)
    except IllegalMoveError as error:
        return error.reason


def _check_move(
    position: Position, piece: Piece, start: Square, dest: Square
) -> MoveResult:
    if piece.color != position.color_to_move:
        raise IllegalMoveError(MoveError.WRONG_COLOR_PIECE)

    if not dest.is_within_bounds():
        raise IllegalMoveError(MoveError.MOVE_OUT_OF_BOUNDS)

    if dest == start:
        raise IllegalMoveError(MoveError.NO_POSITION_CHANGE)

    # tentatively: a normal move, capturing if there's an opponent's piece on the destination
    result = MoveResult()
    occupant = position.piece(dest)
    if occupant is not None:
        if occupant.color == piece.color:
            raise IllegalMoveError(MoveError.OCCUPIED_BY_SAME_COLOR)
        result = MoveResult(MoveType.NORMAL, capturing=True)

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(position, piece, start, dest, result)


# --- MOVEMENT RULES ---
def check_pawn_move(
    position: Position, piece: Piece, start: Square, dest: Square, result: MoveResult
) -> MoveResult:
    """
    A pawn:
    - moves forward by a single square (two squares if it has never moved before)
    - takes diagonally, one square forward
    - can take en passant: right after an opponent's pawn advanced two squares and landed next to it
    """
    d_rank, d_file = displacement(start, dest)
    max_step = 1 if piece.has_moved else 2

    if abs(d_rank) > max_step:
        raise IllegalMoveError(MoveError.RANK_DIFFERENCE_GREATER)

    # Black moves down the board, White moves up the board
    if d_rank * piece.color.direction <= 0:
        raise IllegalMoveError(MoveError.PAWN_MUST_MOVE_FORWARD)

    if d_file == 0:
        # a pawn push is never a capture: a piece in front of the pawn blocks it
        if result.capturing:
            raise IllegalMoveError(MoveError.PAWN_MUST_CAPTURE_DIAGONAL)
        return result

    if abs(d_rank) != 1 or abs(d_file) != 1:
        raise IllegalMoveError(MoveError.PAWN_MUST_CAPTURE_DIAGONAL)

    if result.capturing:
        return result

    # diagonal step onto an empty square: only allowed as en passant
    if is_en_passant(position.previous_move(), piece, dest):
        return MoveResult(MoveType.EN_PASSANT, capturing=True)
    raise IllegalMoveError(MoveError.PAWN_EN_PASSANT_NOT_VALID)


def is_en_passant(previous_move: Optional[Move], piece: Piece, dest: Square) -> bool:
    """
    En passant is only available on the very next ply after an opponent's pawn advanced by two squares.
    The capturing pawn lands on the square that was skipped: same file, one rank behind the passed pawn (seen from the mover).
    """
    if previous_move is None:
        return False

    passed_piece = previous_move.piece
    if passed_piece.type != PieceType.PAWN or passed_piece.color == piece.color:
        return False

    if previous_move.rank_difference != 2:
        return False

    skipped_square = previous_move.end.offset(piece.color.direction, 0)
    return dest == skipped_square


def check_king_move(
    position: Position, piece: Piece, start: Square, dest: Square, result: MoveResult
) -> MoveResult:
    """
    The king moves a single square in any direction.

    Castling is modelled as a king move two files along its own rank.
    """
    if is_single_step(start, dest):
        return result

    if is_castling_shift(start, dest):
        return check_castling(position, piece, start, dest, result.capturing)

    _, d_file = displacement(start, dest)
    if abs(d_file) > 1:
        raise IllegalMoveError(MoveError.FILE_DIFFERENCE_GREATER)
    raise IllegalMoveError(MoveError.RANK_DIFFERENCE_GREATER)


def check_castling(
    position: Position, king: Piece, start: Square, dest: Square, capturing: bool = False
) -> MoveResult:
    """
    **you are allowed to castle if**

    * Your king never moved before.
    * Your rook stands in the corner on the side you are castling to.
    * That rook never moved before.

    NOTE: the squares in between are not checked for being empty or under attack.
    An opponent's piece on the king's destination is captured.
    """
    if king.has_moved:
        raise IllegalMoveError(MoveError.CANNOT_CASTLE_WITH_MOVED_KING)

    rook_file = QUEEN_SIDE_ROOK_FILE if dest.file < start.file else KING_SIDE_ROOK_FILE
    rook = position.piece(Square(start.rank, rook_file))
    if rook is None or rook.type != PieceType.ROOK or rook.color != king.color:
        raise IllegalMoveError(MoveError.NO_ROOK_TO_CASTLE_WITH)

    if rook.has_moved:
        raise IllegalMoveError(MoveError.CANNOT_CASTLE_WITH_MOVED_ROOK)

    return MoveResult(MoveType.CASTLING, capturing=capturing)


def check_rook_move(
    position: Position, piece: Piece, start: Square, dest: Square, result: MoveResult
) -> MoveResult:
    if not is_cardinal_move(start, dest):
        raise IllegalMoveError(MoveError.ROOK_MUST_MOVE_CARDINAL)
    return result


def check_bishop_move(
    position: Position, piece: Piece, start: Square, dest: Square, result: MoveResult
) -> MoveResult:
    if not is_diagonal_move(start, dest):
        raise IllegalMoveError(MoveError.BISHOP_MUST_MOVE_DIAGONAL)
    return result


def check_queen_move(
    position: Position, piece: Piece, start: Square, dest: Square, result: MoveResult
) -> MoveResult:
    """The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)"""
    if not (is_cardinal_move(start, dest) or is_diagonal_move(start, dest)):
        raise IllegalMoveError(MoveError.MOVE_NOT_STRAIGHT_LINE)
    return result


def check_knight_move(
    position: Position, piece: Piece, start: Square, dest: Square, result: MoveResult
) -> MoveResult:
    if not is_knight_move(start, dest):
        raise IllegalMoveError(MoveError.KNIGHT_INVALID_MOVE)
    return result


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Position, Piece, Square, Square, MoveResult], MoveResult]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: check_pawn_move,
    PieceType.KNIGHT: check_knight_move,
    PieceType.BISHOP: check_bishop_move,
    PieceType.ROOK: check_rook_move,
    PieceType.QUEEN: check_queen_move,
    PieceType.KING: check_king_move,
}
