"""
Applying an accepted move
----

`apply_move()` trusts the classification made by the move checker and never re-checks legality.
It returns a NEW Position, the one passed in stays untouched.
"""

from typing import Optional

from loguru import logger

from src.chess.moves import Move, MoveResult, MoveType
from src.chess.pieces import Piece
from src.chess.position import Graveyard, Position, freeze_graveyard
from src.chess.square import Square
from src.core.exceptions import BoardInvariantError


def apply_move(
    position: Position, piece: Piece, start: Square, dest: Square, result: MoveResult
) -> Position:
    """
    1. Remove the captured piece (if any) and add it to the graveyard
    2. Relocate the moving piece, which now counts as moved
    3. Record the move (with the piece as it was BEFORE moving)
    4. Pass the turn to the opponent

    NOTE: on castling only the king is relocated, the rook stays where it is.
    """
    board = position.board
    graveyard = position.graveyard

    captured_square = captured_piece_square(start, dest, result)
    if captured_square is not None:
        captured_piece = board.piece(captured_square)
        if captured_piece is None:
            raise BoardInvariantError(
                f"{result.move_type.name} capture by {piece} {start} -> {dest} expected a piece on {captured_square}, found none."
            )
        graveyard = add_to_graveyard(graveyard, captured_piece)
        board = board.remove_piece(captured_square)

    board = board.move_piece(piece.moved(), start, dest)
    move = Move(piece, start, dest, result.move_type, result.capturing)
    logger.debug(f"Applied {piece} {start} -> {dest} ({result})")

    return Position(
        board=board,
        color_to_move=position.color_to_move.flip(),
        history=position.history + (move,),
        graveyard=graveyard,
    )


def captured_piece_square(
    start: Square, dest: Square, result: MoveResult
) -> Optional[Square]:
    """
    Normal captures (and a king castling onto an opponent's piece) take on the destination.

    En passant takes the pawn that was passed: it stands on the same file as the destination,
    but on the rank the capturing pawn started from.
    """
    if not result.capturing:
        return None
    if result.move_type == MoveType.EN_PASSANT:
        return Square(start.rank, dest.file)
    return dest


def add_to_graveyard(graveyard: Graveyard, captured: Piece) -> Graveyard:
    """New graveyard with one more piece of the captured color + type"""
    updated = {color: dict(counts) for color, counts in graveyard.items()}
    updated[captured.color][captured.type] += 1
    return freeze_graveyard(updated)
