"""
Human readable notation: piece glyphs, square names ('a1' - 'h8') and parsing of what a user types.

NOTE: Only the display/CLI layer uses this module. The move checker and applier do not depend on it.
"""

import re
from string import ascii_lowercase
from typing import Optional

from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square, is_valid
from src.core.exceptions import InvalidSquareError
from src.core.shared_types import Color, PieceType

FILE_LETTERS = ascii_lowercase[: BOARD_DIMENSIONS[1]]

PIECE_GLYPHS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

# "3 5", "3,5" or "3, 5": 1-based rank then file
RANK_FILE_PATTERN = re.compile(r"^\s*(\d+)\s*[, ]\s*(\d+)\s*$")


def piece_glyph(piece: Piece) -> str:
    """Capital letters for the white pieces, small letters for the black pieces"""
    glyph = PIECE_GLYPHS[piece.type]
    return glyph if piece.color == Color.WHITE else glyph.lower()


def square_to_algebraic(square: Square) -> str:
    """(0, 0) -> 'a1', (7, 7) -> 'h8'"""
    return f"{FILE_LETTERS[square.file]}{square.rank + 1}"


def square_from_algebraic(notation: str) -> Optional[Square]:
    """'a1' - 'h8' (case insensitive) get converted to (0, 0) - (7, 7). None if it does not name a square."""
    notation = notation.strip().lower()
    if len(notation) != 2:
        return None

    file_char, rank_char = notation[0], notation[1]
    if file_char not in FILE_LETTERS or not rank_char.isdigit():
        return None

    rank = int(rank_char) - 1
    file = FILE_LETTERS.index(file_char)
    return Square(rank, file) if is_valid(rank, file) else None


def square_from_rank_file(rank: int, file: int) -> Optional[Square]:
    """Users count ranks and files from 1 to 8"""
    if not is_valid(rank - 1, file - 1):
        return None
    return Square(rank - 1, file - 1)


def parse_square(text: str) -> Square:
    """
    Accepts algebraic notation ('e2') or a 1-based 'rank file' pair ('2 5').
    Raises InvalidSquareError if neither interpretation names a square on the board.
    """
    square = square_from_algebraic(text)
    if square is None:
        match = RANK_FILE_PATTERN.match(text)
        if match:
            square = square_from_rank_file(int(match.group(1)), int(match.group(2)))

    if square is None:
        raise InvalidSquareError(
            f"Cannot interpret {text!r} as a square. Use 'e2' or a rank and file from 1-8 ('2 5')."
        )
    return square


def move_to_notation(move: Move) -> str:
    """Short notation for the move list: piece letter + destination, pawns get no letter ('Nf3', 'e4')"""
    glyph = "" if move.piece.type == PieceType.PAWN else PIECE_GLYPHS[move.piece.type]
    return f"{glyph}{square_to_algebraic(move.end)}"
