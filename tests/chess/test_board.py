"""Unit tests for /src/chess/board.py"""

import pytest

from src.chess.board import Board
from src.chess.pieces import BACK_RANK_ORDER, Piece
from src.chess.square import NUM_SQUARES, Square
from src.core.shared_types import Color, PieceType


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    board = Board.starting_position()

    # 1st rank: white pieces, 2nd rank: white pawns
    for file, piece_type in enumerate(BACK_RANK_ORDER):
        assert board.piece(Square(0, file)) == Piece(piece_type, Color.WHITE)
        assert board.piece(Square(1, file)) == Piece(PieceType.PAWN, Color.WHITE)

    # 3rd through 6th ranks are empty
    for rank in range(2, 6):
        for file in range(8):
            assert board.piece(Square(rank, file)) is None

    # 7th rank: black pawns, 8th rank: black pieces
    for file, piece_type in enumerate(BACK_RANK_ORDER):
        assert board.piece(Square(6, file)) == Piece(PieceType.PAWN, Color.BLACK)
        assert board.piece(Square(7, file)) == Piece(piece_type, Color.BLACK)


def test_kings_and_queens_on_their_files() -> None:
    board = Board.starting_position()
    assert board.piece(Square(0, 3)) == Piece(PieceType.QUEEN, Color.WHITE)
    assert board.piece(Square(0, 4)) == Piece(PieceType.KING, Color.WHITE)
    assert board.piece(Square(7, 3)) == Piece(PieceType.QUEEN, Color.BLACK)
    assert board.piece(Square(7, 4)) == Piece(PieceType.KING, Color.BLACK)


def test_starting_position_piece_count() -> None:
    board = Board.starting_position()
    assert board.count_pieces() == 32
    assert len(board.locate_color(Color.WHITE)) == 16
    assert len(board.locate_color(Color.BLACK)) == 16


def test_board_needs_64_squares() -> None:
    with pytest.raises(ValueError):
        _ = Board((None,) * (NUM_SQUARES - 1))


def test_cannot_place_piece_off_the_board() -> None:
    with pytest.raises(ValueError):
        _ = Board.from_pieces({Square(8, 0): Piece(PieceType.ROOK, Color.WHITE)})


# -- LOOKUP ---
@pytest.mark.parametrize("square", [Square(8, 0), Square(0, 8), Square(-1, 3)])
def test_lookup_out_of_bounds_returns_none(square: Square) -> None:
    """Lookup is total: never raises"""
    assert Board.starting_position().piece(square) is None


def test_lookup_empty_square_returns_none() -> None:
    assert Board.empty().piece(Square(4, 4)) is None


# -- UPDATES ---
def test_move_piece_returns_new_board() -> None:
    board = Board.starting_position()
    pawn = board.piece(Square(1, 4))
    assert pawn is not None

    new_board = board.move_piece(pawn, Square(1, 4), Square(3, 4))

    assert new_board.piece(Square(3, 4)) == pawn
    assert new_board.piece(Square(1, 4)) is None
    # the original board did not change
    assert board.piece(Square(1, 4)) == pawn
    assert board.piece(Square(3, 4)) is None
    assert board == Board.starting_position()


def test_place_and_remove_piece() -> None:
    knight = Piece(PieceType.KNIGHT, Color.BLACK)
    board = Board.empty().place_piece(knight, Square(5, 5))
    assert board.piece(Square(5, 5)) == knight
    assert board.occupied_squares() == [Square(5, 5)]

    cleared = board.remove_piece(Square(5, 5))
    assert cleared.count_pieces() == 0
    assert board.count_pieces() == 1


@pytest.mark.parametrize("square", [Square(-1, 4), Square(8, 0), Square(0, -1)])
def test_updates_off_the_board_are_rejected(square: Square) -> None:
    """Negative indices must not wrap around to the other end of the board"""
    board = Board.starting_position()
    with pytest.raises(ValueError):
        board.remove_piece(square)
    with pytest.raises(ValueError):
        board.move_piece(Piece(PieceType.PAWN, Color.WHITE), square, Square(2, 4))
