"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable, Iterable

import pytest

from src.chess.board import Board
from src.chess.game import play_move
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.position import Position, new_standard_position
from src.chess.square import Square
from src.core.shared_types import Color

SquarePair = tuple[tuple[int, int], tuple[int, int]]
MakePosition = Callable[..., Position]
PlayMoves = Callable[[Position, Iterable[SquarePair]], Position]


@pytest.fixture
def starting_position() -> Position:
    return new_standard_position()


@pytest.fixture
def make_position() -> MakePosition:
    """Call the inner function with the pieces (by square) that should be on an otherwise empty board"""

    def _make_position(
        pieces: dict[Square, Piece],
        color_to_move: Color = Color.WHITE,
        history: Iterable[Move] = (),
    ) -> Position:
        return Position(
            board=Board.from_pieces(pieces),
            color_to_move=color_to_move,
            history=tuple(history),
        )

    return _make_position


@pytest.fixture
def play_moves() -> PlayMoves:
    """
    Call the inner function to play a sequence of ((rank, file), (rank, file)) moves.
    Every move in the sequence is expected to be legal.
    """

    def _play_moves(position: Position, moves: Iterable[SquarePair]) -> Position:
        for (start_rank, start_file), (dest_rank, dest_file) in moves:
            start = Square(start_rank, start_file)
            dest = Square(dest_rank, dest_file)
            piece = position.piece(start)
            assert piece is not None, f"no piece on {start}"
            position, error = play_move(position, piece, start, dest)
            assert error is None, f"{start} -> {dest} rejected: {error}"
        return position

    return _play_moves
