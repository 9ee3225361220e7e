"""
The Game class is the entrypoint into the domain layer for the CLI (or any other caller).
It holds the *current* position and orchestrates a turn: check the proposed move, then apply it.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from loguru import logger

from src.chess.move_applier import apply_move
from src.chess.move_checker import check_move
from src.chess.moves import Move, MoveError
from src.chess.pieces import Piece
from src.chess.position import Graveyard, Position, new_standard_position
from src.chess.square import Square
from src.core.exceptions import EmptySquareError, IllegalMoveError
from src.core.shared_types import Color


def play_move(
    position: Position, piece: Piece, start: Square, dest: Square
) -> tuple[Position, Optional[MoveError]]:
    """
    Check, then apply.
    ----

    * legal move --> (next position, None)
    * illegal move --> (the very same position, reason of the rejection)
    """
    try:
        result = check_move(position, piece, start, dest)
    except IllegalMoveError as error:
        logger.info(f"{piece} {start} -> {dest} rejected: {error.reason.value}")
        return position, error.reason
    return apply_move(position, piece, start, dest, result), None


@dataclass
class Game:
    position: Position = field(default_factory=new_standard_position)

    @classmethod
    def new_game(cls) -> Self:
        return cls(new_standard_position())

    @property
    def color_to_move(self) -> Color:
        return self.position.color_to_move

    @property
    def history(self) -> tuple[Move, ...]:
        return self.position.history

    @property
    def graveyard(self) -> Graveyard:
        return self.position.graveyard

    def select_piece(self, square: Square) -> Piece:
        """The piece the player wants to move. You cannot move thin air."""
        piece = self.position.piece(square)
        if piece is None:
            raise EmptySquareError(f"No piece found at {square}")
        return piece

    def make_move(self, start: Square, dest: Square) -> Optional[MoveError]:
        """
        Attempt to move the piece standing on `start`.
        Returns None on success, otherwise the reason the move was rejected (position stays as it was).
        """
        piece = self.select_piece(start)
        self.position, error = play_move(self.position, piece, start, dest)
        return error
