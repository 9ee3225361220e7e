"""
Custom exceptions.

`GameError` and its subclasses are expected, recoverable errors caused by user input (the caller re-prompts).
`BoardInvariantError` is NOT one of them: it signals that the move checker and the move applier disagree.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.chess.moves import MoveError


class GameError(Exception):
    """Base class for all errors a player can cause"""


class IllegalMoveError(GameError):
    """The proposed move was rejected. `reason` tells you which rule was broken."""

    def __init__(self, reason: "MoveError") -> None:
        super().__init__(str(reason))
        self.reason = reason


class InvalidSquareError(GameError):
    """User supplied coordinates that cannot be interpreted as a square on the board."""


class EmptySquareError(GameError):
    """User selected a square without a piece to move."""


class InvalidRequestError(GameError):
    """Raised in pydantic validators. Not a ValueError, so pydantic lets it propagate as-is."""


class BoardInvariantError(RuntimeError):
    """
    Internal defect: the board is not in the state an accepted move promised.

    (ex. a capture was accepted but there is no piece on the captured square)
    """
