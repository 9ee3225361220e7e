"""Request model for user input: validates the squares typed by the player before they reach the Game."""

from pydantic import BaseModel, field_validator

from src.chess.notation import parse_square, square_to_algebraic
from src.chess.square import Square
from src.core.exceptions import InvalidRequestError, InvalidSquareError


class MoveRequest(BaseModel):
    """
    Squares are normalized to algebraic notation ('e2'), whichever way they were typed:
    'e2', 'E2' or the 1-based rank/file pair '2 5' are all the same square.
    """

    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        try:
            square = parse_square(value)
        except InvalidSquareError as error:
            raise InvalidRequestError(str(error)) from error
        return square_to_algebraic(square)

    @property
    def start(self) -> Square:
        return parse_square(self.from_square)

    @property
    def dest(self) -> Square:
        return parse_square(self.to_square)
