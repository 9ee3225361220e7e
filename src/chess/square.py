"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8: ranks and files are both numbered 0..7
BOARD_DIMENSIONS = (8, 8)
NUM_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


def is_valid(rank: int, file: int) -> bool:
    """Used by collaborators that parse user supplied coordinates"""
    return (0 <= rank < BOARD_DIMENSIONS[0]) and (0 <= file < BOARD_DIMENSIONS[1])


@dataclass(frozen=True)
class Square:
    """
    (rank, file) coordinate. (0, 0) is a1, (7, 7) is h8.

    NOTE: Out of range squares can be created on purpose (the move checker has to reject them), use `is_within_bounds()`.
    """

    rank: int
    file: int

    def is_within_bounds(self) -> bool:
        return is_valid(self.rank, self.file)

    @property
    def index(self) -> int:
        """Position in the flattened 64-slot board array"""
        return self.rank * BOARD_DIMENSIONS[1] + self.file

    @classmethod
    def from_index(cls, index: int) -> Square:
        rank, file = divmod(index, BOARD_DIMENSIONS[1])
        return cls(rank, file)

    def offset(self, d_rank: int, d_file: int) -> Square:
        return Square(self.rank + d_rank, self.file + d_file)
