"""Textual rendering of a position: the board, the list of moves, and the captured pieces."""

from src.chess.notation import FILE_LETTERS, move_to_notation, piece_glyph
from src.chess.position import Position
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.shared_types import Color, PieceType

EMPTY_SQUARE = "."
NO_CAPTURES = "No pieces have been captured yet."

# captured pieces are listed from least to most valuable
GRAVEYARD_ORDER: tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
    PieceType.KING,
)


def render_board(position: Position) -> str:
    """Rank 8 at the top (as seen by the white player), file letters underneath"""
    lines: list[str] = []
    for rank in range(BOARD_DIMENSIONS[0] - 1, -1, -1):
        row = []
        for file in range(BOARD_DIMENSIONS[1]):
            piece = position.piece(Square(rank, file))
            row.append(piece_glyph(piece) if piece else EMPTY_SQUARE)
        lines.append(f"{rank + 1} {' '.join(row)}")
    lines.append(f"  {' '.join(FILE_LETTERS)}")
    return "\n".join(lines)


def render_move_list(position: Position) -> str:
    """Moves are numbered per pair: '1. e4 d5'"""
    lines = ["Moves:"]
    history = position.history
    for turn, idx in enumerate(range(0, len(history), 2), start=1):
        pair = [move_to_notation(move) for move in history[idx : idx + 2]]
        lines.append(f"{turn}. {' '.join(pair)}")
    return "\n".join(lines)


def render_graveyard(position: Position) -> str:
    lines = ["Graveyard:"]
    for color in (Color.WHITE, Color.BLACK):
        lines.append(f"  {color.capitalize()} pieces:")
        counts = position.graveyard[color]
        captured = [
            f"    {counts[piece_type]}x {piece_type.capitalize()}"
            for piece_type in GRAVEYARD_ORDER
            if counts[piece_type] > 0
        ]
        lines.extend(captured or [f"    {NO_CAPTURES}"])
    return "\n".join(lines)


def render_position(
    position: Position, show_move_list: bool = True, show_graveyard: bool = True
) -> str:
    sections = [render_board(position)]
    if show_move_list:
        sections.append(render_move_list(position))
    if show_graveyard:
        sections.append(render_graveyard(position))
    return "\n\n".join(sections)
