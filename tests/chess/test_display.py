"""Unit tests for /src/chess/display.py"""

from typing import Callable

from src.chess.display import (
    NO_CAPTURES,
    render_board,
    render_graveyard,
    render_move_list,
    render_position,
)
from src.chess.position import Position
from src.core.shared_types import Color, PieceType

MakePosition = Callable[..., Position]
PlayMoves = Callable[..., Position]

STARTING_BOARD = "\n".join(
    [
        "8 r n b q k b n r",
        "7 p p p p p p p p",
        "6 . . . . . . . .",
        "5 . . . . . . . .",
        "4 . . . . . . . .",
        "3 . . . . . . . .",
        "2 P P P P P P P P",
        "1 R N B Q K B N R",
        "  a b c d e f g h",
    ]
)


def test_render_starting_board(starting_position: Position) -> None:
    assert render_board(starting_position) == STARTING_BOARD


def test_render_board_after_move(starting_position: Position, play_moves: PlayMoves) -> None:
    position = play_moves(starting_position, [((1, 4), (3, 4))])
    lines = render_board(position).splitlines()
    assert lines[4] == "4 . . . . P . . ."
    assert lines[6] == "2 P P P P . P P P"


def test_empty_move_list(starting_position: Position) -> None:
    assert render_move_list(starting_position) == "Moves:"


def test_move_list_pairs_moves(starting_position: Position, play_moves: PlayMoves) -> None:
    position = play_moves(
        starting_position, [((1, 4), (3, 4)), ((6, 3), (4, 3)), ((0, 6), (2, 5))]
    )
    assert render_move_list(position) == "Moves:\n1. e4 d5\n2. Nf3"


def test_empty_graveyard(starting_position: Position) -> None:
    assert render_graveyard(starting_position) == "\n".join(
        [
            "Graveyard:",
            "  White pieces:",
            f"    {NO_CAPTURES}",
            "  Black pieces:",
            f"    {NO_CAPTURES}",
        ]
    )


def test_graveyard_after_capture(starting_position: Position, play_moves: PlayMoves) -> None:
    """1. e4 d5 2. exd5"""
    position = play_moves(
        starting_position, [((1, 4), (3, 4)), ((6, 3), (4, 3)), ((3, 4), (4, 3))]
    )
    lines = render_graveyard(position).splitlines()
    assert lines[2] == f"    {NO_CAPTURES}"
    assert lines[3:] == ["  Black pieces:", "    1x Pawn"]


def test_render_position_sections(starting_position: Position) -> None:
    full = render_position(starting_position)
    assert full.split("\n\n") == [
        STARTING_BOARD,
        render_move_list(starting_position),
        render_graveyard(starting_position),
    ]
    assert render_position(starting_position, show_move_list=False, show_graveyard=False) == STARTING_BOARD


def test_graveyard_lists_pieces_from_pawn_to_king(make_position: MakePosition) -> None:
    # counters stored king first: the listing order does not depend on it
    graveyard = {color: {piece_type: 0 for piece_type in reversed(PieceType)} for color in Color}
    graveyard[Color.WHITE][PieceType.KING] = 1
    graveyard[Color.WHITE][PieceType.PAWN] = 3
    graveyard[Color.WHITE][PieceType.ROOK] = 2
    position = Position(board=make_position({}).board, graveyard=graveyard)
    lines = render_graveyard(position).splitlines()
    assert lines[2:5] == ["    3x Pawn", "    2x Rook", "    1x King"]
