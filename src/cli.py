"""
Interactive command line game: both players take turns at the same terminal.

usage: chess-cli [--log-level LEVEL] [--no-move-list] [--no-graveyard]
"""

import argparse
from typing import Callable, Optional

from src.api.models import MoveRequest
from src.chess.display import render_position
from src.chess.game import Game
from src.chess.notation import parse_square
from src.core.exceptions import GameError
from src.core.logging_config import setup_logging
from src.core.settings import LOG_LEVELS, settings

QUIT_COMMANDS = {"q", "quit", "exit"}

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Two-player chess in the terminal. Enter squares as 'e2' or as rank and file from 1-8 ('2 5')."
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="loguru level for diagnostics written to stderr",
    )
    parser.add_argument(
        "--no-move-list",
        dest="show_move_list",
        action="store_false",
        default=settings.show_move_list,
        help="do not print the list of moves after every turn",
    )
    parser.add_argument(
        "--no-graveyard",
        dest="show_graveyard",
        action="store_false",
        default=settings.show_graveyard,
        help="do not print the captured pieces after every turn",
    )
    return parser


def _prompt(read: ReadFn, text: str) -> Optional[str]:
    """None when the player wants to stop (quit command or end of input)"""
    try:
        answer = read(text)
    except EOFError:
        return None
    if answer.strip().lower() in QUIT_COMMANDS:
        return None
    return answer


def play_turn(game: Game, read: ReadFn, write: WriteFn) -> Optional[bool]:
    """
    Prompt for one move and attempt it.

    Returns True if the move was made, False if it was rejected (player gets prompted again), None to stop playing.
    """
    from_text = _prompt(
        read, f"{game.color_to_move.capitalize()} to move. Square of the piece: "
    )
    if from_text is None:
        return None

    try:
        piece = game.select_piece(parse_square(from_text))
    except GameError as error:
        write(str(error))
        return False
    write(f"Piece found: {piece}")

    to_text = _prompt(read, "Target square: ")
    if to_text is None:
        return None

    try:
        request = MoveRequest(from_square=from_text, to_square=to_text)
        rejection = game.make_move(request.start, request.dest)
    except GameError as error:
        write(str(error))
        return False

    if rejection is not None:
        write(str(rejection))
        return False
    return True


def run(
    game: Game,
    read: ReadFn = input,
    write: WriteFn = print,
    show_move_list: bool = True,
    show_graveyard: bool = True,
) -> Game:
    """The game loop. Returns the game as it stood when the players stopped."""
    write(render_position(game.position, show_move_list, show_graveyard))
    while True:
        outcome = play_turn(game, read, write)
        if outcome is None:
            break
        if outcome:
            write(render_position(game.position, show_move_list, show_graveyard))
    return game


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    run(
        Game.new_game(),
        show_move_list=args.show_move_list,
        show_graveyard=args.show_graveyard,
    )


if __name__ == "__main__":
    main()
