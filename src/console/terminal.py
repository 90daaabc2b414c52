"""
Terminal front end: reads the players' names and commands, prints the board and the game's messages.

All rules live in the domain layer (src/pawns). This module only translates between text and a Game.
"""

import argparse
import logging
import sys
from enum import StrEnum
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from src.core.config import GameConfig
from src.core.shared_types import Color, Status
from src.pawns.game import Game, TurnResult
from src.pawns.render import render_board
from src.pawns.rules import RejectionReason

_LOGGER = logging.getLogger(__name__)

ReadLine = Callable[[], str]
WriteLine = Callable[[str], None]


class GameNotice(StrEnum):
    ASK_FIRST_PLAYER_NAME = "First Player's name:"
    ASK_SECOND_PLAYER_NAME = "Second Player's name:"
    ASK_PLAYER_TURN = "{name}'s turn:"
    BYE = "Bye!"
    INVALID_INPUT = "Invalid Input"
    NO_PAWN_AT_POSITION = "No {color} pawn at {square}"
    PLAYER_WIN = "{color} Wins!"
    DRAW = "Stalemate!"


class Terminal:
    """Line-oriented session: one prompt, one answer, until the game is over."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        read_line: ReadLine = input,
        write_line: WriteLine = print,
    ) -> None:
        self.config = config or GameConfig()
        self._read_line = read_line
        self._write_line = write_line

    def run(self) -> Optional[Game]:
        """Play one game. None when input ended before both players were named."""
        self._write_line(self.config.caption)
        first_player = self._ask(GameNotice.ASK_FIRST_PLAYER_NAME)
        second_player = (
            self._ask(GameNotice.ASK_SECOND_PLAYER_NAME)
            if first_player is not None
            else None
        )
        if first_player is None or second_player is None:
            self._write_line(GameNotice.BYE)
            return None

        game = Game.new_game(first_player, second_player, self.config)
        self._show_board(game)

        while not game.is_over:
            if game.begin_turn() == Status.STALEMATE:
                self._write_line(GameNotice.DRAW)
                break

            result = self._play_turn(game)
            if result.status == Status.QUIT:
                break

            self._show_board(game)
            if result.status == Status.WIN:
                # for the typechecker: a won game always has a winner
                assert game.winner is not None
                self._write_line(
                    GameNotice.PLAYER_WIN.format(color=game.winner.value.capitalize())
                )

        self._write_line(GameNotice.BYE)
        return game

    def _play_turn(self, game: Game) -> TurnResult:
        """Re-prompt the same player until the command is accepted (or they quit)"""
        prompt = GameNotice.ASK_PLAYER_TURN.format(name=game.current_player)
        while True:
            command = self._ask(prompt)
            if command is None:
                # end of input counts as the quit command
                command = self.config.quit_command
            result = game.submit(command)
            if not result.is_rejected:
                return result
            self._write_line(self._rejection_message(game.color_to_move, command, result))

    def _rejection_message(self, color: Color, command: str, result: TurnResult) -> str:
        # for the typechecker: rejected results always carry their resolution
        assert result.resolution is not None
        if result.resolution.reason == RejectionReason.NO_PAWN_AT_SOURCE:
            return GameNotice.NO_PAWN_AT_POSITION.format(
                color=color.value, square=command[:2]
            )
        return GameNotice.INVALID_INPUT

    def _ask(self, question: str) -> Optional[str]:
        """The answer, or None once input has ended"""
        self._write_line(question)
        try:
            return self._read_line()
        except EOFError:
            _LOGGER.info("Input closed, leaving the game")
            return None

    def _show_board(self, game: Game) -> None:
        for line in render_board(game.board):
            self._write_line(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pawns-chess",
        description="Two-player pawns-only chess in the terminal.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="JSON file with game settings (board size, symbols, quit command, ...)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the log written to stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # stdout carries the game itself, so logs go to stderr
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig()
    if args.config:
        try:
            config = GameConfig.from_json_file(args.config)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            parser.error(f"cannot load config {args.config!r}: {exc}")

    Terminal(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
