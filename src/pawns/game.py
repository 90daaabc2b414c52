"""
The Game class is the entrypoint into the domain layer for the terminal front end.
It owns the board, whose turn it is and the last move (needed for en passant), and runs one ply at a time:

begin_turn (stalemate?) -> submit (quit / rejected / applied) -> end-of-game check -> switch player
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.config import GameConfig
from src.core.exceptions import GameStateError
from src.core.shared_types import Color, Status
from src.pawns.board import Board
from src.pawns.moves import Move
from src.pawns.rules import (
    MoveResolution,
    apply_resolution,
    count_pawns,
    is_stalemated,
    resolve_move,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """What happened to a submitted command. `resolution` is None only when the player quit."""

    status: Status
    resolution: Optional[MoveResolution] = None

    @property
    def is_rejected(self) -> bool:
        return self.resolution is not None and self.resolution.is_rejected


@dataclass
class Game:
    board: Board
    players: dict[Color, str]
    color_to_move: Color = Color.WHITE
    last_move: Optional[Move] = None
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None

    @classmethod
    def new_game(
        cls,
        first_player: str,
        second_player: str,
        config: Optional[GameConfig] = None,
    ) -> Self:
        """First player plays White and moves first."""
        return cls(
            board=Board.starting(config),
            players={Color.WHITE: first_player, Color.BLACK: second_player},
        )

    @property
    def config(self) -> GameConfig:
        return self.board.config

    @property
    def current_player(self) -> str:
        return self.players[self.color_to_move]

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def begin_turn(self) -> Status:
        """Before accepting input: a player without any move available ends the game in a draw."""
        self._assert_in_progress()
        if is_stalemated(self.board, self.color_to_move, self.last_move):
            _LOGGER.info("Stalemate: %s has no move left", self.color_to_move)
            self._change_status(Status.STALEMATE)
        return self.status

    def submit(self, command: str) -> TurnResult:
        """
        Attempt a command for the player to move
        -----

        1. quit token? --> game over, board untouched
        2. ask the rules for a verdict; rejected --> nothing changes, same player tries again
        3. update the board (two cells for en passant)
        4. remember the move (the next player may take en passant)
        5. check for the end of the game, otherwise hand over the turn
        """
        self._assert_in_progress()

        if command == self.config.quit_command:
            _LOGGER.info("%s quit the game", self.current_player)
            self._change_status(Status.QUIT)
            return TurnResult(self.status)

        resolution = resolve_move(
            self.board, self.color_to_move, command, self.last_move
        )
        if resolution.is_rejected:
            return TurnResult(self.status, resolution)

        apply_resolution(self.board, resolution, self.last_move)
        # for the typechecker: accepted resolutions always carry their move
        assert resolution.move is not None
        self.last_move = resolution.move
        _LOGGER.debug(
            "%s played %s (%s): %s",
            self.color_to_move,
            resolution.move.to_command(),
            resolution.kind.name.lower(),
            self.board.to_fen(),
        )

        if self._has_won(resolution.move):
            _LOGGER.info("%s wins", self.color_to_move)
            self.winner = self.color_to_move
            self._change_status(Status.WIN)
        else:
            self.color_to_move = self.color_to_move.opponent
        return TurnResult(self.status, resolution)

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.is_over:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _has_won(self, move: Move) -> bool:
        """Reaching the final rank, or no opponent pawns left. Checked before the opponent gets a turn."""
        reached_final_rank = move.to_square.rank == self.config.final_rank(
            self.color_to_move
        )
        opponent_eliminated = count_pawns(self.board, self.color_to_move.opponent) == 0
        return reached_final_rank or opponent_eliminated

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
