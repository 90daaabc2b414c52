"""
Move commands as typed by the players.

Only parsing lives here: whether a move is allowed is decided by the rules module.
"""

from dataclasses import dataclass
from typing import Self

from src.core.config import GameConfig
from src.core.exceptions import InvalidCommandError
from src.pawns.square import Square


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_command(cls, command: str, config: GameConfig) -> Self:
        """
        Command notation
        ---
        Four characters: <file><rank><file><rank>, the starting square followed by the target square.

        examples:
        * "e2e4": move the pawn that was on e2 to e4
        * "d5e6": take diagonally (or en passant) from d5 onto e6

        No capture or promotion suffixes: reaching the final rank simply wins the game.
        """
        if not config.command_pattern.fullmatch(command):
            raise InvalidCommandError(f"Cannot interpret {command!r} as a move.")
        return cls(
            Square.from_algebraic(command[:2]),
            Square.from_algebraic(command[2:4]),
        )

    def to_command(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"

    @property
    def file_delta(self) -> int:
        return self.to_square.file - self.from_square.file

    @property
    def rank_delta(self) -> int:
        return self.to_square.rank - self.from_square.rank


def parse_command(raw: str, config: GameConfig) -> Move:
    """Syntax and range check only: the board is not consulted"""
    return Move.from_command(raw, config)
