"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.config import GameConfig


@dataclass(frozen=True)
class Square:
    """0-based coordinates: 'a1' is (0, 0)"""

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        file = ord(sq[0]) - ord("a")
        rank = int(sq[1]) - 1
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a'))}{self.rank + 1}"

    def is_within_bounds(self, config: GameConfig) -> bool:
        return (0 <= self.file < config.files) and (0 <= self.rank < config.ranks)

    def shifted(self, df: int, dr: int) -> Square:
        return Square(self.file + df, self.rank + dr)
