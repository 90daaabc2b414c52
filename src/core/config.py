"""
Game configuration.

One immutable value handed to the board (and through it to the rules engine) and to the game orchestrator.
Defaults describe the classical 8x8 pawns-only game.
"""

import re
from pathlib import Path
from string import ascii_lowercase
from typing import Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.core.shared_types import Color


class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    files: int = Field(default=8, ge=2, le=len(ascii_lowercase))
    # rank coordinates are typed as a single digit
    ranks: int = Field(default=8, ge=4, le=9)
    white_initial_rank: int = 1
    black_initial_rank: int = 6
    quit_command: str = Field(default="exit", min_length=1)
    white_symbol: str = "W"
    black_symbol: str = "B"
    empty_symbol: str = " "
    caption: str = "Pawns-Only Chess"
    stalemate_counts_en_passant: bool = False

    @field_validator("white_symbol", "black_symbol", "empty_symbol")
    @classmethod
    def validate_symbol(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"Board symbols are single characters, got {value!r}.")
        return value

    @model_validator(mode="after")
    def validate_layout(self) -> Self:
        for rank in (self.white_initial_rank, self.black_initial_rank):
            if not 0 <= rank < self.ranks:
                raise ValueError(
                    f"Initial rank {rank} lies outside a board with {self.ranks} ranks."
                )
        if self.white_initial_rank >= self.black_initial_rank:
            raise ValueError("White must start below Black.")

        if len({self.white_symbol, self.black_symbol, self.empty_symbol}) != 3:
            raise ValueError("White, black and empty symbols must all differ.")
        return self

    @classmethod
    def from_json_file(cls, path: str | Path) -> Self:
        # bytes: a file that is not UTF-8 fails validation like any other bad JSON
        return cls.model_validate_json(Path(path).read_bytes())

    # --- derived values ---
    def forward(self, color: Color) -> int:
        """White moves up the board, Black moves down"""
        return 1 if color == Color.WHITE else -1

    def initial_rank(self, color: Color) -> int:
        return self.white_initial_rank if color == Color.WHITE else self.black_initial_rank

    def final_rank(self, color: Color) -> int:
        """Reaching this rank wins the game"""
        return self.ranks - 1 if color == Color.WHITE else 0

    def symbol(self, color: Optional[Color]) -> str:
        """Character for a cell: the owner's letter, or the empty symbol"""
        if color is None:
            return self.empty_symbol
        return self.white_symbol if color == Color.WHITE else self.black_symbol

    @property
    def file_letters(self) -> str:
        return ascii_lowercase[: self.files]

    @property
    def command_pattern(self) -> re.Pattern[str]:
        """<letter><digit><letter><digit>, restricted to the board's files and ranks"""
        last_file = self.file_letters[-1]
        square = f"[a-{last_file}][1-{self.ranks}]"
        return re.compile(f"({square}){{2}}")
