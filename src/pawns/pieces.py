"""Defines the contents of a single cell: nothing, or a pawn of either color"""

from enum import Enum, auto
from typing import Optional, Self

from src.core.shared_types import Color


class Piece(Enum):
    EMPTY = auto()
    WHITE_PAWN = auto()
    BLACK_PAWN = auto()

    @classmethod
    def pawn(cls, color: Color) -> Self:
        return cls.WHITE_PAWN if color == Color.WHITE else cls.BLACK_PAWN

    @property
    def color(self) -> Optional[Color]:
        return PIECE_COLORS.get(self)

    @property
    def is_empty(self) -> bool:
        return self == Piece.EMPTY

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # upper case: White pawn, lower case: Black pawn
        if character.lower() != "p":
            raise ValueError(f"Only pawns live on this board, got {character!r}")
        return cls.WHITE_PAWN if character.isupper() else cls.BLACK_PAWN

    def to_fen(self) -> str:
        return "P" if self == Piece.WHITE_PAWN else "p"


PIECE_COLORS: dict[Piece, Color] = {
    Piece.WHITE_PAWN: Color.WHITE,
    Piece.BLACK_PAWN: Color.BLACK,
}
