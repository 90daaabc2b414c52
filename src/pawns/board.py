"""The Game board holds the `position` (which pawn stands where) and the primitive updates to it"""

import re
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.config import GameConfig
from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Color
from src.pawns.pieces import Piece
from src.pawns.square import Square

FEN_TOKEN = re.compile(r"\d+|.")


@dataclass
class Board:
    position: dict[Square, Piece]
    config: GameConfig = field(default_factory=GameConfig)

    @classmethod
    def empty(cls, config: Optional[GameConfig] = None) -> Self:
        config = config or GameConfig()
        position = {
            Square(file, rank): Piece.EMPTY
            for rank in range(config.ranks)
            for file in range(config.files)
        }
        return cls(position, config)

    @classmethod
    def starting(cls, config: Optional[GameConfig] = None) -> Self:
        """Full rank of White pawns on White's initial rank, Black pawns on Black's"""
        board = cls.empty(config)
        for color in Color:
            rank = board.config.initial_rank(color)
            for file in range(board.config.files):
                board.place_piece(Piece.pawn(color), Square(file, rank))
        return board

    @classmethod
    def from_fen(cls, fen_str: str, config: Optional[GameConfig] = None) -> Self:
        """Construct a board using the position part of a FEN string (pawns only).

        ex. starting position:
        8/pppppppp/8/8/8/8/PPPPPPPP/8
        means:
        * 8th and 1st rank are empty
        * black pawns (lower case) cover the 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        """
        board = cls.empty(config)
        num_files, num_ranks = board.config.files, board.config.ranks

        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != num_ranks:
            raise InvalidBoardError(
                f"Expected {num_ranks} ranks, got {len(fen_by_ranks)}: {fen_str!r}"
            )

        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank to bottom rank
            rank = num_ranks - 1 - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 0
            for token in FEN_TOKEN.findall(fen_one_rank):
                if token.isdigit():
                    file += int(token)
                    continue
                if file >= num_files:
                    raise InvalidBoardError(
                        f"Rank {rank + 1} has more than {num_files} files: {fen_one_rank!r}"
                    )
                try:
                    piece = Piece.from_fen(token)
                except ValueError as exc:
                    raise InvalidBoardError(str(exc)) from exc
                board.place_piece(piece, Square(file, rank))
                file += 1

            if file != num_files:
                raise InvalidBoardError(
                    f"Rank {rank + 1} does not describe {num_files} files: {fen_one_rank!r}"
                )
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(self.config.ranks - 1, -1, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(self.config.files):
            piece = self.piece(Square(file, rank))

            if not piece.is_empty:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Piece:
        return self.position[square]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square).is_empty

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.position[square] = piece

    def remove_piece(self, square: Square) -> None:
        self.position[square] = Piece.EMPTY

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Vacate the starting square, whatever stood on the target square is overwritten"""
        piece_that_moved = self.piece(from_square)
        self.position[from_square] = Piece.EMPTY
        self.position[to_square] = piece_that_moved

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square for square, piece in self.position.items() if piece.color == color
        ]

    def rank(self, rank: int) -> list[Piece]:
        """Cells of one rank, a-file first"""
        return [self.piece(Square(file, rank)) for file in range(self.config.files)]
