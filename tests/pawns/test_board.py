"""Unit tests for /src/pawns/board.py"""

import pytest

from src.core.config import GameConfig
from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Color
from src.pawns.board import Board
from src.pawns.pieces import Piece
from src.pawns.square import Square

STARTING_FEN = "8/pppppppp/8/8/8/8/PPPPPPPP/8"
EMPTY_FEN = "/".join(["8"] * 8)


def test_starting_position(config: GameConfig) -> None:
    board = Board.starting(config)
    assert board.to_fen() == STARTING_FEN
    assert len(board.locate_color(Color.WHITE)) == 8
    assert len(board.locate_color(Color.BLACK)) == 8
    assert all(square.rank == 1 for square in board.locate_color(Color.WHITE))
    assert all(square.rank == 6 for square in board.locate_color(Color.BLACK))


def test_starting_position_small_board(small_config: GameConfig) -> None:
    board = Board.starting(small_config)
    assert board.to_fen() == "5/ppppp/5/5/PPPPP/5"


def test_empty_board() -> None:
    board = Board.empty()
    assert board.to_fen() == EMPTY_FEN
    assert len(board.position) == 64
    assert all(piece.is_empty for piece in board.position.values())


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_FEN,
        EMPTY_FEN,
        "8/8/8/3p4/3P4/8/8/8",
        "P7/7p/8/2pP4/8/8/8/8",
    ],
)
def test_fen_round_trip(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


def test_from_fen_places_pieces() -> None:
    board = Board.from_fen("8/8/8/3p4/4P3/8/8/8")
    assert board.piece(Square.from_algebraic("d5")) == Piece.BLACK_PAWN
    assert board.piece(Square.from_algebraic("e4")) == Piece.WHITE_PAWN
    assert board.is_empty(Square.from_algebraic("d4"))


@pytest.mark.parametrize(
    "fen",
    [
        "8/8/8/8/8/8/8",  # one rank short
        "8/8/8/8/8/8/8/8/8",  # one rank too many
        "8/8/8/8/8/8/8/7",  # rank too short
        "8/8/8/8/8/8/8/9",  # rank too long
        "8/8/8/8/8/8/8/PPPPPPPPP",
        "8/8/8/8/8/8/8/K7",  # only pawns
    ],
)
def test_invalid_fen(fen: str) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_fen(fen)


def test_move_piece_vacates_and_overwrites() -> None:
    """A capture is realised by overwriting the target square"""
    board = Board.from_fen("8/8/8/3p4/4P3/8/8/8")
    board.move_piece(Square.from_algebraic("e4"), Square.from_algebraic("d5"))
    assert board.to_fen() == "8/8/8/3P4/8/8/8/8"


def test_remove_piece() -> None:
    board = Board.from_fen("8/8/8/3p4/8/8/8/8")
    board.remove_piece(Square.from_algebraic("d5"))
    assert board.to_fen() == EMPTY_FEN


def test_rank_reads_a_file_first() -> None:
    board = Board.from_fen("8/8/8/8/8/8/P6p/8")
    cells = board.rank(1)
    assert cells[0] == Piece.WHITE_PAWN
    assert cells[-1] == Piece.BLACK_PAWN
    assert all(cell.is_empty for cell in cells[1:-1])
