"""Unit tests for /src/pawns/moves.py"""

from string import ascii_lowercase

import pytest

from src.core.config import GameConfig
from src.core.exceptions import InvalidCommandError
from src.pawns.moves import Move, parse_command
from src.pawns.square import Square


@pytest.mark.parametrize(
    "command, from_alg, to_alg",
    [
        ("e2e4", "e2", "e4"),
        ("a7a8", "a7", "a8"),
        ("d5e6", "d5", "e6"),
        ("h1a8", "h1", "a8"),
    ],
)
def test_parse_command(
    config: GameConfig, command: str, from_alg: str, to_alg: str
) -> None:
    """Command notation is <from_square><to_square>, the board is not consulted"""
    move = parse_command(command, config)
    assert move.from_square == Square.from_algebraic(from_alg)
    assert move.to_square == Square.from_algebraic(to_alg)
    assert move.to_command() == command


@pytest.mark.parametrize(
    "from_alg",
    [f"{file}{rank}" for file in ascii_lowercase[:8] for rank in range(1, 9)],
)
def test_command_round_trip_whole_board(config: GameConfig, from_alg: str) -> None:
    """Every square paired with every square parses and serialises back unchanged"""
    for file in config.file_letters:
        for rank in range(1, config.ranks + 1):
            command = f"{from_alg}{file}{rank}"
            move = parse_command(command, config)
            assert move.from_square == Square.from_algebraic(from_alg)
            assert move.to_command() == command


@pytest.mark.parametrize(
    "command",
    ["", "e2", "e2e", "e2e4q", "exit", "e2-e4", "i2i4", "a0a1", "a2a9", "E2E4", " e2e4"],
)
def test_parse_invalid_command(config: GameConfig, command: str) -> None:
    with pytest.raises(InvalidCommandError):
        parse_command(command, config)


def test_parse_respects_board_size(small_config: GameConfig) -> None:
    assert parse_command("e5e6", small_config).to_command() == "e5e6"
    with pytest.raises(InvalidCommandError):
        parse_command("h2h3", small_config)


def test_deltas(config: GameConfig) -> None:
    move = Move.from_command("e4d3", config)
    assert move.file_delta == -1
    assert move.rank_delta == -1


def test_moves_compare_by_value(config: GameConfig) -> None:
    assert Move.from_command("d2d4", config) == Move(
        Square.from_algebraic("d2"), Square.from_algebraic("d4")
    )
