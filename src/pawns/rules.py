"""
Pawn movement and capturing rules

Key idea: pure functions over a board that is owned elsewhere. Only the `apply_*` functions touch the board.

`resolve_move()` is the single entry point for a typed command and returns a tagged outcome,
so the caller branches on data (advance / capture / en passant / rejected).
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from src.core.exceptions import IllegalMoveError, InvalidCommandError
from src.core.shared_types import Color
from src.pawns.board import Board
from src.pawns.moves import Move, parse_command
from src.pawns.pieces import Piece
from src.pawns.square import Square

_LOGGER = logging.getLogger(__name__)


class MoveKind(Enum):
    REJECTED = auto()
    ADVANCE = auto()
    CAPTURE = auto()
    EN_PASSANT = auto()


class RejectionReason(Enum):
    INVALID_FORMAT = auto()
    NO_PAWN_AT_SOURCE = auto()
    ILLEGAL_MOVE = auto()


@dataclass(frozen=True)
class MoveResolution:
    """Verdict on a single command"""

    kind: MoveKind
    move: Optional[Move] = None
    reason: Optional[RejectionReason] = None

    @classmethod
    def rejected(
        cls, reason: RejectionReason, move: Optional[Move] = None
    ) -> "MoveResolution":
        return cls(MoveKind.REJECTED, move, reason)

    @property
    def is_rejected(self) -> bool:
        return self.kind == MoveKind.REJECTED


# --- BOARD QUERIES ---
def has_pawn_at(board: Board, color: Color, square: Square) -> bool:
    return board.piece(square) == Piece.pawn(color)


def count_pawns(board: Board, color: Color) -> int:
    return len(board.locate_color(color))


def _is_forward_diagonal_step(board: Board, color: Color, move: Move) -> bool:
    """Pawns take diagonally: one file sideways, one rank forward"""
    forward = board.config.forward(color)
    return abs(move.file_delta) == 1 and move.rank_delta == forward


# --- MOVEMENT RULES ---
def is_legal_advance(board: Board, color: Color, move: Move) -> bool:
    """
    A pawn:
    - moves straight ahead along its file
    - by a single square, or by two when still on its initial rank
    - never jumps over or lands on another pawn
    """
    if move.file_delta != 0:
        return False

    forward = board.config.forward(color)
    distance = move.rank_delta * forward
    on_initial_rank = move.from_square.rank == board.config.initial_rank(color)
    allowed_distances = (1, 2) if on_initial_rank else (1,)
    if distance not in allowed_distances:
        return False

    # every square walked over, including the target, must be free
    return all(
        board.is_empty(move.from_square.shifted(0, step * forward))
        for step in range(1, distance + 1)
    )


def is_legal_capture(board: Board, color: Color, move: Move) -> bool:
    if not _is_forward_diagonal_step(board, color, move):
        return False
    return board.piece(move.to_square) == Piece.pawn(color.opponent)


def is_double_advance(board: Board, color: Color, move: Move) -> bool:
    """Did `color` push a pawn two squares from its initial rank?"""
    config = board.config
    return (
        move.file_delta == 0
        and move.from_square.rank == config.initial_rank(color)
        and move.rank_delta == 2 * config.forward(color)
    )


def is_legal_en_passant(
    board: Board, color: Color, move: Move, last_move: Optional[Move]
) -> bool:
    """
    En passant
    ----

    The opponent's previous move pushed a pawn two squares, passing the square our pawn attacks.
    We may take it by stepping diagonally onto the square it passed over (directly behind it, seen from the opponent).

    NOTE: Only the last move is known, so the right automatically expires after one ply.
    """
    if last_move is None:
        return False

    opponent = color.opponent
    if not is_double_advance(board, opponent, last_move):
        return False

    if not _is_forward_diagonal_step(board, color, move):
        return False

    landing_square = last_move.to_square
    passed_square = landing_square.shifted(0, -board.config.forward(opponent))
    if move.to_square != passed_square:
        return False

    return board.piece(landing_square) == Piece.pawn(opponent)


def resolve_move(
    board: Board, color: Color, raw: str, last_move: Optional[Move]
) -> MoveResolution:
    """
    Decide what a command typed by `color` means
    ----

    1. it must parse as a command inside the board
    2. the starting square must hold one of your pawns
    3. legal advance? legal capture? (mutually exclusive by geometry)
    4. only then: en passant
    """
    try:
        move = parse_command(raw, board.config)
    except InvalidCommandError:
        _LOGGER.debug("Rejected %r: not a command", raw)
        return MoveResolution.rejected(RejectionReason.INVALID_FORMAT)

    if not has_pawn_at(board, color, move.from_square):
        _LOGGER.debug("Rejected %r: no %s pawn on the starting square", raw, color)
        return MoveResolution.rejected(RejectionReason.NO_PAWN_AT_SOURCE, move)

    if is_legal_advance(board, color, move):
        return MoveResolution(MoveKind.ADVANCE, move)

    if is_legal_capture(board, color, move):
        return MoveResolution(MoveKind.CAPTURE, move)

    if is_legal_en_passant(board, color, move, last_move):
        return MoveResolution(MoveKind.EN_PASSANT, move)

    _LOGGER.debug("Rejected %r: not a legal %s move", raw, color)
    return MoveResolution.rejected(RejectionReason.ILLEGAL_MOVE, move)


# --- BOARD UPDATES ---
def apply_move(board: Board, move: Move) -> None:
    """Also realises ordinary captures: the taken pawn is simply overwritten"""
    board.move_piece(move.from_square, move.to_square)


def apply_en_passant(board: Board, move: Move, last_move: Move) -> None:
    """
    1. Move the pawn diagonally
    2. Remove the opponent's pawn that gets taken (it stands where the last move ended)
    """
    apply_move(board, move)
    board.remove_piece(last_move.to_square)


def apply_resolution(
    board: Board, resolution: MoveResolution, last_move: Optional[Move]
) -> None:
    """Route an accepted resolution to the matching board update"""
    if resolution.is_rejected or resolution.move is None:
        raise IllegalMoveError(f"Cannot apply a rejected move: {resolution}")

    if resolution.kind == MoveKind.EN_PASSANT:
        # for the typechecker: en passant is only resolved when a last move exists
        assert last_move is not None
        apply_en_passant(board, resolution.move, last_move)
    else:
        apply_move(board, resolution.move)


# --- END OF GAME ---
def _has_en_passant(board: Board, color: Color, last_move: Optional[Move]) -> bool:
    forward = board.config.forward(color)
    for square in board.locate_color(color):
        for df in (-1, 1):
            target = square.shifted(df, forward)
            if not target.is_within_bounds(board.config):
                continue
            if is_legal_en_passant(board, color, Move(square, target), last_move):
                return True
    return False


def is_stalemated(
    board: Board, color: Color, last_move: Optional[Move] = None
) -> bool:
    """
    No pawn of `color` can step forward onto an empty square or take diagonally.

    NOTE: En passant is only taken into account when the config enables `stalemate_counts_en_passant`.
    By default a position whose only move is en passant counts as stalemate.
    """
    config = board.config
    forward = config.forward(color)
    opponent_pawn = Piece.pawn(color.opponent)

    for square in board.locate_color(color):
        ahead = square.shifted(0, forward)
        if ahead.is_within_bounds(config) and board.is_empty(ahead):
            return False

        for df in (-1, 1):
            diagonal = square.shifted(df, forward)
            if diagonal.is_within_bounds(config) and board.piece(diagonal) == opponent_pawn:
                return False

    if config.stalemate_counts_en_passant and _has_en_passant(board, color, last_move):
        return False
    return True
