"""
Custom exceptions.

NOTE: GameError derives from Exception, not ValueError. Raised inside a pydantic validator it propagates unwrapped.
"""


class GameError(Exception):
    """Top-level error for anything going wrong in the game layers."""


class InvalidCommandError(GameError):
    """Player input that is not a <file><rank><file><rank> command inside the board."""


class InvalidBoardError(GameError):
    """Board notation that cannot be turned into a position."""


class IllegalMoveError(GameError):
    """Attempt to apply a move the rules rejected."""


class GameStateError(GameError):
    """Game is not in a state that allows the requested action."""
