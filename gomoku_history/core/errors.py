"""
Error kinds and result values for the Gomoku engine.

Engine operations never raise on bad input. They return a Result whose
``error`` field names what went wrong, and leave the engine untouched.
"""
from collections import namedtuple
from enum import Enum


class MoveError(Enum):
    """Recoverable failures reported by the engine."""

    OUT_OF_BOUNDS = 'Cell index is outside the board'
    CELL_OCCUPIED = 'Cell is already occupied'
    GAME_ALREADY_WON = 'Game is already won at this position'
    PLY_OUT_OF_RANGE = 'Ply is outside the recorded history'
    INVALID_DIMENSIONS = 'Board size and win length must be positive and win length <= size'

    @property
    def message(self):
        return self.value


class GameError(ValueError):
    """Raised when a caller asks for an exception instead of a Result."""

    def __init__(self, error: MoveError):
        super().__init__(error.message)
        self.error = error


class Result(namedtuple('Result', ['value', 'error'])):
    """
    Outcome of an engine operation.

    Exactly one of ``value`` / ``error`` is meaningful: ``error`` is None on
    success. Operations with nothing to return succeed with ``value=None``.
    """
    __slots__ = ()

    @classmethod
    def success(cls, value=None):
        return cls(value, None)

    @classmethod
    def failure(cls, error: MoveError):
        return cls(None, error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self):
        """Return the value, raising GameError if the operation failed."""
        if self.error is not None:
            raise GameError(self.error)
        return self.value
