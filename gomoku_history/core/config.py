"""
Configuration for a Gomoku game.
"""
from typing import Any, Dict, Optional

from .board import is_integer
from .errors import MoveError


DEFAULT_BOARD_SIZE = 15
DEFAULT_WIN_LENGTH = 5


class GameConfig:
    """Board dimensions and diagnostics settings for one game."""

    def __init__(self,
                 size: int = DEFAULT_BOARD_SIZE,
                 win_len: int = DEFAULT_WIN_LENGTH,
                 verbose: bool = False):
        self.size = size
        self.win_len = win_len
        self.verbose = verbose

    def validate(self) -> Optional[MoveError]:
        """
        Check the dimensions.

        Returns:
            MoveError.INVALID_DIMENSIONS if either value is not a positive
            integer or the win length exceeds the board size, else None.
        """
        for value in (self.size, self.win_len):
            if not is_integer(value) or value <= 0:
                return MoveError.INVALID_DIMENSIONS
        if self.win_len > self.size:
            return MoveError.INVALID_DIMENSIONS
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'size': self.size,
            'win_len': self.win_len,
            'verbose': self.verbose,
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'GameConfig':
        return cls(**config_dict)

    def __repr__(self):
        return f"GameConfig(size={self.size}, win_len={self.win_len}, verbose={self.verbose})"
