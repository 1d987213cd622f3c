"""
Game implementation for Gomoku with move history and time travel.
"""
from collections import namedtuple
from typing import Iterator, Optional

from .board import Board, Mark, is_integer
from .config import DEFAULT_BOARD_SIZE, DEFAULT_WIN_LENGTH, GameConfig
from .errors import GameError, MoveError, Result
from .win_detector import WinResult, detect


HistoryEntry = namedtuple('HistoryEntry', ['ply', 'is_current'])


class Status(namedtuple('Status', ['winner', 'next_to_move', 'win'])):
    """
    Derived game status at the current ply.

    Exactly one of ``winner`` / ``next_to_move`` is set. ``win`` holds the
    full WinResult (mark and line) when there is a winner.
    """
    __slots__ = ()

    @property
    def is_won(self) -> bool:
        return self.winner is not None


class Game:
    """
    Manages a Gomoku game session.

    The whole state is the list of board snapshots and a pointer into it.
    ``history[0]`` is the empty board and ``history[i]`` is the board after
    ``i`` moves along the current line of play. Whose turn it is and whether
    someone has won are computed from the current snapshot on demand.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a new game.

        Args:
            config (GameConfig, optional): Dimensions and verbosity. Copied,
                so later changes to the caller's object do not affect the game.

        Raises:
            GameError: If the configured dimensions are invalid. Use
                ``new_game`` to get a Result instead.
        """
        config = config if config is not None else GameConfig()
        error = config.validate()
        if error is not None:
            raise GameError(error)

        self._config = GameConfig.from_dict(config.to_dict())
        self._size = int(config.size)
        self._win_len = int(config.win_len)
        self._history = [Board.empty(self._size)]
        self._current_ply = 0

    @property
    def config(self) -> GameConfig:
        """Copy of the settings this game was created with."""
        return GameConfig.from_dict(self._config.to_dict())

    @property
    def size(self) -> int:
        return self._size

    @property
    def win_len(self) -> int:
        return self._win_len

    @property
    def current_ply(self) -> int:
        return self._current_ply

    @property
    def history_length(self) -> int:
        return len(self._history)

    def snapshot(self, ply) -> Optional[Board]:
        """Board recorded at ``ply``, or None if no such ply exists."""
        if not self._valid_ply(ply):
            return None
        return self._history[ply]

    def current_board(self) -> Board:
        """
        Get the board at the current ply.

        Returns:
            Board: ``history[current_ply]``
        """
        return self._history[self._current_ply]

    def turn(self) -> Mark:
        """Black moves on even plies, White on odd ones."""
        return Mark.BLACK if self._current_ply % 2 == 0 else Mark.WHITE

    def winner(self) -> Optional[WinResult]:
        """
        Run win detection on the current board.

        Returns:
            WinResult or None: Winning mark and line, or None if nobody has won
        """
        return detect(self.current_board(), self.size, self.win_len)

    def status(self) -> Status:
        win = self.winner()
        if win is not None:
            return Status(winner=win.mark, next_to_move=None, win=win)
        return Status(winner=None, next_to_move=self.turn(), win=None)

    def play_move(self, cell_index) -> Result:
        """
        Place the current player's stone at ``cell_index``.

        Any snapshots after the current ply are discarded before the new
        board is appended, so playing from a rewound position starts a new
        line of play.

        Args:
            cell_index (int): Row-major cell index in [0, size * size)

        Returns:
            Result: The new board on success, otherwise OUT_OF_BOUNDS,
            CELL_OCCUPIED or GAME_ALREADY_WON with the game unchanged.
        """
        board = self.current_board()
        if not board.in_bounds(cell_index):
            return self._reject(MoveError.OUT_OF_BOUNDS, cell_index)
        if board[cell_index] != Mark.EMPTY:
            return self._reject(MoveError.CELL_OCCUPIED, cell_index)
        if self.winner() is not None:
            return self._reject(MoveError.GAME_ALREADY_WON, cell_index)

        mark = self.turn()
        next_board = board.with_move(int(cell_index), mark)

        discarded = len(self._history) - (self._current_ply + 1)
        if discarded and self._config.verbose:
            print(f"Discarding {discarded} later move(s) after ply {self._current_ply}")
        del self._history[self._current_ply + 1:]
        self._history.append(next_board)
        self._current_ply = len(self._history) - 1

        if self._config.verbose:
            row, col = board.coordinates(cell_index)
            print(f"Move {self._current_ply}: {mark.label} plays ({row}, {col})")
        return Result.success(next_board)

    def jump_to(self, ply) -> Result:
        """
        Move the current position to a recorded ply without changing history.

        Returns:
            Result: Success with no value, or PLY_OUT_OF_RANGE.
        """
        if not self._valid_ply(ply):
            return self._reject(MoveError.PLY_OUT_OF_RANGE, ply)
        self._current_ply = int(ply)
        if self._config.verbose:
            print(f"Jumped to ply {self._current_ply}")
        return Result.success()

    def history_view(self) -> Iterator[HistoryEntry]:
        """
        Yield one HistoryEntry per snapshot in ply order.

        Each call returns a fresh generator over the history as it is now.
        """
        for ply in range(len(self._history)):
            yield HistoryEntry(ply, ply == self._current_ply)

    def _valid_ply(self, ply) -> bool:
        return is_integer(ply) and 0 <= ply < len(self._history)

    def _reject(self, error: MoveError, target) -> Result:
        if self._config.verbose:
            print(f"Rejected {target!r}: {error.message}")
        return Result.failure(error)


def new_game(size: int = DEFAULT_BOARD_SIZE,
             win_len: int = DEFAULT_WIN_LENGTH,
             verbose: bool = False) -> Result:
    """
    Start a game on an empty ``size`` x ``size`` board.

    Returns:
        Result: The Game on success, or INVALID_DIMENSIONS if either value
        is not positive or ``win_len > size``.
    """
    config = GameConfig(size=size, win_len=win_len, verbose=verbose)
    error = config.validate()
    if error is not None:
        return Result.failure(error)
    return Result.success(Game(config))
