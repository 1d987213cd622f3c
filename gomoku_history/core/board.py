"""
Board implementation for Gomoku game.
"""
import numbers
from enum import IntEnum

import numpy as np


def is_integer(value):
    """
    Check for an integer index or dimension.

    Args:
        value: Any object

    Returns:
        bool: True for Python and numpy integers, False for bools and
            everything else
    """
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Mark(IntEnum):
    """
    Cell contents.

    - 0: empty cell
    - 1: black stone
    - -1: white stone
    """
    EMPTY = 0
    BLACK = 1
    WHITE = -1

    @property
    def opponent(self):
        """The other player's stone; EMPTY has no opponent."""
        if self is Mark.EMPTY:
            return Mark.EMPTY
        return Mark(-self.value)

    @property
    def label(self):
        """
        Display name of the mark.

        Returns:
            str: 'Black', 'White' or 'Empty'
        """
        return {Mark.BLACK: 'Black', Mark.WHITE: 'White'}.get(self, 'Empty')


class Board:
    """
    Immutable size x size Gomoku board.

    Cells are stored flat in row-major order (index = row * size + col) in a
    read-only int8 array. Every move produces a new Board, so a Board handed
    out by the engine can be kept and compared safely.
    """

    __slots__ = ('_size', '_cells')

    def __init__(self, size=15, cells=None):
        """
        Create a board.

        Args:
            size (int): Side length of the square board
            cells (array-like, optional): size*size marks in row-major order.
                Copied, so later changes to the argument do not leak in.
                Defaults to an empty board.
        """
        if not is_integer(size) or size <= 0:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")
        size = int(size)
        if cells is None:
            cells = np.zeros(size * size, dtype=np.int8)
        else:
            cells = np.array(cells, dtype=np.int8).reshape(-1)
            if cells.shape[0] != size * size:
                raise ValueError(f"Expected {size * size} cells, got {cells.shape[0]}")
            if not np.all(np.isin(cells, (0, 1, -1))):
                raise ValueError("Cells must be 0 (empty), 1 (black) or -1 (white)")
        cells.flags.writeable = False
        object.__setattr__(self, '_size', size)
        object.__setattr__(self, '_cells', cells)

    def __setattr__(self, name, value):
        raise AttributeError(f"Board is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Board is immutable; cannot delete {name!r}")

    @classmethod
    def empty(cls, size=15):
        """
        Create a board with no stones.

        Args:
            size (int): Side length of the square board

        Returns:
            Board: All-empty board
        """
        return cls(size)

    @property
    def size(self):
        """Side length of the board."""
        return self._size

    @property
    def state(self):
        """Read-only flat view of the cells."""
        return self._cells

    def as_grid(self):
        """Read-only (size, size) view of the cells."""
        return self._cells.reshape(self._size, self._size)

    def index(self, row, col):
        """
        Convert coordinates to a cell index.

        Args:
            row (int): Row position (0 to size-1)
            col (int): Column position (0 to size-1)

        Returns:
            int: Row-major index row * size + col

        Raises:
            IndexError: If the coordinates are off the board
        """
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise IndexError(f"({row}, {col}) is outside a {self._size}x{self._size} board")
        return row * self._size + col

    def coordinates(self, index):
        """
        Convert a cell index to coordinates.

        Args:
            index (int): Row-major cell index

        Returns:
            tuple: (row, col)

        Raises:
            IndexError: If the index is off the board
        """
        if not 0 <= index < len(self):
            raise IndexError(f"Cell {index} is outside a {self._size}x{self._size} board")
        return divmod(int(index), self._size)

    def in_bounds(self, index):
        """
        Check whether ``index`` names a cell on this board.

        Args:
            index: Candidate cell index

        Returns:
            bool: True only for integers in [0, size * size)
        """
        return is_integer(index) and 0 <= index < len(self)

    def with_move(self, index, mark):
        """
        Return a new board with ``mark`` placed at ``index``.

        Args:
            index (int): Row-major cell index
            mark (Mark): BLACK or WHITE

        Returns:
            Board: Copy of this board with the stone placed

        Raises:
            ValueError: If mark is not a stone or the cell is out of range
                or occupied. The engine checks all of these before calling.
        """
        if mark not in (Mark.BLACK, Mark.WHITE):
            raise ValueError(f"Can only place black or white stones, got {mark!r}")
        if not self.in_bounds(index):
            raise ValueError(f"Cell {index} is outside the board")
        if self._cells[index] != Mark.EMPTY:
            raise ValueError(f"Cell {index} is already occupied")
        cells = self._cells.copy()
        cells[index] = mark
        return Board(self._size, cells)

    def stone_count(self):
        """
        Count the stones on the board.

        Returns:
            int: Number of non-empty cells
        """
        return int(np.count_nonzero(self._cells))

    def empty_cells(self):
        """Indices of empty cells in ascending order."""
        return [int(i) for i in np.flatnonzero(self._cells == Mark.EMPTY)]

    def is_full(self):
        return not np.any(self._cells == Mark.EMPTY)

    def __getitem__(self, index):
        if not self.in_bounds(index):
            raise IndexError(f"Cell {index} is outside the board")
        return Mark(int(self._cells[index]))

    def __len__(self):
        return self._size * self._size

    def __iter__(self):
        for value in self._cells:
            yield Mark(int(value))

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._cells, other._cells)

    def __hash__(self):
        return hash((self._size, self._cells.tobytes()))

    def __repr__(self):
        return f"Board(size={self._size}, stones={self.stone_count()})"
