"""
Win-line detection for N-in-a-row boards.

Scans every possible line start in a fixed order, so when a position holds
more than one winning line the reported one is always the same.
"""
from collections import namedtuple
from typing import Iterator, Optional, Tuple

from .board import Mark


# Scan order: horizontal, vertical, diagonal (\), anti-diagonal (/)
DIRECTIONS = (
    (0, 1),
    (1, 0),
    (1, 1),
    (-1, 1),
)


class WinResult(namedtuple('WinResult', ['mark', 'line'])):
    """Winning stone and the cell indices of its line, in walk order."""
    __slots__ = ()

    def contains(self, index) -> bool:
        return index in self.line


def line_starts(size: int, win_len: int, direction: Tuple[int, int]) -> Iterator[Tuple[int, int]]:
    """
    Yield (row, col) starts from which ``win_len`` cells along ``direction``
    stay on the board, rows top to bottom and columns left to right.
    """
    dr, dc = direction
    span = win_len - 1
    if size < win_len or win_len <= 0:
        return
    rows = range(span, size) if dr < 0 else range(size - span * dr)
    cols = range(size - span * dc)
    for row in rows:
        for col in cols:
            yield row, col


def _check_line(board, size, win_len, row, col, dr, dc) -> Optional[WinResult]:
    first = board[row * size + col]
    if first == Mark.EMPTY:
        return None

    line = [row * size + col]
    for k in range(1, win_len):
        idx = (row + dr * k) * size + (col + dc * k)
        if board[idx] != first:
            return None
        line.append(idx)
    return WinResult(Mark(first), tuple(line))


def detect(board, size: int, win_len: int) -> Optional[WinResult]:
    """
    Find the first run of ``win_len`` identical stones on ``board``.

    Args:
        board: Board (or any flat row-major sequence of marks)
        size: Side length of the board
        win_len: Number of stones in a row needed to win

    Returns:
        WinResult or None: The winning mark and its line, or None if no
        line qualifies. A board smaller than ``win_len`` never has a winner.
    """
    for dr, dc in DIRECTIONS:
        for row, col in line_starts(size, win_len, (dr, dc)):
            result = _check_line(board, size, win_len, row, col, dr, dc)
            if result is not None:
                return result
    return None
