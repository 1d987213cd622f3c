"""
Text rendering of a game for terminal front ends.

Everything here is derived from the game's public query surface; nothing
is stored.
"""
from ..core.board import Mark


STONE_SYMBOLS = {Mark.EMPTY: '.', Mark.BLACK: 'X', Mark.WHITE: 'O'}


def status_text(game):
    """'Winner: Black' or 'Next player: White'."""
    status = game.status()
    if status.is_won:
        return f"Winner: {status.winner.label}"
    return f"Next player: {status.next_to_move.label}"


def history_label(entry):
    """Move-list label for one HistoryEntry."""
    if entry.is_current:
        if entry.ply == 0:
            return "You are at game start"
        return f"You are at move #{entry.ply}"
    if entry.ply == 0:
        return "Go to game start"
    return f"Go to move #{entry.ply}"


def history_lines(game):
    return [history_label(entry) for entry in game.history_view()]


def winning_cells(game):
    """Indices of the winning line at the current ply, empty if none."""
    win = game.status().win
    if win is None:
        return frozenset()
    return frozenset(win.line)


def render_board(game):
    """
    Render the current board as ASCII with row and column headers.

    Stones on the winning line are wrapped in brackets, e.g. ``[X]``.
    """
    board = game.current_board()
    size = board.size
    highlight = winning_cells(game)

    header = "    " + "".join(f"{col:3d}" for col in range(size))
    rule = "    " + "---" * size
    lines = [header, rule]
    for row in range(size):
        cells = []
        for col in range(size):
            index = row * size + col
            symbol = STONE_SYMBOLS[board[index]]
            cells.append(f"[{symbol}]" if index in highlight else f" {symbol} ")
        lines.append(f"{row:3d}|" + "".join(cells) + f"|{row:<3d}")
    lines.append(rule)
    lines.append(header)
    return "\n".join(lines)
