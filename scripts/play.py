#!/usr/bin/env python3
"""
CLI interface for playing Gomoku between two people, with time travel.
"""
import argparse
import os
import sys

# Add the parent directory to Python path so we can import gomoku_history
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gomoku_history.core.config import DEFAULT_BOARD_SIZE, DEFAULT_WIN_LENGTH
from gomoku_history.core.game import new_game
from gomoku_history.view.text import history_lines, render_board, status_text


QUIT_COMMANDS = ('quit', 'exit', 'q')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Gomoku with move history")
    parser.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE,
                        help="Board side length (default 15)")
    parser.add_argument("--win-length", type=int, default=DEFAULT_WIN_LENGTH,
                        help="Stones in a row needed to win (default 5)")
    parser.add_argument("--verbose", action="store_true",
                        help="Print engine diagnostics")
    return parser.parse_args(argv)


def parse_move(move_input, size):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "7 7" or "7,7"
        size (int): Board side length

    Returns:
        int: Row-major cell index, or None if the input is malformed.
            Off-board coordinates map to -1 so the engine reports them.
    """
    if ',' in move_input:
        parts = move_input.split(',')
    else:
        parts = move_input.split()

    if len(parts) != 2:
        return None
    try:
        row = int(parts[0].strip())
        col = int(parts[1].strip())
    except ValueError:
        return None

    if 0 <= row < size and 0 <= col < size:
        return row * size + col
    return -1


def parse_jump(command):
    """Parse 'jump N' or 'start'; return the ply or None."""
    if command == 'start':
        return 0
    parts = command.split()
    if len(parts) == 2 and parts[0] == 'jump':
        try:
            return int(parts[1])
        except ValueError:
            return None
    return None


def handle_command(game, command):
    """
    Apply one line of user input to the game.

    Returns:
        bool: False when the user asked to quit.
    """
    command = command.strip().lower()
    if command in QUIT_COMMANDS:
        return False

    if command == 'history':
        for ply, label in enumerate(history_lines(game)):
            print(f"{ply:3d}. {label}")
        return True

    if command == 'start' or command.startswith('jump'):
        ply = parse_jump(command)
        if ply is None:
            print("Invalid input! Use: jump N")
            return True
        result = game.jump_to(ply)
        if not result.ok:
            print(result.error.message)
        return True

    cell = parse_move(command, game.size)
    if cell is None:
        print("Invalid input! Enter: row col (e.g., '7 7'), jump N, history or quit")
        return True
    result = game.play_move(cell)
    if not result.ok:
        print(result.error.message)
    return True


def main(argv=None):
    """Main game loop."""
    args = parse_args(argv)
    result = new_game(args.size, args.win_length, verbose=args.verbose)
    if not result.ok:
        print(f"ERROR: {result.error.message}")
        return 1
    game = result.value

    print("=" * 60)
    print(f"           GOMOKU ({args.win_length} in a row)")
    print("=" * 60)
    print("Black (X) goes first. Enter moves as: row col")
    print("Commands: jump N (go to move N), start, history, quit")
    print("=" * 60)

    try:
        while True:
            print()
            print(render_board(game))
            print(f"\n{status_text(game)}  (move #{game.current_ply})")
            command = input("> ")
            if not handle_command(game, command):
                break
    except (KeyboardInterrupt, EOFError):
        pass

    print("\nThanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
