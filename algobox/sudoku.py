"""Backtracking Sudoku solver for 9x9 boards of '1'-'9' and '.' for blanks."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["EMPTY", "DIGITS", "is_valid_placement", "solve_sudoku"]

EMPTY = "."
DIGITS = "123456789"


def is_valid_placement(board: Sequence[Sequence[str]], row: int, col: int, value: str) -> bool:
    """Tell whether value appears nowhere in the row, column or 3x3 box of a cell."""
    if any(board[r][col] == value for r in range(9)):
        return False
    if any(cell == value for cell in board[row]):
        return False
    top, left = row - row % 3, col - col % 3
    return not any(
        board[r][c] == value for r in range(top, top + 3) for c in range(left, left + 3)
    )


def _check_board(board: Sequence[Sequence[str]]) -> None:
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a Sudoku board must be 9 rows of 9 cells")
    for row in board:
        for cell in row:
            if cell != EMPTY and cell not in DIGITS:
                raise ValueError(f"invalid cell {cell!r}")


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of the board, filling blanks in row-major order.

    Raises ValueError if the blanks cannot be filled.
    """
    _check_board(board)
    grid = [list(row) for row in board]
    blanks = [(r, c) for r in range(9) for c in range(9) if grid[r][c] == EMPTY]

    def fill(position: int) -> bool:
        if position == len(blanks):
            return True
        row, col = blanks[position]
        for digit in DIGITS:
            if is_valid_placement(grid, row, col, digit):
                grid[row][col] = digit
                if fill(position + 1):
                    return True
                grid[row][col] = EMPTY
        return False

    if not fill(0):
        raise ValueError("the board has no solution")
    return grid