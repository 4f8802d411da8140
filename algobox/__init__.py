"""Classic algorithms: sorting, numeric routines, scheduling, graphs, Sudoku and dynamic programming."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "dp_knapsack",
    "dp_strings",
    "graphs",
    "numeric",
    "scheduling",
    "sorting",
    "sudoku",
]