"""Winning-line detection.

Lines are checked in a fixed priority order and the first complete one
is reported: rows 0→4, columns 0→4, main diagonal, anti-diagonal.
"""

from __future__ import annotations

from collections.abc import Sequence

from meeting_bingo.models.card import GRID_SIZE, Square, WinningLine

Grid = Sequence[Sequence[Square]]


def _complete(line: list[Square]) -> bool:
    return all(sq.is_filled for sq in line)


def _candidate_lines(grid: Grid):
    for r in range(GRID_SIZE):
        yield "row", r, list(grid[r])
    for c in range(GRID_SIZE):
        yield "column", c, [grid[r][c] for r in range(GRID_SIZE)]
    yield "diagonal", 0, [grid[i][i] for i in range(GRID_SIZE)]
    yield "diagonal", 1, [grid[i][GRID_SIZE - 1 - i] for i in range(GRID_SIZE)]


def check_for_bingo(grid: Grid) -> WinningLine | None:
    """Return the highest-priority completed line of *grid*, or None."""
    for line_type, index, line in _candidate_lines(grid):
        if _complete(line):
            return WinningLine(type=line_type, index=index, squares=[sq.id for sq in line])
    return None
