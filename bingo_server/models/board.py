"""
Board Model

Board dealing and completed-line detection for 5x5 Bingo boards.
Both functions are pure apart from the random source used for dealing.
"""

import random
from typing import List, NamedTuple, Optional

from ..config.game_settings import BOARD_SIZE, MAX_NUMBER, MAX_LETTERS

Board = List[List[int]]
Marks = List[List[bool]]


class LineResult(NamedTuple):
    """Result of scanning a marked grid for completed lines."""
    line_count: int  # completed lines, capped at MAX_LETTERS
    cells_in_line: Marks  # True where a cell belongs to any completed line


def generate_board(rng: Optional[random.Random] = None) -> Board:
    """
    Deal a board: a uniformly random permutation of 1..25 in row-major order.

    Args:
        rng: Random source; the module-level generator when omitted

    Returns:
        Board: BOARD_SIZE rows of BOARD_SIZE numbers
    """
    numbers = list(range(1, MAX_NUMBER + 1))
    # random.shuffle is a Fisher-Yates shuffle
    (rng or random).shuffle(numbers)
    return [numbers[row * BOARD_SIZE:(row + 1) * BOARD_SIZE] for row in range(BOARD_SIZE)]


def empty_marks() -> Marks:
    return [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def _candidate_lines():
    """The 12 lines of a board as lists of (row, col) cells."""
    size = BOARD_SIZE
    lines = [[(r, c) for c in range(size)] for r in range(size)]
    lines += [[(r, c) for r in range(size)] for c in range(size)]
    lines.append([(i, i) for i in range(size)])
    lines.append([(i, size - 1 - i) for i in range(size)])
    return lines


CANDIDATE_LINES = _candidate_lines()


def detect_lines(marked: Marks) -> LineResult:
    """
    Find completed rows, columns and diagonals on a marked grid.

    Args:
        marked: BOARD_SIZE x BOARD_SIZE booleans

    Returns:
        LineResult with the completed-line count clamped to MAX_LETTERS and
        the cells covered by completed lines
    """
    cells_in_line = empty_marks()
    completed = 0
    for line in CANDIDATE_LINES:
        if all(marked[r][c] for r, c in line):
            completed += 1
            for r, c in line:
                cells_in_line[r][c] = True
    return LineResult(min(MAX_LETTERS, completed), cells_in_line)


def mark_number(board: Board, marked: Marks, number: int) -> int:
    """Mark every cell of ``board`` holding ``number``. Returns cells newly marked."""
    newly_marked = 0
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == number and not marked[r][c]:
                marked[r][c] = True
                newly_marked += 1
    return newly_marked
