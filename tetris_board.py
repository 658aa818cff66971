
"""Board: fixed 20x10 grid of cell tags, bounds-checked access, line clears"""
from typing import Iterator, List, Sequence

COLS, ROWS = 10, 20

EMPTY = 0
OUT_OF_BOUNDS = -1


class Board:
    def __init__(self):
        self.cells: List[List[int]] = []
        self.reset()

    def reset(self):
        self.cells = [[EMPTY] * COLS for _ in range(ROWS)]

    def get(self, row: int, col: int) -> int:
        if row < 0 or row >= ROWS or col < 0 or col >= COLS:
            return OUT_OF_BOUNDS
        return self.cells[row][col]

    def set(self, row: int, col: int, value: int):
        if 0 <= row < ROWS and 0 <= col < COLS:
            self.cells[row][col] = value

    def rows(self) -> Iterator[Sequence[int]]:
        for row in self.cells:
            yield tuple(row)

    def is_empty(self) -> bool:
        return not any(v for row in self.cells for v in row)

    def clear_full_lines(self) -> int:
        """Remove every full row at once and return how many were removed.

        Rows are collected first and dropped in a single rebuild, so any mix of
        non-contiguous full rows keeps the survivors in their original order.
        """
        full = [y for y in range(ROWS) if all(self.cells[y][x] != EMPTY for x in range(COLS))]
        if not full:
            return 0
        kept = [row for y, row in enumerate(self.cells) if y not in full]
        self.cells = [[EMPTY] * COLS for _ in full] + kept
        return len(full)
