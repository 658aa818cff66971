import pytest

from tetris_board import Board, COLS


class FixedRandom:
    """Deals piece types from a fixed list, repeating the last one when exhausted."""
    def __init__(self, types):
        self.types = list(types)
        self.i = 0

    def next_piece(self):
        t = self.types[min(self.i, len(self.types) - 1)]
        self.i += 1
        return t


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def board():
    return Board()


def fill_row(board, row, tag=1, skip=()):
    for col in range(COLS):
        if col not in skip:
            board.set(row, col, tag)


@pytest.fixture(name="fill_row")
def fill_row_fixture():
    return fill_row
