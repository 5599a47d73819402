"""Shared board builders for the test suite."""

import pytest

from Gomoku_Bot_AI.Board import BOARD_SIZE, BOT, EMPTY, HUMAN, Board


def make_grid(stones=(), size=BOARD_SIZE):
    """Build a raw 15x15 grid from {(row, col): player} or an iterable of (row, col, player)."""
    grid = [[EMPTY] * size for _ in range(size)]
    items = stones.items() if isinstance(stones, dict) else (((r, c), p) for r, c, p in stones)
    for (r, c), player in items:
        grid[r][c] = player
    return grid


def make_board(stones=()):
    return Board.from_grid(make_grid(stones))


def full_grid():
    """Completely occupied grid with no five-in-a-row for either side."""
    return [
        [HUMAN if ((r // 2) + c) % 2 else BOT for c in range(BOARD_SIZE)]
        for r in range(BOARD_SIZE)
    ]


@pytest.fixture
def empty_board():
    return Board()
