"""Freestyle five-in-a-row rules: win detection and hypothetical placement."""

from contextlib import contextmanager

try:
    from Board import EMPTY, Board
except ImportError:
    from Gomoku_Bot_AI.Board import EMPTY, Board


@contextmanager
def simulate(board: Board, row: int, col: int, player: int):
    """Place a stone for the duration of the block; the cell is emptied on every exit path."""
    if board.cells[row][col] != EMPTY:
        raise ValueError(f"cell ({row}, {col}) is already occupied")
    board._push_stone(row, col, player)
    try:
        yield
    finally:
        board._pop_stone(row, col)


def is_win_after_move(board: Board, row: int, col: int, player: int) -> bool:
    """Assumes stone is already placed. Overlines count as wins."""
    return board.cells[row][col] == player and board.has_five_or_more(row, col)


def find_winning_cell(board: Board, player: int):
    """First empty cell (row-major) that completes five or more for player, else None."""
    for row, col in board.empty_cells():
        with simulate(board, row, col, player):
            if is_win_after_move(board, row, col, player):
                return (row, col)
    return None
