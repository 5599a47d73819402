"""Move validation and time control for the human-vs-bot game loop."""

try:
    from utils import timer
except ImportError:
    from Gomoku_Bot_AI.utils import timer


def check_move(move, board, deadline=None):
    """
    Validate a move against time, bounds, and occupancy.
    Raises ValueError/TimeoutError on invalid moves.
    """
    if timer.expired(deadline):
        raise TimeoutError("Move exceeded allotted time")

    if move is None:
        raise ValueError("No move supplied")
    row, col = move
    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not board.is_empty(row, col):
        raise ValueError("Cell already occupied")

    return True
