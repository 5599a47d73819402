"""Line pattern analysis along one axis and threat tiers for hypothetical moves."""

from dataclasses import dataclass

try:
    from Board import DIRECTIONS, EMPTY
    from engine import rules
except ImportError:
    from Gomoku_Bot_AI.Board import DIRECTIONS, EMPTY
    from Gomoku_Bot_AI.engine import rules


THREAT_NONE = 0
THREAT_THREE = 1       # three with one open end
THREAT_OPEN_THREE = 2
THREAT_FOUR = 3        # four with both ends blocked
THREAT_OPEN_FOUR = 4   # four with at least one open end
THREAT_FIVE = 5


@dataclass(frozen=True)
class PatternResult:
    length: int
    open_ends: int
    blocked_ends: int
    both_open: bool


def analyze_direction(board, row, col, d_row, d_col, player):
    """
    Measure the run of `player` through (row, col) along (d_row, d_col).

    The origin always counts toward the run, whether or not it holds a stone,
    so an empty cell can be scored as if `player` stood there. An end is open
    only when the first cell past the run is on the board and empty; edges and
    opposing stones block it.
    """
    cells = board.cells
    length = 1
    open_ends = 0

    r, c = row - d_row, col - d_col
    while board.in_bounds(r, c) and cells[r][c] == player:
        length += 1
        r -= d_row
        c -= d_col
    back_open = board.in_bounds(r, c) and cells[r][c] == EMPTY
    if back_open:
        open_ends += 1

    r, c = row + d_row, col + d_col
    while board.in_bounds(r, c) and cells[r][c] == player:
        length += 1
        r += d_row
        c += d_col
    forward_open = board.in_bounds(r, c) and cells[r][c] == EMPTY
    if forward_open:
        open_ends += 1

    return PatternResult(length, open_ends, 2 - open_ends, back_open and forward_open)


def patterns_at(board, row, col, player):
    """PatternResult for each of the four axes through (row, col)."""
    return [analyze_direction(board, row, col, d_row, d_col, player) for d_row, d_col in DIRECTIONS]


def threat_tier(pattern):
    length = pattern.length
    if length >= 5:
        return THREAT_FIVE
    if length == 4:
        return THREAT_OPEN_FOUR if pattern.open_ends >= 1 else THREAT_FOUR
    if length == 3:
        if pattern.both_open:
            return THREAT_OPEN_THREE
        if pattern.open_ends >= 1:
            return THREAT_THREE
    return THREAT_NONE


def threat_level(board, row, col, player):
    """
    Highest threat tier `player` would create by playing the empty cell (row, col).
    Raises ValueError for an occupied cell; the board is left as it was.
    """
    with rules.simulate(board, row, col, player):
        return max(threat_tier(p) for p in patterns_at(board, row, col, player))
