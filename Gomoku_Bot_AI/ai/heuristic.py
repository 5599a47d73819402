"""Pattern weights and whole-board evaluation (positive favors the bot)."""

try:
    from Board import BOT, HUMAN
except ImportError:
    from Gomoku_Bot_AI.Board import BOT, HUMAN

from . import patterns as line_patterns


FIVE_IN_ROW = 100000
OPEN_FOUR_SCORE = 50000
FOUR_SCORE = 10000
OPEN_THREE_SCORE = 5000
THREE_SCORE = 1000
OPEN_TWO_SCORE = 500
TWO_SCORE = 100
ONE_SCORE = 10

CENTER_BONUS_RADIUS = 10


def score_pattern(pattern):
    """Map a PatternResult to its weight. Fours need one open end to count as open."""
    length = pattern.length
    if length >= 5:
        return FIVE_IN_ROW
    if length == 4:
        return OPEN_FOUR_SCORE if pattern.open_ends >= 1 else FOUR_SCORE
    if length == 3:
        if pattern.both_open:
            return OPEN_THREE_SCORE
        return THREE_SCORE if pattern.open_ends >= 1 else 0
    if length == 2:
        if pattern.both_open:
            return OPEN_TWO_SCORE
        return TWO_SCORE if pattern.open_ends >= 1 else 0
    if length == 1:
        return ONE_SCORE if pattern.open_ends >= 1 else 0
    return 0


def score_position_for(board, row, col, player):
    """Sum of pattern weights on the four axes through (row, col) for `player`."""
    return sum(score_pattern(p) for p in line_patterns.patterns_at(board, row, col, player))


def center_bonus(board, player):
    center = board.size // 2
    bonus = 0
    for row in range(board.size):
        for col in range(board.size):
            if board.cells[row][col] == player:
                distance = abs(row - center) + abs(col - center)
                bonus += max(0, CENTER_BONUS_RADIUS - distance)
    return bonus


def evaluate_board(board):
    """
    Static evaluation of the whole board from the bot's point of view.

    Every stone contributes its own pattern score, so a run of N stones is
    counted once per member. Center control is added for the bot and
    subtracted for the human.
    """
    bot_total = 0
    human_total = 0
    cells = board.cells
    for row in range(board.size):
        for col in range(board.size):
            v = cells[row][col]
            if v == BOT:
                bot_total += score_position_for(board, row, col, BOT)
            elif v == HUMAN:
                human_total += score_position_for(board, row, col, HUMAN)

    bot_total += center_bonus(board, BOT)
    human_total += center_bonus(board, HUMAN)
    return bot_total - human_total
