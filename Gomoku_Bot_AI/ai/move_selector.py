"""Candidate move generation (5x5 neighbourhood of every stone, heuristic ordering)."""

from dataclasses import dataclass

try:
    from Board import BOT, EMPTY, HUMAN
except ImportError:
    from Gomoku_Bot_AI.Board import BOT, EMPTY, HUMAN

from . import heuristic


CANDIDATE_RADIUS = 2
CENTER_MOVE_SCORE = 100


@dataclass(frozen=True)
class CandidateMove:
    row: int
    col: int
    score: int

    @property
    def move(self):
        return (self.row, self.col)


def score_move_at(board, row, col):
    """
    Ordering score for the empty cell (row, col): the bot's own pattern value,
    plus half the human's value once the human would reach an open three there.
    """
    bot_points = heuristic.score_position_for(board, row, col, BOT)
    human_points = heuristic.score_position_for(board, row, col, HUMAN)

    defense_bonus = 0
    if human_points >= heuristic.OPEN_THREE_SCORE:
        defense_bonus = human_points // 2
    return bot_points + defense_bonus


def generate_candidates(board, radius=CANDIDATE_RADIUS):
    """
    Generate ranked candidate moves near existing stones.
    - If board empty: return center only.
    - Neighbourhood: Chebyshev radius around every stone, in bounds and empty.
    - Sorted by score, highest first; equal scores keep discovery order.
    """
    size = board.size
    cells = board.cells
    scores: dict[tuple[int, int], int] = {}
    has_stones = False

    for row in range(size):
        for col in range(size):
            if cells[row][col] == EMPTY:
                continue
            has_stones = True
            for d_row in range(-radius, radius + 1):
                for d_col in range(-radius, radius + 1):
                    nr, nc = row + d_row, col + d_col
                    if nr < 0 or nr >= size or nc < 0 or nc >= size:
                        continue
                    if cells[nr][nc] != EMPTY or (nr, nc) in scores:
                        continue
                    scores[(nr, nc)] = score_move_at(board, nr, nc)

    if not scores:
        if has_stones:
            return []
        center = size // 2
        return [CandidateMove(center, center, CENTER_MOVE_SCORE)]

    ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
    return [CandidateMove(r, c, score) for (r, c), score in ranked]
