"""Minimax with alpha-beta pruning, tactical guardrails, and iterative deepening."""

import logging
import random
import time

try:
    from Board import BOT, HUMAN, Board
    from engine import rules
except ImportError:
    from Gomoku_Bot_AI.Board import BOT, HUMAN, Board
    from Gomoku_Bot_AI.engine import rules

from . import heuristic
from . import move_selector
from . import patterns
from . import transposition


LOGGER = logging.getLogger(__name__)

INF = 10 ** 9
INSTANT_WIN = 1000000
SEARCH_DEPTH = 6
MIN_SEARCH_DEPTH = 2
ROOT_CANDIDATE_LIMIT = 12
NODE_CANDIDATE_LIMIT = 10


class MinimaxSearcher:
    """
    Move-selection engine for the bot side.

    One instance owns one position cache for its whole lifetime. Each call to
    find_best_move works on a private copy of the caller's grid, so the caller's
    data is never written. Instances are not safe to share between threads.
    """

    def __init__(
        self,
        depth=SEARCH_DEPTH,
        root_candidate_limit=ROOT_CANDIDATE_LIMIT,
        candidate_limit=NODE_CANDIDATE_LIMIT,
        cache=None,
        cache_capacity=transposition.DEFAULT_CAPACITY,
        strict_cache=False,
        rng=None,
        stats=None,
    ):
        if depth < MIN_SEARCH_DEPTH:
            raise ValueError(f"depth must be at least {MIN_SEARCH_DEPTH}")
        self.depth = depth
        self.root_candidate_limit = root_candidate_limit
        self.candidate_limit = candidate_limit
        self.cache = transposition.PositionCache(cache_capacity) if cache is None else cache
        self.strict_cache = strict_cache
        self.rng = random.Random() if rng is None else rng
        self.stats_list = stats

        # Internal state
        self.board = None
        self.node_counter = 0
        self.start_time = None
        self.depth_reached = 0

    def find_best_move(self, grid):
        """
        Return (row, col) for the bot, or None when the board has no empty cell.

        `grid` is a 15x15 sequence of 0 (empty), 1 (human), 2 (bot), or a Board.
        Raises InvalidBoardError for anything else.
        """
        board = grid.clone() if isinstance(grid, Board) else Board.from_grid(grid)
        self.board = board
        self.node_counter = 0
        self.depth_reached = 0
        self.start_time = time.time()

        self.cache.trim_if_over()

        move, reason = self._choose(board)
        LOGGER.debug("Bot move %s (%s)", move, reason)

        if self.stats_list is not None:
            self._record_stats(reason)
        return move

    def _choose(self, board):
        # Tactical guardrails: immediate win, immediate block, critical threat.
        win_move = rules.find_winning_cell(board, BOT)
        if win_move is not None:
            return win_move, "win"
        block_move = rules.find_winning_cell(board, HUMAN)
        if block_move is not None:
            return block_move, "block"
        threat_move = self._find_critical_threat(board)
        if threat_move is not None:
            return threat_move, "threat"

        candidates = move_selector.generate_candidates(board)
        if not candidates:
            return self._fallback_move(board), "fallback"
        if len(candidates) == 1:
            return candidates[0].move, "only"
        return self._search_root(board, candidates), "search"

    def _find_critical_threat(self, board):
        """First empty cell (row-major) where the human would reach an open four or better."""
        for row, col in board.empty_cells():
            if patterns.threat_level(board, row, col, HUMAN) >= patterns.THREAT_OPEN_FOUR:
                return (row, col)
        return None

    def _search_root(self, board, candidates):
        """Iterative deepening over the top root candidates; the deepest completed pass wins."""
        root_moves = candidates[: self.root_candidate_limit]
        best_so_far = None

        for current_depth in range(MIN_SEARCH_DEPTH, self.depth + 1):
            best_value = -INF
            current_best = None
            found_win = False

            for cand in root_moves:
                with rules.simulate(board, cand.row, cand.col, BOT):
                    value = self._minimax(board, current_depth - 1, -INF, INF, False)

                if value > best_value:
                    best_value = value
                    current_best = cand
                if value >= INSTANT_WIN // 2:
                    found_win = True
                    break

            if current_best is not None:
                best_so_far = current_best
                self.depth_reached = current_depth
            LOGGER.debug(
                "depth %d: best %s value %d (nodes=%d, cache=%d)",
                current_depth,
                current_best.move if current_best else None,
                best_value,
                self.node_counter,
                len(self.cache),
            )
            if found_win:
                break

        if best_so_far is None:
            best_so_far = candidates[0]
        return best_so_far.move

    def _cache_key(self, board, depth, maximizing):
        key = transposition.pack_board(board)
        if self.strict_cache:
            return (key, depth, maximizing)
        return key

    def _minimax(self, board, depth, alpha, beta, maximizing):
        self.node_counter += 1

        if depth == 0:
            return heuristic.evaluate_board(board)

        # Same board, same value: depth and side to move are not part of the key
        # unless strict_cache is on.
        key = self._cache_key(board, depth, maximizing)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        candidates = move_selector.generate_candidates(board)
        if not candidates:
            score = heuristic.evaluate_board(board)
            self.cache.put(key, score)
            return score

        player = BOT if maximizing else HUMAN
        win_score = INSTANT_WIN if maximizing else -INSTANT_WIN
        best_value = -INF if maximizing else INF

        for cand in candidates[: self.candidate_limit]:
            row, col = cand.row, cand.col
            board._push_stone(row, col, player)
            try:
                if rules.is_win_after_move(board, row, col, player):
                    self.cache.put(key, win_score)
                    return win_score
                value = self._minimax(board, depth - 1, alpha, beta, not maximizing)
            finally:
                board._pop_stone(row, col)

            if maximizing:
                best_value = max(best_value, value)
                alpha = max(alpha, value)
            else:
                best_value = min(best_value, value)
                beta = min(beta, value)

            if beta <= alpha:
                break

        self.cache.put(key, best_value)
        return best_value

    def _fallback_move(self, board):
        center = board.size // 2
        if board.is_empty(center, center):
            return (center, center)
        empties = board.empty_cells()
        if not empties:
            LOGGER.info("Board is full; no move available")
            return None
        return self.rng.choice(empties)

    def _record_stats(self, reason):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "reason": reason,
            "depth": self.depth_reached,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
            "cache_size": len(self.cache),
        })


def find_best_move(grid, depth=SEARCH_DEPTH, cache=None, rng=None, stats=None, strict_cache=False):
    """
    Public function to run one search with a throwaway MinimaxSearcher.
    Pass `cache` to share a PositionCache between calls.
    """
    searcher = MinimaxSearcher(
        depth=depth,
        cache=cache,
        strict_cache=strict_cache,
        rng=rng,
        stats=stats,
    )
    return searcher.find_best_move(grid)
