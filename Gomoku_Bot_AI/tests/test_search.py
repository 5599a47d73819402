"""Search-level tests: tactical guardrails, restoration, cache policy, fallbacks."""

import random

import pytest

from Gomoku_Bot_AI.Board import BOT, HUMAN, Board, InvalidBoardError
from Gomoku_Bot_AI.ai import search_minimax, transposition
from Gomoku_Bot_AI.ai.search_minimax import INF, INSTANT_WIN, MinimaxSearcher
from conftest import full_grid, make_board, make_grid


def test_empty_board_plays_center():
    assert MinimaxSearcher().find_best_move(make_grid()) == (7, 7)


def test_takes_open_four_win():
    grid = make_grid({(7, c): BOT for c in range(5, 9)})
    stats = []
    mv = MinimaxSearcher(stats=stats).find_best_move(grid)
    assert mv in {(7, 4), (7, 9)}
    assert stats[-1]["reason"] == "win"


def test_win_beats_block():
    stones = {(2, c): BOT for c in range(4)}
    stones.update({(10, c): HUMAN for c in range(5, 9)})
    assert MinimaxSearcher().find_best_move(make_grid(stones)) == (2, 4)


def test_blocks_human_open_four():
    stones = {(7, c): HUMAN for c in range(5, 9)}
    stones.update({(0, 0): BOT, (14, 14): BOT, (0, 14): BOT})
    stats = []
    mv = MinimaxSearcher(stats=stats).find_best_move(make_grid(stones))
    assert mv in {(7, 4), (7, 9)}
    assert stats[-1]["reason"] == "block"


def test_blocks_gapped_human_five():
    stones = {(3, 3): HUMAN, (4, 4): HUMAN, (6, 6): HUMAN, (7, 7): HUMAN, (0, 14): BOT}
    assert MinimaxSearcher().find_best_move(make_grid(stones)) == (5, 5)


def test_open_three_is_met_by_critical_threat_defense():
    # Extending an open three yields a four with an open end (tier 4),
    # so the first such cell in row-major order is taken without search.
    grid = make_grid({(7, 5): HUMAN, (7, 6): HUMAN, (7, 7): HUMAN, (0, 0): BOT})
    stats = []
    mv = MinimaxSearcher(depth=2, stats=stats).find_best_move(grid)
    assert mv == (7, 4)
    assert stats[-1]["reason"] == "threat"


def test_closed_four_threat_goes_to_search(monkeypatch):
    # Human can only make a four with both ends blocked (tier 3): not intercepted.
    grid = make_grid({(7, 5): HUMAN, (7, 6): HUMAN, (7, 7): HUMAN, (7, 4): BOT, (7, 9): BOT})
    calls = []

    def fake_search(self, board, candidates):
        calls.append(len(candidates))
        return candidates[0].move

    monkeypatch.setattr(MinimaxSearcher, "_search_root", fake_search)
    MinimaxSearcher(depth=2).find_best_move(grid)
    assert calls, "Expected iterative deepening to run"


def test_quiet_position_searches_and_returns_empty_cell():
    grid = make_grid({(7, 7): HUMAN, (7, 8): HUMAN, (8, 8): BOT})
    stats = []
    searcher = MinimaxSearcher(depth=2, stats=stats)
    mv = searcher.find_best_move(grid)

    assert grid[mv[0]][mv[1]] == 0
    assert stats[-1]["reason"] == "search"
    assert stats[-1]["depth"] == 2
    assert stats[-1]["nodes"] > 0
    assert len(searcher.cache) > 0


def test_does_not_mutate_caller_grid_and_restores_scratch_board():
    grid = make_grid({(7, 7): HUMAN, (6, 8): BOT, (8, 6): HUMAN})
    before = [row[:] for row in grid]

    searcher = MinimaxSearcher(depth=3)
    searcher.find_best_move(grid)

    assert grid == before
    assert searcher.board.cells == before
    assert searcher.board.move_count == 3


def test_does_not_mutate_board_instance():
    b = make_board({(7, 7): HUMAN, (6, 8): BOT})
    before = b.to_grid()
    MinimaxSearcher(depth=2).find_best_move(b)
    assert b.cells == before
    assert b.move_count == 2


def test_minimax_restores_board_and_detects_wins():
    searcher = MinimaxSearcher(depth=2)

    bot_four = make_board({(7, c): BOT for c in range(5, 9)})
    before = bot_four.to_grid()
    assert searcher._minimax(bot_four, 1, -INF, INF, True) == INSTANT_WIN
    assert bot_four.cells == before

    human_four = make_board({(7, c): HUMAN for c in range(5, 9)})
    before = human_four.to_grid()
    assert searcher._minimax(human_four, 1, -INF, INF, False) == -INSTANT_WIN
    assert human_four.cells == before


def test_minimax_depth_zero_is_static_evaluation():
    b = make_board({(7, 7): BOT, (0, 0): HUMAN})
    assert MinimaxSearcher()._minimax(b, 0, -INF, INF, True) == 20


def test_fresh_searchers_are_deterministic():
    grid = make_grid({(7, 7): HUMAN, (7, 8): BOT, (8, 7): HUMAN})
    first = MinimaxSearcher(depth=3).find_best_move(grid)
    second = MinimaxSearcher(depth=3).find_best_move(grid)
    assert first == second


def test_fallback_center_when_no_candidates(monkeypatch):
    monkeypatch.setattr(search_minimax.move_selector, "generate_candidates", lambda *args, **kwargs: [])
    grid = make_grid({(0, 0): HUMAN})
    stats = []
    assert MinimaxSearcher(stats=stats).find_best_move(grid) == (7, 7)
    assert stats[-1]["reason"] == "fallback"


def test_fallback_random_cell_uses_injected_rng(monkeypatch):
    monkeypatch.setattr(search_minimax.move_selector, "generate_candidates", lambda *args, **kwargs: [])
    grid = make_grid({(7, 7): HUMAN})

    a = MinimaxSearcher(rng=random.Random(11)).find_best_move(grid)
    b = MinimaxSearcher(rng=random.Random(11)).find_best_move(grid)
    assert a == b
    assert a != (7, 7)
    assert grid[a[0]][a[1]] == 0


def test_full_board_reports_no_move():
    assert MinimaxSearcher().find_best_move(full_grid()) is None


def test_invalid_board_raises():
    with pytest.raises(InvalidBoardError):
        MinimaxSearcher().find_best_move([[0] * 15 for _ in range(3)])
    grid = make_grid()
    grid[0][0] = 7
    with pytest.raises(InvalidBoardError):
        MinimaxSearcher().find_best_move(grid)


def test_cache_cleared_when_over_capacity_at_next_call():
    searcher = MinimaxSearcher()
    for i in range(10001):
        searcher.cache.put(i.to_bytes(2, "big"), i)

    grid = make_grid({(7, c): BOT for c in range(5, 9)})
    searcher.find_best_move(grid)
    assert len(searcher.cache) == 0


def test_cache_kept_at_capacity():
    searcher = MinimaxSearcher()
    for i in range(10000):
        searcher.cache.put(i.to_bytes(2, "big"), i)

    searcher.find_best_move(make_grid({(7, c): BOT for c in range(5, 9)}))
    assert len(searcher.cache) == 10000


def test_cache_resets_across_many_searches():
    stats = []
    searcher = MinimaxSearcher(depth=2, cache_capacity=10, stats=stats)
    trims = []
    original_trim = searcher.cache.trim_if_over

    def spy_trim():
        cleared = original_trim()
        trims.append((cleared, len(searcher.cache)))
        return cleared

    searcher.cache.trim_if_over = spy_trim
    boards = [
        {(7, 7): HUMAN, (7, 8): BOT},
        {(3, 3): HUMAN, (4, 4): BOT, (3, 4): HUMAN},
        {(10, 10): HUMAN, (10, 11): BOT, (11, 10): HUMAN},
    ]
    for stones in boards:
        searcher.find_best_move(make_grid(stones))

    # Each quiet search stores one entry per root candidate, more than capacity.
    assert all(entry["cache_size"] > 10 for entry in stats)
    assert trims[0] == (False, 0)
    assert all(trim == (True, 0) for trim in trims[1:])


def test_board_only_cache_keys_by_default():
    searcher = MinimaxSearcher(depth=2)
    searcher.find_best_move(make_grid({(7, 7): HUMAN, (7, 8): BOT}))
    assert searcher.cache, "Expected cache to be populated"
    for key in searcher.cache.keys():
        assert isinstance(key, bytes) and len(key) == 225


def test_strict_cache_keys_include_depth_and_side():
    searcher = MinimaxSearcher(depth=2, strict_cache=True)
    searcher.find_best_move(make_grid({(7, 7): HUMAN, (7, 8): BOT}))
    assert searcher.cache, "Expected cache to be populated"
    for key in searcher.cache.keys():
        assert isinstance(key, tuple) and len(key) == 3
        assert len(key[0]) == 225
        assert key[1] >= 1
        assert key[2] in (True, False)


def test_shared_cache_through_module_function():
    cache = transposition.PositionCache()
    grid = make_grid({(7, 7): HUMAN, (7, 8): BOT})
    mv = search_minimax.find_best_move(grid, depth=2, cache=cache)
    assert grid[mv[0]][mv[1]] == 0
    assert len(cache) > 0


def test_depth_below_two_rejected():
    with pytest.raises(ValueError):
        MinimaxSearcher(depth=1)


def test_float_cells_rejected_before_search():
    grid = make_grid({(7, 6): HUMAN})
    grid[7][7] = 1.0
    with pytest.raises(InvalidBoardError):
        MinimaxSearcher(depth=2).find_best_move(grid)
