"""Settings loading and bot wiring for the entry point."""

import pytest

from Gomoku_Bot_AI import main
from Gomoku_Bot_AI.BotPlayer import BotPlayer


def test_bundled_settings_match_engine_defaults():
    settings = main.load_settings("config/settings.yaml")
    assert settings["search_depth"] == 6
    assert settings["root_candidate_limit"] == 12
    assert settings["node_candidate_limit"] == 10
    assert settings["cache_capacity"] == 10000
    assert settings["strict_cache"] is False
    assert settings["move_timeout_seconds"] == 60


def test_partial_settings_filled_with_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("search_depth: 3\nseed: 5\n", encoding="utf-8")
    settings = main.load_settings(path)
    assert settings["search_depth"] == 3
    assert settings["seed"] == 5
    assert settings["cache_capacity"] == 10000


def test_non_mapping_settings_rejected(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        main.load_settings(path)


def test_build_bot_applies_settings_and_overrides():
    settings = dict(main.DEFAULT_SETTINGS, cache_capacity=500, node_candidate_limit=8)
    bot = main.build_bot(settings, depth=3, seed=1, strict_cache=True)
    assert isinstance(bot, BotPlayer)
    searcher = bot.searcher
    assert searcher.depth == 3
    assert searcher.candidate_limit == 8
    assert searcher.root_candidate_limit == 12
    assert searcher.cache.capacity == 500
    assert searcher.strict_cache is True


def test_parse_args_overrides():
    from Gomoku_Bot_AI.utils.cli import parse_args

    args = parse_args(["--depth", "4", "--timeout", "30", "--strict-cache"])
    assert args.depth == 4
    assert args.timeout == 30.0
    assert args.strict_cache is True
    assert args.settings == "config/settings.yaml"
