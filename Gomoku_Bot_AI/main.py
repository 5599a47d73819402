"""Entry point for a text-mode game against the bot. Load settings, wire players, start Omokgame."""

import logging
import random
from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import log_event
    from Omokgame import Omokgame
    from Player import HumanPlayer
    from BotPlayer import BotPlayer
    from Board import BOT, HUMAN
except ImportError:
    from Gomoku_Bot_AI.utils.cli import parse_args
    from Gomoku_Bot_AI.utils.logger import log_event
    from Gomoku_Bot_AI.Omokgame import Omokgame
    from Gomoku_Bot_AI.Player import HumanPlayer
    from Gomoku_Bot_AI.BotPlayer import BotPlayer
    from Gomoku_Bot_AI.Board import BOT, HUMAN


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "move_timeout_seconds": 60,
    "search_depth": 6,
    "root_candidate_limit": 12,
    "node_candidate_limit": 10,
    "cache_capacity": 10000,
    "strict_cache": False,
    "seed": None,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gomoku_Bot_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML and fill in defaults for any missing key."""
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    settings = dict(DEFAULT_SETTINGS)
    settings.update(loaded)
    return settings


def build_bot(settings, depth=None, seed=None, strict_cache=False):
    seed = seed if seed is not None else settings.get("seed")
    return BotPlayer(
        depth=depth or settings["search_depth"],
        root_candidate_limit=settings["root_candidate_limit"],
        candidate_limit=settings["node_candidate_limit"],
        cache_capacity=settings["cache_capacity"],
        strict_cache=strict_cache or bool(settings["strict_cache"]),
        rng=random.Random(seed),
    )


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    settings = load_settings(args.settings)

    move_timeout = args.timeout or settings["move_timeout_seconds"]
    bot = build_bot(settings, depth=args.depth, seed=args.seed, strict_cache=args.strict_cache)
    human = HumanPlayer()

    game = Omokgame(
        human_player=human,
        bot_player=bot,
        move_timeout=move_timeout,
        logger=log_event,
        show_board=True,
    )
    log_event("You play X and move first; the bot plays O.", game.board)
    result = game.play()
    outcome = {HUMAN: "You win", BOT: "Bot wins", 0: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
