"""CLI options for the text-mode game: settings path, time limit, search tuning."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku vs. bot (free-style five in a row, 15x15)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--timeout", type=float, help="Seconds per human move (default from settings)")
    parser.add_argument("--depth", type=int, help="Maximum iterative-deepening depth for the bot")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the bot's random fallback move")
    parser.add_argument(
        "--strict-cache",
        action="store_true",
        help="Key the position cache by board, depth and side to move",
    )
    parser.add_argument("--verbose", action="store_true", help="Log search details")
    return parser.parse_args(argv)
