"""Gomoku_Bot_AI package exports."""

from .Board import Board, InvalidBoardError, BOARD_SIZE, EMPTY, HUMAN, BOT
from .Omokgame import Omokgame
from .Player import Player, HumanPlayer
from .BotPlayer import BotPlayer
from .ai.search_minimax import MinimaxSearcher, find_best_move

# Subpackages for rules, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "InvalidBoardError",
    "BOARD_SIZE",
    "EMPTY",
    "HUMAN",
    "BOT",
    "Omokgame",
    "Player",
    "HumanPlayer",
    "BotPlayer",
    "MinimaxSearcher",
    "find_best_move",
    "ai",
    "engine",
    "utils",
]
