"""Bot player: one long-lived MinimaxSearcher answering every automated turn."""

try:
    from Board import BOT
    from Player import Player
    from ai import search_minimax
except ImportError:
    from Gomoku_Bot_AI.Board import BOT
    from Gomoku_Bot_AI.Player import Player
    from Gomoku_Bot_AI.ai import search_minimax


class BotPlayer(Player):
    def __init__(self, searcher=None, **search_args):
        super().__init__(BOT)
        # The searcher (and its position cache) lives as long as the player.
        self.searcher = searcher or search_minimax.MinimaxSearcher(**search_args)

    def next_move(self, board, deadline=None):
        move = self.searcher.find_best_move(board.cells)
        if move is None:
            raise ValueError("No empty cell left for the bot")
        return move
