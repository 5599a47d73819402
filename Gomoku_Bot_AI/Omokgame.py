"""Game loop and turn management for human-vs-bot five in a row."""

try:
    from Board import BOT, HUMAN, Board
    from engine import referee, rules
    from utils import timer
except ImportError:
    from Gomoku_Bot_AI.Board import BOT, HUMAN, Board
    from Gomoku_Bot_AI.engine import referee, rules
    from Gomoku_Bot_AI.utils import timer


NAMES = {HUMAN: "Human", BOT: "Bot"}


class Omokgame:
    def __init__(self, human_player, bot_player, move_timeout=None, logger=print, show_board=False):
        self.board = Board()
        self.move_timeout = move_timeout
        self.players = {HUMAN: human_player, BOT: bot_player}
        self.logger = logger
        self.show_board = show_board
        self.move_index = 0

    def play(self):
        """Run a single game. Returns 1 (human win), 2 (bot win), or 0 (draw)."""
        color = HUMAN  # human starts
        game_result = None
        while game_result is None:
            player = self.players[color]
            # Only the human is on the clock; the bot search has no time limit.
            deadline = timer.deadline_after(self.move_timeout) if color == HUMAN else None

            try:
                move = player.next_move(self.board, deadline=deadline)
                referee.check_move(move, self.board, deadline)
                self.board.place(*move, color)
            except (TimeoutError, ValueError) as exc:
                self.logger(f"Disqualification: {NAMES[color]} - {exc}")
                game_result = self._opponent(color)
                break

            self.move_index += 1
            if self.show_board:
                self.logger(f"Move {self.move_index}: {NAMES[color]} {move}", self.board)
            else:
                self.logger(f"Move {self.move_index}: {NAMES[color]} {move}")

            if rules.is_win_after_move(self.board, *move, color):
                self.logger(f"Winner: {NAMES[color]}")
                game_result = color
            elif self.board.is_full():
                self.logger("Result: Draw (board full)")
                game_result = 0

            color = self._opponent(color)

        return game_result

    @staticmethod
    def _opponent(color):
        return BOT if color == HUMAN else HUMAN
