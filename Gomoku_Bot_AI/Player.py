"""Player interface plus the text-input human controller."""

try:
    from Board import HUMAN
    from utils import timer
except ImportError:
    from Gomoku_Bot_AI.Board import HUMAN
    from Gomoku_Bot_AI.utils import timer


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board, deadline=None):
        """Return (row, col) for next move within time limit."""
        raise NotImplementedError


def parse_move(raw):
    """Parse 'row col' (0-indexed); commas are accepted as separators."""
    try:
        row_str, col_str = raw.replace(",", " ").split()
        return int(row_str), int(col_str)
    except ValueError as exc:
        raise ValueError("Invalid input format; expected two integers 'row col'") from exc


class HumanPlayer(Player):
    def __init__(self, color=HUMAN, input_fn=None, output_fn=print):
        super().__init__(color)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def next_move(self, board, deadline=None):
        """
        Text-input player with deadline guard (raises TimeoutError on timeout).
        Unparseable input is reported and asked for again until the deadline passes.
        """
        prompt = "Enter move as 'row col' (0-indexed): "
        while True:
            raw = self._read_line(prompt, deadline)
            try:
                return parse_move(raw)
            except ValueError as exc:
                self.output_fn(exc)

    def _read_line(self, prompt, deadline):
        import os
        import sys
        import time

        if timer.expired(deadline):
            raise TimeoutError("Move exceeded allotted time")
        if self.input_fn is not None:
            return self.input_fn(prompt).strip()
        remaining = timer.time_remaining(deadline)
        if remaining is None:
            return input(prompt).strip()

        sys.stdout.write(prompt)
        sys.stdout.flush()
        if os.name == "nt":
            # Windows: select() on stdin is not supported. Poll with msvcrt.
            import msvcrt

            buffer = ""
            while not timer.expired(deadline):
                if msvcrt.kbhit():
                    ch = msvcrt.getwche()
                    if ch in ("\r", "\n"):
                        sys.stdout.write("\n")
                        break
                    buffer += ch
                time.sleep(0.01)
            else:
                raise TimeoutError("Move exceeded allotted time")
            return buffer.strip()

        import select

        rlist, _, _ = select.select([sys.stdin], [], [], remaining)
        if not rlist:
            raise TimeoutError("Move exceeded allotted time")
        line = sys.stdin.readline()
        if not line:
            raise EOFError("stdin closed")
        return line.strip()
