"""Lightweight match logging: timestamped lines, optionally followed by the board."""

import datetime


def log_event(message, board=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")
    if board is not None:
        print(board)
