"""Position cache: exact-board memo of evaluations with a clear-all capacity policy."""

import logging


LOGGER = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10000


def pack_board(board):
    """Packed cache key for a Board (one byte per cell, row-major, 225 bytes)."""
    return board.pack()


class PositionCache:
    """
    Maps packed board encodings to evaluation scores.

    Inserts never evict. Once the table holds more than `capacity` entries,
    the next call to trim_if_over() drops everything.
    """

    def __init__(self, capacity=DEFAULT_CAPACITY):
        self.capacity = capacity
        self._table = {}

    def get(self, key):
        return self._table.get(key)

    def put(self, key, value):
        self._table[key] = value

    def clear(self):
        self._table.clear()

    def trim_if_over(self):
        """Clear the whole cache if it has grown past capacity. Returns True when cleared."""
        size = len(self._table)
        if size <= self.capacity:
            return False
        LOGGER.info("Position cache over capacity (%d > %d); clearing", size, self.capacity)
        self._table.clear()
        return True

    def keys(self):
        return self._table.keys()

    def __len__(self):
        return len(self._table)

    def __contains__(self, key):
        return key in self._table
