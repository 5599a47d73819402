"""Board state container, grid validation, and five-in-a-row checking."""

from itertools import chain

BOARD_SIZE = 15
EMPTY = 0
HUMAN = 1
BOT = 2

DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

_SYMBOLS = {EMPTY: ".", HUMAN: "X", BOT: "O"}


class InvalidBoardError(ValueError):
    """Raised when a caller supplies a grid that is not a 15x15 board of 0/1/2."""


class Board:
    def __init__(self, size=BOARD_SIZE):
        # Store cells as 0 (empty), 1 (human), 2 (bot), indexed cells[row][col]
        if size != BOARD_SIZE:
            raise InvalidBoardError(f"only {BOARD_SIZE}x{BOARD_SIZE} boards are supported")
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0

    @classmethod
    def from_grid(cls, grid):
        """Validate and copy a caller-owned grid; the grid itself is never touched."""
        if not isinstance(grid, (list, tuple)) or len(grid) != BOARD_SIZE:
            raise InvalidBoardError(f"board must have {BOARD_SIZE} rows")
        board = cls()
        count = 0
        for r, row in enumerate(grid):
            if not isinstance(row, (list, tuple)) or len(row) != BOARD_SIZE:
                raise InvalidBoardError(f"row {r} must have {BOARD_SIZE} cells")
            for c, value in enumerate(row):
                if type(value) is not int or value not in (EMPTY, HUMAN, BOT):
                    raise InvalidBoardError(f"invalid cell value {value!r} at ({r}, {c})")
                if value != EMPTY:
                    count += 1
            board.cells[r] = list(row)
        board.move_count = count
        return board

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def is_full(self):
        return self.move_count >= self.size * self.size

    def place(self, row, col, player):
        """Place a stone; raise if out of bounds or occupied."""
        if player not in (HUMAN, BOT):
            raise ValueError("player must be 1 (human) or 2 (bot)")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self.cells[row][col] != EMPTY:
            raise ValueError("cell already occupied")
        self.cells[row][col] = player
        self.move_count += 1

    def _push_stone(self, row, col, player):
        # Unchecked placement for search; always paired with _pop_stone.
        self.cells[row][col] = player
        self.move_count += 1

    def _pop_stone(self, row, col):
        self.cells[row][col] = EMPTY
        self.move_count -= 1

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        return new_board

    def to_grid(self):
        return [row[:] for row in self.cells]

    def empty_cells(self):
        """All empty cells in row-major order."""
        return [(r, c) for r in range(self.size) for c in range(self.size) if self.cells[r][c] == EMPTY]

    def occupied(self):
        """All stones in row-major order."""
        return [(r, c) for r in range(self.size) for c in range(self.size) if self.cells[r][c] != EMPTY]

    def pack(self):
        """Exact 225-byte encoding of the grid, one byte per cell, row-major."""
        return bytes(chain.from_iterable(self.cells))

    def has_five_or_more(self, row, col):
        """Check for 5+ in any direction through (row, col)."""
        player = self.cells[row][col]
        if player not in (HUMAN, BOT):
            return False
        for d_row, d_col in DIRECTIONS:
            forward = self._count_dir(row, col, d_row, d_col, player)
            backward = self._count_dir(row, col, -d_row, -d_col, player)
            if 1 + forward + backward >= 5:
                return True
        return False

    def _count_dir(self, row, col, d_row, d_col, player):
        """Count contiguous stones of player from (row, col) (exclusive) in (d_row, d_col)."""
        count = 0
        r, c = row + d_row, col + d_col
        while self.in_bounds(r, c) and self.cells[r][c] == player:
            count += 1
            r += d_row
            c += d_col
        return count

    def __str__(self):
        header = "   " + "".join(f"{c:>3}" for c in range(self.size))
        lines = [header]
        for r, row in enumerate(self.cells):
            lines.append(f"{r:>3}" + "".join(f"{_SYMBOLS[v]:>3}" for v in row))
        return "\n".join(lines)
