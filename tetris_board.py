"""Board helpers: flat grid, collide, lock, full rows, clear, drop distance"""
from typing import Iterable, List, Optional

import numpy as np

from tetris_piece import Piece
from tetris_shapes import CODE_TYPES, TYPE_CODES


class Board:
    """
    Fixed-size occupancy grid stored as one flat int8 array.

    Cell (col, row) lives at index ``row * width + col``; row 0 is the top
    (inside the hidden spawn rows). 0 means empty, otherwise the code of the
    piece type that was locked there.
    """

    def __init__(self, width: int, rows: int):
        if width <= 0 or rows <= 0:
            raise ValueError(f"board must be at least 1x1, got {width}x{rows}")
        self.width = width
        self.rows = rows
        self.cells = np.zeros(width * rows, dtype=np.int8)

    @classmethod
    def empty(cls, width: int, height: int, hidden_rows: int) -> "Board":
        return cls(width, height + hidden_rows)

    @property
    def grid(self) -> np.ndarray:
        """2-D (rows, width) view sharing memory with ``cells``."""
        return self.cells.reshape(self.rows, self.width)

    def _index(self, col: int, row: int) -> int:
        if not (0 <= col < self.width and 0 <= row < self.rows):
            raise IndexError(f"cell ({col}, {row}) outside {self.width}x{self.rows} board")
        return row * self.width + col

    def get(self, col: int, row: int) -> Optional[str]:
        return CODE_TYPES.get(int(self.cells[self._index(col, row)]))

    def is_occupied(self, col: int, row: int) -> bool:
        return bool(self.cells[self._index(col, row)])

    def set_cell(self, col: int, row: int, t: Optional[str]) -> None:
        self.cells[self._index(col, row)] = TYPE_CODES[t] if t else 0

    def row(self, row: int) -> np.ndarray:
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} outside board")
        return self.cells[row * self.width:(row + 1) * self.width]

    def fill_row(self, row: int, t: str = "I", holes: Iterable[int] = ()) -> None:
        """Occupy a whole row except the given hole columns."""
        r = self.row(row)
        r[:] = TYPE_CODES[t]
        for col in holes:
            r[col] = 0

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def copy(self) -> "Board":
        b = Board(self.width, self.rows)
        b.cells[:] = self.cells
        return b

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width, self.rows) == (other.width, other.rows) and \
            bool(np.array_equal(self.cells, other.cells))

    def __repr__(self):
        return f"Board({self.width}x{self.rows}, occupied={self.occupied_count()})"


def collides(board: Board, piece: Piece) -> bool:
    """Return True if the piece hits a wall, the floor or a locked cell.

    Cells above row 0 are only checked against the side walls.
    """
    for x, y in piece.cells():
        if x < 0 or x >= board.width or y >= board.rows:
            return True
        if y >= 0 and board.cells[y * board.width + x]:
            return True
    return False


def lock(board: Board, piece: Piece) -> None:
    """Write the piece into the grid (no collision check); rows < 0 are dropped."""
    for x, y in piece.cells():
        if 0 <= y < board.rows and 0 <= x < board.width:
            board.set_cell(x, y, piece.t)


def full_rows(board: Board) -> List[int]:
    """Indices of completely occupied rows, ascending."""
    return [int(r) for r in np.flatnonzero(board.grid.all(axis=1))]


def clear_rows(board: Board, rows: Iterable[int]) -> int:
    """Remove the given rows and shift everything above them down.

    Kept rows are compacted toward the bottom in one move, so the order of
    ``rows`` never matters. Returns the number of rows removed.
    """
    doomed = sorted({r for r in rows if 0 <= r < board.rows})
    if not doomed:
        return 0
    grid = board.grid
    keep = np.ones(board.rows, dtype=bool)
    keep[doomed] = False
    kept = grid[keep].copy()
    n = len(doomed)
    grid[:n] = 0
    grid[n:] = kept
    return n


def drop_distance(board: Board, piece: Piece) -> int:
    """How many cells the piece can fall before it would collide."""
    d = 0
    while not collides(board, piece.moved(0, d + 1)):
        d += 1
    return d
