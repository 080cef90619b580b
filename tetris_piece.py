"""Piece model and spawn placement"""
from dataclasses import dataclass, replace
from typing import List, Tuple

from tetris_shapes import shape_cells, shape_size


@dataclass(frozen=True)
class Piece:
    t: str
    x: int  # column of the footprint's left edge
    y: int  # row of the footprint's top edge, may be negative
    rot: int = 0  # rotation index 0..3

    @staticmethod
    def spawn(t: str, board_width: int, hidden_rows: int) -> "Piece":
        """Centered over the board with its bottom row on the last hidden row.

        Pieces taller than the hidden zone start partly above row 0.
        """
        w, h = shape_size(t, 0)
        return Piece(t, (board_width - w) // 2, hidden_rows - h, 0)

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (col, row) cells occupied by the piece."""
        return [(self.x + cx, self.y + cy) for cx, cy in shape_cells(self.t, self.rot)]

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, rot: int, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.t, self.x + dx, self.y + dy, rot % 4)
