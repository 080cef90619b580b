"""Rotation with kicks: pluggable offset policies"""
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

Offset = Tuple[int, int]
# fits(rotation, dx, dy) -> True when the rotated, offset piece does not collide
FitTest = Callable[[int, int, int], bool]


class KickResult(NamedTuple):
    rot: int
    dx: int
    dy: int


class SimpleKicks:
    """
    Uniform kick list applied to every piece type and orientation.

    Candidates are tried in order: in place, one column right, one column
    left, one row up, one row down.
    """

    DEFAULT_OFFSETS: Sequence[Offset] = ((0, 0), (1, 0), (-1, 0), (0, -1), (0, 1))

    def __init__(self, offsets: Optional[Sequence[Offset]] = None):
        self.offsets = tuple(offsets if offsets is not None else self.DEFAULT_OFFSETS)

    def try_rotate(self, fits: FitTest, rot: int, direction: int,
                   piece_type: Optional[str] = None) -> Optional[KickResult]:
        new_rot = (rot + direction) % 4
        for dx, dy in self.offsets:
            if fits(new_rot, dx, dy):
                return KickResult(new_rot, dx, dy)
        return None
