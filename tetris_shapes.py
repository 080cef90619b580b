"""Shape table: per-type cell offsets, rotation and normalization"""
from typing import Dict, List, Tuple

Cell = Tuple[int, int]

PIECES = ["I", "O", "T", "J", "L", "S", "Z"]

# (x, y) offsets, y grows downward
SHAPES: Dict[str, List[Cell]] = {
    "I": [(0, 0), (1, 0), (2, 0), (3, 0)],
    "O": [(0, 0), (1, 0), (0, 1), (1, 1)],
    "T": [(0, 0), (1, 0), (2, 0), (1, 1)],
    "J": [(1, 0), (1, 1), (1, 2), (0, 2)],
    "L": [(0, 0), (0, 1), (0, 2), (1, 2)],
    "S": [(1, 0), (2, 0), (0, 1), (1, 1)],
    "Z": [(0, 0), (1, 0), (1, 1), (2, 1)],
}

# 1-based codes stored in the board grid; 0 means empty
TYPE_CODES: Dict[str, int] = {t: i + 1 for i, t in enumerate(PIECES)}
CODE_TYPES: Dict[int, str] = {c: t for t, c in TYPE_CODES.items()}


def rotate_cells(cells: List[Cell], steps: int) -> List[Cell]:
    """Rotate offsets by 90 degrees * steps about the origin."""
    n = steps % 4
    if n == 1:
        return [(-y, x) for x, y in cells]
    if n == 2:
        return [(-x, -y) for x, y in cells]
    if n == 3:
        return [(y, -x) for x, y in cells]
    return list(cells)


def normalize(cells: List[Cell]) -> List[Cell]:
    """Translate cells so the minimum x and y become 0."""
    min_x = min(x for x, _ in cells)
    min_y = min(y for _, y in cells)
    return [(x - min_x, y - min_y) for x, y in cells]


_FOOTPRINTS: Dict[Tuple[str, int], Tuple[Cell, ...]] = {
    (t, r): tuple(normalize(rotate_cells(SHAPES[t], r)))
    for t in PIECES
    for r in range(4)
}


def shape_cells(t: str, rotation: int) -> Tuple[Cell, ...]:
    """Local footprint of a piece type in the given rotation."""
    return _FOOTPRINTS[(t, rotation % 4)]


def shape_size(t: str, rotation: int) -> Tuple[int, int]:
    """(width, height) of the footprint's bounding box."""
    cells = shape_cells(t, rotation)
    return max(x for x, _ in cells) + 1, max(y for _, y in cells) + 1
