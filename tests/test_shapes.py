import pytest

from tetris_shapes import PIECES, SHAPES, normalize, rotate_cells, shape_cells, shape_size


@pytest.mark.parametrize("t", PIECES)
def test_four_cells_every_rotation(t):
    for r in range(4):
        cells = shape_cells(t, r)
        assert len(cells) == 4
        assert len(set(cells)) == 4
        assert min(x for x, _ in cells) == 0
        assert min(y for _, y in cells) == 0


@pytest.mark.parametrize("t", PIECES)
def test_rotation_is_modulo_four(t):
    for r in range(4):
        assert shape_cells(t, r) == shape_cells(t, r + 4) == shape_cells(t, r - 4)
    assert rotate_cells(SHAPES[t], 4) == SHAPES[t]
    assert normalize(rotate_cells(SHAPES[t], 2)) == normalize(rotate_cells(rotate_cells(SHAPES[t], 1), 1))


def test_rotation_identities():
    cells = [(2, 1)]
    assert rotate_cells(cells, 1) == [(-1, 2)]
    assert rotate_cells(cells, 2) == [(-2, -1)]
    assert rotate_cells(cells, 3) == [(1, -2)]


def test_sizes():
    assert shape_size("I", 0) == (4, 1)
    assert shape_size("I", 1) == (1, 4)
    assert shape_size("O", 3) == (2, 2)
    assert shape_size("L", 0) == (2, 3)


def test_o_footprint_is_rotation_invariant():
    assert {frozenset(shape_cells("O", r)) for r in range(4)} == {frozenset(shape_cells("O", 0))}
