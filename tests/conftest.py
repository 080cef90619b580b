import pytest

from tetris_config import GameParams
from tetris_engine import create_game


@pytest.fixture
def make_params():
    """GameParams factory with no gravity unless asked for."""
    def make(**overrides):
        values = dict(
            gravity_cells_per_second=lambda level: 0.0,
            lock_delay_ms=500,
            das_ms=160,
            arr_ms=30,
            soft_drop_bonus=15,
            line_clear_score=lambda lines, level: 100 * lines,
            level_up=lambda total: total // 5,
        )
        values.update(overrides)
        return GameParams(**values)
    return make


@pytest.fixture
def still(make_params):
    return make_params()


@pytest.fixture
def game():
    return create_game(10, 20, 1234)
