import pytest

from tetris_config import CONFIG, DEFAULT_PARAMS, GameParams, make_gravity_curve, make_line_clear_score
from tetris_kicks import SimpleKicks


def test_defaults_follow_config():
    assert DEFAULT_PARAMS.das_ms == CONFIG["DAS_MS"]
    assert DEFAULT_PARAMS.arr_ms == CONFIG["ARR_MS"]
    assert DEFAULT_PARAMS.lock_delay_ms == CONFIG["LOCK_DELAY_MS"]
    assert isinstance(DEFAULT_PARAMS.kicks, SimpleKicks)
    assert DEFAULT_PARAMS.level_up(CONFIG["LINES_PER_LEVEL"]) == 1


def test_gravity_curve():
    g = make_gravity_curve(1000, 60, 60)
    assert g(0) == pytest.approx(1.0)
    assert g(10) == pytest.approx(2.5)
    assert g(50) == pytest.approx(1000 / 60)


def test_line_clear_score_table():
    score = make_line_clear_score({1: 40, 2: 100, 3: 300, 4: 1200})
    assert score(0, 5) == 0
    assert score(1, 0) == 40
    assert score(4, 2) == 3600
    assert score(5, 0) == 1500


def test_overrides():
    params = GameParams.from_config({"DAS_MS": 100}, arr_ms=0, kicks=SimpleKicks([(0, 0)]))
    assert params.das_ms == 100
    assert params.arr_ms == 0
    assert params.kicks.offsets == ((0, 0),)


@pytest.mark.parametrize("field,value", [
    ("das_ms", -1), ("arr_ms", -5), ("lock_delay_ms", -0.1), ("soft_drop_bonus", -2),
    ("das_ms", "fast"), ("lock_delay_ms", True),
])
def test_rejects_bad_numbers(field, value):
    with pytest.raises(ValueError):
        GameParams.from_config(**{field: value})


def test_rejects_non_callables():
    with pytest.raises(ValueError):
        GameParams.from_config(level_up=10)
    with pytest.raises(ValueError):
        GameParams.from_config(kicks=object())


def test_params_are_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_PARAMS.das_ms = 1
