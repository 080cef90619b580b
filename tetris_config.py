"""Tunable defaults and the immutable per-call GameParams"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from tetris_kicks import SimpleKicks

CONFIG: Dict[str, Any] = {
    # Horizontal movement feel
    "DAS_MS": 160,            # Delayed Auto Shift (ms before auto-stepping)
    "ARR_MS": 30,             # Auto Repeat Rate (ms per step after DAS). 0 => instant

    # Locking behavior
    "LOCK_DELAY_MS": 500,     # How long a grounded piece may stay unlocked

    # Gravity curve, expressed as ms per cell
    "GRAVITY_BASE_MS": 1000,  # level 0
    "GRAVITY_STEP_MS": 60,    # faster per level
    "GRAVITY_MIN_MS": 60,     # cap
    "SOFT_DROP_BONUS": 15.0,  # extra cells/s while soft drop is held

    # Scoring & level progression
    "LINES_PER_LEVEL": 10,
    "SCORE_TABLE": {1: 40, 2: 100, 3: 300, 4: 1200},  # multiplied by level + 1

    # Board
    "WIDTH": 10,
    "HEIGHT": 20,
    "HIDDEN_ROWS": 2,
    "SEED": 1234,
}


def make_gravity_curve(base_ms: float, step_ms: float, min_ms: float) -> Callable[[int], float]:
    def gravity(level: int) -> float:
        interval = max(min_ms, base_ms - level * step_ms)
        return 1000.0 / interval
    return gravity


def make_line_clear_score(table: Dict[int, int]) -> Callable[[int, int], int]:
    top = max(table) if table else 0

    def score(lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        base = table.get(lines)
        if base is None:
            # beyond the table: scale the largest entry linearly
            base = table[top] * lines // top if top else 0
        return base * (level + 1)
    return score


def make_level_up(lines_per_level: int) -> Callable[[int], int]:
    def level_up(total: int) -> int:
        return total // lines_per_level
    return level_up


@dataclass(frozen=True)
class GameParams:
    """
    Per-call engine configuration. Never mutated by the engine.

    Values are checked once here; the engine itself does not re-validate.
    """
    gravity_cells_per_second: Callable[[int], float]
    lock_delay_ms: float
    das_ms: float
    arr_ms: float
    soft_drop_bonus: float
    line_clear_score: Callable[[int, int], int]
    level_up: Callable[[int], int]
    kicks: Any = field(default_factory=SimpleKicks)

    def __post_init__(self):
        for name in ("lock_delay_ms", "das_ms", "arr_ms", "soft_drop_bonus"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        for name in ("gravity_cells_per_second", "line_clear_score", "level_up"):
            if not callable(getattr(self, name)):
                raise ValueError(f"{name} must be callable")
        if not callable(getattr(self.kicks, "try_rotate", None)):
            raise ValueError("kicks must provide try_rotate(fits, rot, direction, piece_type)")

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None, **overrides) -> "GameParams":
        """Build params from CONFIG-style keys; keyword overrides win."""
        c = dict(CONFIG)
        if config:
            c.update(config)
        values = dict(
            gravity_cells_per_second=make_gravity_curve(
                c["GRAVITY_BASE_MS"], c["GRAVITY_STEP_MS"], c["GRAVITY_MIN_MS"]),
            lock_delay_ms=c["LOCK_DELAY_MS"],
            das_ms=c["DAS_MS"],
            arr_ms=c["ARR_MS"],
            soft_drop_bonus=c["SOFT_DROP_BONUS"],
            line_clear_score=make_line_clear_score(c["SCORE_TABLE"]),
            level_up=make_level_up(c["LINES_PER_LEVEL"]),
        )
        values.update(overrides)
        return cls(**values)


DEFAULT_PARAMS = GameParams.from_config()
