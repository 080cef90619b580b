"""Input intents and the DAS/ARR controller"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Inputs:
    """Normalized intents for one step.

    Movement and soft drop are held intents; rotations, hard drop, hold and
    respawn are one-shot and must be edge-detected by the caller.
    """
    left: bool = False
    right: bool = False
    rotate_cw: bool = False
    rotate_ccw: bool = False
    soft_drop: bool = False
    hard_drop: bool = False
    hold: bool = False
    respawn: bool = False


NO_INPUT = Inputs()


@dataclass
class ShiftRepeat:
    """
    Horizontal auto-shift timers, one pair per direction.

    • First press moves once immediately (with the opposite side released).
    • Once das_ms of held time has passed, held time accumulates into the
      repeat timer and each full arr_ms emits a step
      (arr_ms == 0 => one step per call).
    • Both held, or neither, resets both sides.
    """
    left_held_ms: float = 0.0
    right_held_ms: float = 0.0
    left_repeat_ms: float = 0.0
    right_repeat_ms: float = 0.0
    left_active: bool = False
    right_active: bool = False

    def reset(self):
        self.left_held_ms = self.right_held_ms = 0.0
        self.left_repeat_ms = self.right_repeat_ms = 0.0
        self.left_active = self.right_active = False

    def update(self, dt: float, left: bool, right: bool, das_ms: float, arr_ms: float) -> int:
        """Advance timers and return signed step count (negative = left)."""
        if left == right:
            self.reset()
            return 0
        if left:
            self.right_held_ms = self.right_repeat_ms = 0.0
            self.right_active = False
            self.left_held_ms, self.left_repeat_ms, self.left_active, n = _advance(
                self.left_held_ms, self.left_repeat_ms, self.left_active, dt, das_ms, arr_ms)
            return -n
        self.left_held_ms = self.left_repeat_ms = 0.0
        self.left_active = False
        self.right_held_ms, self.right_repeat_ms, self.right_active, n = _advance(
            self.right_held_ms, self.right_repeat_ms, self.right_active, dt, das_ms, arr_ms)
        return n


def _advance(held, repeat, active, dt, das, arr):
    if not active:
        return 0.0, 0.0, True, 1
    held += dt
    if held < das:
        return held, repeat, True, 0
    # charged: the whole step counts toward the repeat timer
    repeat += dt
    if arr <= 0:
        return held, 0.0, True, 1
    steps = 0
    while repeat >= arr:
        repeat -= arr
        steps += 1
    return held, repeat, True, steps
