"""
Deterministic game-state engine.

``step`` is the only mutation entry point during play. It is driven once per
discrete time step with already-normalized intents and the elapsed time, and
never reads a clock or does I/O, so a recorded (inputs, elapsed_ms) sequence
replays to the same state.

State flow per piece:

  spawning -> falling -> grounded (lock delay) -> lock -> clear -> spawning

with a terminal ``game_over`` reached from a blocked spawn or from locking a
cell above the visible playfield. After that ``step`` is a no-op until the
caller creates a new game.
"""
import logging
from dataclasses import dataclass, field
from typing import Deque, List, Optional

import numpy as np

from tetris_bag import new_queue, refill_queue
from tetris_board import Board, clear_rows, collides, drop_distance, full_rows, lock
from tetris_config import CONFIG, GameParams
from tetris_input import Inputs, ShiftRepeat
from tetris_piece import Piece
from tetris_rng import XorShiftRandom
from tetris_shapes import PIECES, shape_size

log = logging.getLogger(__name__)

SOFT_DROP_PER_CELL = 1
HARD_DROP_PER_CELL = 2


@dataclass
class GameState:
    board: Board
    rng: XorShiftRandom
    queue: Deque[str]
    hidden_rows: int
    seed: int
    active: Optional[Piece] = None
    held: Optional[str] = None
    can_hold: bool = True
    score: int = 0
    lines: int = 0
    level: int = 0
    fall_accum: float = 0.0     # fractional cells of pending gravity
    lock_timer_ms: float = 0.0  # time spent grounded
    shift: ShiftRepeat = field(default_factory=ShiftRepeat)
    tick: int = 0
    game_over: bool = False
    last_cleared: List[int] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        """Visible playfield height (hidden rows excluded)."""
        return self.board.rows - self.hidden_rows


def create_game(width: int = CONFIG["WIDTH"], height: int = CONFIG["HEIGHT"],
                seed: Optional[int] = CONFIG["SEED"],
                hidden_rows: int = CONFIG["HIDDEN_ROWS"]) -> GameState:
    """Allocate a fresh board, seed the bag and spawn the first piece."""
    widest = max(max(shape_size(t, r)[0] for r in range(4)) for t in PIECES)
    if width < widest:
        raise ValueError(f"board width must be at least {widest}, got {width}")
    if height < 1:
        raise ValueError(f"board height must be positive, got {height}")
    if hidden_rows < 0:
        raise ValueError(f"hidden_rows must be >= 0, got {hidden_rows}")

    rng = XorShiftRandom(seed)
    state = GameState(
        board=Board.empty(width, height, hidden_rows),
        rng=rng,
        queue=new_queue(rng),
        hidden_rows=hidden_rows,
        seed=rng.state,
    )
    log.debug("new game %dx%d (+%d hidden), seed=0x%08X", width, height, hidden_rows, state.seed)
    spawn_next(state)
    return state


# -------------------------------------------------------------
# Spawning & hold
# -------------------------------------------------------------

def _next_type(state: GameState) -> str:
    refill_queue(state.queue, state.rng)
    t = state.queue.popleft()
    refill_queue(state.queue, state.rng)
    return t


def _place_new(state: GameState, t: str) -> bool:
    piece = Piece.spawn(t, state.width, state.hidden_rows)
    if collides(state.board, piece):
        state.active = None
        state.game_over = True
        log.info("game over: %s blocked at spawn (score=%d, lines=%d)", t, state.score, state.lines)
        return False
    state.active = piece
    state.lock_timer_ms = 0.0
    return True


def spawn_next(state: GameState) -> bool:
    """Make the next queued piece active. Returns False on top-out."""
    t = _next_type(state)
    if not _place_new(state, t):
        return False
    state.can_hold = True
    log.debug("spawned %s at (%d, %d)", t, state.active.x, state.active.y)
    return True


def respawn(state: GameState) -> bool:
    """Discard the active piece and spawn the next one."""
    state.active = None
    return spawn_next(state)


def hold(state: GameState) -> bool:
    """Swap the active piece into the hold slot, once per spawned piece."""
    if not state.can_hold or state.active is None:
        return False
    incoming = state.held
    state.held = state.active.t
    if incoming is None:
        incoming = _next_type(state)
    state.fall_accum = 0.0
    placed = _place_new(state, incoming)
    state.can_hold = False
    log.debug("hold %s, now playing %s", state.held, incoming)
    return placed


# -------------------------------------------------------------
# Movement
# -------------------------------------------------------------

def try_move(state: GameState, dx: int, dy: int) -> bool:
    """Shift the active piece; any successful move restarts the lock delay."""
    if state.active is None:
        return False
    moved = state.active.moved(dx, dy)
    if collides(state.board, moved):
        return False
    state.active = moved
    state.lock_timer_ms = 0.0
    return True


def try_rotate(state: GameState, direction: int, params: GameParams) -> bool:
    """Rotate the active piece by +1 (cw) or -1 (ccw) through the kick policy."""
    piece = state.active
    if piece is None:
        return False

    def fits(rot: int, dx: int, dy: int) -> bool:
        return not collides(state.board, piece.rotated(rot, dx, dy))

    kick = params.kicks.try_rotate(fits, piece.rot, direction, piece.t)
    if kick is None:
        return False
    state.active = piece.rotated(kick.rot, kick.dx, kick.dy)
    state.lock_timer_ms = 0.0
    return True


def is_grounded(state: GameState) -> bool:
    return state.active is not None and collides(state.board, state.active.moved(0, 1))


def _shift(state: GameState, inputs: Inputs, elapsed_ms: float, params: GameParams) -> None:
    steps = state.shift.update(elapsed_ms, inputs.left, inputs.right, params.das_ms, params.arr_ms)
    dx = 1 if steps > 0 else -1
    for _ in range(abs(steps)):
        if not try_move(state, dx, 0):
            break


# -------------------------------------------------------------
# Locking, clearing, scoring
# -------------------------------------------------------------

def _lock_active(state: GameState, params: GameParams) -> None:
    piece = state.active
    lock(state.board, piece)
    state.active = None
    state.fall_accum = 0.0
    state.lock_timer_ms = 0.0
    state.last_cleared = []

    if any(y < state.hidden_rows for _, y in piece.cells()):
        state.game_over = True
        log.info("game over: %s locked above the playfield (score=%d, lines=%d)",
                 piece.t, state.score, state.lines)
        return

    rows = full_rows(state.board)
    if rows:
        clear_rows(state.board, rows)
        state.last_cleared = rows
        state.lines += len(rows)
        state.score += params.line_clear_score(len(rows), state.level)
        level = params.level_up(state.lines)
        if level != state.level:
            log.debug("level %d -> %d at %d lines", state.level, level, state.lines)
        state.level = level
        log.debug("cleared rows %s, score=%d", rows, state.score)
    spawn_next(state)


def hard_drop(state: GameState, params: GameParams) -> int:
    """Drop to the floor, score 2 per cell, lock at once. Returns cells dropped."""
    if state.active is None:
        return 0
    dropped = drop_distance(state.board, state.active)
    state.active = state.active.moved(0, dropped)
    state.score += dropped * HARD_DROP_PER_CELL
    _lock_active(state, params)
    return dropped


def _gravity(state: GameState, inputs: Inputs, elapsed_ms: float, params: GameParams) -> bool:
    """Apply accumulated gravity; returns True if the piece locked."""
    speed = params.gravity_cells_per_second(state.level)
    if inputs.soft_drop:
        speed += params.soft_drop_bonus
    state.fall_accum += speed * elapsed_ms / 1000.0

    while state.fall_accum >= 1.0 and state.active is not None:
        if try_move(state, 0, 1):
            state.fall_accum -= 1.0
            if inputs.soft_drop:
                state.score += SOFT_DROP_PER_CELL
            continue
        # grounded: pending gravity waits instead of piling up
        state.fall_accum = 1.0
        state.lock_timer_ms += elapsed_ms
        if state.lock_timer_ms >= params.lock_delay_ms:
            _lock_active(state, params)
            return True
        break
    return False


# -------------------------------------------------------------
# Step
# -------------------------------------------------------------

def step(state: GameState, inputs: Inputs, elapsed_ms: float, params: GameParams) -> None:
    """Advance the game by one discrete time step."""
    if state.game_over:
        return
    state.tick += 1

    if inputs.hold:
        hold(state)
        if state.game_over:
            return
    if inputs.rotate_cw:
        try_rotate(state, 1, params)
    if inputs.rotate_ccw:
        try_rotate(state, -1, params)

    if state.active is not None:
        _shift(state, inputs, elapsed_ms, params)

    if inputs.hard_drop and state.active is not None:
        hard_drop(state, params)
        return

    if _gravity(state, inputs, elapsed_ms, params):
        return

    if inputs.respawn:
        respawn(state)


# -------------------------------------------------------------
# Read-only queries
# -------------------------------------------------------------

def ghost_piece(state: GameState) -> Optional[Piece]:
    """Where the active piece would land if hard-dropped."""
    if state.active is None:
        return None
    return state.active.moved(0, drop_distance(state.board, state.active))


def visible_rows(state: GameState) -> np.ndarray:
    """(height, width) view of the playfield below the hidden rows."""
    return state.board.grid[state.hidden_rows:]


def preview(state: GameState, n: int = 5) -> List[str]:
    return list(state.queue)[:n]
