"""Headless fixed-step driver: plays a seeded game with scripted intents."""
import argparse
import logging
import sys

from tetris_config import CONFIG, GameParams
from tetris_engine import create_game, step
from tetris_input import Inputs
from tetris_rng import XorShiftRandom

log = logging.getLogger("tetris")


class ScriptedPlayer:
    """Pseudo-random intents from its own PRNG, so runs replay exactly.

    Held intents (left/right/soft drop) persist for a few frames; one-shot
    intents fire on a single frame, as an edge-detecting front end would.
    """

    def __init__(self, seed: int):
        self.rng = XorShiftRandom(seed)
        self.hold_dir = 0
        self.hold_frames = 0

    def next_inputs(self) -> Inputs:
        r = self.rng
        if self.hold_frames <= 0:
            self.hold_dir = r.choice((-1, 0, 0, 1))
            self.hold_frames = 1 + r.randrange(20)
        self.hold_frames -= 1
        roll = r.randrange(100)
        return Inputs(
            left=self.hold_dir < 0,
            right=self.hold_dir > 0,
            rotate_cw=roll < 6,
            rotate_ccw=6 <= roll < 9,
            soft_drop=r.randrange(4) == 0,
            hard_drop=roll == 99,
            hold=roll == 98,
        )


def run(width, height, seed, steps, hz, params):
    state = create_game(width, height, seed)
    player = ScriptedPlayer(seed ^ 0x5F3759DF)
    dt_ms = 1000.0 / hz
    for _ in range(steps):
        if state.game_over:
            break
        step(state, player.next_inputs(), dt_ms, params)
    return state


def format_field(state) -> str:
    """Playfield as text: piece letters for locked cells, '.' for empty."""
    board = state.board
    return "\n".join(
        "".join(board.get(col, row) or "." for col in range(board.width))
        for row in range(state.hidden_rows, board.rows)
    )


def main(argv=None):
    ap = argparse.ArgumentParser(description="Run a seeded headless falling-block game.")
    ap.add_argument("--seed", type=int, default=CONFIG["SEED"])
    ap.add_argument("--width", type=int, default=CONFIG["WIDTH"])
    ap.add_argument("--height", type=int, default=CONFIG["HEIGHT"])
    ap.add_argument("--steps", type=int, default=60 * 120, help="fixed steps to simulate")
    ap.add_argument("--hz", type=float, default=60.0, help="fixed update rate")
    ap.add_argument("--das", type=float, default=CONFIG["DAS_MS"])
    ap.add_argument("--arr", type=float, default=CONFIG["ARR_MS"])
    ap.add_argument("--lock-delay", type=float, default=CONFIG["LOCK_DELAY_MS"])
    ap.add_argument("--show-field", action="store_true")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.hz <= 0:
        ap.error("--hz must be positive")
    try:
        params = GameParams.from_config(das_ms=args.das, arr_ms=args.arr, lock_delay_ms=args.lock_delay)
    except ValueError as e:
        ap.error(str(e))

    try:
        state = run(args.width, args.height, args.seed, args.steps, args.hz, params)
    except ValueError as e:
        ap.error(str(e))
    log.info("ticks=%d score=%d lines=%d level=%d game_over=%s",
             state.tick, state.score, state.lines, state.level, state.game_over)
    if args.show_field:
        print(format_field(state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
